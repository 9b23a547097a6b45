"""Application service: Search Products use case (query).

A full linear scan of the store; names are matched case-insensitively
on their trimmed value.
"""

from __future__ import annotations

from randproduct.domain.exceptions import ValidationError
from randproduct.domain.model.product import Product
from randproduct.domain.repository.product_repository import ProductRepository


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, term: str) -> list[Product]:
        """Return products whose name contains ``term``, in storage order."""
        if not term or not term.strip():
            raise ValidationError("Please enter a search term", field="term")

        needle = term.strip().casefold()
        return [
            product
            for product in self._product_repo.scan()
            if needle in product.name.casefold()
        ]
