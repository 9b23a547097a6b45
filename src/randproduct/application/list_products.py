"""Application service: List Products use case (query)."""

from __future__ import annotations

from randproduct.application.dto import ProductDTO
from randproduct.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [
            ProductDTO.from_record(index, product)
            for index, product in enumerate(self._product_repo.scan())
        ]
