"""Application service: Update Cost use case.

Only the 8-byte cost field of the record is rewritten; name,
description and ID stay as they are on disk.
"""

from __future__ import annotations

from randproduct.application.dto import ProductDTO
from randproduct.domain.model.value_objects import Cost
from randproduct.domain.repository.product_repository import ProductRepository


class UpdateCostHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, number: int, new_cost: str) -> ProductDTO:
        """Change the cost of record ``number`` (1-based)."""
        index = number - 1
        product = self._product_repo.read_at(index)
        product.update_cost(Cost.of(new_cost).amount)
        self._product_repo.update_cost(index, product.cost)
        return ProductDTO.from_record(index, product)
