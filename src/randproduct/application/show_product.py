"""Application service: Show Product use case (query).

Records are addressed by their 1-based record number, the same number
reported when the record was added.
"""

from __future__ import annotations

from randproduct.application.dto import ProductDTO
from randproduct.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, number: int) -> ProductDTO:
        index = number - 1
        product = self._product_repo.read_at(index)
        return ProductDTO.from_record(index, product)
