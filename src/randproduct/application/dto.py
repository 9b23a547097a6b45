"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from randproduct.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: one stored record as displayed to the user."""

    number: int  # 1-based record number
    id: str
    name: str
    description: str
    cost: str  # formatted, e.g. "$1.50"

    @staticmethod
    def from_record(index: int, product: Product) -> ProductDTO:
        return ProductDTO(
            number=index + 1,
            id=product.id,
            name=product.name,
            description=product.description,
            cost=f"${product.cost:.2f}",
        )
