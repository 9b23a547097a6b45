"""Application service: Add Product use case.

All field validation happens here, before the store is touched. The
codec itself would silently truncate anything too long.
"""

from __future__ import annotations

from randproduct.application.dto import ProductDTO
from randproduct.domain.exceptions import ValidationError
from randproduct.domain.model.product import (
    DESCRIPTION_SIZE,
    ID_SIZE,
    NAME_SIZE,
    Product,
    text_length,
)
from randproduct.domain.model.value_objects import Cost
from randproduct.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, description: str, product_id: str, cost: str) -> ProductDTO:
        """Validate the entered fields and append a new record."""
        name = (name or "").strip()
        description = (description or "").strip()
        product_id = (product_id or "").strip()
        cost_text = str(cost if cost is not None else "").strip()

        for field, value in (
            ("name", name),
            ("description", description),
            ("id", product_id),
            ("cost", cost_text),
        ):
            if not value:
                raise ValidationError("All fields must be filled in", field=field)

        if text_length(name) > NAME_SIZE:
            raise ValidationError(
                f"Product name must be {NAME_SIZE} characters or less", field="name"
            )
        if text_length(description) > DESCRIPTION_SIZE:
            raise ValidationError(
                f"Description must be {DESCRIPTION_SIZE} characters or less",
                field="description",
            )
        if text_length(product_id) != ID_SIZE:
            raise ValidationError(
                f"Product ID must be exactly {ID_SIZE} characters", field="id"
            )

        product = Product(
            id=product_id,
            name=name,
            description=description,
            cost=Cost.of(cost_text).amount,
        )
        index = self._product_repo.append(product)
        return ProductDTO.from_record(index, product)
