"""Product entity.

A product is what one fixed-length record in the data file holds. It is
built transiently, either from user input or by decoding a record.
"""

from __future__ import annotations

from dataclasses import dataclass

from randproduct.domain.exceptions import ValidationError

# Stored field widths, in UTF-16 code units
NAME_SIZE = 35
DESCRIPTION_SIZE = 75
ID_SIZE = 6


def text_length(text: str) -> int:
    """Length of ``text`` in UTF-16 code units, the unit field widths use."""
    return len(text.encode("utf-16-be", "surrogatepass")) // 2


@dataclass
class Product:
    """A product in the catalogue.

    Mutable because the cost of a stored record may be rewritten in
    place; the ID never changes once a record exists.
    """

    id: str
    name: str
    description: str = ""
    cost: float = 0.0

    def update_cost(self, new_cost: float) -> None:
        if new_cost < 0:
            raise ValidationError("Cost cannot be negative", field="cost")
        self.cost = new_cost
