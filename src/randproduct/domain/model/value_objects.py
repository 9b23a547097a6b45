"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from randproduct.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Cost:
    """Non-negative product cost.

    Stored on disk as a 64-bit float, so the amount is a plain float
    rather than a Decimal.
    """

    amount: float

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise ValidationError(
                f"Cost must be a number, got {type(self.amount).__name__}",
                field="cost",
            )
        if not math.isfinite(self.amount):
            raise ValidationError(f"Cost must be finite, got {self.amount}", field="cost")
        if self.amount < 0:
            raise ValidationError(
                f"Cost cannot be negative, got {self.amount}", field="cost"
            )

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int) -> Cost:
        """Parse user input (e.g. ``"1.50"``) into a Cost."""
        try:
            value = float(str(amount).strip())
        except ValueError as exc:
            raise ValidationError(
                f"Cost must be a valid positive number, got {amount!r}", field="cost"
            ) from exc
        return Cost(value)
