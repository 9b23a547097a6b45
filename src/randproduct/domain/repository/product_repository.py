"""Abstract repository for Product records.

Defined in the domain layer so the domain never depends on
infrastructure. Records are addressed by their 0-based position in
storage order; there is no lookup by key.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from randproduct.domain.model.product import Product


class ProductRepository(ABC):

    @property
    @abstractmethod
    def record_count(self) -> int:
        """Number of complete records currently stored."""

    @abstractmethod
    def append(self, product: Product) -> int:
        """Store a product after the last record and return its index."""

    @abstractmethod
    def read_at(self, index: int) -> Product:
        """Return the product at a 0-based index.

        Raises RecordOutOfRangeError when ``index`` is not in
        ``[0, record_count)``.
        """

    @abstractmethod
    def scan(self) -> Iterator[Product]:
        """Yield every product in storage order, starting at index 0."""

    @abstractmethod
    def update_cost(self, index: int, cost: float) -> None:
        """Overwrite the cost of the record at ``index``."""
