"""Random-access file implementation of ProductRepository.

The file is a headerless sequence of fixed-size records, so record ``i``
lives at byte ``i * RECORD_SIZE`` and the record count is simply the file
size divided by the record size.

One RecordStore owns one file handle. Several stores writing the same
path at once is not supported.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from randproduct.domain.exceptions import (
    MalformedRecordError,
    RecordOutOfRangeError,
    StorageError,
    StoreNotFoundError,
)
from randproduct.domain.model.product import Product
from randproduct.domain.repository.product_repository import ProductRepository
from randproduct.infrastructure.persistence import record_codec
from randproduct.infrastructure.persistence.record_codec import COST_OFFSET, RECORD_SIZE

logger = logging.getLogger(__name__)


class RecordStore(ProductRepository):
    """Record-granularity access to a seekable binary file.

    Use as a context manager so the handle is released on every path::

        with RecordStore.open(path) as store:
            store.append(product)
    """

    def __init__(self, file: BinaryIO) -> None:
        self._file: BinaryIO | None = file
        self._name = str(getattr(file, "name", "<stream>"))
        self._lock = threading.RLock()
        size = self._size()
        self._record_count = size // RECORD_SIZE
        if size % RECORD_SIZE:
            logger.warning(
                "%s ends with %d bytes of a partial record; ignored",
                self._name,
                size % RECORD_SIZE,
            )
        logger.debug("Opened %s with %d records", self._name, self._record_count)

    @classmethod
    def open(cls, path: str | Path, readonly: bool = False) -> RecordStore:
        """Open the data file at ``path``.

        In read-write mode a missing file (and its parent directories) is
        created. In read-only mode a missing file raises
        StoreNotFoundError.
        """
        path = Path(path)
        try:
            if readonly:
                file = open(path, "rb")
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                try:
                    file = open(path, "r+b")
                except FileNotFoundError:
                    file = open(path, "w+b")
        except FileNotFoundError as exc:
            raise StoreNotFoundError(f"Product data file not found: {path}") from exc
        except OSError as exc:
            raise StorageError(f"Error opening file {path}: {exc}") from exc

        try:
            return cls(file)
        except BaseException:
            file.close()
            raise

    # --- ProductRepository interface ------------------------------------------

    @property
    def record_count(self) -> int:
        return self._record_count

    def append(self, product: Product) -> int:
        block = record_codec.encode(product)
        with self._lock:
            file = self._require_open()
            offset = self._record_count * RECORD_SIZE
            try:
                file.seek(offset)
                written = file.write(block)
                file.flush()
            except OSError as exc:
                self._rollback(offset)
                raise StorageError(f"Error writing to {self._name}: {exc}") from exc
            if written is not None and written != RECORD_SIZE:
                self._rollback(offset)
                raise StorageError(
                    f"Short write to {self._name}: {written} of {RECORD_SIZE} bytes"
                )
            self._record_count += 1
            index = self._record_count - 1

        logger.debug("Appended record %d to %s", index, self._name)
        return index

    def read_at(self, index: int) -> Product:
        self._check_index(index)
        block = self._read_block(index * RECORD_SIZE)
        return record_codec.decode(block)

    def scan(self) -> Iterator[Product]:
        # Each step re-checks the end of the file, so records appended
        # while a scan is in progress are picked up.
        offset = 0
        while True:
            with self._lock:
                if offset >= self._size():
                    return
                block = self._read_block(offset)
            if len(block) < RECORD_SIZE:
                raise MalformedRecordError(
                    f"Truncated record at offset {offset} in {self._name}: "
                    f"{len(block)} of {RECORD_SIZE} bytes"
                )
            yield record_codec.decode(block)
            offset += RECORD_SIZE

    def update_cost(self, index: int, cost: float) -> None:
        self._check_index(index)
        with self._lock:
            file = self._require_open()
            try:
                file.seek(index * RECORD_SIZE + COST_OFFSET)
                file.write(record_codec.encode_cost(cost))
                file.flush()
            except OSError as exc:
                raise StorageError(f"Error writing to {self._name}: {exc}") from exc
        logger.debug("Rewrote cost of record %d in %s", index, self._name)

    # --- Lifecycle ------------------------------------------------------------

    def close(self) -> None:
        with self._lock:
            if self._file is None:
                return
            try:
                self._file.close()
            except OSError as exc:
                raise StorageError(f"Error closing {self._name}: {exc}") from exc
            finally:
                self._file = None
        logger.debug("Closed %s", self._name)

    @property
    def closed(self) -> bool:
        return self._file is None

    def __len__(self) -> int:
        return self._record_count

    def __enter__(self) -> RecordStore:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --- File helpers ---------------------------------------------------------

    def _require_open(self) -> BinaryIO:
        if self._file is None:
            raise StorageError(f"Store {self._name} is closed")
        return self._file

    def _size(self) -> int:
        with self._lock:
            file = self._require_open()
            try:
                return file.seek(0, os.SEEK_END)
            except OSError as exc:
                raise StorageError(f"Error reading {self._name}: {exc}") from exc

    def _read_block(self, offset: int) -> bytes:
        with self._lock:
            file = self._require_open()
            try:
                file.seek(offset)
                return file.read(RECORD_SIZE)
            except OSError as exc:
                raise StorageError(f"Error reading {self._name}: {exc}") from exc

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._record_count:
            raise RecordOutOfRangeError(
                f"Record index {index} out of range (store holds {self._record_count} records)"
            )

    def _rollback(self, length: int) -> None:
        """Cut the file back to ``length`` after a failed append."""
        try:
            self._file.truncate(length)
        except OSError as exc:
            logger.warning("Could not roll back %s to %d bytes: %s", self._name, length, exc)
