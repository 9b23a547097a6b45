"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from randproduct.infrastructure.persistence.record_store import RecordStore

DATA_FILE_NAME = "ProductData.dat"
DATA_FILE_ENV = "RANDPRODUCT_DATA_FILE"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

logger = logging.getLogger(__name__)


def default_data_file() -> Path:
    override = os.environ.get(DATA_FILE_ENV)
    if override:
        return Path(override)
    return _DATA_DIR / DATA_FILE_NAME


def product_repository(path: Path | None = None, readonly: bool = False) -> RecordStore:
    path = path or default_data_file()
    logger.debug("Opening product store %s (readonly=%s)", path, readonly)
    return RecordStore.open(path, readonly=readonly)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
