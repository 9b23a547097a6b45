"""Fixed-length binary codec for Product records.

Record layout (big-endian, 240 bytes, no header)::

    offset  length  field
         0      70  name         35 UTF-16 code units, space-padded
        70     150  description  75 UTF-16 code units, space-padded
       220      12  id            6 UTF-16 code units, space-padded
       232       8  cost         IEEE-754 double

Widths are counted in 2-byte code units, not in Python characters, so a
character outside the BMP uses two of them. Over-long values are
truncated and short ones padded; nothing is validated here.
"""

from __future__ import annotations

import struct

from randproduct.domain.exceptions import MalformedRecordError
from randproduct.domain.model.product import (
    DESCRIPTION_SIZE,
    ID_SIZE,
    NAME_SIZE,
    Product,
)

CHAR_WIDTH = 2
RECORD_SIZE = (NAME_SIZE + DESCRIPTION_SIZE + ID_SIZE) * CHAR_WIDTH + 8

NAME_OFFSET = 0
DESCRIPTION_OFFSET = NAME_OFFSET + NAME_SIZE * CHAR_WIDTH
ID_OFFSET = DESCRIPTION_OFFSET + DESCRIPTION_SIZE * CHAR_WIDTH
COST_OFFSET = ID_OFFSET + ID_SIZE * CHAR_WIDTH

_TEXT_ENCODING = "utf-16-be"
# Lone surrogates are legal 16-bit code units; pass them through both ways.
_TEXT_ERRORS = "surrogatepass"
_SPACE = " ".encode(_TEXT_ENCODING)
_COST = struct.Struct(">d")


def pad_field(text: str | None, width: int) -> bytes:
    """Encode ``text`` into exactly ``width`` code units.

    Truncates beyond ``width`` and right-pads with spaces below it.
    ``None`` is treated as the empty string.
    """
    raw = (text or "").encode(_TEXT_ENCODING, _TEXT_ERRORS)[: width * CHAR_WIDTH]
    missing = width - len(raw) // CHAR_WIDTH
    return raw + _SPACE * missing


def _read_field(block: bytes, offset: int, width: int) -> str:
    raw = block[offset : offset + width * CHAR_WIDTH]
    return raw.decode(_TEXT_ENCODING, _TEXT_ERRORS).rstrip(" ")


def encode_cost(cost: float) -> bytes:
    return _COST.pack(cost)


def encode(product: Product) -> bytes:
    """Encode a product into one ``RECORD_SIZE`` block."""
    return b"".join(
        (
            pad_field(product.name, NAME_SIZE),
            pad_field(product.description, DESCRIPTION_SIZE),
            pad_field(product.id, ID_SIZE),
            encode_cost(product.cost),
        )
    )


def decode(block: bytes) -> Product:
    """Decode the first ``RECORD_SIZE`` bytes of ``block``.

    Trailing padding is stripped from each text field, so only the
    trimmed value survives a round trip.
    """
    if len(block) < RECORD_SIZE:
        raise MalformedRecordError(
            f"Expected {RECORD_SIZE} bytes for a record, got {len(block)}"
        )
    (cost,) = _COST.unpack_from(block, COST_OFFSET)
    return Product(
        id=_read_field(block, ID_OFFSET, ID_SIZE),
        name=_read_field(block, NAME_OFFSET, NAME_SIZE),
        description=_read_field(block, DESCRIPTION_OFFSET, DESCRIPTION_SIZE),
        cost=cost,
    )
