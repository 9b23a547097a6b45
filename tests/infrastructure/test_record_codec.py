"""Unit tests for the fixed-length record codec."""

import struct

import pytest

from randproduct.domain.exceptions import MalformedRecordError
from randproduct.domain.model.product import Product
from randproduct.infrastructure.persistence import record_codec
from randproduct.infrastructure.persistence.record_codec import (
    COST_OFFSET,
    DESCRIPTION_OFFSET,
    DESCRIPTION_SIZE,
    ID_OFFSET,
    ID_SIZE,
    NAME_SIZE,
    RECORD_SIZE,
    decode,
    encode,
    pad_field,
)


def _product(**overrides) -> Product:
    fields = dict(id="000123", name="Bolt", description="Steel bolt", cost=1.50)
    fields.update(overrides)
    return Product(**fields)


# ── Layout ───────────────────────────────────────────────────────────────────


class TestLayout:

    def test_constants(self):
        assert (NAME_SIZE, DESCRIPTION_SIZE, ID_SIZE) == (35, 75, 6)
        assert RECORD_SIZE == 240

    def test_offsets(self):
        assert DESCRIPTION_OFFSET == 70
        assert ID_OFFSET == 220
        assert COST_OFFSET == 232

    @pytest.mark.parametrize(
        "product",
        [
            _product(),
            _product(name="", description="", id=""),
            _product(name="N" * 200, description="D" * 500, id="1234567890"),
            _product(name="café \U0001F600"),
        ],
    )
    def test_fixed_size(self, product):
        assert len(encode(product)) == RECORD_SIZE

    def test_exact_bytes(self):
        block = encode(_product())
        assert block[:8] == "Bolt".encode("utf-16-be")
        assert block[8:70] == " ".encode("utf-16-be") * 31
        assert block[70:90] == "Steel bolt".encode("utf-16-be")
        assert block[ID_OFFSET:COST_OFFSET] == "000123".encode("utf-16-be")
        assert block[COST_OFFSET:] == struct.pack(">d", 1.5)

    def test_cost_is_big_endian_double(self):
        block = encode(_product(cost=25.0))
        assert block[COST_OFFSET:] == bytes.fromhex("4039000000000000")


# ── Padding and truncation ───────────────────────────────────────────────────


class TestPadding:

    def test_short_name_is_space_padded(self):
        block = encode(_product(name="abc"))
        name_bytes = block[:70]
        assert name_bytes[:6] == "abc".encode("utf-16-be")
        assert name_bytes[6:] == b"\x00 " * 32
        assert len(name_bytes[6:]) == 64

    def test_padding_stripped_on_decode(self):
        assert decode(encode(_product(name="abc"))).name == "abc"

    def test_long_name_truncated(self):
        name = "ABCDEFGHIJ" * 4
        assert decode(encode(_product(name=name))).name == name[:35]

    def test_long_description_truncated(self):
        description = "x" * 80
        assert decode(encode(_product(description=description))).description == "x" * 75

    def test_long_id_truncated(self):
        assert decode(encode(_product(id="12345678"))).id == "123456"

    def test_pad_field_none_is_empty(self):
        assert pad_field(None, 3) == b"\x00 " * 3

    def test_pad_field_counts_code_units(self):
        # One astral character fills two code units.
        raw = pad_field("\U0001F600", 3)
        assert len(raw) == 6
        assert raw[4:] == b"\x00 "

    def test_trailing_spaces_not_preserved(self):
        assert decode(encode(_product(name="Bolt   "))).name == "Bolt"

    def test_leading_spaces_preserved(self):
        assert decode(encode(_product(name="  Bolt"))).name == "  Bolt"


# ── Round trip ───────────────────────────────────────────────────────────────


class TestRoundTrip:

    def test_typical_product(self):
        p = _product()
        assert decode(encode(p)) == p

    def test_full_width_fields(self):
        p = Product(id="999999", name="n" * 35, description="d" * 75, cost=1e300)
        assert decode(encode(p)) == p

    def test_empty_fields(self):
        p = Product(id="", name="", description="", cost=0.0)
        assert decode(encode(p)) == p

    def test_non_ascii_text(self):
        p = _product(name="Café crème", description="über \U0001F600")
        assert decode(encode(p)) == p

    def test_negative_cost_passes_through(self):
        assert decode(encode(_product(cost=-3.5))).cost == -3.5


# ── Decode errors ────────────────────────────────────────────────────────────


class TestDecode:

    def test_short_block_rejected(self):
        with pytest.raises(MalformedRecordError, match="Expected 240 bytes"):
            decode(encode(_product())[:-1])

    def test_empty_block_rejected(self):
        with pytest.raises(MalformedRecordError):
            decode(b"")

    def test_extra_bytes_ignored(self):
        p = _product()
        assert decode(encode(p) + b"\xff" * 10) == p

    def test_encode_cost(self):
        assert record_codec.encode_cost(1.5) == struct.pack(">d", 1.5)
