"""Recursive-length-prefix primitives."""

from __future__ import annotations

import pytest

from flow_tx_spec.errors import EncodingError, ErrorCode
from flow_tx_spec.rlp import (
    EMPTY_LIST,
    EMPTY_STRING,
    ListWriter,
    _length_prefix,
    encode_bytes,
    encode_list,
    encode_uint,
    uint_to_bytes,
)


def test_zero_is_empty_string() -> None:
    assert uint_to_bytes(0) == b""
    assert encode_uint(0) == EMPTY_STRING == bytes.fromhex("80")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, "01"),
        (0x7F, "7f"),
        (0x80, "8180"),
        (255, "81ff"),
        (500, "8201f4"),
        (1000, "8203e8"),
        (2**64 - 1, "88ffffffffffffffff"),
    ],
)
def test_uint_minimal_big_endian(value: int, expected: str) -> None:
    assert encode_uint(value).hex() == expected


def test_uint_rejects_negative() -> None:
    with pytest.raises(EncodingError) as exc:
        encode_uint(-1)
    assert exc.value.code == ErrorCode.NEGATIVE_INTEGER


def test_uint_rejects_bool_and_text() -> None:
    for bad in (True, "1", 1.0):
        with pytest.raises(EncodingError) as exc:
            encode_uint(bad)  # type: ignore[arg-type]
        assert exc.value.code == ErrorCode.INVALID_TYPE


def test_bytes_single_byte_below_0x80_is_itself() -> None:
    assert encode_bytes(b"\x00") == b"\x00"
    assert encode_bytes(b"\x7f") == b"\x7f"
    assert encode_bytes(b"\x80") == b"\x81\x80"


def test_bytes_short_and_long_boundary() -> None:
    assert encode_bytes(b"") == EMPTY_STRING
    assert encode_bytes(b"dog").hex() == "83646f67"

    short = b"a" * 55
    assert encode_bytes(short) == b"\xb7" + short

    long = b"a" * 56
    assert encode_bytes(long) == b"\xb8\x38" + long

    kilo = b"x" * 1024
    assert encode_bytes(kilo)[:3] == b"\xb9\x04\x00"


def test_bytes_rejects_text() -> None:
    with pytest.raises(EncodingError) as exc:
        encode_bytes("dog")  # type: ignore[arg-type]
    assert exc.value.code == ErrorCode.INVALID_TYPE


def test_empty_list_is_distinct() -> None:
    assert encode_list([]) == EMPTY_LIST == bytes.fromhex("c0")
    assert encode_list([EMPTY_STRING]).hex() == "c180"
    assert encode_list([EMPTY_LIST]).hex() == "c1c0"


def test_long_list_prefix() -> None:
    items = [encode_bytes(b"a" * 54)]  # 55 bytes encoded
    assert encode_list(items)[:1] == b"\xf7"
    items = [encode_bytes(b"a" * 55)]  # 56 bytes encoded
    assert encode_list(items)[:2] == b"\xf8\x38"


def test_length_of_length_overflow() -> None:
    with pytest.raises(EncodingError) as exc:
        _length_prefix(2**64, 0x80, 0xB7)
    assert exc.value.code == ErrorCode.LENGTH_OVERFLOW


def test_list_writer_keeps_write_order() -> None:
    w = ListWriter()
    w.write_text("hi")
    w.write_uint(0)
    w.write_list([encode_uint(1), encode_uint(2)])
    w.write_encoded(EMPTY_LIST)
    assert w.finish().hex() == "c8" + "826869" + "80" + "c20102" + "c0"
