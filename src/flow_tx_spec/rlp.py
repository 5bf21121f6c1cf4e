"""Recursive-length-prefix primitives.

Three shapes are encodable: unsigned integers, byte strings, and lists of
already-encoded items. Integers use their minimal big-endian form, so zero
is the empty string (``80``). A single byte below ``0x80`` is its own
encoding; anything else is length-prefixed, short form up to 55 bytes and
"length of the length" form beyond that. Lists use the same rule with the
list prefixes, so the empty list is ``c0``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .errors import EncodingError, ErrorCode

SINGLE_BYTE_MAX = 0x7F
SHORT_STRING_PREFIX = 0x80
LONG_STRING_BASE = 0xB7
SHORT_LIST_PREFIX = 0xC0
LONG_LIST_BASE = 0xF7
SHORT_MAX_LEN = 55
MAX_LENGTH_OF_LENGTH = 8

EMPTY_STRING = bytes([SHORT_STRING_PREFIX])
EMPTY_LIST = bytes([SHORT_LIST_PREFIX])


def uint_to_bytes(value: int) -> bytes:
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingError(
            f"integer expected, got {type(value).__name__}", ErrorCode.INVALID_TYPE
        )
    if value < 0:
        raise EncodingError("negative integers are not encodable", ErrorCode.NEGATIVE_INTEGER)
    if value == 0:
        return b""
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def _length_prefix(length: int, short_base: int, long_base: int) -> bytes:
    if length <= SHORT_MAX_LEN:
        return bytes([short_base + length])
    length_bytes = uint_to_bytes(length)
    if len(length_bytes) > MAX_LENGTH_OF_LENGTH:
        raise EncodingError("payload length does not fit in 8 bytes", ErrorCode.LENGTH_OVERFLOW)
    return bytes([long_base + len(length_bytes)]) + length_bytes


def encode_bytes(data: bytes) -> bytes:
    if not isinstance(data, (bytes, bytearray)):
        raise EncodingError(
            f"bytes expected, got {type(data).__name__}", ErrorCode.INVALID_TYPE
        )
    data = bytes(data)
    if len(data) == 1 and data[0] <= SINGLE_BYTE_MAX:
        return data
    return _length_prefix(len(data), SHORT_STRING_PREFIX, LONG_STRING_BASE) + data


def encode_uint(value: int) -> bytes:
    return encode_bytes(uint_to_bytes(value))


def encode_list(items: Iterable[bytes]) -> bytes:
    body = b"".join(items)
    return _length_prefix(len(body), SHORT_LIST_PREFIX, LONG_LIST_BASE) + body


@dataclass
class ListWriter:
    """Collects encoded members of one list, in write order."""

    items: list[bytes] = field(default_factory=list)

    def write_uint(self, v: int) -> None:
        self.items.append(encode_uint(v))

    def write_bytes(self, b: bytes) -> None:
        self.items.append(encode_bytes(b))

    def write_text(self, s: str) -> None:
        self.write_bytes(s.encode("utf-8"))

    def write_list(self, encoded: Iterable[bytes]) -> None:
        self.items.append(encode_list(encoded))

    def write_encoded(self, encoded: bytes) -> None:
        self.items.append(encoded)

    def finish(self) -> bytes:
        return encode_list(self.items)
