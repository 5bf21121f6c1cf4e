"""Canonical byte forms for domain scalars (addresses, block ids, amounts)."""

from __future__ import annotations

import re
from typing import Union

from .config import (
    ADDRESS_LENGTH,
    BLOCK_ID_LENGTH,
    UFIX64_DECIMALS,
    UFIX64_MAX_INTEGER_PART,
    UFIX64_MAX_UNITS,
    UFIX64_SCALE,
)
from .errors import EncodingError, ErrorCode, MalformedAddressError

HexLike = Union[str, bytes, bytearray]

_UFIX64_RE = re.compile(r"([0-9]+)(?:\.([0-9]{1,8}))?")
_HEX_RE = re.compile(r"^[0-9a-fA-F]*$")


def _sans_prefix(value: str) -> str:
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value


def hex_to_bytes(value: HexLike, name: str = "value") -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str):
        raise EncodingError(
            f"{name} must be bytes or hex text, got {type(value).__name__}",
            ErrorCode.INVALID_TYPE,
        )
    text = _sans_prefix(value.strip())
    if _HEX_RE.match(text) is None:
        raise EncodingError(f"{name} is not valid hex: {value!r}", ErrorCode.INVALID_HEX)
    if len(text) % 2:
        text = "0" + text
    return bytes.fromhex(text)


def _left_pad(data: bytes, size: int) -> bytes:
    return data.rjust(size, b"\x00")


def address_bytes(value: HexLike) -> bytes:
    try:
        raw = hex_to_bytes(value, "address")
    except EncodingError as e:
        raise MalformedAddressError(e.message) from None
    if len(raw) > ADDRESS_LENGTH:
        raise MalformedAddressError(
            f"address must be at most {ADDRESS_LENGTH} bytes, got {len(raw)}"
        )
    return _left_pad(raw, ADDRESS_LENGTH)


def address_hex(value: HexLike) -> str:
    return address_bytes(value).hex()


def block_id_bytes(value: HexLike) -> bytes:
    raw = hex_to_bytes(value, "reference_block_id")
    if len(raw) > BLOCK_ID_LENGTH:
        raise EncodingError(
            f"reference_block_id must be at most {BLOCK_ID_LENGTH} bytes",
            ErrorCode.INVALID_LENGTH,
        )
    return _left_pad(raw, BLOCK_ID_LENGTH)


def signature_bytes(value: HexLike) -> bytes:
    return hex_to_bytes(value, "signature")


def uint(value: int, bits: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingError(
            f"{name} must be an integer, got {type(value).__name__}", ErrorCode.INVALID_TYPE
        )
    if value < 0:
        raise EncodingError(f"{name} must not be negative", ErrorCode.NEGATIVE_INTEGER)
    if value >> bits:
        raise EncodingError(f"{name} must fit u{bits}", ErrorCode.INTEGER_OUT_OF_RANGE)
    return value


def _ufix64_match(amount: str) -> re.Match:
    if not isinstance(amount, str):
        raise EncodingError("UFix64 amount must be decimal text", ErrorCode.INVALID_AMOUNT)
    m = _UFIX64_RE.fullmatch(amount)
    if m is None:
        raise EncodingError(f"malformed UFix64 amount: {amount!r}", ErrorCode.INVALID_AMOUNT)
    if int(m.group(1)) > UFIX64_MAX_INTEGER_PART:
        raise EncodingError(
            f"UFix64 integer part exceeds {UFIX64_MAX_INTEGER_PART}",
            ErrorCode.INTEGER_OUT_OF_RANGE,
        )
    return m


def ufix64_text(amount: str) -> str:
    """Check a decimal token amount and return it unchanged.

    Argument JSON carries the amount text as given, so ``0.0`` stays ``0.0``.
    Only the shape and the whole-number part are checked here.
    """
    _ufix64_match(amount)
    return amount


def ufix64_to_units(amount: str) -> int:
    """Scale a decimal token amount to smallest units (10^-8), as a u64."""
    m = _ufix64_match(amount)
    fraction = (m.group(2) or "").ljust(UFIX64_DECIMALS, "0")
    units = int(m.group(1)) * UFIX64_SCALE + int(fraction)
    if units > UFIX64_MAX_UNITS:
        raise EncodingError(
            f"UFix64 amount {amount!r} does not fit u64", ErrorCode.INTEGER_OUT_OF_RANGE
        )
    return units
