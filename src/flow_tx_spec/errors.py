"""Flow transaction encoding error codes and exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ErrorCode(IntEnum):
    # Structure
    MISSING_FIELD = 0x0100
    INVALID_TYPE = 0x0101

    # Addresses
    MALFORMED_ADDRESS = 0x0200

    # Encoding
    INVALID_HEX = 0x0301
    INVALID_LENGTH = 0x0302
    NEGATIVE_INTEGER = 0x0303
    INTEGER_OUT_OF_RANGE = 0x0304
    LENGTH_OVERFLOW = 0x0305
    INVALID_AMOUNT = 0x0306
    INVALID_ARGUMENT = 0x0307


@dataclass(frozen=True)
class SpecError(Exception):
    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.name}({self.code:#06x}): {self.message}"


# Allow Python's Exception machinery to set __traceback__/__context__/__cause__
# while keeping dataclass fields frozen (Python 3.13 contextlib compat).
_EXCEPTION_ATTRS = frozenset(("__traceback__", "__context__", "__cause__"))
_frozen_setattr = SpecError.__setattr__


def _spec_error_setattr(self: SpecError, name: str, value: object) -> None:
    if name in _EXCEPTION_ATTRS:
        object.__setattr__(self, name, value)
    else:
        _frozen_setattr(self, name, value)


SpecError.__setattr__ = _spec_error_setattr  # type: ignore[method-assign]


class MissingFieldError(SpecError):
    """A required transaction field is absent."""

    def __init__(self, field_name: str) -> None:
        super().__init__(ErrorCode.MISSING_FIELD, f"missing required field: {field_name}")


class MalformedAddressError(SpecError):
    """An address does not decode to at most 8 bytes."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.MALFORMED_ADDRESS, message)


class EncodingError(SpecError):
    """Structurally unencodable input (negative integer, length overflow, ...)."""

    def __init__(self, message: str, code: ErrorCode) -> None:
        super().__init__(code, message)
