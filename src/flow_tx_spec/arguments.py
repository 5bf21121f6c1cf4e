"""JSON-Cadence argument serialization.

The transaction encoders treat arguments as opaque byte strings. This module
produces those bytes for the argument kinds the fixtures use: each argument
is a ``{"type", "value"}`` object rendered as compact UTF-8 JSON.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .canonical import address_hex, ufix64_text, uint
from .errors import EncodingError, ErrorCode


class ArgumentType(Enum):
    STRING = "String"
    ADDRESS = "Address"
    UFIX64 = "UFix64"
    BOOL = "Bool"
    UINT8 = "UInt8"
    UINT16 = "UInt16"
    UINT32 = "UInt32"
    UINT64 = "UInt64"
    ARRAY = "Array"
    OPTIONAL = "Optional"


UINT_BITS = {
    ArgumentType.UINT8: 8,
    ArgumentType.UINT16: 16,
    ArgumentType.UINT32: 32,
    ArgumentType.UINT64: 64,
}


@dataclass(frozen=True)
class Argument:
    type: ArgumentType
    value: Any

    def to_json(self) -> dict[str, Any]:
        return {"type": self.type.value, "value": _cadence_value(self.type, self.value)}

    def to_bytes(self) -> bytes:
        return json.dumps(self.to_json(), separators=(",", ":"), ensure_ascii=False).encode(
            "utf-8"
        )


@dataclass(frozen=True)
class RawArgument:
    """Argument bytes already produced by an external serializer."""

    data: bytes

    def to_bytes(self) -> bytes:
        return bytes(self.data)


AnyArgument = Union[Argument, RawArgument, bytes]


def _invalid(message: str) -> EncodingError:
    return EncodingError(message, ErrorCode.INVALID_ARGUMENT)


def _nested(value: Any) -> dict[str, Any]:
    if not isinstance(value, Argument):
        raise _invalid("nested values must be Argument instances")
    return value.to_json()


def _cadence_value(arg_type: ArgumentType, value: Any) -> Any:
    if arg_type == ArgumentType.STRING:
        if not isinstance(value, str):
            raise _invalid("String argument value must be str")
        return value
    if arg_type == ArgumentType.ADDRESS:
        return "0x" + address_hex(value)
    if arg_type == ArgumentType.UFIX64:
        return ufix64_text(value)
    if arg_type == ArgumentType.BOOL:
        if not isinstance(value, bool):
            raise _invalid("Bool argument value must be bool")
        return value
    if arg_type in UINT_BITS:
        if isinstance(value, str) and value.isascii() and value.isdigit():
            value = int(value)
        return str(uint(value, UINT_BITS[arg_type], arg_type.value))
    if arg_type == ArgumentType.ARRAY:
        if not isinstance(value, (list, tuple)):
            raise _invalid("Array argument value must be a list")
        return [_nested(v) for v in value]
    if arg_type == ArgumentType.OPTIONAL:
        if value is None:
            return None
        return _nested(value)
    raise _invalid(f"unsupported argument type: {arg_type}")


def argument_bytes(arg: AnyArgument) -> bytes:
    if isinstance(arg, (bytes, bytearray)):
        return bytes(arg)
    if isinstance(arg, (Argument, RawArgument)):
        return arg.to_bytes()
    raise _invalid(f"unsupported argument: {type(arg).__name__}")


def string(value: str) -> Argument:
    return Argument(ArgumentType.STRING, value)


def address(value: str) -> Argument:
    return Argument(ArgumentType.ADDRESS, value)


def ufix64(value: str) -> Argument:
    return Argument(ArgumentType.UFIX64, value)


def array(*items: Argument) -> Argument:
    return Argument(ArgumentType.ARRAY, list(items))
