"""Helpers to serialize/deserialize transaction fixtures.

JSON keys follow the fixture format consumed by the signing-device tests
(``refBlock``, ``gasLimit``, ``proposalKey.sequenceNum``, ``payloadSigs``).
Missing keys load as ``None`` so the encoders can report them; present keys
of the wrong shape raise ``EncodingError(INVALID_TYPE)``.
"""

from __future__ import annotations

from typing import Any, Optional

from .arguments import AnyArgument, Argument, ArgumentType, RawArgument
from .canonical import hex_to_bytes
from .errors import EncodingError, ErrorCode
from .types import PayloadSignature, ProposalKey, Transaction


def _hex_text(v: Any) -> Any:
    if isinstance(v, (bytes, bytearray)):
        return bytes(v).hex()
    return v


def _object(v: Any, name: str) -> dict[str, Any]:
    if not isinstance(v, dict):
        raise EncodingError(
            f"{name} must be an object, got {type(v).__name__}", ErrorCode.INVALID_TYPE
        )
    return v


def _array(v: Any, name: str) -> list[Any]:
    if not isinstance(v, list):
        raise EncodingError(
            f"{name} must be an array, got {type(v).__name__}", ErrorCode.INVALID_TYPE
        )
    return v


def argument_to_json(arg: AnyArgument) -> dict[str, Any]:
    if isinstance(arg, Argument):
        return arg.to_json()
    if isinstance(arg, RawArgument):
        return {"raw": arg.data.hex()}
    if isinstance(arg, (bytes, bytearray)):
        return {"raw": bytes(arg).hex()}
    raise EncodingError(f"unsupported argument: {type(arg).__name__}", ErrorCode.INVALID_ARGUMENT)


def argument_from_json(data: Any, name: str = "argument") -> AnyArgument:
    data = _object(data, name)
    if "raw" in data:
        return RawArgument(hex_to_bytes(data["raw"], f"{name}.raw"))
    try:
        arg_type = ArgumentType(data.get("type"))
    except ValueError:
        raise EncodingError(
            f"unknown argument type: {data.get('type')!r}", ErrorCode.INVALID_ARGUMENT
        ) from None
    value = data.get("value")
    if arg_type == ArgumentType.ARRAY:
        items = _array(value, f"{name}.value")
        value = [argument_from_json(v, f"{name}.value[{i}]") for i, v in enumerate(items)]
    elif arg_type == ArgumentType.OPTIONAL and value is not None:
        value = argument_from_json(value, f"{name}.value")
    return Argument(arg_type, value)


def _proposal_key_to_json(key: Optional[ProposalKey]) -> Optional[dict[str, Any]]:
    if key is None:
        return None
    return {
        "address": _hex_text(key.address),
        "keyId": key.key_id,
        "sequenceNum": key.sequence_number,
    }


def _signature_to_json(sig: PayloadSignature) -> dict[str, Any]:
    return {
        "address": _hex_text(sig.address),
        "keyId": sig.key_id,
        "sig": _hex_text(sig.signature),
    }


def tx_to_json(tx: Transaction) -> dict[str, Any]:
    result: dict[str, Any] = {
        "script": tx.script,
        "arguments": (
            [argument_to_json(a) for a in tx.arguments] if tx.arguments is not None else None
        ),
        "refBlock": _hex_text(tx.reference_block_id),
        "gasLimit": tx.gas_limit,
        "proposalKey": _proposal_key_to_json(tx.proposal_key),
        "payer": _hex_text(tx.payer),
        "authorizers": (
            [_hex_text(a) for a in tx.authorizers] if tx.authorizers is not None else None
        ),
    }
    if tx.payload_signatures is not None:
        result["payloadSigs"] = [_signature_to_json(s) for s in tx.payload_signatures]
    return result


def _proposal_key_from_json(data: Any) -> Optional[ProposalKey]:
    if data is None:
        return None
    pk = _object(data, "proposalKey")
    return ProposalKey(
        address=pk.get("address"),
        key_id=pk.get("keyId"),
        sequence_number=pk.get("sequenceNum"),
    )


def _signature_from_json(data: Any, index: int) -> PayloadSignature:
    s = _object(data, f"payloadSigs[{index}]")
    return PayloadSignature(address=s.get("address"), key_id=s.get("keyId"), signature=s.get("sig"))


def tx_from_json(data: Any) -> Transaction:
    data = _object(data, "transaction")
    arguments = data.get("arguments")
    authorizers = data.get("authorizers")
    sigs = data.get("payloadSigs")

    return Transaction(
        script=data.get("script"),
        arguments=(
            [
                argument_from_json(a, f"arguments[{i}]")
                for i, a in enumerate(_array(arguments, "arguments"))
            ]
            if arguments is not None
            else None
        ),
        reference_block_id=data.get("refBlock"),
        gas_limit=data.get("gasLimit"),
        proposal_key=_proposal_key_from_json(data.get("proposalKey")),
        payer=data.get("payer"),
        authorizers=list(_array(authorizers, "authorizers")) if authorizers is not None else None,
        payload_signatures=(
            [_signature_from_json(s, i) for i, s in enumerate(_array(sigs, "payloadSigs"))]
            if sigs is not None
            else None
        ),
    )
