"""Payload and envelope encoding.

Payload (signed by proposer, payer and authorizers)::

    PAYLOAD_DOMAIN_TAG || rlp([script, [arg...], ref_block, gas_limit,
                              proposer_address, proposer_key_id,
                              proposer_sequence_number, payer, [authorizer...]])

Envelope (signed last by the payer)::

    ENVELOPE_DOMAIN_TAG || rlp([<payload list>, [[address, key_id, sig]...]])

The envelope re-derives the payload list with the same function instead of
reusing an earlier payload result. Signatures keep the caller's order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, List

from .arguments import argument_bytes
from .canonical import address_bytes, block_id_bytes, signature_bytes, uint
from .config import (
    ENVELOPE_DOMAIN_TAG,
    GAS_LIMIT_BITS,
    KEY_ID_BITS,
    PAYLOAD_DOMAIN_TAG,
    SEQUENCE_NUMBER_BITS,
)
from .errors import EncodingError, ErrorCode, MissingFieldError
from .rlp import ListWriter, encode_bytes
from .types import PayloadSignature, Transaction


@dataclass(frozen=True)
class PayloadMessage:
    """Bytes a proposer, payer or authorizer key signs."""

    domain_tag: ClassVar[bytes] = PAYLOAD_DOMAIN_TAG
    data: bytes

    def hex(self) -> str:
        return self.data.hex()


@dataclass(frozen=True)
class EnvelopeMessage:
    """Bytes the payer key signs after collecting payload signatures."""

    domain_tag: ClassVar[bytes] = ENVELOPE_DOMAIN_TAG
    data: bytes

    def hex(self) -> str:
        return self.data.hex()


def _require(value: Any, name: str) -> Any:
    if value is None:
        raise MissingFieldError(name)
    return value


def _require_list(value: Any, name: str) -> List[Any]:
    _require(value, name)
    if not isinstance(value, (list, tuple)):
        raise EncodingError(f"{name} must be a list", ErrorCode.INVALID_TYPE)
    return list(value)


def payload_fields(tx: Transaction) -> bytes:
    """Encode the payload field list, without a domain tag."""
    script = _require(tx.script, "script")
    if not isinstance(script, str):
        raise EncodingError("script must be text", ErrorCode.INVALID_TYPE)
    arguments = _require_list(tx.arguments, "arguments")
    reference_block_id = _require(tx.reference_block_id, "reference_block_id")
    gas_limit = _require(tx.gas_limit, "gas_limit")
    proposal_key = _require(tx.proposal_key, "proposal_key")
    proposer = _require(proposal_key.address, "proposal_key.address")
    key_id = _require(proposal_key.key_id, "proposal_key.key_id")
    sequence_number = _require(proposal_key.sequence_number, "proposal_key.sequence_number")
    payer = _require(tx.payer, "payer")
    authorizers = _require_list(tx.authorizers, "authorizers")

    w = ListWriter()
    w.write_text(script)
    w.write_list([encode_bytes(argument_bytes(a)) for a in arguments])
    w.write_bytes(block_id_bytes(reference_block_id))
    w.write_uint(uint(gas_limit, GAS_LIMIT_BITS, "gas_limit"))
    w.write_bytes(address_bytes(proposer))
    w.write_uint(uint(key_id, KEY_ID_BITS, "proposal_key.key_id"))
    w.write_uint(uint(sequence_number, SEQUENCE_NUMBER_BITS, "proposal_key.sequence_number"))
    w.write_bytes(address_bytes(payer))
    w.write_list([encode_bytes(address_bytes(a)) for a in authorizers])
    return w.finish()


def _signature_entry(sig: PayloadSignature, index: int) -> bytes:
    label = f"payload_signatures[{index}]"
    w = ListWriter()
    w.write_bytes(address_bytes(_require(sig.address, f"{label}.address")))
    w.write_uint(uint(_require(sig.key_id, f"{label}.key_id"), KEY_ID_BITS, f"{label}.key_id"))
    w.write_bytes(signature_bytes(_require(sig.signature, f"{label}.signature")))
    return w.finish()


def payload_signatures(tx: Transaction) -> bytes:
    """Encode the collected payload signatures as a list, in supplied order."""
    sigs = _require_list(tx.payload_signatures, "payload_signatures")
    w = ListWriter()
    for i, sig in enumerate(sigs):
        w.write_encoded(_signature_entry(sig, i))
    return w.finish()


def payload_message(tx: Transaction) -> PayloadMessage:
    return PayloadMessage(PAYLOAD_DOMAIN_TAG + payload_fields(tx))


def envelope_message(tx: Transaction) -> EnvelopeMessage:
    w = ListWriter()
    w.write_encoded(payload_fields(tx))
    w.write_encoded(payload_signatures(tx))
    return EnvelopeMessage(ENVELOPE_DOMAIN_TAG + w.finish())


def encode_payload(tx: Transaction) -> str:
    """Encode the transaction payload as lowercase hex."""
    return payload_message(tx).hex()


def encode_envelope(tx: Transaction) -> str:
    """Encode the transaction envelope as lowercase hex."""
    return envelope_message(tx).hex()
