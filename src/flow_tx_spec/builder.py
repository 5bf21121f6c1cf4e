"""Base fixture transactions and variant builders.

Defaults live here, outside the encoders. Variants are built with
``dataclasses.replace``; list fields given to a builder replace the base
list outright, and every built transaction gets list copies of its own.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from .account_key import encode_account_key
from .arguments import string
from .config import HASH_ALGO_SHA3_256, SIG_ALGO_ECDSA_P256, WEIGHT_MAX
from .scripts import TX_ADD_NEW_KEY
from .types import PayloadSignature, ProposalKey, Transaction

PUBLIC_KEY = (
    "94488a795a07700c6fb83e066cf57dfd87f92ce70cbc81cb3bd3fea2df7b6707"
    "3b70e36b44f3578b43d64d3faa2e8e415ef6c2b5fe4390d5a78e238581c6e4bc"
)
SERVICE_ADDRESS = "f8d6e0586b0a20c7"
REFERENCE_BLOCK_ID = "f0e4c2f76c58916ec258f246851bea091d14d4247a2fc3e18694461b1816e13b"
PAYER_SIGNATURE = "f7225388c1d69d57e6251c9fda50cbbf9e05131e5adb81e5aa0422402f048162"

DEFAULT_ACCOUNT_KEY = encode_account_key(
    PUBLIC_KEY, SIG_ALGO_ECDSA_P256, HASH_ALGO_SHA3_256, WEIGHT_MAX
)

DEFAULT_PROPOSAL_KEY = ProposalKey(address=SERVICE_ADDRESS, key_id=4, sequence_number=10)

DEFAULT_PAYLOAD_SIGNATURE = PayloadSignature(
    address=SERVICE_ADDRESS, key_id=4, signature=PAYER_SIGNATURE
)

BASE_PAYLOAD_TX = Transaction(
    script=TX_ADD_NEW_KEY,
    arguments=(string(DEFAULT_ACCOUNT_KEY),),
    reference_block_id=REFERENCE_BLOCK_ID,
    gas_limit=42,
    proposal_key=DEFAULT_PROPOSAL_KEY,
    payer=SERVICE_ADDRESS,
    authorizers=(SERVICE_ADDRESS,),
)

BASE_ENVELOPE_TX = replace(BASE_PAYLOAD_TX, payload_signatures=(DEFAULT_PAYLOAD_SIGNATURE,))


def proposal_key(**changes: Any) -> ProposalKey:
    return replace(DEFAULT_PROPOSAL_KEY, **changes)


def payload_signature(**changes: Any) -> PayloadSignature:
    return replace(DEFAULT_PAYLOAD_SIGNATURE, **changes)


def _fresh_lists(tx: Transaction) -> Transaction:
    copies = {}
    for name in ("arguments", "authorizers", "payload_signatures"):
        value = getattr(tx, name)
        if value is not None:
            copies[name] = list(value)
    return replace(tx, **copies)


def build_payload_tx(**changes: Any) -> Transaction:
    return _fresh_lists(replace(BASE_PAYLOAD_TX, **changes))


def build_envelope_tx(**changes: Any) -> Transaction:
    return _fresh_lists(replace(BASE_ENVELOPE_TX, **changes))


def without_signatures(tx: Transaction) -> Transaction:
    """The envelope form recorded next to a payload case: no signatures yet."""
    return replace(tx, payload_signatures=[])
