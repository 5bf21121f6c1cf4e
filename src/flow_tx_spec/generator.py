"""Enumerate signed-transaction fixture cases.

Four case families are produced, one file each. "Invalid" cases carry
unapproved or empty scripts: they still encode, the label only tells the
consumer (the signing device) to reject them.

Signature hex is read with odd lengths padded by a leading ``0`` nibble.
The out-of-order case signs with ``"c"``, ``"a"`` and ``"b"``, which encode
as the single bytes ``0c``, ``0a`` and ``0b``. Node's ``Buffer.from(s, "hex")``
drops a trailing odd nibble and yields empty signatures, so that case's
envelope hex differs from fixtures made by the JavaScript generator.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

from .account_key import encode_account_key
from .arguments import Argument, address, array, string, ufix64
from .builder import (
    PUBLIC_KEY,
    SERVICE_ADDRESS,
    build_envelope_tx,
    build_payload_tx,
    payload_signature,
    proposal_key,
    without_signatures,
)
from .config import (
    FLOW_AMOUNTS,
    HASH_ALGOS,
    INVALID_ENVELOPE_CASES,
    INVALID_PAYLOAD_CASES,
    OUTPUT_FORMATS,
    SIG_ALGOS,
    VALID_ENVELOPE_CASES,
    VALID_PAYLOAD_CASES,
    WEIGHTS,
)
from .encoding import encode_envelope, encode_payload
from .fixtures_io import tx_to_json
from .scripts import TX_ADD_NEW_KEY, TX_CREATE_ACCOUNT, TX_HELLO_WORLD, TX_TRANSFER_TOKENS
from .types import Transaction
from .yaml_dump import write_yaml

logger = logging.getLogger(__name__)

Case = dict[str, Any]
BuildTx = Callable[..., Transaction]


def account_keys() -> list[str]:
    """Every sign/hash algorithm and weight combination, as encoded hex."""
    return [
        encode_account_key(PUBLIC_KEY, sig_algo, hash_algo, weight)
        for sig_algo in SIG_ALGOS
        for hash_algo in HASH_ALGOS
        for weight in WEIGHTS
    ]


def _transfer_args(amount: str) -> list[Argument]:
    return [ufix64(amount), address("0x" + SERVICE_ADDRESS)]


def _example_cases(kind: str, build: BuildTx) -> list[tuple[str, Transaction]]:
    return [
        (f"Example Transaction - Valid {kind} - Zero Gas Limit", build(gas_limit=0)),
        (
            f"Example Transaction - Valid {kind} - Zero proposerKey.keyId",
            build(proposal_key=proposal_key(key_id=0)),
        ),
        (
            f"Example Transaction - Valid {kind} - Zero proposalKey.sequenceNum",
            build(proposal_key=proposal_key(sequence_number=0)),
        ),
        (f"Example Transaction - Valid {kind} - Empty Authorizers", build(authorizers=[])),
    ]


def _script_cases(kind: str, build: BuildTx, keys: list[str]) -> list[tuple[str, Transaction]]:
    cases: list[tuple[str, Transaction]] = []
    for amount in FLOW_AMOUNTS:
        cases.append(
            (
                f"Send Flow Token Transaction - Valid {kind} - Valid Amount {amount}",
                build(script=TX_TRANSFER_TOKENS, arguments=_transfer_args(amount)),
            )
        )
    for i, key in enumerate(keys):
        cases.append(
            (
                f"Create Account Transaction - Valid {kind} - Single Account Key #{i}",
                build(script=TX_CREATE_ACCOUNT, arguments=[array(string(key))]),
            )
        )
    for i in range(1, 5):
        cases.append(
            (
                f"Create Account Transaction - Valid {kind} - Multiple Account Keys #{i}",
                build(
                    script=TX_CREATE_ACCOUNT,
                    arguments=[array(*(string(k) for k in keys[:i]))],
                ),
            )
        )
    return cases


def _add_key_cases(keys: list[str]) -> list[tuple[str, Transaction]]:
    return [
        (
            f"Add New Key Transaction - Valid Envelope - Valid Account Key {i}",
            build_envelope_tx(script=TX_ADD_NEW_KEY, arguments=[string(key)]),
        )
        for i, key in enumerate(keys)
    ]


def _invalid_cases(kind: str, build: BuildTx) -> list[tuple[str, Transaction]]:
    return [
        (
            f"Example Transaction - Invalid {kind} - Unapproved Script",
            build(script=TX_HELLO_WORLD),
        ),
        (f"Example Transaction - Invalid {kind} - Empty Script", build(script="")),
    ]


def payload_case(title: str, tx: Transaction, valid: bool) -> Case:
    unsigned = without_signatures(tx)
    return {
        "title": title,
        "valid": valid,
        "testnet": False,
        "payloadMessage": tx_to_json(tx),
        "envelopeMessage": tx_to_json(unsigned),
        "encodedTransactionPayloadHex": encode_payload(tx),
        "encodedTransactionEnvelopeHex": encode_envelope(unsigned),
    }


def envelope_case(title: str, tx: Transaction, valid: bool = True) -> Case:
    return {
        "title": title,
        "valid": valid,
        "testnet": False,
        "envelopeMessage": tx_to_json(tx),
        "encodedTransactionEnvelopeHex": encode_envelope(tx),
    }


def valid_payload_cases() -> list[Case]:
    keys = account_keys()
    txs = (
        _example_cases("Payload", build_payload_tx)
        + _script_cases("Payload", build_payload_tx, keys)
        + _add_key_cases(keys)
    )
    return [payload_case(title, tx, valid=True) for title, tx in txs]


def invalid_payload_cases() -> list[Case]:
    return [
        payload_case(title, tx, valid=False)
        for title, tx in _invalid_cases("Payload", build_payload_tx)
    ]


def valid_envelope_cases() -> list[Case]:
    keys = account_keys()
    signatures = [
        (
            "Example Transaction - Valid Envelope - Empty payloadSigs",
            build_envelope_tx(payload_signatures=[]),
        ),
        (
            "Example Transaction - Valid Envelope - Zero payloadSigs.0.key",
            build_envelope_tx(payload_signatures=[payload_signature(key_id=0)]),
        ),
        (
            "Example Transaction - Valid Envelope - Out-of-order payloadSigs -- By keyId",
            build_envelope_tx(
                authorizers=[SERVICE_ADDRESS],
                payload_signatures=[
                    payload_signature(key_id=2, signature="c"),
                    payload_signature(key_id=0, signature="a"),
                    payload_signature(key_id=1, signature="b"),
                ],
            ),
        ),
    ]
    txs = (
        _example_cases("Envelope", build_envelope_tx)
        + signatures
        + _script_cases("Envelope", build_envelope_tx, keys)
        + _add_key_cases(keys)
    )
    return [envelope_case(title, tx) for title, tx in txs]


def invalid_envelope_cases() -> list[Case]:
    return [
        payload_case(title, tx, valid=False)
        for title, tx in _invalid_cases("Envelope", build_envelope_tx)
    ]


def generate_cases() -> dict[str, list[Case]]:
    cases = {
        VALID_PAYLOAD_CASES: valid_payload_cases(),
        INVALID_PAYLOAD_CASES: invalid_payload_cases(),
        VALID_ENVELOPE_CASES: valid_envelope_cases(),
        INVALID_ENVELOPE_CASES: invalid_envelope_cases(),
    }
    for name, items in cases.items():
        logger.debug(f"{name}: {len(items)} cases")
    return cases


def write_cases(out_dir: Path, output_format: str = "json") -> list[Path]:
    """Write every case family to ``out_dir``; returns the written paths."""
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"unsupported output format: {output_format}")
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name, cases in generate_cases().items():
        target = out_dir / f"{name}.{output_format}"
        if output_format == "yaml":
            write_yaml(target, cases)
        else:
            target.write_text(json.dumps(cases, indent=2, ensure_ascii=False))
        logger.info(f"Wrote {len(cases)} cases to {target}")
        written.append(target)
    return written
