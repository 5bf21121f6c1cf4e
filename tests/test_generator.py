"""Fixture case enumeration and file output."""

from __future__ import annotations

import json

import pytest
import yaml

from flow_tx_spec.builder import SERVICE_ADDRESS
from flow_tx_spec.config import (
    INVALID_ENVELOPE_CASES,
    INVALID_PAYLOAD_CASES,
    VALID_ENVELOPE_CASES,
    VALID_PAYLOAD_CASES,
)
from flow_tx_spec.encoding import encode_envelope, encode_payload
from flow_tx_spec.fixtures_io import tx_from_json
from flow_tx_spec.generator import account_keys, generate_cases, write_cases


@pytest.fixture(scope="module")
def cases():
    return generate_cases()


def test_account_key_grid() -> None:
    keys = account_keys()
    assert len(keys) == 48
    assert len(set(keys)) == 48


def test_case_counts(cases) -> None:
    assert len(cases[VALID_PAYLOAD_CASES]) == 106
    assert len(cases[INVALID_PAYLOAD_CASES]) == 2
    assert len(cases[VALID_ENVELOPE_CASES]) == 109
    assert len(cases[INVALID_ENVELOPE_CASES]) == 2


def test_titles_unique_per_file(cases) -> None:
    for items in cases.values():
        titles = [c["title"] for c in items]
        assert len(titles) == len(set(titles))


def test_validity_labels(cases) -> None:
    assert all(c["valid"] for c in cases[VALID_PAYLOAD_CASES])
    assert all(c["valid"] for c in cases[VALID_ENVELOPE_CASES])
    assert not any(c["valid"] for c in cases[INVALID_PAYLOAD_CASES])
    assert not any(c["valid"] for c in cases[INVALID_ENVELOPE_CASES])
    assert all(c["testnet"] is False for items in cases.values() for c in items)


def test_invalid_cases_still_encode(cases) -> None:
    scripts = {c["payloadMessage"]["script"] for c in cases[INVALID_PAYLOAD_CASES]}
    assert "" in scripts
    for c in cases[INVALID_PAYLOAD_CASES] + cases[INVALID_ENVELOPE_CASES]:
        assert c["encodedTransactionPayloadHex"]
        assert c["encodedTransactionEnvelopeHex"]


def test_payload_cases_record_unsigned_envelope(cases) -> None:
    for c in cases[VALID_PAYLOAD_CASES]:
        assert c["envelopeMessage"]["payloadSigs"] == []
        assert c["encodedTransactionEnvelopeHex"].endswith("c0")


def test_out_of_order_signatures_kept(cases) -> None:
    (case,) = [
        c for c in cases[VALID_ENVELOPE_CASES] if "Out-of-order payloadSigs" in c["title"]
    ]
    sigs = case["envelopeMessage"]["payloadSigs"]
    assert [s["keyId"] for s in sigs] == [2, 0, 1]
    assert [s["sig"] for s in sigs] == ["c", "a", "b"]

    # odd-length signature hex gains a leading zero nibble: "c" -> 0c
    entry = "cb88" + SERVICE_ADDRESS
    assert case["encodedTransactionEnvelopeHex"].endswith(
        "e4" + entry + "020c" + entry + "800a" + entry + "010b"
    )


def test_token_amounts_kept_verbatim(cases) -> None:
    for amount in ("0.0", "184467440737.9551615"):
        (case,) = [
            c for c in cases[VALID_PAYLOAD_CASES] if c["title"].endswith(f"Valid Amount {amount}")
        ]
        assert case["payloadMessage"]["arguments"][0] == {"type": "UFix64", "value": amount}
        arg = f'{{"type":"UFix64","value":"{amount}"}}'.encode()
        assert arg.hex() in case["encodedTransactionPayloadHex"]


def test_cases_reencode_from_json(cases, vector_test_group) -> None:
    for name, items in cases.items():
        for c in items:
            if "payloadMessage" in c:
                tx = tx_from_json(c["payloadMessage"])
                assert encode_payload(tx) == c["encodedTransactionPayloadHex"], c["title"]
            tx = tx_from_json(c["envelopeMessage"])
            assert encode_envelope(tx) == c["encodedTransactionEnvelopeHex"], c["title"]
        vector_test_group(f"cases/{name}.json", {"name": name, "cases": items})


def test_write_cases_json(tmp_path, cases) -> None:
    written = write_cases(tmp_path, "json")
    assert sorted(p.name for p in written) == sorted(f"{n}.json" for n in cases)
    loaded = json.loads((tmp_path / f"{VALID_PAYLOAD_CASES}.json").read_text())
    assert loaded == cases[VALID_PAYLOAD_CASES]


def test_write_cases_yaml(tmp_path, cases) -> None:
    write_cases(tmp_path / "yaml", "yaml")
    loaded = yaml.safe_load((tmp_path / "yaml" / f"{VALID_ENVELOPE_CASES}.yaml").read_text())
    assert loaded == cases[VALID_ENVELOPE_CASES]


def test_write_cases_rejects_unknown_format(tmp_path) -> None:
    with pytest.raises(ValueError):
        write_cases(tmp_path, "xml")
