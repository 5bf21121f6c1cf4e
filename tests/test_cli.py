"""Command line entry points."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from flow_tx_spec.cli import main
from flow_tx_spec.encoding import encode_envelope, encode_payload
from flow_tx_spec.fixtures_io import tx_to_json


def test_encode_key() -> None:
    result = CliRunner().invoke(main, ["encode-key", "1234", "2", "3", "1000"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "c882123402038203e8"


def test_encode_key_out_of_range() -> None:
    result = CliRunner().invoke(main, ["encode-key", "1234", "256", "3", "1000"])
    assert result.exit_code != 0
    assert "INTEGER_OUT_OF_RANGE" in result.output


def test_encode_payload_and_envelope(tmp_path, envelope_tx) -> None:
    tx_file = tmp_path / "tx.json"
    tx_file.write_text(json.dumps(tx_to_json(envelope_tx)))

    runner = CliRunner()
    result = runner.invoke(main, ["encode", str(tx_file)])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == encode_payload(envelope_tx)

    result = runner.invoke(main, ["encode", str(tx_file), "--envelope"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == encode_envelope(envelope_tx)


def test_encode_reports_missing_field(tmp_path, payload_tx) -> None:
    tx_file = tmp_path / "tx.json"
    tx_file.write_text(json.dumps(tx_to_json(payload_tx)))
    result = CliRunner().invoke(main, ["encode", str(tx_file), "--envelope"])
    assert result.exit_code == 1
    assert "MISSING_FIELD" in result.output


def test_encode_rejects_non_object(tmp_path) -> None:
    tx_file = tmp_path / "tx.json"
    tx_file.write_text("[1, 2]")
    result = CliRunner().invoke(main, ["encode", str(tx_file)])
    assert result.exit_code == 1
    assert "must be an object" in result.output


def test_generate_writes_case_files(tmp_path) -> None:
    out = tmp_path / "out"
    result = CliRunner().invoke(main, ["generate", str(out), "--format", "yaml"])
    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in out.iterdir()) == [
        "invalidEnvelopeCases.yaml",
        "invalidPayloadCases.yaml",
        "validEnvelopeCases.yaml",
        "validPayloadCases.yaml",
    ]


def test_generate_uses_environment(tmp_path, monkeypatch) -> None:
    out = tmp_path / "env-out"
    monkeypatch.setenv("FLOW_TX_SPEC_OUT_DIR", str(out))
    monkeypatch.setenv("FLOW_TX_SPEC_FORMAT", "JSON")
    result = CliRunner().invoke(main, ["generate"])
    assert result.exit_code == 0, result.output
    assert (out / "validPayloadCases.json").exists()


def test_generate_rejects_bad_env_format(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("FLOW_TX_SPEC_FORMAT", "xml")
    result = CliRunner().invoke(main, ["generate", str(tmp_path)])
    assert result.exit_code == 2


@pytest.mark.parametrize(
    ("key", "value"),
    [("proposalKey", "f8d6"), ("payloadSigs", [1]), ("arguments", ["x"])],
)
def test_encode_reports_malformed_fixture(tmp_path, envelope_tx, key, value) -> None:
    data = tx_to_json(envelope_tx)
    data[key] = value
    tx_file = tmp_path / "tx.json"
    tx_file.write_text(json.dumps(data))
    result = CliRunner().invoke(main, ["encode", str(tx_file), "--envelope"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "INVALID_TYPE" in result.output
