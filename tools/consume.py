"""Consume generated fixture files and re-check every encoding."""

from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))

from flow_tx_spec.encoding import encode_envelope, encode_payload  # noqa: E402
from flow_tx_spec.errors import SpecError  # noqa: E402
from flow_tx_spec.fixtures_io import tx_from_json  # noqa: E402

CHECKS = (
    ("payloadMessage", "encodedTransactionPayloadHex", encode_payload),
    ("envelopeMessage", "encodedTransactionEnvelopeHex", encode_envelope),
)


def check_case_file(path: Path) -> list[str]:
    failures: list[str] = []
    for case in json.loads(path.read_text()):
        for message_key, hex_key, encode in CHECKS:
            if message_key not in case:
                continue
            try:
                actual = encode(tx_from_json(case[message_key]))
            except SpecError as e:
                failures.append(f"{path.name}: {case['title']}: {e}")
                continue
            if actual != case[hex_key]:
                failures.append(f"{path.name}: {case['title']}: {hex_key} mismatch")
    return failures


def main() -> None:
    fixtures = Path(sys.argv[1]) if len(sys.argv) > 1 else ROOT / "fixtures" / "json"

    failures: list[str] = []
    for path in sorted(fixtures.glob("*Cases.json")):
        failures.extend(check_case_file(path))

    if failures:
        for f in failures:
            print("FAIL", f)
        raise SystemExit(1)

    print("All fixtures passed")


if __name__ == "__main__":
    main()
