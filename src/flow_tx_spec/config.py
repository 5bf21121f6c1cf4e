"""Flow transaction encoding constants and generator configuration.

Keep the domain tags aligned with the signer: a signature produced over one
tag must never verify against a message built with the other.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

# Domain separation
DOMAIN_TAG_LENGTH = 32
PAYLOAD_DOMAIN_TAG = b"FLOW-V0.0-transaction".ljust(DOMAIN_TAG_LENGTH, b"\x00")
ENVELOPE_DOMAIN_TAG = b"FLOW-V0.0-envelope".ljust(DOMAIN_TAG_LENGTH, b"\x00")

# Field widths (bytes)
ADDRESS_LENGTH = 8
BLOCK_ID_LENGTH = 32

# Integer widths (bits)
GAS_LIMIT_BITS = 64
KEY_ID_BITS = 64
SEQUENCE_NUMBER_BITS = 64
SIGN_ALGORITHM_BITS = 8
HASH_ALGORITHM_BITS = 8
WEIGHT_BITS = 16

# UFix64
UFIX64_DECIMALS = 8
UFIX64_SCALE = 10**UFIX64_DECIMALS
UFIX64_MAX_UNITS = 2**64 - 1
UFIX64_MAX_INTEGER_PART = UFIX64_MAX_UNITS // UFIX64_SCALE  # 184467440737

# Signature algorithms
SIG_ALGO_UNKNOWN = 0
SIG_ALGO_ECDSA_P256 = 2
SIG_ALGO_ECDSA_SECP256K1 = 3
SIG_ALGO_MAX = 255
SIG_ALGOS = (SIG_ALGO_UNKNOWN, SIG_ALGO_ECDSA_P256, SIG_ALGO_ECDSA_SECP256K1, SIG_ALGO_MAX)

# Hash algorithms
HASH_ALGO_UNKNOWN = 0
HASH_ALGO_SHA2_256 = 1
HASH_ALGO_SHA3_256 = 3
HASH_ALGO_MAX = 255
HASH_ALGOS = (HASH_ALGO_UNKNOWN, HASH_ALGO_SHA2_256, HASH_ALGO_SHA3_256, HASH_ALGO_MAX)

# Key weights
WEIGHT_MIN = 0
WEIGHT_MID = 500
WEIGHT_MAX = 1000
WEIGHTS = (WEIGHT_MIN, WEIGHT_MID, WEIGHT_MAX)

# Token amounts probed by the generator
FLOW_AMOUNT_MIN = "0.0"
FLOW_AMOUNT_MAX = "184467440737.9551615"
FLOW_AMOUNTS = (FLOW_AMOUNT_MIN, FLOW_AMOUNT_MAX)

# Generator output
VALID_PAYLOAD_CASES = "validPayloadCases"
INVALID_PAYLOAD_CASES = "invalidPayloadCases"
VALID_ENVELOPE_CASES = "validEnvelopeCases"
INVALID_ENVELOPE_CASES = "invalidEnvelopeCases"
OUTPUT_FORMATS = ("json", "yaml")


@dataclass
class GeneratorConfig:
    """Settings for the fixture generator CLI."""
    out_dir: str = "fixtures"
    output_format: str = "json"
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Load configuration from environment variables."""
        config = cls()
        config.out_dir = os.environ.get("FLOW_TX_SPEC_OUT_DIR", config.out_dir)
        config.output_format = os.environ.get(
            "FLOW_TX_SPEC_FORMAT", config.output_format
        ).lower()
        config.verbose = os.environ.get("VERBOSE", "").lower() in ("true", "1", "yes")
        return config
