"""Account key encoding.

An account key is the list ``[public_key, sign_algorithm, hash_algorithm,
weight]``. Scripts that add keys or create accounts take it as hex text in a
String argument. Algorithm codes and weights are only checked against their
declared widths; whether a code names a real algorithm is the network's
business.
"""

from __future__ import annotations

from typing import Union

from .canonical import hex_to_bytes, uint
from .config import HASH_ALGORITHM_BITS, SIGN_ALGORITHM_BITS, WEIGHT_BITS
from .rlp import ListWriter
from .types import AccountKey


def account_key_bytes(key: AccountKey) -> bytes:
    w = ListWriter()
    w.write_bytes(hex_to_bytes(key.public_key, "public_key"))
    w.write_uint(uint(key.sign_algorithm, SIGN_ALGORITHM_BITS, "sign_algorithm"))
    w.write_uint(uint(key.hash_algorithm, HASH_ALGORITHM_BITS, "hash_algorithm"))
    w.write_uint(uint(key.weight, WEIGHT_BITS, "weight"))
    return w.finish()


def encode_account_key(
    public_key: Union[str, bytes], sign_algorithm: int, hash_algorithm: int, weight: int
) -> str:
    """Encode an account key as lowercase hex, e.g. for a String argument."""
    key = AccountKey(
        public_key=public_key,
        sign_algorithm=sign_algorithm,
        hash_algorithm=hash_algorithm,
        weight=weight,
    )
    return account_key_bytes(key).hex()
