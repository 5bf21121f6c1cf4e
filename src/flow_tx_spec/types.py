"""Core value types for Flow transaction encoding.

Every record is immutable and fully built by the caller before encoding.
Transaction fields default to ``None`` only so that an absent field can be
represented; the encoders report such fields as missing rather than filling
them in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence, Union

if TYPE_CHECKING:
    from .arguments import Argument, RawArgument

# Hex text (optionally 0x-prefixed) or raw bytes.
Address = Union[str, bytes]


@dataclass(frozen=True)
class ProposalKey:
    address: Optional[Address] = None
    key_id: Optional[int] = None
    sequence_number: Optional[int] = None


@dataclass(frozen=True)
class PayloadSignature:
    address: Optional[Address] = None
    key_id: Optional[int] = None
    signature: Optional[Union[str, bytes]] = None


@dataclass(frozen=True)
class AccountKey:
    public_key: Union[str, bytes]
    sign_algorithm: int
    hash_algorithm: int
    weight: int


@dataclass(frozen=True)
class Transaction:
    script: Optional[str] = None
    arguments: Optional[Sequence[Union["Argument", "RawArgument", bytes]]] = None
    reference_block_id: Optional[Union[str, bytes]] = None
    gas_limit: Optional[int] = None
    proposal_key: Optional[ProposalKey] = None
    payer: Optional[Address] = None
    authorizers: Optional[Sequence[Address]] = None
    payload_signatures: Optional[Sequence[PayloadSignature]] = None
