# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of IBCView - see LICENSE
# Refs: CIP-19
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..core.errors import InvalidLengthError, MalformedCredentialError, UnknownTagError
from ..utils import config as CFG

RawCredential = Union[bytes, bytearray, memoryview, str]


class CredentialKind(Enum):
    KEY_HASH = "key_hash"
    SCRIPT_HASH = "script_hash"


_TAGS = {
    CFG.CREDENTIAL_TAG_KEY: CredentialKind.KEY_HASH,
    CFG.CREDENTIAL_TAG_SCRIPT: CredentialKind.SCRIPT_HASH,
}


@dataclass(frozen=True)
class PaymentCredential:
    kind: CredentialKind
    digest: bytes

    def __post_init__(self):
        if not isinstance(self.kind, CredentialKind):
            raise TypeError(f"kind must be CredentialKind, got {type(self.kind).__name__}")
        if len(self.digest) != CFG.CREDENTIAL_HASH_SIZE:
            raise InvalidLengthError(
                f"credential digest must be {CFG.CREDENTIAL_HASH_SIZE} bytes, got {len(self.digest)}",
                bytes(self.digest))
        object.__setattr__(self, "digest", bytes(self.digest))

    def hex(self) -> str:
        return self.digest.hex()


def _to_bytes(raw: RawCredential) -> bytes:
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return bytes(raw)
    if isinstance(raw, str):
        s = raw.strip()
        if s[:2].lower() == "0x":
            s = s[2:]
        try:
            return bytes.fromhex(s)
        except ValueError:
            raise MalformedCredentialError(f"credential is not hex: {raw!r}", raw) from None
    raise MalformedCredentialError(f"unsupported credential type {type(raw).__name__}", raw)


def decode(raw: RawCredential, kind: Optional[CredentialKind] = None) -> PaymentCredential:
    """Interpret a raw payment credential.

    Accepted shapes:
      - 28 bytes: the bare hash, of ``kind`` (key-hash when not given)
      - 29 bytes: one tag byte (0x00 key-hash, 0x01 script-hash) + hash

    Hex strings (optionally ``0x``-prefixed) are accepted, since that is how
    the bridge indexer ships credentials.
    """
    data = _to_bytes(raw)
    size = CFG.CREDENTIAL_HASH_SIZE
    if len(data) == size:
        return PaymentCredential(kind or CredentialKind.KEY_HASH, data)
    if len(data) == size + 1:
        tag = data[0]
        tagged = _TAGS.get(tag)
        if tagged is None:
            raise UnknownTagError(f"unknown credential tag 0x{tag:02x}", tag)
        return PaymentCredential(tagged, data[1:])
    raise InvalidLengthError(
        f"credential must be {size} or {size + 1} bytes, got {len(data)}", len(data))
