# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of IBCView - see LICENSE
# Refs: BIP173; CIP-5
"""Bech32 encoding of raw byte payloads.

The checksum and 5-bit regrouping come from the ``bech32`` reference
implementation, so every string produced here verifies with any BIP-173
decoder. The only deviation is the total length limit: Cardano addresses
routinely exceed the 90 characters BIP-173 allows, so the limit is
``BECH32_MAX_LENGTH``.
"""
from __future__ import annotations

from bech32 import CHARSET, bech32_encode, bech32_verify_checksum, convertbits

from ..core.errors import InvalidPrefixError, PayloadTooLargeError
from ..utils import config as CFG
from ..utils.view_logging import get_ctx_logger

log = get_ctx_logger("ibcview.codec.bech32_codec")

SEPARATOR = "1"


def _check_prefix(prefix: str) -> str:
    if not isinstance(prefix, str) or not prefix:
        raise InvalidPrefixError("bech32 prefix must be a non-empty string", prefix)
    if len(prefix) > CFG.BECH32_HRP_MAX_LENGTH:
        raise InvalidPrefixError(
            f"bech32 prefix longer than {CFG.BECH32_HRP_MAX_LENGTH} characters", prefix)
    if any(ord(c) < 33 or ord(c) > 126 for c in prefix):
        raise InvalidPrefixError(f"bech32 prefix has characters outside US-ASCII 33..126: {prefix!r}", prefix)
    if prefix.lower() != prefix and prefix.upper() != prefix:
        raise InvalidPrefixError(f"bech32 prefix mixes upper and lower case: {prefix!r}", prefix)
    return prefix.lower()


def encode(prefix: str, payload: bytes) -> str:
    """Encode ``payload`` under ``prefix`` as ``prefix + "1" + data + checksum``."""
    hrp = _check_prefix(prefix)
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise TypeError(f"payload must be bytes-like, got {type(payload).__name__}")
    payload = bytes(payload)
    groups = convertbits(payload, 8, 5, True)
    total = len(hrp) + len(SEPARATOR) + len(groups) + CFG.BECH32_CHECKSUM_LEN
    if total > CFG.BECH32_MAX_LENGTH:
        raise PayloadTooLargeError(
            f"payload of {len(payload)} bytes encodes to {total} characters "
            f"(max {CFG.BECH32_MAX_LENGTH})", len(payload))
    out = bech32_encode(hrp, groups)
    log.trace("[encode] hrp=%s bytes=%d chars=%d", hrp, len(payload), len(out))
    return out


def checksum_valid(address: str) -> bool:
    """Recompute the checksum of ``address`` against its own prefix.

    Only answers "is this a well-formed bech32 string"; it does not interpret
    the data part.
    """
    if not isinstance(address, str) or len(address) > CFG.BECH32_MAX_LENGTH:
        return False
    if any(ord(c) < 33 or ord(c) > 126 for c in address):
        return False
    if address.lower() != address and address.upper() != address:
        return False
    address = address.lower()
    pos = address.rfind(SEPARATOR)
    if pos < 1 or pos + 1 + CFG.BECH32_CHECKSUM_LEN > len(address):
        return False
    data_part = address[pos + 1:]
    if not all(c in CHARSET for c in data_part):
        return False
    data = [CHARSET.find(c) for c in data_part]
    return bool(bech32_verify_checksum(address[:pos], data))
