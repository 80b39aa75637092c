# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of IBCView - see LICENSE
# Refs: BIP173; CIP-19
from __future__ import annotations

from typing import Optional

from ..codec import bech32_codec
from ..codec.credential import CredentialKind, RawCredential, decode
from ..formatting.truncate import truncate
from ..network.selector import NetworkContext, resolve
from ..utils import config as CFG
from ..utils.view_logging import get_ctx_logger

log = get_ctx_logger("ibcview.address.formatter")


def format_address(raw: RawCredential, context: NetworkContext,
                   kind: Optional[CredentialKind] = None) -> str:
    """Render a payment credential as a Cardano enterprise address.

    Raises DecodeError for a malformed credential (checked first) and
    EncodeError if the network table ever carries an unusable prefix.
    """
    cred = decode(raw, kind)
    params = resolve(context)
    header = params.layout.header_byte(cred.kind)
    address = bech32_codec.encode(params.prefix, bytes([header]) + cred.digest)
    log.trace("[format_address] %s %s header=0x%02x -> %s",
              context.value, cred.kind.value, header, address)
    return address


def shorten_address(raw: RawCredential, context: NetworkContext,
                    head: int = CFG.ADDRESS_HEAD, tail: int = CFG.ADDRESS_TAIL) -> str:
    return truncate(format_address(raw, context), head, tail)
