# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of IBCView - see LICENSE
# Refs: BIP173; CIP-19

import os
import sys

import pytest
from bech32 import bech32_decode, convertbits

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_ROOT = os.path.join(PROJECT_ROOT, "src")
for path in (PROJECT_ROOT, SRC_ROOT):
    if path not in sys.path:
        sys.path.append(path)

from ibcview.address.formatter import format_address, shorten_address  # noqa: E402
from ibcview.codec.credential import CredentialKind  # noqa: E402
from ibcview.core.errors import InvalidLengthError, UnknownTagError  # noqa: E402
from ibcview.network.selector import NetworkContext  # noqa: E402

KEY_HASH = "9493315cd92eb5d8c4304e67b7e16ae36d61d34502694657811a2c8e"
SCRIPT_HASH = "c37b1b5dc0669f1d3c61a6fddb2e8fde96be87b881c60bce8e8d542f"

ZERO_MAINNET = "addr1vyqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqkdl5mw"


def test_zero_credential_mainnet_vector():
    assert format_address(bytes(28), NetworkContext.MAINNET) == ZERO_MAINNET


@pytest.mark.parametrize("raw,kind,ctx,expected", [
    (KEY_HASH, CredentialKind.KEY_HASH, NetworkContext.MAINNET,
     "addr1vx2fxv2umyhttkxyxp8x0dlpdt3k6cwng5pxj3jhsydzers66hrl8"),
    (KEY_HASH, CredentialKind.KEY_HASH, NetworkContext.PREPROD,
     "addr_test1vz2fxv2umyhttkxyxp8x0dlpdt3k6cwng5pxj3jhsydzerspjrlsz"),
    (SCRIPT_HASH, CredentialKind.SCRIPT_HASH, NetworkContext.MAINNET,
     "addr1w8phkx6acpnf78fuvxn0mkew3l0fd058hzquvz7w36x4gtcyjy7wx"),
    (SCRIPT_HASH, CredentialKind.SCRIPT_HASH, NetworkContext.PREVIEW,
     "addr_test1wrphkx6acpnf78fuvxn0mkew3l0fd058hzquvz7w36x4gtcl6szpr"),
])
def test_cip19_enterprise_vectors(raw, kind, ctx, expected):
    assert format_address(raw, ctx, kind) == expected


def test_tagged_script_credential():
    raw = "01" + SCRIPT_HASH
    assert format_address(raw, NetworkContext.MAINNET) == \
        "addr1w8phkx6acpnf78fuvxn0mkew3l0fd058hzquvz7w36x4gtcyjy7wx"


@pytest.mark.parametrize("ctx", list(NetworkContext))
def test_output_is_valid_bech32(ctx):
    digest = bytes(range(100, 128))
    out = format_address(digest, ctx)
    hrp, data = bech32_decode(out)
    assert hrp == ("addr" if ctx.is_mainnet else "addr_test")
    decoded = bytes(convertbits(data, 5, 8, False))
    assert decoded[1:] == digest
    assert decoded[0] & 0x0F == (1 if ctx.is_mainnet else 0)


def test_deterministic():
    digest = bytes(range(28))
    first = format_address(digest, NetworkContext.PREPROD)
    assert all(format_address(digest, NetworkContext.PREPROD) == first for _ in range(5))


def test_decode_failure_propagates():
    with pytest.raises(InvalidLengthError):
        format_address(bytes(10), NetworkContext.MAINNET)
    with pytest.raises(UnknownTagError):
        format_address(b"\x05" + bytes(28), NetworkContext.MAINNET)


def test_shorten_address():
    assert shorten_address(bytes(28), NetworkContext.MAINNET) == "addr1v…kdl5mw"
    assert shorten_address(bytes(28), NetworkContext.MAINNET, 4, 2) == "addr…mw"
