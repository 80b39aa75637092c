# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of IBCView - see LICENSE
# Refs: BIP173; CIP-5

import os
import sys

import pytest
from bech32 import bech32_decode, convertbits

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_ROOT = os.path.join(PROJECT_ROOT, "src")
for path in (PROJECT_ROOT, SRC_ROOT):
    if path not in sys.path:
        sys.path.append(path)

from ibcview.codec.bech32_codec import checksum_valid, encode  # noqa: E402
from ibcview.core.errors import EncodeError, InvalidPrefixError, PayloadTooLargeError  # noqa: E402


def test_bip173_empty_payload_vector():
    assert encode("a", b"") == "a12uel5l"


def test_uppercase_prefix_is_lowercased():
    assert encode("A", b"") == "a12uel5l"


@pytest.mark.parametrize("prefix", ["", "aB", "addr test", "addr\x7f", "x" * 84])
def test_invalid_prefix_rejected(prefix):
    with pytest.raises(InvalidPrefixError):
        encode(prefix, b"\x00")


def test_invalid_prefix_is_encode_error():
    with pytest.raises(EncodeError):
        encode("Ab", b"")


def test_payload_too_large():
    with pytest.raises(PayloadTooLargeError) as exc:
        encode("addr", bytes(700))
    assert exc.value.value == 700


def test_large_payload_within_cardano_limit():
    out = encode("addr", bytes(600))
    assert len(out) > 90
    assert checksum_valid(out)


def test_output_decodes_with_reference_implementation():
    payload = bytes(range(29))
    out = encode("addr", payload)
    hrp, data = bech32_decode(out)
    assert hrp == "addr"
    assert bytes(convertbits(data, 5, 8, False)) == payload


def test_checksum_valid_rejects_tampering():
    good = encode("addr", bytes(29))
    bad = good[:-1] + ("q" if good[-1] != "q" else "p")
    assert checksum_valid(good)
    assert checksum_valid(good.upper())
    assert not checksum_valid(bad)


@pytest.mark.parametrize("s", ["", "1qqqqqq", "addr", "addr1", "addr1qqqqqb", "Addr1qqqqqqqq", 42])
def test_checksum_valid_garbage(s):
    assert not checksum_valid(s)


@pytest.mark.parametrize("payload", [3, 0, "00", [0, 0, 0], None])
def test_non_bytes_payload_rejected(payload):
    with pytest.raises(TypeError):
        encode("addr", payload)


def test_bytes_like_payloads_accepted():
    expected = encode("addr", b"\x00\x01\x02")
    assert encode("addr", bytearray(b"\x00\x01\x02")) == expected
    assert encode("addr", memoryview(b"\x00\x01\x02")) == expected
