# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of IBCView - see LICENSE
# Refs: cosmos/chain-registry

import json
import os
import sys

import pytest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_ROOT = os.path.join(PROJECT_ROOT, "src")
for path in (PROJECT_ROOT, SRC_ROOT):
    if path not in sys.path:
        sys.path.append(path)

from ibcview.chains.registry import (  # noqa: E402
    ChainMetadata, ChainRegistry, get_registry, load_registry)

ENTRIES = {
    "osmosis-1": {
        "chain_name": "osmosis",
        "pretty_name": "Osmosis",
        "logo_URIs": {"png": "osmo.png", "svg": "osmo.svg"},
    },
    "png-only": {"pretty_name": "Png Chain", "logo_URIs": {"png": "p.png"}},
    "nameless": {"chain_name": "nameless-chain"},
    "bare": {},
}


@pytest.fixture
def registry():
    return ChainRegistry.from_entries(ENTRIES)


def test_resolve_known(registry):
    assert registry.resolve("osmosis-1") == ChainMetadata("Osmosis", "osmo.svg")


def test_png_fallback(registry):
    assert registry.resolve("png-only").logo_ref == "p.png"


def test_name_fallbacks(registry):
    assert registry.resolve("nameless").pretty_name == "nameless-chain"
    assert registry.resolve("bare") == ChainMetadata("bare", None)


@pytest.mark.parametrize("chain_id", ["unknown-7", "", "Osmosis-1", "osmosis"])
def test_resolve_unknown_falls_back_to_id(registry, chain_id):
    meta = registry.resolve(chain_id)
    assert meta.pretty_name == chain_id
    assert meta.logo_ref is None


def test_lookup_reports_miss(registry):
    assert registry.lookup("osmosis-1") is not None
    assert registry.lookup("nope") is None
    assert "osmosis-1" in registry
    assert len(registry) == 4


def test_registry_is_read_only(registry):
    with pytest.raises(TypeError):
        registry.chains["x"] = ChainMetadata("x")


def test_bad_entry_rejected():
    with pytest.raises(ValueError):
        ChainRegistry.from_entries({"x": "not an object"})


def test_load_registry_overlay(tmp_path):
    path = tmp_path / "chains.json"
    path.write_text(json.dumps({"cardano": {"pretty_name": "Cardano Preview"}, "new-1": {}}), encoding="utf-8")
    reg = load_registry(str(path))
    assert reg.resolve("cardano").pretty_name == "Cardano Preview"
    assert reg.resolve("new-1").pretty_name == "new-1"
    assert reg.resolve("osmosis-1").pretty_name == "Osmosis"


def test_load_registry_missing_file(tmp_path):
    reg = load_registry(str(tmp_path / "absent.json"))
    assert reg.resolve("osmosis-1").pretty_name == "Osmosis"


def test_load_registry_broken_file_uses_builtin(tmp_path):
    path = tmp_path / "chains.json"
    path.write_text("{not json", encoding="utf-8")
    reg = load_registry(str(path))
    assert reg.resolve("cosmoshub-4").pretty_name == "Cosmos Hub"


def test_get_registry_is_cached():
    assert get_registry() is get_registry()
