# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of IBCView - see LICENSE
# Refs: cosmos/chain-registry
from __future__ import annotations

import json, os, threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from ..utils import config as CFG
from ..utils.view_logging import get_ctx_logger

log = get_ctx_logger("ibcview.chains.registry")

# preferred first
LOGO_FORMATS = ("svg", "png")


@dataclass(frozen=True)
class ChainMetadata:
    pretty_name: str
    logo_ref: Optional[str] = None


def _entry_to_metadata(chain_id: str, entry: Any) -> ChainMetadata:
    if isinstance(entry, ChainMetadata):
        return entry
    if not isinstance(entry, Mapping):
        raise ValueError(f"chain {chain_id!r}: entry must be an object, got {type(entry).__name__}")
    name = entry.get("pretty_name") or entry.get("chain_name") or chain_id
    logo = None
    uris = entry.get("logo_URIs")
    if isinstance(uris, Mapping):
        for fmt in LOGO_FORMATS:
            if uris.get(fmt):
                logo = str(uris[fmt])
                break
    return ChainMetadata(pretty_name=str(name), logo_ref=logo)


class ChainRegistry:
    """Read-only chain id -> ChainMetadata table."""

    def __init__(self, chains: Optional[Mapping[str, ChainMetadata]] = None):
        self._chains: Mapping[str, ChainMetadata] = MappingProxyType(dict(chains or {}))

    @classmethod
    def from_entries(cls, entries: Mapping[str, Any]) -> "ChainRegistry":
        return cls({str(cid): _entry_to_metadata(str(cid), e) for cid, e in entries.items()})

    @classmethod
    def from_file(cls, path: str | os.PathLike) -> "ChainRegistry":
        with open(path, "r", encoding="utf-8") as f:
            obj = json.load(f)
        if not isinstance(obj, dict):
            raise ValueError(f"{path}: chain registry must be a JSON object keyed by chain id")
        return cls.from_entries(obj)

    def merged(self, other: "ChainRegistry") -> "ChainRegistry":
        chains: Dict[str, ChainMetadata] = dict(self._chains)
        chains.update(other.chains)
        return ChainRegistry(chains)

    @property
    def chains(self) -> Mapping[str, ChainMetadata]:
        return self._chains

    def __len__(self) -> int:
        return len(self._chains)

    def __contains__(self, chain_id: object) -> bool:
        return chain_id in self._chains

    def lookup(self, chain_id: str) -> Optional[ChainMetadata]:
        return self._chains.get(chain_id)

    def resolve(self, chain_id: str) -> ChainMetadata:
        """Metadata for ``chain_id``; unknown ids display as themselves with no logo."""
        meta = self.lookup(chain_id)
        if meta is None:
            log.debug("[resolve] chain %r not in registry", chain_id)
            return ChainMetadata(pretty_name=str(chain_id), logo_ref=None)
        return meta


# ---------------- process-wide registry ----------------

_registry: Optional[ChainRegistry] = None
_registry_lock = threading.Lock()


def load_registry(path: Optional[str] = None) -> ChainRegistry:
    """Built-in chains overlaid with the JSON file at ``path``, if present."""
    base = ChainRegistry.from_entries(CFG.DEFAULT_CHAINS)
    path = CFG.CHAIN_REGISTRY_PATH if path is None else path
    if not path or not os.path.exists(path):
        return base
    try:
        overlay = ChainRegistry.from_file(path)
    except (OSError, ValueError) as e:
        log.warning("[load_registry] ignoring %s: %s", path, e)
        return base
    log.info("[load_registry] %d chains loaded from %s", len(overlay), path)
    return base.merged(overlay)


def get_registry() -> ChainRegistry:
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = load_registry()
    return _registry
