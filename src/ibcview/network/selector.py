# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of IBCView - see LICENSE
# Refs: CIP-19
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..codec.credential import CredentialKind
from ..utils import config as CFG


class NetworkContext(Enum):
    MAINNET = "mainnet"
    PREPROD = "preprod"
    PREVIEW = "preview"
    SANCHONET = "sanchonet"
    DEVNET = "devnet"

    @property
    def is_mainnet(self) -> bool:
        return self is NetworkContext.MAINNET

    @property
    def network_magic(self) -> int:
        return NETWORKS[self].magic

    @classmethod
    def from_magic(cls, magic) -> "NetworkContext":
        """Pick the context for a Cardano protocol magic; unknown magics are local devnets."""
        try:
            magic = int(magic)
        except (TypeError, ValueError):
            return cls.DEVNET
        for ctx, params in NETWORKS.items():
            if params.magic == magic:
                return ctx
        return cls.DEVNET


_ENTERPRISE_HEADERS = MappingProxyType({
    CredentialKind.KEY_HASH: CFG.HEADER_ENTERPRISE_KEY,
    CredentialKind.SCRIPT_HASH: CFG.HEADER_ENTERPRISE_SCRIPT,
})


@dataclass(frozen=True)
class LayoutParams:
    network_id: int
    header_types: Mapping[CredentialKind, int] = field(default_factory=lambda: _ENTERPRISE_HEADERS)

    def header_byte(self, kind: CredentialKind) -> int:
        return ((self.header_types[kind] & 0x0F) << 4) | (self.network_id & 0x0F)


@dataclass(frozen=True)
class NetworkParams:
    prefix: str
    layout: LayoutParams
    magic: int


# the only per-network table: one entry per NetworkContext member
NETWORKS: Mapping[NetworkContext, NetworkParams] = MappingProxyType({
    NetworkContext.MAINNET: NetworkParams(
        CFG.HRP_MAINNET, LayoutParams(CFG.NETWORK_ID_MAINNET), CFG.MAGIC_MAINNET),
    NetworkContext.PREPROD: NetworkParams(
        CFG.HRP_TESTNET, LayoutParams(CFG.NETWORK_ID_TESTNET), CFG.MAGIC_PREPROD),
    NetworkContext.PREVIEW: NetworkParams(
        CFG.HRP_TESTNET, LayoutParams(CFG.NETWORK_ID_TESTNET), CFG.MAGIC_PREVIEW),
    NetworkContext.SANCHONET: NetworkParams(
        CFG.HRP_TESTNET, LayoutParams(CFG.NETWORK_ID_TESTNET), CFG.MAGIC_SANCHONET),
    NetworkContext.DEVNET: NetworkParams(
        CFG.HRP_TESTNET, LayoutParams(CFG.NETWORK_ID_TESTNET), CFG.MAGIC_DEVNET),
})

_missing = [ctx.name for ctx in NetworkContext if ctx not in NETWORKS]
if _missing:
    raise RuntimeError(f"network table incomplete, missing: {', '.join(_missing)}")


def resolve(context: NetworkContext) -> NetworkParams:
    if not isinstance(context, NetworkContext):
        raise TypeError(f"context must be NetworkContext, got {type(context).__name__}")
    return NETWORKS[context]
