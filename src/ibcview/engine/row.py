# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of IBCView - see LICENSE
# Refs: CIP-19; ICS-20
"""One transfer record in, one flat set of display values out.

Each field is formatted on its own; nothing here checks the record for
consistency (e.g. end before create). Address and timestamp failures are
raised to the caller, who is expected to show an error marker for the row.
Missing chain metadata and unknown statuses never fail.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from ..address.formatter import shorten_address
from ..chains.registry import ChainRegistry, get_registry
from ..codec.credential import RawCredential
from ..formatting.status import StatusTag, TxStatus, classify, status_label
from ..formatting.timestamp import TzLike, format_timestamp
from ..formatting.truncate import truncate, truncate_optional
from ..network.selector import NetworkContext
from ..utils import config as CFG
from ..utils.view_logging import get_ctx_logger

# indexer (camelCase) -> record field
_FIELD_ALIASES = {
    "fromTxHash": "from_tx_hash",
    "fromAddress": "from_address",
    "fromChainId": "from_chain_id",
    "toAddress": "to_address",
    "toTxHash": "to_tx_hash",
    "status": "status",
    "createTime": "create_time",
    "endTime": "end_time",
}


@dataclass(frozen=True)
class TransactionRecord:
    from_tx_hash: str
    from_address: RawCredential
    from_chain_id: str
    to_address: RawCredential
    status: TxStatus | str
    create_time: int
    end_time: int
    to_tx_hash: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "TransactionRecord":
        kwargs: Dict[str, Any] = {}
        for key, value in d.items():
            name = _FIELD_ALIASES.get(key, key)
            if name in _FIELD_ALIASES.values():
                kwargs[name] = value
        missing = [f for f in _FIELD_ALIASES.values() if f not in kwargs and f != "to_tx_hash"]
        if missing:
            raise KeyError(f"transaction record missing fields: {', '.join(missing)}")
        return cls(**kwargs)


@dataclass(frozen=True)
class RowDisplay:
    from_hash_display: str
    from_address_display: str
    chain_display_name: str
    chain_logo_ref: Optional[str]
    status_tag: StatusTag
    status_label: str
    to_address_display: str
    to_hash_display: str
    create_time_display: str
    end_time_display: str

    def as_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["status_tag"] = self.status_tag.value
        return d


def format_row(record: TransactionRecord, context: NetworkContext, *,
               registry: Optional[ChainRegistry] = None,
               tz: TzLike = None,
               time_only: bool = CFG.ROW_TIME_ONLY,
               hash_head: int = CFG.HASH_HEAD,
               hash_tail: int = CFG.HASH_TAIL,
               address_head: int = CFG.ADDRESS_HEAD,
               address_tail: int = CFG.ADDRESS_TAIL) -> RowDisplay:
    log = get_ctx_logger("ibcview.engine.row", chain=record.from_chain_id, tx=record.from_tx_hash)
    registry = registry if registry is not None else get_registry()
    chain = registry.resolve(record.from_chain_id)

    row = RowDisplay(
        from_hash_display=truncate(record.from_tx_hash, hash_head, hash_tail),
        from_address_display=shorten_address(record.from_address, context, address_head, address_tail),
        chain_display_name=chain.pretty_name,
        chain_logo_ref=chain.logo_ref,
        status_tag=classify(record.status),
        status_label=status_label(record.status),
        to_address_display=shorten_address(record.to_address, context, address_head, address_tail),
        to_hash_display=truncate_optional(record.to_tx_hash, hash_head, hash_tail),
        create_time_display=format_timestamp(record.create_time, time_only, tz),
        end_time_display=format_timestamp(record.end_time, time_only, tz),
    )
    log.trace("[format_row] %s", row)
    return row
