# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of IBCView - see LICENSE
# Refs: ICS-20
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Optional, Union

from ..utils.view_logging import get_ctx_logger

log = get_ctx_logger("ibcview.formatting.status")


class TxStatus(Enum):
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"


class StatusTag(Enum):
    ERROR = "error"
    WARNING = "warning"
    SUCCESS = "success"


STATUS_TAGS = MappingProxyType({
    TxStatus.PROCESSING: StatusTag.WARNING,
    TxStatus.SUCCESS: StatusTag.SUCCESS,
    TxStatus.FAILED: StatusTag.ERROR,
})
# unknown statuses render as failures
DEFAULT_STATUS_TAG = StatusTag.ERROR

_unmapped = [s.name for s in TxStatus if s not in STATUS_TAGS]
if _unmapped:
    raise RuntimeError(f"status table incomplete, missing: {', '.join(_unmapped)}")


def parse_status(status: Union[TxStatus, str, None]) -> Optional[TxStatus]:
    if isinstance(status, TxStatus):
        return status
    if not isinstance(status, str):
        return None
    try:
        return TxStatus(status.strip().lower())
    except ValueError:
        return None


def classify(status: Union[TxStatus, str, None]) -> StatusTag:
    known = parse_status(status)
    if known is None:
        log.debug("[classify] unknown status %r, tagging as %s", status, DEFAULT_STATUS_TAG.value)
        return DEFAULT_STATUS_TAG
    return STATUS_TAGS[known]


def status_label(status: Union[TxStatus, str, None]) -> str:
    if isinstance(status, TxStatus):
        status = status.value
    if not status:
        return "Unknown"
    return str(status).strip().capitalize()
