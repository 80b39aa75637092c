# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of IBCView - see LICENSE
# Refs: ICS-20
from __future__ import annotations

from typing import Optional

from ..utils import config as CFG

ELLIPSIS = CFG.ELLIPSIS
EMPTY_PLACEHOLDER = CFG.EMPTY_PLACEHOLDER


def truncate(s: str, head_len: int, tail_len: int) -> str:
    """Shorten ``s`` to ``head…tail``; strings that already fit come back untouched."""
    if head_len < 0 or tail_len < 0:
        raise ValueError("head_len and tail_len must be >= 0")
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    if len(s) <= head_len + tail_len:
        return s
    tail = s[len(s) - tail_len:] if tail_len else ""
    return f"{s[:head_len]}{ELLIPSIS}{tail}"


def truncate_optional(s: Optional[str], head_len: int, tail_len: int) -> str:
    if not s:
        return EMPTY_PLACEHOLDER
    return truncate(s, head_len, tail_len)
