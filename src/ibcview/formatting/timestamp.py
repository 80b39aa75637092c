# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of IBCView - see LICENSE
# Refs: ISO-8601; ICS-20
"""Epoch -> display string.

Epoch values are whole SECONDS. The bridge indexer has historically mixed
second and millisecond fields; convert millisecond sources with
``millis_to_seconds`` before calling, nothing here guesses the unit.
"""
from __future__ import annotations

import datetime as dt
from numbers import Integral
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.errors import OutOfRangeError
from ..utils import config as CFG

TzLike = Union[dt.tzinfo, str, None]


def _zone(tz: TzLike) -> dt.tzinfo:
    if tz is None:
        tz = CFG.DISPLAY_TIMEZONE
    if isinstance(tz, dt.tzinfo):
        return tz
    if str(tz).upper() == "UTC":
        return dt.timezone.utc
    try:
        return ZoneInfo(str(tz))
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"unknown timezone {tz!r}") from e


def _check_epoch(epoch) -> int:
    if isinstance(epoch, bool) or not isinstance(epoch, Integral):
        raise TypeError(f"epoch must be an integer number of seconds, got {type(epoch).__name__}")
    return int(epoch)


def to_datetime(epoch: int, tz: TzLike = None) -> dt.datetime:
    seconds = _check_epoch(epoch)
    zone = _zone(tz)
    try:
        return dt.datetime.fromtimestamp(seconds, tz=zone)
    except (OverflowError, OSError, ValueError) as e:
        raise OutOfRangeError(f"epoch {seconds} is outside the representable date range", seconds) from e


def format_timestamp(epoch: int, time_only: bool = False, tz: TzLike = None) -> str:
    """Format ``epoch`` seconds in ``tz`` (``DISPLAY_TIMEZONE`` when omitted)."""
    fmt = CFG.TIME_FORMAT if time_only else CFG.DATETIME_FORMAT
    return to_datetime(epoch, tz).strftime(fmt)


def millis_to_seconds(ms: int) -> int:
    return _check_epoch(ms) // 1000
