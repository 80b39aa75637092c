# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of IBCView - see LICENSE
# Refs: BIP173; CIP-19
from __future__ import annotations

from typing import Any


class DisplayError(ValueError):
    """Base for every failure the display engine reports to its caller.

    ``value`` holds the offending input so a UI can render an error
    indicator next to the field instead of crashing the whole row.
    """

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


# ---------------- credential decoding ----------------

class DecodeError(DisplayError):
    pass

class InvalidLengthError(DecodeError):
    pass

class UnknownTagError(DecodeError):
    pass

class MalformedCredentialError(DecodeError):
    pass


# ---------------- bech32 encoding ----------------

class EncodeError(DisplayError):
    pass

class InvalidPrefixError(EncodeError):
    pass

class PayloadTooLargeError(EncodeError):
    pass


# ---------------- time formatting ----------------

class FormatError(DisplayError):
    pass

class OutOfRangeError(FormatError):
    pass
