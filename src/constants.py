"""Project-wide constants describing the share-code wire format.

This module centralises small constants that are imported across the
application. Keep this file minimal and free of side effects.
"""

from __future__ import annotations

# Literal prefix preceding the five character groups of every token.
TOKEN_PREFIX = "CSGO"
GROUP_SEPARATOR = "-"
GROUP_COUNT = 5
GROUP_LENGTH = 5

# 24 unambiguous letters and 8 digits; I, O, 0 and 1 are excluded.
ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
BITS_PER_CHAR = 5

DATA_CHARS = GROUP_COUNT * GROUP_LENGTH
TOKEN_BITS = DATA_CHARS * BITS_PER_CHAR

# Type tag identifying a crosshair record.
CROSSHAIR_TYPE_TAG = 3

# ``color_index`` value selecting the custom RGB colour.
CUSTOM_COLOR_INDEX = 5

DEFAULT_ALIAS = "crosshair"

__all__ = [
    "ALPHABET",
    "BITS_PER_CHAR",
    "CROSSHAIR_TYPE_TAG",
    "CUSTOM_COLOR_INDEX",
    "DATA_CHARS",
    "DEFAULT_ALIAS",
    "GROUP_COUNT",
    "GROUP_LENGTH",
    "GROUP_SEPARATOR",
    "TOKEN_BITS",
    "TOKEN_PREFIX",
]
