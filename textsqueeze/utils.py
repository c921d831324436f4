"""Utility helpers for textsqueeze codecs."""

from __future__ import annotations

from typing import Optional

from .config import CompressionConfig

LINE_FEED = 10
CARRIAGE_RETURN = 13
SENTINEL_CODE = 31
SENTINEL = chr(SENTINEL_CODE)

DIGITS = frozenset("0123456789")

# Control characters 1-31 minus line breaks and the sentinel itself.
MARKERS: tuple[str, ...] = tuple(
    chr(code)
    for code in range(1, 32)
    if code not in (LINE_FEED, CARRIAGE_RETURN, SENTINEL_CODE)
)


def is_compressible(length: int, count: int) -> bool:
    return length * count > length + 2


def read_count(text: str, start: int, limit: Optional[int] = None) -> tuple[Optional[int], int]:
    """Read the ASCII decimal number that starts at ``start``.

    Digits are consumed greedily. With ``limit`` set, consumption stops before
    the first digit that would push the value above ``limit``. Returns the
    parsed value (``None`` when no digit was read) and the index just past the
    consumed digits.
    """
    idx = start
    value: Optional[int] = None
    while idx < len(text) and text[idx] in DIGITS:
        candidate = (value or 0) * 10 + int(text[idx])
        if limit is not None and value is not None and candidate > limit:
            break
        value = candidate
        idx += 1
    return value, idx


def pattern_length_bound(config: CompressionConfig) -> int:
    """Longest pattern whose header length field stays unambiguous.

    A length ``n`` followed by a pattern that starts with a digit reads as
    ``10 * n + digit`` unless that value is above the bound, so the bound must
    stay below ``10 * min_pattern_length``.
    """
    shortest = max(config.min_pattern_length, 1)
    return min(config.max_pattern_length, 10 * shortest - 1)
