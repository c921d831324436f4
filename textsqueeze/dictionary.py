"""Phase 2: marker assignment, substitution and the dictionary header.

Header layout is a run of ``<marker><decimal length><pattern>`` entries with
no delimiters, followed by the sentinel and the substituted content.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .types import DictionaryEntry, Pattern
from .utils import MARKERS, SENTINEL, read_count


def assign_markers(patterns: Iterable[Pattern], markers: Sequence[str] = MARKERS) -> tuple[DictionaryEntry, ...]:
    return tuple(
        DictionaryEntry(marker=marker, pattern=pattern.text)
        for pattern, marker in zip(patterns, markers)
    )


def substitute(text: str, entries: Iterable[DictionaryEntry]) -> str:
    body = text
    for entry in entries:
        body = body.replace(entry.pattern, entry.marker)
    return body


def expand(body: str, entries: Iterable[DictionaryEntry]) -> str:
    text = body
    for entry in entries:
        text = text.replace(entry.marker, entry.pattern)
    return text


def build_header(entries: Iterable[DictionaryEntry]) -> str:
    return "".join(f"{entry.marker}{len(entry.pattern)}{entry.pattern}" for entry in entries)


def parse_header(header: str, max_length: int | None = None) -> tuple[DictionaryEntry, ...]:
    """Recover dictionary entries in header order.

    ``max_length`` bounds the length field so that a pattern starting with a
    digit is not read as part of its own length. Headers the encoder produced
    parse the same as with plain greedy digits; a hand-written length above
    ``max_length`` does not (``"\\x0112abc"`` reads as length 1, pattern
    ``"2"``). An entry whose marker is not followed by a length is skipped.
    """
    entries: list[DictionaryEntry] = []
    idx = 0
    n = len(header)
    while idx < n:
        marker = header[idx]
        idx += 1
        length, idx = read_count(header, idx, limit=max_length)
        if length is None:
            continue
        entries.append(DictionaryEntry(marker=marker, pattern=header[idx : idx + length]))
        idx += length
    return tuple(entries)


def build_encoded(entries: Sequence[DictionaryEntry], body: str) -> str:
    return build_header(entries) + SENTINEL + body


def split_encoded(text: str) -> tuple[str, str]:
    header, _, body = text.partition(SENTINEL)
    return header, body
