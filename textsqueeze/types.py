"""Shared types for the textsqueeze codecs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

MODE_RLE = "rle"
MODE_PATTERN = "pattern"

FALLBACK_SHORT_INPUT = "short-input"
FALLBACK_NO_PATTERNS = "no-patterns"


@dataclass(frozen=True)
class Run:
    char: str
    start: int
    length: int


@dataclass(frozen=True)
class Pattern:
    text: str
    count: int

    @property
    def score(self) -> int:
        return self.count * len(self.text)


@dataclass(frozen=True)
class DictionaryEntry:
    marker: str
    pattern: str


@dataclass(frozen=True)
class EncodingPlan:
    """Outcome of the encode decision procedure.

    ``mode`` is ``"rle"`` whenever the pattern codec falls back, in which case
    ``fallback_reason`` says why and ``entries`` is empty.
    """

    mode: str
    entries: tuple[DictionaryEntry, ...] = ()
    fallback_reason: Optional[str] = None
    candidates_discovered: int = 0

    @property
    def is_fallback(self) -> bool:
        return self.mode == MODE_RLE


@dataclass(frozen=True)
class CompressionResult:
    text: str
    algorithm: str
    mode: str
    dictionary: tuple[DictionaryEntry, ...]
    original_length: int
    compressed_length: int

    @property
    def ratio(self) -> float:
        if not self.original_length:
            return 0.0
        return (1 - self.compressed_length / self.original_length) * 100
