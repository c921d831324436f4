"""Phase 1: repeated substring discovery."""

from __future__ import annotations

from collections import defaultdict

from .config import CompressionConfig
from .types import Pattern
from .utils import is_compressible, pattern_length_bound


def count_substrings(text: str, min_length: int, max_length: int) -> dict[str, int]:
    """Frequency of every substring of ``min_length..max_length`` characters.

    Overlapping occurrences all count. Keys keep first-seen order, which breaks
    ranking ties.
    """
    counts: dict[str, int] = defaultdict(int)
    n = len(text)
    if min_length < 1:
        min_length = 1
    for start in range(n):
        for length in range(min_length, max_length + 1):
            end = start + length
            if end > n:
                break
            counts[text[start:end]] += 1
    return counts


def rank_candidates(text: str, config: CompressionConfig | None = None) -> list[Pattern]:
    """Every pattern worth substituting, best first."""
    cfg = config or CompressionConfig()
    counts = count_substrings(text, cfg.min_pattern_length, pattern_length_bound(cfg))
    candidates = [
        Pattern(text=substring, count=count)
        for substring, count in counts.items()
        if count >= cfg.min_pattern_occurrences and is_compressible(len(substring), count)
    ]
    candidates.sort(key=lambda pattern: pattern.score, reverse=True)
    return candidates


def discover_patterns(text: str, config: CompressionConfig | None = None) -> list[Pattern]:
    """Ranked patterns worth substituting, at most ``max_patterns``."""
    cfg = config or CompressionConfig()
    return rank_candidates(text, cfg)[: max(0, cfg.max_patterns)]
