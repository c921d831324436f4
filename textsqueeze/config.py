"""Configuration for textsqueeze codecs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompressionConfig:
    min_run_length: int = 3
    min_text_length: int = 10
    min_pattern_length: int = 3
    max_pattern_length: int = 10
    min_pattern_occurrences: int = 3
    max_patterns: int = 20
    verify: bool = False
