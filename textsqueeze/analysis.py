"""Character statistics used to estimate how well a text will compress."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

MOST_COMMON_LIMIT = 10

# (threshold, label), checked in order; the first threshold exceeded wins.
ESTIMATE_BANDS: tuple[tuple[float, str], ...] = (
    (0.8, "Very High (80-95%)"),
    (0.6, "High (60-80%)"),
    (0.4, "Medium (40-60%)"),
    (0.2, "Low-Medium (20-40%)"),
)
ESTIMATE_FLOOR = "Low (0-20%)"


@dataclass(frozen=True)
class TextAnalysis:
    char_count: int
    unique_chars: int
    most_common: tuple[tuple[str, int], ...]
    repetition_score: float
    estimated_compression: str


def estimate_compression(repetition_score: float) -> str:
    for threshold, label in ESTIMATE_BANDS:
        if repetition_score > threshold:
            return label
    return ESTIMATE_FLOOR


def analyze_text(text: str) -> TextAnalysis:
    frequencies = Counter(text)
    total = len(text)
    unique = len(frequencies)
    score = 1 - unique / total if total else 0.0
    return TextAnalysis(
        char_count=total,
        unique_chars=unique,
        most_common=tuple(frequencies.most_common(MOST_COMMON_LIMIT)),
        repetition_score=score,
        estimated_compression=estimate_compression(score),
    )
