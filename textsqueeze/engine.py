"""Pattern codec decision procedure."""

from __future__ import annotations

from dataclasses import dataclass
import warnings

from .config import CompressionConfig
from .dictionary import assign_markers
from .discovery import rank_candidates
from .types import FALLBACK_NO_PATTERNS, FALLBACK_SHORT_INPUT, MODE_PATTERN, MODE_RLE, EncodingPlan
from .validation import validate_config


@dataclass(frozen=True)
class CompressionEngine:
    config: CompressionConfig
    last_candidates_discovered: int = 0

    def plan(self, text: str) -> EncodingPlan:
        for warning in validate_config(self.config):
            warnings.warn(warning.message, RuntimeWarning)
        if len(text) < self.config.min_text_length:
            object.__setattr__(self, "last_candidates_discovered", 0)
            return EncodingPlan(mode=MODE_RLE, fallback_reason=FALLBACK_SHORT_INPUT)

        candidates = rank_candidates(text, self.config)
        object.__setattr__(self, "last_candidates_discovered", len(candidates))
        patterns = candidates[: max(0, self.config.max_patterns)]
        if not patterns:
            return EncodingPlan(
                mode=MODE_RLE,
                fallback_reason=FALLBACK_NO_PATTERNS,
                candidates_discovered=len(candidates),
            )

        return EncodingPlan(
            mode=MODE_PATTERN,
            entries=assign_markers(patterns),
            candidates_discovered=len(candidates),
        )


def default_engine(config: CompressionConfig | None = None) -> CompressionEngine:
    return CompressionEngine(config or CompressionConfig())


def plan_encoding(text: str, config: CompressionConfig | None = None) -> EncodingPlan:
    return default_engine(config).plan(text)
