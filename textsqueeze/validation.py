"""Configuration diagnostics."""

from __future__ import annotations

from dataclasses import dataclass

from .config import CompressionConfig
from .utils import MARKERS, pattern_length_bound


@dataclass(frozen=True)
class ConfigWarning:
    field: str
    message: str


def validate_config(config: CompressionConfig) -> list[ConfigWarning]:
    warnings: list[ConfigWarning] = []
    if config.max_patterns > len(MARKERS):
        warnings.append(
            ConfigWarning(
                "max_patterns",
                f"max_patterns={config.max_patterns} exceeds the {len(MARKERS)} available markers; "
                "extra patterns are ignored.",
            )
        )
    if config.min_pattern_length < 2:
        warnings.append(
            ConfigWarning("min_pattern_length", "Patterns shorter than 2 characters cannot save space.")
        )
    if config.max_pattern_length < config.min_pattern_length:
        warnings.append(
            ConfigWarning(
                "max_pattern_length",
                "max_pattern_length is below min_pattern_length; no patterns will be discovered.",
            )
        )
    if pattern_length_bound(config) < config.max_pattern_length:
        warnings.append(
            ConfigWarning(
                "max_pattern_length",
                f"max_pattern_length={config.max_pattern_length} makes header lengths ambiguous; "
                f"patterns are capped at {pattern_length_bound(config)} characters.",
            )
        )
    if config.min_run_length < 2:
        warnings.append(
            ConfigWarning("min_run_length", "Single characters will be run-length encoded and grow the output.")
        )
    return warnings
