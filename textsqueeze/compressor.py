"""Core compression and decompression APIs."""

from __future__ import annotations

from .config import CompressionConfig
from .dictionary import build_encoded, expand, parse_header, split_encoded, substitute
from .engine import default_engine
from .rle import rle_decode, rle_encode
from .types import MODE_RLE, CompressionResult, EncodingPlan
from .utils import SENTINEL, pattern_length_bound

ALGORITHM_BASIC = "basic"
ALGORITHM_ADVANCED = "advanced"
ALGORITHMS = (ALGORITHM_BASIC, ALGORITHM_ADVANCED)


def _encode_with_plan(text: str, plan: EncodingPlan, cfg: CompressionConfig) -> str:
    if plan.is_fallback:
        return rle_encode(text, cfg)
    return build_encoded(plan.entries, substitute(text, plan.entries))


def pattern_encode(text: str, config: CompressionConfig | None = None) -> str:
    cfg = config or CompressionConfig()
    plan = default_engine(cfg).plan(text)
    return _encode_with_plan(text, plan, cfg)


def is_pattern_encoded(text: str) -> bool:
    return SENTINEL in text


def pattern_decode(text: str, config: CompressionConfig | None = None) -> str:
    cfg = config or CompressionConfig()
    if not is_pattern_encoded(text):
        return rle_decode(text)
    header, body = split_encoded(text)
    entries = parse_header(header, max_length=pattern_length_bound(cfg))
    return expand(body, entries)


def _require_algorithm(algorithm: str) -> None:
    if algorithm not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm {algorithm!r}; expected one of {', '.join(ALGORITHMS)}.")


def compress(
    text: str,
    config: CompressionConfig | None = None,
    algorithm: str = ALGORITHM_ADVANCED,
) -> CompressionResult:
    cfg = config or CompressionConfig()
    _require_algorithm(algorithm)

    if algorithm == ALGORITHM_BASIC:
        encoded = rle_encode(text, cfg)
        mode = MODE_RLE
        dictionary = ()
    else:
        plan = default_engine(cfg).plan(text)
        encoded = _encode_with_plan(text, plan, cfg)
        mode = plan.mode
        dictionary = plan.entries

    result = CompressionResult(
        text=encoded,
        algorithm=algorithm,
        mode=mode,
        dictionary=dictionary,
        original_length=len(text),
        compressed_length=len(encoded),
    )

    if cfg.verify:
        roundtrip = decompress(encoded, cfg, algorithm)
        if roundtrip != text:
            raise ValueError("Round-trip verification failed.")

    return result


def decompress(
    text: str,
    config: CompressionConfig | None = None,
    algorithm: str = ALGORITHM_ADVANCED,
) -> str:
    _require_algorithm(algorithm)
    if algorithm == ALGORITHM_BASIC:
        return rle_decode(text)
    return pattern_decode(text, config)
