"""Run-length codec.

Runs of ``min_run_length`` or more identical characters are written as the
decimal run length followed by the character; shorter runs are copied
verbatim. The decoder cannot tell a literal digit from a count prefix, so text
containing ASCII digits does not survive a round trip.
"""

from __future__ import annotations

from typing import Iterator

from .config import CompressionConfig
from .types import Run
from .utils import read_count


def iter_runs(text: str) -> Iterator[Run]:
    idx = 0
    n = len(text)
    while idx < n:
        char = text[idx]
        end = idx + 1
        while end < n and text[end] == char:
            end += 1
        yield Run(char=char, start=idx, length=end - idx)
        idx = end


def rle_encode(text: str, config: CompressionConfig | None = None) -> str:
    cfg = config or CompressionConfig()
    parts: list[str] = []
    for run in iter_runs(text):
        if run.length >= cfg.min_run_length:
            parts.append(f"{run.length}{run.char}")
        else:
            parts.append(run.char * run.length)
    return "".join(parts)


def rle_decode(text: str) -> str:
    parts: list[str] = []
    idx = 0
    n = len(text)
    while idx < n:
        count, end = read_count(text, idx)
        if count is None:
            parts.append(text[idx])
            idx += 1
            continue
        if end >= n:
            # Truncated trailing count produces no output.
            break
        parts.append(text[end] * count)
        idx = end + 1
    return "".join(parts)
