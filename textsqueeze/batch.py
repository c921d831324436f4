"""Compress several independent buffers at once.

Each buffer succeeds or fails on its own: a failing item is reported with
``status == "error"`` and the remaining items are still compressed.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Iterable, Optional, Union

from .compressor import ALGORITHM_ADVANCED, compress
from .config import CompressionConfig
from .types import CompressionResult

LOW_RATIO_THRESHOLD = 10.0

STATUS_COMPLETED = "completed"
STATUS_ERROR = "error"


@dataclass(frozen=True)
class BatchItem:
    name: str
    text: str
    algorithm: str = ALGORITHM_ADVANCED


@dataclass(frozen=True)
class BatchEntry:
    name: str
    algorithm: str
    result: Optional[CompressionResult] = None
    error: Optional[str] = None

    @property
    def status(self) -> str:
        return STATUS_ERROR if self.result is None else STATUS_COMPLETED

    @property
    def output_name(self) -> str:
        return output_name(self.name, self.algorithm)


@dataclass(frozen=True)
class BatchReport:
    entries: tuple[BatchEntry, ...]

    @property
    def completed(self) -> tuple[BatchEntry, ...]:
        return tuple(entry for entry in self.entries if entry.result is not None)

    @property
    def failed(self) -> tuple[BatchEntry, ...]:
        return tuple(entry for entry in self.entries if entry.result is None)

    @property
    def total_original(self) -> int:
        return sum(entry.result.original_length for entry in self.completed)

    @property
    def total_compressed(self) -> int:
        return sum(entry.result.compressed_length for entry in self.completed)

    @property
    def ratio(self) -> float:
        if not self.total_original:
            return 0.0
        return (1 - self.total_compressed / self.total_original) * 100

    @property
    def low_ratio_items(self) -> tuple[BatchEntry, ...]:
        return tuple(entry for entry in self.completed if entry.result.ratio < LOW_RATIO_THRESHOLD)


def output_name(name: str, algorithm: str, action: str = "compressed") -> str:
    stem = PurePath(name).stem or name
    return f"{stem}-{algorithm}-{action}.txt"


def read_text(path: Path) -> str:
    # newline="" keeps CR/LF characters exactly as stored.
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def _compress_item(item: BatchItem, config: CompressionConfig) -> BatchEntry:
    try:
        result = compress(item.text, config, item.algorithm)
    except ValueError as exc:
        return BatchEntry(name=item.name, algorithm=item.algorithm, error=str(exc))
    return BatchEntry(name=item.name, algorithm=item.algorithm, result=result)


def _compress_path(path: Path, algorithm: str, config: CompressionConfig) -> BatchEntry:
    try:
        text = read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        return BatchEntry(name=path.name, algorithm=algorithm, error=str(exc))
    return _compress_item(BatchItem(name=path.name, text=text, algorithm=algorithm), config)


def compress_batch(
    items: Iterable[BatchItem],
    config: CompressionConfig | None = None,
    max_workers: Optional[int] = None,
) -> BatchReport:
    cfg = config or CompressionConfig()
    pending = list(items)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(_compress_item, item, cfg) for item in pending]
        entries = tuple(fut.result() for fut in futures)
    return BatchReport(entries=entries)


def compress_files(
    paths: Iterable[Union[str, Path]],
    algorithm: str = ALGORITHM_ADVANCED,
    config: CompressionConfig | None = None,
    max_workers: Optional[int] = None,
) -> BatchReport:
    """Read and compress files; unreadable files are reported, not raised."""
    cfg = config or CompressionConfig()
    pending = [Path(path) for path in paths]
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(_compress_path, path, algorithm, cfg) for path in pending]
        entries = tuple(fut.result() for fut in futures)
    return BatchReport(entries=entries)
