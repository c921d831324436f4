"""textsqueeze: run-length and dictionary substitution text codecs."""

from .analysis import TextAnalysis, analyze_text
from .batch import BatchItem, BatchReport, compress_batch, compress_files
from .compressor import compress, decompress, pattern_decode, pattern_encode
from .config import CompressionConfig
from .engine import CompressionEngine, default_engine, plan_encoding
from .rle import rle_decode, rle_encode
from .types import CompressionResult, DictionaryEntry, EncodingPlan
from .utils import MARKERS, SENTINEL

__all__ = [
    "rle_encode",
    "rle_decode",
    "pattern_encode",
    "pattern_decode",
    "compress",
    "decompress",
    "CompressionConfig",
    "CompressionResult",
    "CompressionEngine",
    "default_engine",
    "plan_encoding",
    "DictionaryEntry",
    "EncodingPlan",
    "TextAnalysis",
    "analyze_text",
    "BatchItem",
    "BatchReport",
    "compress_batch",
    "compress_files",
    "MARKERS",
    "SENTINEL",
]
