"""Command line front end for the text codecs."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .analysis import analyze_text
from .batch import compress_files, output_name, read_text, write_text
from .compressor import ALGORITHM_ADVANCED, ALGORITHMS, compress, decompress
from .config import CompressionConfig


def _config(args: argparse.Namespace) -> CompressionConfig:
    return CompressionConfig(verify=getattr(args, "verify", False))


def _cmd_compress(args: argparse.Namespace) -> int:
    source = Path(args.file)
    result = compress(read_text(source), _config(args), args.algorithm)
    target = Path(args.output) if args.output else source.with_name(output_name(source.name, args.algorithm))
    write_text(target, result.text)
    print(f"Original size:    {result.original_length}")
    print(f"Compressed size:  {result.compressed_length}")
    print(f"Compression ratio: {result.ratio:.2f}%")
    if result.ratio <= 0:
        print("Note: this file could not be compressed effectively with the selected algorithm.")
    print(f"Wrote {target}")
    return 0


def _cmd_decompress(args: argparse.Namespace) -> int:
    source = Path(args.file)
    text = read_text(source)
    restored = decompress(text, _config(args), args.algorithm)
    target = (
        Path(args.output)
        if args.output
        else source.with_name(output_name(source.name, args.algorithm, action="decompressed"))
    )
    write_text(target, restored)
    expansion = len(restored) / len(text) * 100 if text else 0.0
    print(f"Compressed size:   {len(text)}")
    print(f"Decompressed size: {len(restored)}")
    print(f"Expansion ratio:   {expansion:.2f}%")
    print(f"Wrote {target}")
    return 0


def _cmd_analyze(args: argparse.Namespace) -> int:
    analysis = analyze_text(read_text(Path(args.file)))
    print(f"Characters:        {analysis.char_count}")
    print(f"Unique characters: {analysis.unique_chars}")
    print(f"Repetition score:  {analysis.repetition_score * 100:.2f}%")
    print(f"Estimated compression: {analysis.estimated_compression}")
    print("Most common characters:")
    for char, count in analysis.most_common:
        print(f"  {char!r}: {count}")
    return 0


def _cmd_batch(args: argparse.Namespace) -> int:
    paths = [Path(name) for name in args.files]
    report = compress_files(paths, args.algorithm, _config(args), max_workers=args.workers)
    for path, entry in zip(paths, report.entries):
        if entry.result is None:
            print(f"{entry.name}: error: {entry.error}", file=sys.stderr)
            continue
        out_dir = Path(args.out_dir) if args.out_dir else path.parent
        write_text(out_dir / entry.output_name, entry.result.text)
        print(
            f"{entry.name}: {entry.result.original_length} -> {entry.result.compressed_length} "
            f"({entry.result.ratio:.1f}%)"
        )
    print(f"Total: {report.total_original} -> {report.total_compressed} ({report.ratio:.1f}%)")
    if report.low_ratio_items:
        print("Some files have low compression ratios. These may be already compressed files or contain random data.")
    if report.failed:
        print(f"{len(report.failed)} of {len(report.entries)} files failed.", file=sys.stderr)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="textsqueeze", description="Run-length and dictionary text compression")
    sub = parser.add_subparsers(dest="command", required=True)

    p_compress = sub.add_parser("compress", help="Compress a text file")
    p_compress.add_argument("file")
    p_compress.add_argument("--algorithm", choices=ALGORITHMS, default=ALGORITHM_ADVANCED)
    p_compress.add_argument("-o", "--output")
    p_compress.add_argument("--verify", action="store_true", help="Decode the output and compare with the input")
    p_compress.set_defaults(func=_cmd_compress)

    p_decompress = sub.add_parser("decompress", help="Decompress a text file")
    p_decompress.add_argument("file")
    p_decompress.add_argument("--algorithm", choices=ALGORITHMS, default=ALGORITHM_ADVANCED)
    p_decompress.add_argument("-o", "--output")
    p_decompress.set_defaults(func=_cmd_decompress)

    p_analyze = sub.add_parser("analyze", help="Estimate how well a text file compresses")
    p_analyze.add_argument("file")
    p_analyze.set_defaults(func=_cmd_analyze)

    p_batch = sub.add_parser("batch", help="Compress several text files")
    p_batch.add_argument("files", nargs="+")
    p_batch.add_argument("--algorithm", choices=ALGORITHMS, default=ALGORITHM_ADVANCED)
    p_batch.add_argument("--out-dir")
    p_batch.add_argument("--workers", type=int, default=None)
    p_batch.add_argument("--verify", action="store_true")
    p_batch.set_defaults(func=_cmd_batch)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        print(f"Error processing file: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
