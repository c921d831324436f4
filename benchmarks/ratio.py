import argparse
import random
import statistics
import string

from textsqueeze import CompressionConfig, compress


def generate_text(length: int, vocab_size: int, seed: int) -> str:
    rng = random.Random(seed)
    letters = string.ascii_lowercase
    words = ["".join(rng.choice(letters) for _ in range(rng.randint(2, 7))) for _ in range(vocab_size)]
    out: list[str] = []
    size = 0
    while size < length:
        word = rng.choice(words)
        out.append(word)
        size += len(word) + 1
    return " ".join(out)[:length]


def main() -> None:
    parser = argparse.ArgumentParser(description="textsqueeze compression ratio benchmark")
    parser.add_argument("--length", type=int, default=4096)
    parser.add_argument("--vocab", type=int, default=64)
    parser.add_argument("--runs", type=int, default=10)
    parser.add_argument("--max-len", type=int, default=10)
    parser.add_argument("--seed", type=int, default=7)
    args = parser.parse_args()

    ratios: dict[str, list[float]] = {"basic": [], "advanced": []}

    for offset in range(args.runs):
        text = generate_text(args.length, args.vocab, args.seed + offset)
        cfg = CompressionConfig(max_pattern_length=args.max_len, verify=True)
        for algorithm in ratios:
            result = compress(text, cfg, algorithm)
            ratios[algorithm].append(result.compressed_length / result.original_length)

    print(f"Runs: {args.runs}")
    print(f"Characters: {args.length}")
    print(f"Max pattern length: {args.max_len}")
    for algorithm, values in ratios.items():
        print(f"Mean {algorithm} compression ratio: {statistics.mean(values):.4f}")


if __name__ == "__main__":
    main()
