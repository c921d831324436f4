"""Basic usage example for textsqueeze."""

from textsqueeze import CompressionConfig, analyze_text, compress, decompress, rle_encode


def main():
    # Example 1: Run-length encoding
    print("=" * 60)
    print("Example 1: Run-Length Encoding")
    print("=" * 60)

    text = "aaaabbbcccccccccccccd"
    result = compress(text, algorithm="basic")

    print(f"Original:          {text!r}")
    print(f"Encoded:           {result.text!r}")
    print(f"Compression ratio: {result.ratio:.1f}%")
    print(f"Lossless:          {decompress(result.text, algorithm='basic') == text}")

    # Example 2: Dictionary substitution
    print("\n" + "=" * 60)
    print("Example 2: Pattern Dictionary")
    print("=" * 60)

    text = "the quick brown fox jumps over the lazy dog. " * 20
    config = CompressionConfig(verify=True)

    result = compress(text, config)

    print(f"Original length:   {result.original_length} characters")
    print(f"Compressed length: {result.compressed_length} characters")
    print(f"Compression ratio: {result.ratio:.1f}%")
    print(f"Patterns used:     {len(result.dictionary)}")

    if result.dictionary:
        print("\nDictionary entries:")
        for entry in result.dictionary:
            print(f"  {ord(entry.marker):2d} -> {entry.pattern!r}")

    # Example 3: Fallback to run-length encoding
    print("\n" + "=" * 60)
    print("Example 3: Fallback")
    print("=" * 60)

    for sample in ["short", "abcdefghijklmnop", "xxxxxyyyyyzzzzz"]:
        result = compress(sample)
        print(f"{sample!r:22s}: mode={result.mode:7s} same-as-rle={result.text == rle_encode(sample)}")

    # Example 4: Estimating compressibility
    print("\n" + "=" * 60)
    print("Example 4: Analysis")
    print("=" * 60)

    analysis = analyze_text(text)
    print(f"Repetition score:  {analysis.repetition_score:.2%}")
    print(f"Estimate:          {analysis.estimated_compression}")


if __name__ == "__main__":
    main()
