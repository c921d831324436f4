import pytest

from textsqueeze import (
    CompressionConfig,
    compress,
    decompress,
    pattern_decode,
    pattern_encode,
    rle_decode,
    rle_encode,
)
from textsqueeze.compressor import is_pattern_encoded
from textsqueeze.utils import SENTINEL


def test_empty_input():
    assert pattern_encode("") == ""
    assert pattern_decode("") == ""


def test_short_input_matches_rle():
    for text in ["aaabbbbc", "aa", "abc", "zzzzzzzzz"]:
        assert pattern_encode(text) == rle_encode(text)


def test_no_qualifying_pattern_matches_rle():
    text = "abcdefghijklmnopqrst"
    assert pattern_encode(text) == rle_encode(text) == text
    text = "abcdefgxxxxhij"
    assert pattern_encode(text) == "abcdefg4xhij"


def test_exact_encoding():
    expected_header = (
        "\x016abcabc"
        "\x025abcab"
        "\x035bcabc"
        "\x043abc"
        "\x054abca"
        "\x064bcab"
        "\x074cabc"
        "\x083bca"
        "\x093cab"
    )
    assert pattern_encode("abcabcabcabc") == expected_header + SENTINEL + "\x01\x01"


def test_round_trip(round_trip_text):
    encoded = pattern_encode(round_trip_text)
    assert pattern_decode(encoded) == round_trip_text


def test_round_trip_with_digit_led_patterns():
    text = "1ab1ab1ab1ab"
    encoded = pattern_encode(text)
    assert is_pattern_encoded(encoded)
    assert pattern_decode(encoded) == text


def test_sentinel_disambiguation():
    for text in ["3a4bc", "plain text", "12a", "ab3"]:
        assert pattern_decode(text) == rle_decode(text)


def test_decode_ignores_malformed_header():
    assert pattern_decode("\x01abc" + SENTINEL + "body") == "body"


def test_decode_splits_at_first_sentinel():
    encoded = "\x013abc" + SENTINEL + "\x01" + SENTINEL + "\x01"
    assert pattern_decode(encoded) == "abc" + SENTINEL + "abc"


def test_compress_basic_stats():
    result = compress("aaabbbbc", algorithm="basic")
    assert result.text == "3a4bc"
    assert result.mode == "rle"
    assert result.dictionary == ()
    assert result.original_length == 8
    assert result.compressed_length == 5
    assert result.ratio == pytest.approx(37.5)


def test_compress_advanced(prose):
    result = compress(prose)
    assert result.algorithm == "advanced"
    assert result.mode == "pattern"
    assert len(result.dictionary) == 20
    assert result.compressed_length < result.original_length
    assert decompress(result.text) == prose


def test_compress_advanced_fallback_reports_rle():
    result = compress("short")
    assert result.mode == "rle"
    assert result.text == "short"


def test_empty_ratio():
    assert compress("").ratio == 0.0


def test_verify_passes(prose):
    cfg = CompressionConfig(verify=True)
    assert compress(prose, cfg).text == pattern_encode(prose)


def test_verify_detects_digit_corruption():
    cfg = CompressionConfig(verify=True)
    try:
        compress("a1b2c3", cfg, algorithm="basic")
    except ValueError as exc:
        assert "Round-trip" in str(exc)
    else:
        raise AssertionError("Expected verification failure for literal digits.")


def test_unknown_algorithm():
    with pytest.raises(ValueError, match="Unknown algorithm"):
        compress("text", algorithm="lzw")
    with pytest.raises(ValueError, match="Unknown algorithm"):
        decompress("text", algorithm="lzw")


def test_decompress_basic():
    assert decompress("3a4bc", algorithm="basic") == "aaabbbbc"


def test_round_trip_with_long_pattern_limit():
    cfg = CompressionConfig(max_pattern_length=40)
    text = "0xyA0xyB0xyC0xyD0xyE"
    with pytest.warns(RuntimeWarning):
        encoded = pattern_encode(text, cfg)
    assert pattern_decode(encoded, cfg) == text


def test_hand_written_long_length_is_bounded():
    assert pattern_decode("\x0112abcdefghijkl" + SENTINEL + "\x01") == "2"
