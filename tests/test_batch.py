from textsqueeze import BatchItem, CompressionConfig, compress_batch, decompress
from textsqueeze.batch import STATUS_COMPLETED, STATUS_ERROR, compress_files, output_name


def test_batch_keeps_order_and_algorithms(prose):
    items = [
        BatchItem("story.txt", prose),
        BatchItem("runs.txt", "aaaaabbbbbccccc", algorithm="basic"),
        BatchItem("noise.txt", "qwertyuiopasdfgh"),
    ]
    report = compress_batch(items, max_workers=2)
    assert [entry.name for entry in report.entries] == ["story.txt", "runs.txt", "noise.txt"]
    assert report.entries[1].result.text == "5a5b5c"
    assert decompress(report.entries[0].result.text) == prose
    assert report.total_original == len(prose) + 15 + 16
    assert report.total_compressed == sum(e.result.compressed_length for e in report.entries)


def test_low_ratio_items():
    report = compress_batch([BatchItem("noise.txt", "qwertyuiopasdfgh"), BatchItem("runs.txt", "a" * 9)])
    assert [entry.name for entry in report.low_ratio_items] == ["noise.txt"]


def test_output_names():
    assert output_name("notes.txt", "basic") == "notes-basic-compressed.txt"
    assert output_name("notes", "advanced") == "notes-advanced-compressed.txt"
    assert output_name("notes.txt", "advanced", action="decompressed") == "notes-advanced-decompressed.txt"
    report = compress_batch([BatchItem("a.txt", "hello")])
    assert report.entries[0].output_name == "a-advanced-compressed.txt"


def test_empty_batch():
    report = compress_batch([])
    assert report.entries == ()
    assert report.ratio == 0.0


def test_failing_item_does_not_stop_the_batch():
    report = compress_batch(
        [
            BatchItem("bad.txt", "a1b2c3"),
            BatchItem("good.txt", "aaaaabbbbb", algorithm="basic"),
            BatchItem("odd.txt", "text", algorithm="lzw"),
        ],
        CompressionConfig(verify=True),
    )
    assert [entry.status for entry in report.entries] == [STATUS_ERROR, STATUS_COMPLETED, STATUS_ERROR]
    assert "Round-trip" in report.entries[0].error
    assert "Unknown algorithm" in report.entries[2].error
    assert [entry.name for entry in report.failed] == ["bad.txt", "odd.txt"]
    assert report.total_original == 10
    assert report.entries[1].result.text == "5a5b"


def test_compress_files_reports_unreadable_files(tmp_path):
    good = tmp_path / "good.txt"
    good.write_text("aaaaabbbbb", encoding="utf-8")
    broken = tmp_path / "broken.txt"
    broken.write_bytes(b"\xff\xfe not utf-8")
    missing = tmp_path / "missing.txt"

    report = compress_files([good, broken, missing], algorithm="basic")
    assert [entry.status for entry in report.entries] == [STATUS_COMPLETED, STATUS_ERROR, STATUS_ERROR]
    assert report.completed[0].result.text == "5a5b"
    assert report.entries[1].result is None
    assert "utf-8" in report.entries[1].error
