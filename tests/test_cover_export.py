"""Tests for cover image export."""

import pytest

from utilities.cover_export import CoverExporter, cover_extension


@pytest.mark.parametrize("source, expected", [
    ("cover.jpg", "jpg"),
    ("/songs/A - B [CO].jpeg", "jpeg"),
    ("archive.tar.png", "png"),
    ("/songs/v1.2/cover", ""),
    ("cover", ""),
])
def test_cover_extension(source, expected):
    assert cover_extension(source) == expected


def test_export_sequence(tmp_path):
    sources = tmp_path / "src"
    sources.mkdir()
    out = tmp_path / "covers"
    out.mkdir()

    files = {"a.jpg": b"\xff\xd8jpeg", "b.png": b"\x89PNGdata", "c": b"raw"}
    for name, data in files.items():
        (sources / name).write_bytes(data)

    exporter = CoverExporter(str(out))
    names = [exporter.export(sources / name) for name in files]

    assert names == ["cover-0.jpg", "cover-1.png", "cover-2"]
    assert (out / "cover-0.jpg").read_bytes() == files["a.jpg"]
    assert (out / "cover-1.png").read_bytes() == files["b.png"]
    assert (out / "cover-2").read_bytes() == files["c"]
    assert exporter.exported_count == 3


def test_missing_source_does_not_advance_counter(tmp_path):
    exporter = CoverExporter(str(tmp_path))

    with pytest.raises(OSError):
        exporter.export(tmp_path / "missing.jpg")

    assert exporter.index == 0
    assert exporter.next_name("next.png") == "cover-0.png"


def test_missing_output_dir_raises(tmp_path):
    source = tmp_path / "cover.jpg"
    source.write_bytes(b"data")
    exporter = CoverExporter(str(tmp_path / "nope"))

    with pytest.raises(OSError):
        exporter.export(source)
    assert exporter.index == 0
