"""Tests for the song index and its JSON format."""

import json

import pytest

from orchestrator import SongIndex, load_index
from parsers import Song


def sample_songs():
    return [
        Song(title="Tubthumping", artist=["Chumbawamba"], duration=215, bpm=340, gap=800),
        Song(title="Duet", artist=["Ana", "Bo"], duration=0, cover_image="cover-0.jpg"),
        Song(title="Café Ünïcode", artist=[""], duration=61, bpm=120),
    ]


def test_field_order_and_values():
    index = SongIndex(sample_songs()[:1])

    entry = index.to_list()[0]

    assert list(entry) == ["title", "artist", "duration", "tags", "cover_image", "bpm", "gap"]
    assert entry == {
        "title": "Tubthumping",
        "artist": ["Chumbawamba"],
        "duration": 215,
        "tags": [],
        "cover_image": "",
        "bpm": 340,
        "gap": 800
    }


def test_cover_file_not_serialized():
    song = Song(title="x", artist=[""], cover_file="cover.jpg")
    assert "cover_file" not in song.to_dict()


def test_write_and_load(tmp_path):
    songs = sample_songs()
    index = SongIndex()
    for song in songs:
        index.add(song)
    out = tmp_path / "songs.json"

    index.write(str(out))
    loaded = load_index(str(out))

    assert len(loaded) == len(songs)
    assert loaded.songs == songs
    assert "Café Ünïcode" in out.read_text(encoding="utf-8")


def test_output_is_single_array(tmp_path):
    out = tmp_path / "songs.json"
    SongIndex(sample_songs()).write(str(out), indent=2)

    data = json.loads(out.read_text(encoding="utf-8"))

    assert isinstance(data, list)
    assert [entry["title"] for entry in data] == ["Tubthumping", "Duet", "Café Ünïcode"]


def test_empty_index(tmp_path):
    out = tmp_path / "songs.json"
    SongIndex().write(str(out))
    assert json.loads(out.read_text(encoding="utf-8")) == []


def test_load_without_gap(tmp_path):
    out = tmp_path / "old.json"
    out.write_text(json.dumps([{
        "title": "Old", "artist": ["Band"], "duration": 100,
        "tags": [], "cover_image": "", "bpm": 200
    }]), encoding="utf-8")

    song = load_index(str(out)).songs[0]

    assert song.gap == 0
    assert song.bpm == 200


def test_load_rejects_non_array(tmp_path):
    out = tmp_path / "bad.json"
    out.write_text('{"title": "x"}', encoding="utf-8")
    with pytest.raises(ValueError):
        load_index(str(out))


def test_write_failure_raises(tmp_path):
    with pytest.raises(OSError):
        SongIndex(sample_songs()).write(str(tmp_path / "missing" / "songs.json"))
