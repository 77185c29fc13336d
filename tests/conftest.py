"""Shared fixtures for building song libraries on disk."""

import pytest

from orchestrator import ConfigManager


def song_text(title=None, artists=(), bpm=None, gap=None, end=None, cover=None, notes=()):
    """Render a song description file"""
    lines = ["#VERSION:1.0.0"]
    if title is not None:
        lines.append(f"#TITLE:{title}")
    for artist in artists:
        lines.append(f"#ARTIST:{artist}")
    if cover is not None:
        lines.append(f"#COVER:{cover}")
    if bpm is not None:
        lines.append(f"#BPM:{bpm}")
    if gap is not None:
        lines.append(f"#GAP:{gap}")
    if end is not None:
        lines.append(f"#END:{end}")
    lines.extend(notes)
    if notes:
        lines.append("E")
    return "\n".join(lines) + "\n"


@pytest.fixture
def config():
    return ConfigManager(None)


@pytest.fixture
def make_song(tmp_path):
    """Create a song folder: make_song('Song', text, library='lib', files={...})"""

    def _make(folder_name, text=None, library="library", files=None, txt_name="song.txt"):
        folder = tmp_path / library / folder_name
        folder.mkdir(parents=True)
        if text is not None:
            (folder / txt_name).write_text(text, encoding="utf-8")
        for name, content in (files or {}).items():
            (folder / name).write_bytes(content)
        return folder

    return _make
