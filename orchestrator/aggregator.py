#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Song index aggregation and JSON serialization.

The index is a single JSON array of song objects:
    [{"title": ..., "artist": [...], "duration": 0, "tags": [],
      "cover_image": "", "bpm": 0, "gap": 0}, ...]
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from parsers import Song


class SongIndex:
    """Ordered collection of indexed songs"""

    def __init__(self, songs: Optional[Iterable[Song]] = None):
        self._songs: List[Song] = list(songs) if songs else []

    def add(self, song: Song) -> None:
        """Append a song in production order"""
        self._songs.append(song)

    def extend(self, songs: Iterable[Song]) -> None:
        for song in songs:
            self.add(song)

    @property
    def songs(self) -> List[Song]:
        return list(self._songs)

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self):
        return iter(self._songs)

    def to_list(self) -> List[Dict[str, Any]]:
        """Convert to a list of dictionaries for JSON serialization"""
        return [song.to_dict() for song in self._songs]

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_list(), indent=indent, ensure_ascii=False)

    def write(self, out_file: str, indent: Optional[int] = None) -> Path:
        """
        Write the whole index to a JSON file.

        Raises:
            OSError: If the file can't be written
        """
        path = Path(out_file)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.to_json(indent=indent))
        return path


def load_index(index_file: str) -> SongIndex:
    """
    Load a previously written index.

    Accepts files from the older format without 'gap'.
    """
    with open(index_file, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Song index must be a JSON array: {index_file}")

    return SongIndex(Song.from_dict(entry) for entry in data)
