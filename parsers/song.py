#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Song record produced for every indexed song folder.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


# Serialized field order of an index entry
SONG_FIELDS = ('title', 'artist', 'duration', 'tags', 'cover_image', 'bpm', 'gap')


@dataclass
class Song:
    """Indexed song information"""
    title: str = ""
    artist: List[str] = field(default_factory=list)
    duration: int = 0  # seconds
    tags: List[str] = field(default_factory=list)
    cover_image: str = ""  # exported file name, relative to the cover dir
    bpm: int = 0
    gap: int = 0  # milliseconds
    cover_file: str = field(default="", compare=False, repr=False)  # raw COVER value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "title": self.title,
            "artist": list(self.artist),
            "duration": self.duration,
            "tags": list(self.tags),
            "cover_image": self.cover_image,
            "bpm": self.bpm,
            "gap": self.gap
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Song':
        """
        Build a Song from an index entry.

        Entries written by the older index format carry no 'gap' field;
        it defaults to 0.
        """
        return cls(
            title=data.get('title', ""),
            artist=list(data.get('artist') or [""]),
            duration=int(data.get('duration', 0)),
            tags=list(data.get('tags') or []),
            cover_image=data.get('cover_image', ""),
            bpm=int(data.get('bpm', 0)),
            gap=int(data.get('gap', 0))
        )
