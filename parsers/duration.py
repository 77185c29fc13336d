#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Duration Inference - Recovers a song length from its note block.

Note lines look like ': 12 4 60 la' (type, start beat, length, pitch, text).
The last note line gives the final beat; converted through the tempo this
yields the song length when no END tag was present.
"""

from typing import Optional

from .song import Song


# Regular, golden, freestyle, rap and golden rap notes
NOTE_PREFIXES = (':', '*', 'F', 'R', 'G')

# Beat subdivision of the note grid
BEAT_SUBDIVISION = 4


def find_last_note_line(text: str) -> Optional[str]:
    """Return the last line starting with a note prefix, if any"""
    for line in reversed(text.splitlines()):
        if line.startswith(NOTE_PREFIXES):
            return line
    return None


def _parse_beat(value: str) -> Optional[int]:
    if value.isascii() and value.isdigit():
        return int(value)
    return None


def infer_duration(song: Song, text: str) -> Optional[int]:
    """
    Infer the duration of a song from its last note.

    Only applies when the song has no duration yet and a tempo is known.

    Args:
        song: Parsed song (duration, bpm and gap are read)
        text: Raw description file content

    Returns:
        Duration in seconds, or None when it can't be inferred
    """
    if song.duration != 0 or song.bpm <= 0:
        return None

    line = find_last_note_line(text)
    if line is None:
        return None

    fields = line.split()
    if len(fields) < 3:
        return None

    start = _parse_beat(fields[1])
    length = _parse_beat(fields[2])
    if start is None or length is None:
        return None

    end_beat = start + length
    # end_beat * (60 / bpm), truncated
    total_seconds = end_beat * 60 // song.bpm

    return total_seconds // BEAT_SUBDIVISION + song.gap // 1000
