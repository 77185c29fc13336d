#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tag Parser - Reads the '#KEY:VALUE' header of a song description file.

Recognized tags:
- TITLE   Song title (last one wins)
- ARTIST  Performer, may repeat
- COVER   Cover image file name, relative to the song folder
- BPM     Tempo, decimal with '.' or ',' separator
- GAP     Milliseconds before the first note, decimal like BPM
- END     Song end in milliseconds

Every other line (unknown tags, the note block) is ignored here.
"""

import math
import os
from pathlib import Path
from typing import Callable, Optional

from .song import Song


TAG_MARKER = '#'
TAG_SEPARATOR = ':'


def parse_decimal(value: str) -> Optional[int]:
    """
    Parse a locale-tolerant decimal and truncate it to an integer.

    '120,5' and '120.5' both give 120. Negative values clamp to 0.

    Returns:
        The truncated value, or None if the text is not a finite number
    """
    if '_' in value:
        return None

    try:
        number = float(value.strip().replace(',', '.'))
    except ValueError:
        return None

    if not math.isfinite(number):
        return None

    return max(int(number), 0)


def parse_millis(value: str) -> Optional[int]:
    """Parse a non-negative integer count of milliseconds"""
    if '_' in value:
        return None

    try:
        millis = int(value.strip())
    except ValueError:
        return None
    return millis if millis >= 0 else None


def _default_log(message: str) -> None:
    print(f"[Parser] {message}")


def parse_song_text(text: str, folder: str,
                    log: Optional[Callable[[str], None]] = None) -> Song:
    """
    Parse a description file into a Song.

    Args:
        text: Full content of the description file
        folder: Path of the song folder the file came from
        log: Diagnostic sink for malformed values (defaults to stdout)

    Returns:
        Song with defaults for every tag that was missing
    """
    log = log or _default_log
    song = Song()

    for line in text.splitlines():
        if not line.startswith(TAG_MARKER):
            continue

        key, _, value = line[len(TAG_MARKER):].partition(TAG_SEPARATOR)

        if key == 'TITLE':
            song.title = value.strip()
        elif key == 'ARTIST':
            song.artist.append(value.strip())
        elif key == 'COVER':
            song.cover_file = value.strip()
        elif key == 'BPM':
            song.bpm = _numeric_field(key, value, folder, log)
        elif key == 'GAP':
            song.gap = _numeric_field(key, value, folder, log)
        elif key == 'END':
            millis = parse_millis(value)
            song.duration = millis // 1000 if millis is not None else 0

    if not song.title:
        # abspath so "." and ".." still name the folder
        song.title = Path(os.path.abspath(folder)).stem
        log(f"Title empty, taking folder name: {folder}")

    if not song.artist:
        song.artist.append("")

    return song


def _numeric_field(key: str, value: str, folder: str, log: Callable[[str], None]) -> int:
    """Parse a BPM/GAP value, reporting and zeroing anything malformed"""
    parsed = parse_decimal(value)
    if parsed is None:
        log(f"Invalid {key} value {value.strip()!r}: {folder}")
        return 0
    return parsed
