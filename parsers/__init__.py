# Song Description Parsers
# Tag parsing and duration inference for song description files

from .song import Song
from .tags import parse_song_text, parse_decimal, parse_millis, TAG_MARKER, TAG_SEPARATOR
from .duration import infer_duration, find_last_note_line, NOTE_PREFIXES

__all__ = [
    'Song',
    'parse_song_text',
    'parse_decimal',
    'parse_millis',
    'TAG_MARKER',
    'TAG_SEPARATOR',
    'infer_duration',
    'find_last_note_line',
    'NOTE_PREFIXES'
]
