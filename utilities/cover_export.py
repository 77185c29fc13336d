#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Cover Exporter - Copies song cover images into a single output folder.

Covers are renamed cover-0.jpg, cover-1.png, ... in export order so that
files from different song folders (and different libraries) never collide.
Images are copied byte for byte, never re-encoded.
"""

import shutil
from pathlib import Path


def cover_extension(source) -> str:
    """Return the text after the last '.' of the file name, or ''"""
    name = Path(source).name
    if '.' not in name:
        return ""
    return name.rsplit('.', 1)[1]


class CoverExporter:
    """
    Exports cover images under collision-free names.

    One exporter is shared by every library scanned in a run; its counter
    only advances when a copy succeeds.
    """

    def __init__(self, output_dir: str):
        self.output_dir = Path(output_dir)
        self.index = 0

    def next_name(self, source) -> str:
        """Name the next exported cover would get"""
        ext = cover_extension(source)
        return f"cover-{self.index}.{ext}" if ext else f"cover-{self.index}"

    def export(self, source) -> str:
        """
        Copy a cover image into the output folder.

        Args:
            source: Path to the source image

        Returns:
            Generated file name, relative to the output folder

        Raises:
            OSError: If the source is missing/unreadable or the copy fails
        """
        name = self.next_name(source)
        shutil.copyfile(str(source), str(self.output_dir / name))
        self.index += 1
        return name

    @property
    def exported_count(self) -> int:
        return self.index

    def __repr__(self) -> str:
        return f"CoverExporter(output_dir={self.output_dir}, index={self.index})"
