#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Scanner Agent - Discovers and indexes song folders in karaoke libraries.

Responsibilities:
- Traverse each library root (one song per immediate sub-folder)
- Locate the song description file in every folder
- Parse its tags and infer a missing duration from the note block
- Export the cover image when a cover folder is configured
- Skip and report folders that can't be indexed without stopping the run
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from parsers import Song, parse_song_text, infer_duration
from utilities.cover_export import CoverExporter

from .base import BaseAgent


class ScannerAgent(BaseAgent):
    """
    Scanner agent for discovering and indexing song folders.

    The cover exporter (and with it the cover counter) lives as long as the
    agent, so cover names stay unique across every library it scans.
    """

    def __init__(self, config, cover_exporter: Optional[CoverExporter] = None):
        super().__init__(config)
        self.cover_exporter = cover_exporter

    @property
    def name(self) -> str:
        return "Scanner"

    @property
    def description_suffix(self) -> str:
        return self.config.description_suffix

    @property
    def encoding(self) -> str:
        return self.config.encoding

    def process(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Process a single song folder.

        Args:
            item: Dictionary with 'path' key pointing to the song folder

        Returns:
            Result with the indexed 'song' on success
        """
        folder_path = item.get('path')
        if not folder_path:
            return {"status": "error", "error": "No path provided"}

        try:
            description = self.find_description_file(folder_path)
            if description is None:
                self.log(f"Skipping {folder_path}: no {self.description_suffix} file")
                return {
                    "status": "skipped",
                    "path": folder_path,
                    "reason": f"no {self.description_suffix} file"
                }

            song = self.scan_song(folder_path, description)

        except (OSError, UnicodeDecodeError) as e:
            self.log_error(f"Skipping {folder_path}: {e}")
            return {
                "status": "error",
                "path": folder_path,
                "error": str(e)
            }

        self.log(f"Indexed {song.title}")
        return {
            "status": "success",
            "path": folder_path,
            "song": song
        }

    def find_description_file(self, folder_path) -> Optional[Path]:
        """First file in the folder whose name ends in the description suffix"""
        for entry in Path(folder_path).iterdir():
            if entry.name.endswith(self.description_suffix) and entry.is_file():
                return entry
        return None

    def scan_song(self, folder_path, description=None) -> Song:
        """
        Build the Song for a single folder.

        Args:
            folder_path: Path to the song folder
            description: Description file to parse (located if omitted)

        Returns:
            Song with duration inferred and cover exported where possible

        Raises:
            FileNotFoundError: If the folder holds no description file
            OSError: If the description or cover can't be read or copied
            UnicodeDecodeError: If the description isn't valid text
        """
        folder = Path(folder_path)
        if description is None:
            description = self.find_description_file(folder)
            if description is None:
                raise FileNotFoundError(f"No {self.description_suffix} file in {folder}")

        with open(description, 'r', encoding=self.encoding) as f:
            text = f.read()

        song = parse_song_text(text, str(folder), log=self.log)

        duration = infer_duration(song, text)
        if duration is not None:
            song.duration = duration

        if self.cover_exporter is not None and song.cover_file:
            song.cover_image = self.cover_exporter.export(folder / song.cover_file)

        return song

    def list_song_folders(self, library_path) -> List[Path]:
        """
        List candidate song folders of a library, in directory order.

        Raises:
            NotADirectoryError: If the library root is not a directory
            OSError: If the library root can't be listed
        """
        path = Path(library_path)
        if not path.is_dir():
            raise NotADirectoryError(f"Library root is not a directory: {library_path}")

        return [entry for entry in path.iterdir() if entry.is_dir()]

    def scan_library(self, library_path) -> Dict[str, Any]:
        """
        Scan every song folder of one library.

        Args:
            library_path: Root path of the library

        Returns:
            Batch summary; 'songs' holds the indexed songs in scan order
        """
        self.log(f"Scanning library: {library_path}")
        folders = self.list_song_folders(library_path)

        summary = self.process_batch([{'path': str(folder)} for folder in folders])
        summary["library"] = str(library_path)
        summary["songs"] = [
            result["song"] for result in summary["items"]
            if result.get("status") == "success"
        ]
        return summary
