#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Song Library Indexer - Main orchestration class.

Runs the indexing pipeline over one or more karaoke libraries:
    Scan folders -> Parse tags -> Infer duration -> Export cover -> Write index

Usage:
    from orchestrator import SongIndexer

    indexer = SongIndexer('songindex-config.yaml')
    indexer.run(['/karaoke/library', '/karaoke/extra'], 'songs.json',
                cover_dir='covers')
"""

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from .config import ConfigManager
from .aggregator import SongIndex

from agents import ScannerAgent
from parsers import Song
from utilities.cover_export import CoverExporter


class SongIndexer:
    """
    Central orchestrator for song library indexing.

    Every run gets a fresh scanner and cover exporter, so cover names
    restart at cover-0 for each run.
    """

    def __init__(self, config_path: Optional[str] = None, config: Optional[ConfigManager] = None):
        """
        Initialize indexer.

        Args:
            config_path: Path to configuration file (built-in defaults if None)
            config: Ready ConfigManager, takes precedence over config_path
        """
        self.config = config or ConfigManager(config_path)
        self._progress_callback: Optional[Callable] = None

    def set_progress_callback(self, callback: Callable[[str, int, int], None]) -> None:
        """
        Set progress callback for UI updates.

        Args:
            callback: Function(message, current, total)
        """
        self._progress_callback = callback

    def _progress(self, message: str, current: int = 0, total: int = 0) -> None:
        """Report progress"""
        if self._progress_callback:
            self._progress_callback(message, current, total)
        else:
            print(f"[Progress] {message} ({current}/{total})" if total else f"[Progress] {message}")

    def run(self, library_roots: Optional[List[str]] = None, out_file: Optional[str] = None,
            cover_dir: Optional[str] = None) -> Dict[str, Any]:
        """
        Index the libraries and write the JSON index.

        Arguments left as None fall back to the configuration.

        Args:
            library_roots: Library root folders, scanned in order
            out_file: Destination of the JSON index
            cover_dir: Folder for exported covers; no export if unset

        Returns:
            Run summary with counts and output locations

        Raises:
            ValueError: If no library root or output file is configured
            NotADirectoryError: If a library root is not a directory
            OSError: If a library can't be listed or the index can't be written
        """
        library_roots = library_roots or self.config.library_roots
        out_file = out_file or self.config.out_file
        cover_dir = cover_dir or self.config.cover_dir

        if not library_roots:
            raise ValueError("No song library given")
        if not out_file:
            raise ValueError("No output file given")

        exporter = None
        if cover_dir:
            Path(cover_dir).mkdir(parents=True, exist_ok=True)
            exporter = CoverExporter(cover_dir)

        scanner = ScannerAgent(self.config, cover_exporter=exporter)
        index = SongIndex()

        for i, library_root in enumerate(library_roots, 1):
            self._progress(f"Library: {library_root}", i, len(library_roots))
            summary = scanner.scan_library(library_root)
            index.extend(summary["songs"])
            self._progress(
                f"{summary['success']} indexed, {summary['skipped']} skipped, "
                f"{summary['failed']} failed"
            )

        path = index.write(out_file, indent=self.config.indent)
        self._progress(f"Wrote {len(index)} songs to {path}")

        return {
            "libraries": list(library_roots),
            "songs": len(index),
            "covers": exporter.exported_count if exporter else 0,
            "out_file": str(path),
            "cover_dir": str(cover_dir) if cover_dir else None,
            "index": index
        }

    def parse_folder(self, folder_path: str) -> Song:
        """
        Parse a single song folder without exporting its cover.

        Raises:
            FileNotFoundError: If the folder holds no description file
            OSError: If the description can't be read
        """
        scanner = ScannerAgent(self.config)
        return scanner.scan_song(folder_path)
