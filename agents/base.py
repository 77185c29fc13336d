#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Base class for processing agents.
The library scanner inherits from this.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import time


class BaseAgent(ABC):
    """
    Abstract base class for processing agents.

    An agent processes one item (a song folder) at a time and reports the
    outcome as a result dictionary with a 'status' of 'success', 'skipped'
    or 'error'. Failures of a single item never stop a batch.
    """

    def __init__(self, config):
        """
        Initialize agent with configuration.

        Args:
            config: ConfigManager instance
        """
        self.config = config
        self._start_time: Optional[float] = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Agent name identifier"""
        pass

    @abstractmethod
    def process(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Process a single item (song folder).

        Args:
            item: Dictionary with folder info including 'path'

        Returns:
            Dictionary with processing results
        """
        pass

    def process_batch(self, items: list) -> Dict[str, Any]:
        """
        Process multiple items.

        Args:
            items: List of items to process

        Returns:
            Summary of batch processing
        """
        results = {
            "total": len(items),
            "success": 0,
            "failed": 0,
            "skipped": 0,
            "items": []
        }

        self._start_time = time.time()

        for item in items:
            try:
                result = self.process(item)
            except Exception as e:
                result = {
                    "path": item.get("path"),
                    "status": "error",
                    "error": str(e)
                }
                self.log_error(f"Error processing {item.get('path')}: {e}")

            if result.get("status") == "success":
                results["success"] += 1
            elif result.get("status") == "skipped":
                results["skipped"] += 1
            else:
                results["failed"] += 1

            results["items"].append(result)

        results["duration"] = time.time() - self._start_time
        return results

    def log(self, message: str) -> None:
        """Log a message with agent name prefix"""
        print(f"[{self.name}] {message}")

    def log_error(self, message: str) -> None:
        """Log an error message"""
        print(f"[{self.name}] ERROR: {message}")
