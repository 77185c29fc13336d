#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration management for song library indexing.
Loads YAML config with environment variable support.
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional


DEFAULT_CONFIG_PATH = "songindex-config.yaml"


class ConfigManager:
    """
    Configuration manager that loads settings from a YAML file.
    Supports environment variable expansion for path values.
    """

    def __init__(self, config_path: Optional[str] = DEFAULT_CONFIG_PATH):
        """
        Args:
            config_path: YAML file to load; None uses the built-in defaults
        """
        self.config_path = Path(config_path) if config_path else None
        self._config: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        """Load configuration file"""
        if self.config_path is None:
            self._config = self._default_config()
        elif self.config_path.exists():
            with open(self.config_path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}
        else:
            print(f"[Config] Warning: Config file not found: {self.config_path}")
            self._config = self._default_config()

    def _default_config(self) -> Dict[str, Any]:
        """Return default configuration"""
        return {
            'library': {
                'roots': [],
                'description_suffix': '.txt',
                'encoding': 'utf-8-sig'
            },
            'output': {
                'out_file': 'songs.json',
                'cover_dir': '',
                'indent': None
            }
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get config value with dot notation.

        Examples:
            config.get('library.roots')
            config.get('output.cover_dir')

        Environment variables are expanded if value is like ${VAR_NAME}
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
            if value is None:
                return default

        return self._expand(value, default)

    def _expand(self, value: Any, default: Any = None) -> Any:
        if isinstance(value, str) and value.startswith('${') and value.endswith('}'):
            env_var = value[2:-1]
            return os.environ.get(env_var, default)
        if isinstance(value, list):
            return [self._expand(v) for v in value]
        return value

    @property
    def library_roots(self) -> List[str]:
        roots = self.get('library.roots', [])
        if isinstance(roots, str):
            return [roots]
        return [r for r in roots if r]

    @property
    def description_suffix(self) -> str:
        return self.get('library.description_suffix', '.txt')

    @property
    def encoding(self) -> str:
        return self.get('library.encoding', 'utf-8-sig')

    @property
    def out_file(self) -> Optional[str]:
        return self.get('output.out_file')

    @property
    def cover_dir(self) -> Optional[str]:
        return self.get('output.cover_dir') or None

    @property
    def indent(self) -> Optional[int]:
        return self.get('output.indent')

    def __repr__(self) -> str:
        return f"ConfigManager(config={self.config_path})"
