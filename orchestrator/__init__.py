# Song Library Indexing
# Core orchestration engine

from .config import ConfigManager
from .aggregator import SongIndex, load_index
from .indexer import SongIndexer

__all__ = [
    'ConfigManager',
    'SongIndex',
    'load_index',
    'SongIndexer'
]
