# Utilities
# Standalone helpers used by the indexing pipeline

from .cover_export import CoverExporter, cover_extension

__all__ = [
    'CoverExporter',
    'cover_extension'
]
