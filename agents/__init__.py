# Processing Agents
# Specialized agents for scanning song libraries

from .base import BaseAgent
from .scanner import ScannerAgent

__all__ = [
    'BaseAgent',
    'ScannerAgent'
]
