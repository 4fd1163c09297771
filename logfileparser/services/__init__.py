"""Services layer - log parsing and analysis."""
from .logparser import LogParser

__all__ = ["LogParser"]
