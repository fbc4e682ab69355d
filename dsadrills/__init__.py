"""Merging, searching, sorting and binary-search-on-answer partition algorithms."""

__version__ = "0.1.0"
__all__ = ["merging", "partition", "searching", "sorting"]