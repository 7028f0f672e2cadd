"""Data models shared by all engine adapters."""

from metasearch.models.search_result import SearchResult

__all__ = ["SearchResult"]
