"""Configuration module — exports Settings and the cached accessor."""

from metasearch.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
