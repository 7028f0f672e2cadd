"""Utility modules for metasearch.

- **errors** -- Exception hierarchy rooted at MetasearchError, including the
  closed engine failure taxonomy (EmptyResultSet, RequestError,
  UnexpectedError) with attached context chains.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
"""

from metasearch.utils.errors import (
    ConfigurationError,
    EmptyResultSet,
    EngineError,
    EngineErrorKind,
    MetasearchError,
    RequestError,
    UnexpectedError,
)
from metasearch.utils.logging import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "EmptyResultSet",
    "EngineError",
    "EngineErrorKind",
    "MetasearchError",
    "RequestError",
    "UnexpectedError",
    "configure_logging",
    "get_logger",
]
