"""Concrete search engine adapters and the name → adapter registry.

To add an engine, implement :class:`~metasearch.interfaces.SearchEngine`
in a new module here and register the class in ``ENGINES`` under its
``name``.
"""

from __future__ import annotations

from typing import Any

from metasearch.engines.duckduckgo import DuckDuckGo
from metasearch.engines.qwant import Qwant
from metasearch.interfaces.search_engine import SearchEngine
from metasearch.utils.errors import ConfigurationError

ENGINES: dict[str, type[SearchEngine]] = {
    Qwant.name: Qwant,
    DuckDuckGo.name: DuckDuckGo,
}


def available_engines() -> list[str]:
    """Return the registered engine names in sorted order."""
    return sorted(ENGINES)


def get_engine(name: str, **kwargs: Any) -> SearchEngine:
    """Construct the engine registered under *name* (case-insensitive).

    Keyword arguments are forwarded to the engine constructor.

    Raises
    ------
    ConfigurationError
        If no engine is registered under *name*.
    UnexpectedError
        If the engine's selectors fail to compile.
    """
    engine_cls = ENGINES.get(name.strip().lower())
    if engine_cls is None:
        raise ConfigurationError(
            message=f"No such engine: {name!r} (available: {', '.join(available_engines())})",
            engine_name=name,
        )
    return engine_cls(**kwargs)


__all__ = ["ENGINES", "DuckDuckGo", "Qwant", "available_engines", "get_engine"]
