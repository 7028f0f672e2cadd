"""Public interface definitions for upstream search engines.

Concrete adapters in ``metasearch/engines/`` implement :class:`SearchEngine`
and are looked up by name through the engine registry, so the aggregator
never depends on a concrete provider class.

CONCRETE ENGINE MAP:
    Interface       →  Concrete implementations (in metasearch/engines/)
    ─────────────────────────────────────────────────────────────────
    SearchEngine    →  Qwant, DuckDuckGo
"""

from metasearch.interfaces.search_engine import DEFAULT_REQUEST_TIMEOUT, SearchEngine, validate_page

__all__ = ["DEFAULT_REQUEST_TIMEOUT", "SearchEngine", "validate_page"]
