"""Composition root: builds engines and the shared HTTP client from Settings.

Also provides :func:`run_engines`, which fans one query out to several
engines concurrently and reports each engine's outcome separately.  It does
not merge, deduplicate or rank across engines; that is the aggregator's job.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

import httpx
import structlog

from metasearch.config.settings import Settings
from metasearch.engines import get_engine
from metasearch.interfaces.search_engine import SearchEngine
from metasearch.models.search_result import SearchResult
from metasearch.utils.errors import EmptyResultSet, EngineError

logger = structlog.get_logger(logger_name=__name__)


@dataclass(frozen=True)
class EngineOutcome:
    """Result of querying one engine: either results or the engine error."""

    engine: str
    results: dict[str, SearchResult] = field(default_factory=dict)
    error: EngineError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failed(self) -> bool:
        """True for real failures; an empty result set is not a failure."""
        return self.error is not None and not isinstance(self.error, EmptyResultSet)


def build_engines(app_settings: Settings) -> list[SearchEngine]:
    """Construct every engine enabled in *app_settings*.

    Selector compilation happens here, so a broken engine configuration
    fails at startup rather than on the first query.
    """
    engines = [
        get_engine(name, timeout=app_settings.request_timeout) for name in app_settings.engines
    ]
    logger.info("engines_initialized", engines=[engine.name for engine in engines])
    return engines


def build_http_client(app_settings: Settings) -> httpx.AsyncClient:
    """Create the shared HTTP client used by all engines."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(app_settings.request_timeout),
        follow_redirects=True,
    )


async def _run_engine(
    engine: SearchEngine,
    query: str,
    page: int,
    user_agent: str,
    client: httpx.AsyncClient,
    safe_search: int,
) -> EngineOutcome:
    try:
        results = await engine.results(query, page, user_agent, client, safe_search)
    except EngineError as exc:
        log = logger.info if isinstance(exc, EmptyResultSet) else logger.warning
        log(
            "engine_query_failed",
            engine=engine.name,
            kind=exc.kind.value,
            error=str(exc),
        )
        return EngineOutcome(engine=engine.name, error=exc)
    return EngineOutcome(engine=engine.name, results=results)


async def run_engines(
    engines: list[SearchEngine],
    query: str,
    page: int,
    user_agent: str,
    client: httpx.AsyncClient,
    safe_search: int = 0,
) -> list[EngineOutcome]:
    """Query all *engines* concurrently; outcomes follow the order of *engines*."""
    return list(
        await asyncio.gather(
            *(
                _run_engine(engine, query, page, user_agent, client, safe_search)
                for engine in engines
            )
        )
    )
