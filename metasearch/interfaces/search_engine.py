"""Abstract base class for upstream search engine adapters.

Every provider (Qwant, DuckDuckGo, ...) is wrapped in one adapter that
implements :meth:`SearchEngine.results`.  The aggregator only ever holds
``SearchEngine`` instances, so adding a provider never touches the call
site.  The shared plumbing every scraping adapter needs (header building,
fetching and HTML parsing) lives here so concrete adapters only describe
their URL scheme, headers and selectors.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import ClassVar

import httpx
from bs4 import BeautifulSoup

from metasearch.models.search_result import SearchResult
from metasearch.parsers.search_result_parser import ResultBuilder, SearchResultParser
from metasearch.utils.errors import EmptyResultSet, EngineError, RequestError, UnexpectedError
from metasearch.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_REQUEST_TIMEOUT = 30.0
_FORBIDDEN_HEADER_CHARS = ("\r", "\n", "\x00")
_SELECTOR_ROLES = (
    "no_result_selector",
    "results_selector",
    "result_title_selector",
    "result_url_selector",
    "result_desc_selector",
)


def validate_page(page: int) -> int:
    """Reject page numbers below zero; ``0`` is kept as "first page"."""
    if page < 0:
        raise ValueError(f"page must be zero or positive, got {page}")
    return page


# Concrete implementations live in metasearch/engines/ and are registered
# by name in metasearch/engines/__init__.py.
class SearchEngine(ABC):
    """Contract for an upstream search engine adapter.

    An adapter is built once (compiling its selectors) and is immutable
    afterwards; any number of concurrent :meth:`results` calls may share
    one instance.

    Scraping adapters declare their markup as plain data in
    ``default_selectors`` and their cookie in ``cookie``; any selector can
    be overridden by keyword at construction.

    Parameters
    ----------
    parser:
        A ready-made extractor.  When omitted one is compiled from
        ``default_selectors`` merged with ``selector_overrides``.
    timeout:
        Per-request timeout in seconds passed to the HTTP client.
    **selector_overrides:
        Any of ``no_result_selector``, ``results_selector``,
        ``result_title_selector``, ``result_url_selector`` and
        ``result_desc_selector``.

    Raises
    ------
    metasearch.utils.errors.UnexpectedError
        If a selector does not compile.
    """

    name: ClassVar[str]
    default_selectors: ClassVar[Mapping[str, str]] = {}
    referer: ClassVar[str] = "https://google.com/"
    content_type: ClassVar[str] = "application/x-www-form-urlencoded"
    cookie: ClassVar[str] = ""

    def __init__(
        self,
        parser: SearchResultParser | None = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        **selector_overrides: str,
    ) -> None:
        if parser is None:
            parser = self.build_parser(**selector_overrides)
        elif selector_overrides:
            raise TypeError("Pass either a parser or selector overrides, not both")
        self._parser = parser
        self._timeout = timeout

    @classmethod
    def build_parser(cls, **selector_overrides: str) -> SearchResultParser:
        """Compile this engine's selectors, applying any overrides."""
        unknown = sorted(set(selector_overrides) - set(_SELECTOR_ROLES))
        if unknown:
            raise TypeError(f"Unknown selector arguments: {', '.join(unknown)}")
        selectors = {**cls.default_selectors, **selector_overrides}
        missing = [role for role in _SELECTOR_ROLES if role not in selectors]
        if missing:
            raise TypeError(f"{cls.__name__} has no default for: {', '.join(missing)}")
        try:
            return SearchResultParser(**selectors)
        except EngineError as exc:
            raise exc.attach(f"constructing {cls.name} engine", engine_name=cls.name)

    @property
    def parser(self) -> SearchResultParser:
        return self._parser

    @abstractmethod
    async def results(
        self,
        query: str,
        page: int,
        user_agent: str,
        client: httpx.AsyncClient,
        safe_search: int = 0,
    ) -> dict[str, SearchResult]:
        """Query the upstream engine and return its results keyed by url.

        Parameters
        ----------
        query:
            The user's search query.
        page:
            Page number; ``0`` and ``1`` both mean the first page.
        user_agent:
            User-Agent header value sent upstream.
        client:
            Shared HTTP client used for the request.
        safe_search:
            Safe-search level.  Engines without such a filter ignore it.

        Returns
        -------
        dict[str, SearchResult]
            Results in document order, keyed by url.

        Raises
        ------
        metasearch.utils.errors.EmptyResultSet
            If the engine explicitly reported no results.
        metasearch.utils.errors.RequestError
            If the upstream request failed.
        metasearch.utils.errors.UnexpectedError
            If headers could not be built or the page could not be parsed.
        ValueError
            If *page* is negative.
        """

    def get_engine_name(self) -> str:
        """Return the engine identifier stamped on every result."""
        return self.name

    def build_headers(self, headers: Mapping[str, str]) -> httpx.Headers:
        """Build the wire header set, rejecting values that cannot be sent."""
        for key, value in headers.items():
            if any(char in value for char in _FORBIDDEN_HEADER_CHARS):
                raise UnexpectedError(
                    message=f"Invalid value for header {key!r}",
                    engine_name=self.name,
                    context=["building request headers"],
                )
        try:
            return httpx.Headers(dict(headers))
        except (UnicodeEncodeError, TypeError) as exc:
            raise UnexpectedError(
                message="Request headers could not be encoded",
                engine_name=self.name,
                context=["building request headers"],
            ) from exc

    def request_headers(self, user_agent: str) -> httpx.Headers:
        """The four headers every scraping request carries."""
        return self.build_headers(
            {
                "User-Agent": user_agent,
                "Referer": self.referer,
                "Content-Type": self.content_type,
                "Cookie": self.cookie,
            }
        )

    async def fetch_html_from_upstream(
        self,
        url: str,
        headers: httpx.Headers,
        client: httpx.AsyncClient,
    ) -> str:
        """GET *url* and return the response body as text.

        Transport failures and non-2xx responses are raised as
        :class:`RequestError` with the original exception as the cause.
        """
        try:
            response = await client.get(url, headers=headers, timeout=self._timeout)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning(
                "engine_upstream_request_failed",
                engine=self.name,
                url=url,
                error=str(exc),
            )
            raise RequestError(engine_name=self.name, context=[f"fetching {url}"]) from exc
        return response.text

    def parse_document(self, html: str) -> BeautifulSoup:
        """Parse *html* into a document tree."""
        try:
            return BeautifulSoup(html, "html.parser")
        except Exception as exc:  # noqa: BLE001
            raise UnexpectedError(
                engine_name=self.name,
                context=["parsing upstream html"],
            ) from exc

    async def scrape(
        self,
        url: str,
        headers: httpx.Headers,
        client: httpx.AsyncClient,
        builder: ResultBuilder,
    ) -> dict[str, SearchResult]:
        """Fetch *url*, honour the no-result marker, then extract results.

        Shared by every scraping adapter's :meth:`results`.
        """
        html = await self.fetch_html_from_upstream(url, headers, client)
        document = self.parse_document(html)

        if next(self._parser.parse_for_no_results(document), None) is not None:
            logger.info("engine_empty_result_set", engine=self.name, url=url)
            raise EmptyResultSet(engine_name=self.name, context=[f"scraping {url}"])

        try:
            results = self._parser.parse_for_results(document, builder)
        except EngineError as exc:
            raise exc.attach(f"scraping {url}", engine_name=self.name)

        logger.info("engine_results_parsed", engine=self.name, url=url, result_count=len(results))
        return results

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, timeout={self._timeout!r})"
