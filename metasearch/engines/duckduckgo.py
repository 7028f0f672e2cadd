"""DuckDuckGo (HTML endpoint) search engine adapter.

Uses the JavaScript-free ``html.duckduckgo.com`` page.  Result links on
that page point at a DuckDuckGo redirect, so the displayed ``.result__url``
text is used as the target url instead.
"""

from __future__ import annotations

from urllib.parse import urlencode

import httpx
from bs4 import Tag

from metasearch.interfaces.search_engine import SearchEngine, validate_page
from metasearch.models.search_result import SearchResult
from metasearch.parsers.search_result_parser import element_text

_BASE_URL = "https://html.duckduckgo.com/html/"
_RESULTS_PER_PAGE = 30

NO_RESULT_SELECTOR = ".no-results"
RESULTS_SELECTOR = ".results>.result"
RESULT_TITLE_SELECTOR = ".result__title>.result__a"
RESULT_URL_SELECTOR = ".result__url"
RESULT_DESC_SELECTOR = ".result__snippet"


def _safe_search_param(level: int) -> str:
    if level <= 0:
        return "-2"
    if level == 1:
        return "-1"
    return "1"


class DuckDuckGo(SearchEngine):
    """Adapter for the DuckDuckGo HTML results page."""

    name = "duckduckgo"
    default_selectors = {
        "no_result_selector": NO_RESULT_SELECTOR,
        "results_selector": RESULTS_SELECTOR,
        "result_title_selector": RESULT_TITLE_SELECTOR,
        "result_url_selector": RESULT_URL_SELECTOR,
        "result_desc_selector": RESULT_DESC_SELECTOR,
    }
    cookie = "kl=wt-wt"

    def build_url(self, query: str, page: int, safe_search: int = 0) -> str:
        params: dict[str, str | int] = {"q": query, "kp": _safe_search_param(safe_search)}
        if validate_page(page) > 1:
            offset = (page - 1) * _RESULTS_PER_PAGE
            params.update({"s": offset, "dc": offset + 1})
        return f"{_BASE_URL}?{urlencode(params)}"

    def _build_result(self, title: Tag, url: Tag, desc: Tag) -> SearchResult | None:
        target = element_text(url)
        if not target:
            return None
        if "://" not in target:
            target = f"https://{target}"
        return SearchResult(
            title=element_text(title),
            url=target,
            description=element_text(desc),
            engines=frozenset({self.name}),
        )

    async def results(
        self,
        query: str,
        page: int,
        user_agent: str,
        client: httpx.AsyncClient,
        safe_search: int = 0,
    ) -> dict[str, SearchResult]:
        """Fetch and scrape one page of DuckDuckGo results."""
        url = self.build_url(query, page, safe_search)
        headers = self.request_headers(user_agent)
        return await self.scrape(url, headers, client, self._build_result)
