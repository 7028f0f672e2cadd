"""Qwant search engine adapter.

Scrapes the Qwant web results page.  Qwant ignores the safe-search level
for this page, so the parameter is accepted and dropped.
"""

from __future__ import annotations

from urllib.parse import urlencode

import httpx
from bs4 import Tag

from metasearch.interfaces.search_engine import SearchEngine, validate_page
from metasearch.models.search_result import SearchResult
from metasearch.parsers.search_result_parser import element_href, element_text

_BASE_URL = "https://www.qwant.com/"

NO_RESULT_SELECTOR = "[data-testid='noResults']"
RESULTS_SELECTOR = "._2NDle.nt3hI"
RESULT_TITLE_SELECTOR = "._35zId._3A7p7.RMB_d.eoseI>a"
RESULT_URL_SELECTOR = "._35zId._3A7p7.RMB_d.eoseI>a"
RESULT_DESC_SELECTOR = "._2-LMx.XqdKF._1UMq0._29nLp._3PXjk>span"


def page_param(page: int) -> int:
    """Map a caller page number onto Qwant's ``s`` parameter.

    Callers that leave the page unset send ``0``; Qwant rejects it, so both
    ``0`` and ``1`` mean the first page.  Negative pages raise ``ValueError``.
    """
    if validate_page(page) in (0, 1):
        return 1
    return page


class Qwant(SearchEngine):
    """Adapter for the Qwant web search results page.

    Selectors default to the markup Qwant currently serves and can be
    overridden when that markup changes.
    """

    name = "qwant"
    default_selectors = {
        "no_result_selector": NO_RESULT_SELECTOR,
        "results_selector": RESULTS_SELECTOR,
        "result_title_selector": RESULT_TITLE_SELECTOR,
        "result_url_selector": RESULT_URL_SELECTOR,
        "result_desc_selector": RESULT_DESC_SELECTOR,
    }
    # Pins the A/B test bucket and the "daily" home layout the selectors target.
    cookie = "ab_test_group=1; home=daily"

    def build_url(self, query: str, page: int) -> str:
        return f"{_BASE_URL}?{urlencode({'q': query, 's': page_param(page)})}"

    def _build_result(self, title: Tag, url: Tag, desc: Tag) -> SearchResult | None:
        href = element_href(url)
        if not href:
            return None
        return SearchResult(
            title=element_text(title),
            url=href,
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
        """Fetch and scrape one page of Qwant results."""
        url = self.build_url(query, page)
        headers = self.request_headers(user_agent)
        return await self.scrape(url, headers, client, self._build_result)
