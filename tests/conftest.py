"""Shared pytest fixtures for the metasearch test suite."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from metasearch.config.settings import Settings
from metasearch.interfaces.search_engine import SearchEngine
from metasearch.models.search_result import SearchResult


# ---------------------------------------------------------------------------
# HTML fixtures
# ---------------------------------------------------------------------------


def _qwant_item(title: str | None, url: str | None, desc: str | None) -> str:
    parts = ['<div class="_2NDle nt3hI">']
    if title is not None or url is not None:
        href = f' href="{url}"' if url is not None else ""
        parts.append(f'<div class="_35zId _3A7p7 RMB_d eoseI"><a{href}>{title or ""}</a></div>')
    if desc is not None:
        parts.append(f'<div class="_2-LMx XqdKF _1UMq0 _29nLp _3PXjk"><span>{desc}</span></div>')
    parts.append("</div>")
    return "".join(parts)


def _page(*items: str) -> str:
    return (
        "<!DOCTYPE html><html><head><title>Qwant</title></head><body>"
        '<header class="nav">Qwant</header><main>'
        + "".join(items)
        + "</main></body></html>"
    )


@pytest.fixture
def qwant_item() -> Callable[[str | None, str | None, str | None], str]:
    """Factory rendering one Qwant result container.

    Passing ``None`` for a field leaves its element out of the markup.
    """
    return _qwant_item


@pytest.fixture
def html_page() -> Callable[..., str]:
    """Factory wrapping result containers in a full HTML page."""
    return _page


@pytest.fixture
def qwant_results_html() -> str:
    """A Qwant results page with three well-formed results."""
    return _page(
        _qwant_item("  Rust Programming Language \n", " https://www.rust-lang.org/ ", "  A language empowering everyone.  "),
        _qwant_item("Tokio", "https://tokio.rs/", "An asynchronous runtime for Rust"),
        _qwant_item("async-std", "https://async.rs/", "Async version of the Rust standard library"),
    )


@pytest.fixture
def qwant_no_results_html() -> str:
    """A Qwant page reporting zero results, with broken leftover markup."""
    return (
        "<html><body><main>"
        '<div data-testid="noResults">No results found for this query</div>'
        '<div class="_35zId"><a>dangling'
        "</main></body></html>"
    )


@pytest.fixture
def duckduckgo_results_html() -> str:
    """A DuckDuckGo HTML-endpoint page with two results."""
    return (
        "<html><body><div class=\"results\">"
        '<div class="result results_links web-result">'
        '<h2 class="result__title"><a class="result__a" href="//duckduckgo.com/l/?uddg=x">Tokio</a></h2>'
        '<a class="result__url" href="//duckduckgo.com/l/?uddg=x"> tokio.rs </a>'
        '<a class="result__snippet">An asynchronous runtime</a>'
        "</div>"
        '<div class="result results_links web-result">'
        '<h2 class="result__title"><a class="result__a" href="//duckduckgo.com/l/?uddg=y">Rust</a></h2>'
        '<a class="result__url">https://www.rust-lang.org/</a>'
        '<a class="result__snippet">A language empowering everyone</a>'
        "</div>"
        "</div></body></html>"
    )


# ---------------------------------------------------------------------------
# Transport fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_client() -> Callable[[str], AsyncMock]:
    """Factory for a mocked ``httpx.AsyncClient`` whose GET returns *html*."""

    def _make(html: str) -> AsyncMock:
        response = MagicMock()
        response.text = html
        response.status_code = 200
        response.raise_for_status = MagicMock()

        client = AsyncMock(spec=httpx.AsyncClient)
        client.get = AsyncMock(return_value=response)
        return client

    return _make


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any local ``.env`` file."""
    return Settings(_env_file=None, engines=["qwant", "duckduckgo"], request_timeout=5.0)


# ---------------------------------------------------------------------------
# Fake engine
# ---------------------------------------------------------------------------


class FakeEngine(SearchEngine):
    """In-memory engine returning canned results or raising a canned error."""

    name = "fake"

    def __init__(
        self,
        name: str = "fake",
        results: dict[str, SearchResult] | None = None,
        error: Exception | None = None,
    ) -> None:
        super().__init__(parser=MagicMock())
        self.name = name
        self._results = results or {}
        self._error = error
        self.calls: list[tuple[str, int, str, int]] = []

    async def results(self, query, page, user_agent, client, safe_search=0):  # noqa: ANN001, ANN201
        self.calls.append((query, page, user_agent, safe_search))
        if self._error is not None:
            raise self._error
        return self._results


@pytest.fixture
def fake_engine_cls() -> type[FakeEngine]:
    return FakeEngine
