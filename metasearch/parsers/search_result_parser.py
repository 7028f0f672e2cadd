"""Selector-driven extraction of search results from upstream HTML.

One :class:`SearchResultParser` serves every engine: the engine supplies
five CSS selectors and a builder callback, and the parser does the rest.
Selectors are compiled once with soupsieve (the CSS engine behind
BeautifulSoup's ``select``) so a typo in a selector fails when the engine
is constructed, not on the first query.

Compiled selectors are immutable, so one parser can be shared by any
number of concurrent queries.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

import soupsieve as sv
from bs4 import BeautifulSoup, Tag

from metasearch.models.search_result import SearchResult
from metasearch.utils.errors import EngineError, UnexpectedError
from metasearch.utils.logging import get_logger

logger = get_logger(__name__)

# builder(title_element, url_element, description_element) -> record or None
ResultBuilder = Callable[[Tag, Tag, Tag], SearchResult | None]


def _compile(selector: str, role: str) -> sv.SoupSieve:
    try:
        return sv.compile(selector)
    except (sv.SelectorSyntaxError, TypeError) as exc:
        raise UnexpectedError(
            message=f"Invalid {role} selector {selector!r}",
            context=[f"compiling {role} selector"],
        ) from exc


class SearchResultParser:
    """Generic extractor configured by five CSS selectors.

    Parameters
    ----------
    no_result_selector:
        Matches the element an engine renders when it found nothing.
    results_selector:
        Matches one container (the anchor) per search result.
    result_title_selector, result_url_selector, result_desc_selector:
        Matched *inside* each anchor to locate the title, link and
        description elements of that result.

    Raises
    ------
    UnexpectedError
        If any selector is not valid CSS.
    """

    def __init__(
        self,
        no_result_selector: str,
        results_selector: str,
        result_title_selector: str,
        result_url_selector: str,
        result_desc_selector: str,
    ) -> None:
        self._no_result = _compile(no_result_selector, "no-result")
        self._results = _compile(results_selector, "results")
        self._result_title = _compile(result_title_selector, "title")
        self._result_url = _compile(result_url_selector, "url")
        self._result_desc = _compile(result_desc_selector, "description")

    def parse_for_no_results(self, document: BeautifulSoup) -> Iterator[Tag]:
        """Lazily yield elements matching the no-result selector.

        Any yielded element means the engine explicitly reported zero
        results; check this before :meth:`parse_for_results`.
        """
        return self._no_result.iselect(document)

    def parse_for_results(
        self,
        document: BeautifulSoup,
        builder: ResultBuilder,
    ) -> dict[str, SearchResult]:
        """Extract results from *document* in document order.

        Anchors missing a title, url or description element are skipped,
        as are anchors for which *builder* returns ``None``.  Results are
        keyed by url; a later duplicate replaces the earlier record.

        Raises
        ------
        UnexpectedError
            If applying the selectors or building a record fails.
        """
        results: dict[str, SearchResult] = {}
        skipped = 0
        try:
            for anchor in self._results.iselect(document):
                title = self._result_title.select_one(anchor)
                url = self._result_url.select_one(anchor)
                desc = self._result_desc.select_one(anchor)
                if title is None or url is None or desc is None:
                    skipped += 1
                    continue

                result = builder(title, url, desc)
                if result is None:
                    skipped += 1
                    continue
                results[result.url] = result
        except EngineError as exc:
            raise exc.attach("extracting search results")
        except Exception as exc:  # noqa: BLE001
            raise UnexpectedError(context=["extracting search results"]) from exc

        logger.debug("search_results_extracted", result_count=len(results), skipped=skipped)
        return results


def element_text(element: Tag) -> str:
    """Return the text content of *element* with surrounding whitespace trimmed."""
    return element.get_text().strip()


def element_href(element: Tag) -> str:
    """Return the trimmed ``href`` of *element*, or its text when it has none."""
    href = element.get("href")
    if isinstance(href, str) and href.strip():
        return href.strip()
    return element_text(element)
