"""HTML result extraction shared by all engine adapters."""

from metasearch.parsers.search_result_parser import (
    ResultBuilder,
    SearchResultParser,
    element_href,
    element_text,
)

__all__ = ["ResultBuilder", "SearchResultParser", "element_href", "element_text"]
