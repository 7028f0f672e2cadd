"""Normalized result record produced by every engine adapter.

A SearchResult is built once per scraped item and never mutated.  The
``engines`` set records which adapters returned the url; the aggregator
merges records for the same url by unioning that set, so the model only
provides copy-on-merge helpers and never merges anything itself.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SearchResult(BaseModel):
    """A single search result scraped from an upstream engine.

    Attributes
    ----------
    title:
        Title text shown by the upstream engine.
    url:
        Target url of the result.  Never empty; callers use it as the
        natural deduplication key.
    description:
        Snippet text shown under the title.
    engines:
        Names of the engines that returned this url.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    url: str = Field(min_length=1)
    description: str = ""
    engines: frozenset[str] = Field(default_factory=frozenset)

    def with_engines(self, *engine_names: str) -> SearchResult:
        """Return a copy whose ``engines`` also contains *engine_names*."""
        return self.model_copy(update={"engines": self.engines | frozenset(engine_names)})

    def merged_with(self, other: SearchResult) -> SearchResult:
        """Return a copy of this record carrying the engines of both records.

        Raises ``ValueError`` when the two records describe different urls.
        """
        if other.url != self.url:
            raise ValueError(f"Cannot merge results for different urls: {self.url!r} != {other.url!r}")
        return self.with_engines(*other.engines)
