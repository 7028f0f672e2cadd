"""Engine adapter layer of a metasearch aggregator.

Each upstream provider is wrapped in a :class:`~metasearch.interfaces.SearchEngine`
that scrapes the provider's HTML with a shared, selector-configured
:class:`~metasearch.parsers.SearchResultParser` and returns
:class:`~metasearch.models.SearchResult` records keyed by url.
"""

__version__ = "0.1.0"
