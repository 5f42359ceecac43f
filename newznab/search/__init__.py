"""Search package for Newznab queries and results.

This package provides the query classes that encode search options into
request parameters, and the result classes that wrap the responses.
"""

from newznab.search.query import (
    QUERY_TYPES,
    BookSearchQuery,
    MovieSearchQuery,
    MusicSearchQuery,
    SearchQuery,
    TvSearchQuery,
)
from newznab.search.results import DEFAULT_LIMIT, Item, ResultList, SearchResults

__all__ = [
    # Query classes
    "SearchQuery",
    "TvSearchQuery",
    "MovieSearchQuery",
    "MusicSearchQuery",
    "BookSearchQuery",
    "QUERY_TYPES",
    # Result classes
    "Item",
    "ResultList",
    "SearchResults",
    "DEFAULT_LIMIT",
]
