"""newznab: A Python client for the Newznab indexer API.

Quick Start:
    ```python
    from newznab import NewznabClient

    # Endpoint and key default to NEWZNAB_URI / NEWZNAB_API_KEY
    client = NewznabClient(uri="https://indexer.example", key="secret")

    # What does the server support?
    caps = client.caps()

    # Search, then walk through the pages
    results = client.tv_search(query="This Old House", limit=10)
    for item in results:
        print(item.title, item.size)
    results.next_page()
    ```

Main Classes:
    - `NewznabClient`: configuration and the API functions
    - `SearchResults`: a page of `Item` objects with page navigation
    - `SearchQuery` and its subclasses: search options and their encoding
"""

import logging
from importlib.metadata import version

from .client import NewznabClient
from .config import ClientSettings
from .exceptions import (
    FunctionDisabled,
    FunctionNotSupported,
    NewznabError,
    ProtocolError,
    ServerError,
    TransportError,
    UsageError,
)
from .functions import FunctionName, FunctionRegistry
from .search import (
    BookSearchQuery,
    Item,
    MovieSearchQuery,
    MusicSearchQuery,
    ResultList,
    SearchQuery,
    SearchResults,
    TvSearchQuery,
)

logger = logging.getLogger(__name__)

__all__ = [
    # client.py
    "NewznabClient",
    "ClientSettings",
    # functions.py
    "FunctionName",
    "FunctionRegistry",
    # search
    "SearchQuery",
    "TvSearchQuery",
    "MovieSearchQuery",
    "MusicSearchQuery",
    "BookSearchQuery",
    "Item",
    "ResultList",
    "SearchResults",
    # exceptions.py
    "NewznabError",
    "UsageError",
    "FunctionNotSupported",
    "ProtocolError",
    "TransportError",
    "ServerError",
    "FunctionDisabled",
]

__version__ = version("newznab")
