"""The Newznab API client."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Iterable, Optional, Union

import requests
from typing_extensions import Self

from newznab._core._models import PageWindow
from newznab._core._request import (
    API_FORMAT,
    RequestConfig,
    api_url,
    default_headers,
    request,
)
from newznab._core._validators import require_non_empty
from newznab.config import DEFAULT_RATE_LIMIT, DEFAULT_TIMEOUT, ClientSettings
from newznab.exceptions import FunctionNotSupported, ItemNotFound
from newznab.functions import FunctionName, FunctionRegistry, function_value
from newznab.search import (
    BookSearchQuery,
    Item,
    MovieSearchQuery,
    MusicSearchQuery,
    SearchQuery,
    SearchResults,
    TvSearchQuery,
)

logger = logging.getLogger(__name__)


class NewznabClient:
    """Client for one Newznab indexer.

    The endpoint and API key default to the ``NEWZNAB_URI`` and
    ``NEWZNAB_API_KEY`` environment variables, read once when the client is
    created; explicit arguments take precedence.

    A client is not safe for concurrent use. Requests are blocking and are
    never retried: each failure is raised to the caller as a
    `newznab.exceptions.NewznabError`.

    Examples:
        >>> client = NewznabClient(uri="https://indexer.example", key="secret")
        >>> results = client.tv_search(query="This Old House", limit=10)  # doctest: +SKIP
        >>> results.total_count  # doctest: +SKIP
        844
    """

    def __init__(
        self,
        uri: Optional[str] = None,
        key: Optional[str] = None,
        timeout: int = DEFAULT_TIMEOUT,
        rate_limit: float = DEFAULT_RATE_LIMIT,
        functions: Optional[
            Union[FunctionRegistry, Iterable[Union[FunctionName, str]]]
        ] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the client.

        Parameters:
            uri: Base URI of the indexer; ``/api`` is appended when missing.
            key: API key of the user.
            timeout: Request timeout in seconds.
            rate_limit: Seconds to wait before every request, 0 to disable.
            functions: Allowlist of functions, every known one by default.
            session: A `requests.Session` to send requests with. The client
                creates and owns one when omitted.
        """
        self.settings = ClientSettings.from_env(
            uri=uri, key=key, timeout=timeout, rate_limit=rate_limit
        )
        if isinstance(functions, FunctionRegistry):
            self.functions = functions
        else:
            self.functions = FunctionRegistry(functions)
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._caps: Optional[Dict[str, Any]] = None

    @property
    def api_uri(self) -> Optional[str]:
        return self.settings.api_uri

    @api_uri.setter
    def api_uri(self, uri: Optional[str]) -> None:
        self.settings.api_uri = uri

    @property
    def api_key(self) -> Optional[str]:
        return self.settings.api_key

    @api_key.setter
    def api_key(self, key: Optional[str]) -> None:
        self.settings.api_key = key

    @property
    def api_timeout(self) -> int:
        """Request timeout in seconds."""
        return self.settings.timeout

    @api_timeout.setter
    def api_timeout(self, seconds: Union[int, str]) -> None:
        self.settings.timeout = int(seconds)

    @property
    def rate_limit(self) -> float:
        """Seconds slept before each request."""
        return self.settings.rate_limit

    @rate_limit.setter
    def rate_limit(self, seconds: float) -> None:
        self.settings.rate_limit = float(seconds)

    @property
    def api_url(self) -> str:
        """The normalised API endpoint."""
        require_non_empty({"api_uri": self.api_uri}, ["api_uri"])
        return api_url(self.api_uri)  # type: ignore[arg-type]

    def get(self, function: Union[FunctionName, str], **params: Any) -> Any:
        """Call *function* with *params* and return the decoded response.

        Parameters:
            function: One of the functions in `functions`.
            **params: Request parameters. They are merged over the
                ``apikey``, ``o`` and ``t`` parameters the client adds.

        Returns:
            The decoded JSON payload.

        Raises:
            FunctionNotSupported: *function* is not allowed; nothing is sent.
            UsageError: No endpoint is configured, or no API key for a
                function other than `caps`.
            TransportError: Network failure, timeout or 404.
            ProtocolError: The response could not be decoded.
            ServerError: The server returned a Newznab error code.
        """
        if not self.functions.is_supported(function):
            raise FunctionNotSupported(str(function))
        name = function_value(function)
        url = self.api_url
        # caps is the only function servers answer without credentials
        if name != FunctionName.CAPS:
            require_non_empty({"api_key": self.api_key}, ["api_key"])

        if self.rate_limit > 0:
            time.sleep(self.rate_limit)

        query: Dict[str, Any] = {"o": API_FORMAT, "t": name}
        if self.api_key:
            query["apikey"] = self.api_key
        query.update(params)

        logger.debug("Calling %s with %s", name, sorted(params))
        config = RequestConfig(
            url=url,
            params=query,
            headers=default_headers(),
            timeout=self.api_timeout,
        )
        return request(config, self._session)

    def caps(self) -> Dict[str, Any]:
        """Return the server's capabilities.

        The first call queries the server; the result is kept for the life
        of the client and never refreshed.
        """
        if self._caps is None:
            self._caps = self.get(FunctionName.CAPS)
        else:
            logger.debug("Using cached capabilities")
        return self._caps

    def restrict_to_caps(self) -> FunctionRegistry:
        """Limit the allowlist to the functions the server advertises."""
        self.functions = FunctionRegistry.from_caps(self.caps())
        return self.functions

    def execute(self, query: SearchQuery) -> SearchResults:
        """Run a prepared search query."""
        params = query.to_params()
        payload = self.get(query.function, **params)
        return SearchResults(payload, query.function, params, self)

    def search(self, **params: Any) -> SearchResults:
        """Search all categories.

        Parameters:
            **params: Options of `newznab.search.SearchQuery`.
        """
        return self.execute(SearchQuery(**params))

    def tv_search(self, **params: Any) -> SearchResults:
        """Search TV releases.

        Parameters:
            **params: Options of `newznab.search.TvSearchQuery`, e.g.
                ``rid``, ``season`` and ``ep``.
        """
        return self.execute(TvSearchQuery(**params))

    def movie_search(self, **params: Any) -> SearchResults:
        """Search movie releases by ``imdbid``/``genre`` and the common options."""
        return self.execute(MovieSearchQuery(**params))

    def music_search(self, **params: Any) -> SearchResults:
        """Search music releases by album, artist, label, track, year or genre."""
        return self.execute(MusicSearchQuery(**params))

    def book_search(self, **params: Any) -> SearchResults:
        """Search book releases by ``title``/``author`` and the common options."""
        return self.execute(BookSearchQuery(**params))

    def details(self, guid: str) -> Item:
        """Return the item identified by *guid*.

        Raises:
            ItemNotFound: The server returned no item.
        """
        require_non_empty({"guid": guid}, ["guid"])
        window = PageWindow.from_json(self.get(FunctionName.DETAILS, id=guid))
        if not window.records:
            raise ItemNotFound(300, "No such item.")
        return Item.from_record(window.records[0])

    def get_nfo(self, guid: str) -> Optional[str]:
        """Return the NFO text of the item identified by *guid*, if any."""
        require_non_empty({"guid": guid}, ["guid"])
        window = PageWindow.from_json(self.get(FunctionName.GETNFO, id=guid))
        if not window.records:
            return None
        return Item.from_record(window.records[0]).description

    def close(self) -> None:
        """Close the HTTP session if the client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        key = "***" if self.api_key else None
        return f"{self.__class__.__name__}(uri={self.api_uri!r}, key={key!r})"
