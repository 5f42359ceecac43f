"""Result classes for Newznab search responses.

This module provides the Item, ResultList and SearchResults classes for
representing and navigating the items returned by the search functions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    Union,
)

from newznab._core._models import PageWindow, normalize_records
from newznab.functions import FunctionName

if TYPE_CHECKING:
    from newznab.client import NewznabClient

logger = logging.getLogger(__name__)

# Page size the protocol uses when a request sends no limit.
DEFAULT_LIMIT = 100


def _text(value: Any) -> Optional[str]:
    # XML-derived values may arrive as {"#text": ..., "@attributes": ...}
    if isinstance(value, Mapping):
        value = value.get("#text")
    return None if value is None else str(value)


def _parse_pub_date(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    # RFC 822 per the feed format; some indexers send ISO 8601 instead.
    for parse in (parsedate_to_datetime, datetime.fromisoformat):
        try:
            return parse(value)
        except (TypeError, ValueError):
            continue
    logger.debug("Unparseable pubDate %r", value)
    return None


def _parse_attrs(attrs: Any) -> Dict[str, List[str]]:
    """Group the repeated ``attr`` name/value pairs of an item by name."""
    metadata: Dict[str, List[str]] = {}
    for attr in normalize_records(attrs):
        attributes = attr.get("@attributes", attr)
        name = attributes.get("name")
        value = attributes.get("value")
        if name is None or value is None:
            continue
        metadata.setdefault(name, []).append(value)
    return metadata


@dataclass(frozen=True)
class Item:
    """A single search result.

    Attributes:
        title: Release title.
        guid: Globally unique identifier of the item on the indexer.
        link: Download link of the NZB.
        pub_date: Publication time, parsed from the RFC 822 ``pubDate``.
        description: Free form description.
        enclosure: The enclosure attributes (``url``, ``length``, ``type``).
        metadata: Extended attributes, each name mapped to all its values.
        raw: The record as decoded from the response.
    """

    title: Optional[str] = None
    guid: Optional[str] = None
    link: Optional[str] = None
    pub_date: Optional[datetime] = None
    description: Optional[str] = None
    enclosure: Dict[str, str] = field(default_factory=dict)
    metadata: Dict[str, List[str]] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Item:
        """Flatten a decoded ``item`` record."""
        enclosure = record.get("enclosure") or {}
        return cls(
            title=_text(record.get("title")),
            guid=_text(record.get("guid")),
            link=_text(record.get("link")),
            pub_date=_parse_pub_date(_text(record.get("pubDate"))),
            description=_text(record.get("description")),
            enclosure=dict(enclosure.get("@attributes", enclosure)),
            metadata=_parse_attrs(record.get("attr")),
            raw=dict(record),
        )

    def __hash__(self) -> int:
        return hash((self.guid, self.link))

    def get_attribute(self, name: str) -> Optional[Union[str, List[str]]]:
        """Look *name* up in the enclosure, then in the extended attributes.

        Returns:
            The enclosure value, the list of attribute values, or `None`.
        """
        if name in self.enclosure:
            return self.enclosure[name]
        return self.metadata.get(name)

    @property
    def url(self) -> Optional[str]:
        return self.enclosure.get("url")

    @property
    def length(self) -> Optional[int]:
        length = self.enclosure.get("length")
        return int(length) if length is not None else None

    @property
    def type(self) -> Optional[str]:
        return self.enclosure.get("type")

    @property
    def category(self) -> List[str]:
        return self.metadata.get("category", [])

    @property
    def size(self) -> Optional[int]:
        """Size in bytes from the ``size`` attribute or the enclosure length."""
        sizes = self.metadata.get("size")
        if sizes:
            return int(sizes[0])
        return self.length


class ResultList:
    """A page of results with its window metadata.

    Behaves as a read-only sequence of the page's items. Response level
    attributes (such as the feed ``version``) are available through
    `get_attribute`.

    Attributes:
        total_count: Number of items matching the query on the server.
        offset: Zero based index of the first item of this page.
        limit: Page size.
        raw_response: The decoded response this page was built from.
    """

    def __init__(self, payload: Mapping[str, Any], limit: Optional[int] = None):
        self.limit = limit if limit and limit > 0 else DEFAULT_LIMIT
        self._update_window(payload)

    def _update_window(self, payload: Mapping[str, Any]) -> None:
        window = PageWindow.from_json(payload)
        self.raw_response = payload
        self.total_count = window.total_count
        self.offset = window.offset
        self._attributes = window.attributes
        self._items = self._convert_results(window.records)

    def _convert_results(self, records: List[Mapping[str, Any]]) -> List[Any]:
        """Convert raw records to result objects. Override in subclasses."""
        return list(records)

    @property
    def page(self) -> int:
        """The one based number of the current page."""
        return self.offset // self.limit + 1

    @property
    def total_pages(self) -> int:
        """Number of pages needed to hold ``total_count`` items."""
        return max(1, -(-self.total_count // self.limit))

    @property
    def has_more(self) -> bool:
        """True if pages exist after the current one."""
        return self.total_pages > self.page

    def get_attribute(self, name: str) -> Optional[str]:
        """Return a response level attribute, or `None` if absent."""
        value = self._attributes.get(name)
        return None if value is None else str(value)

    def count(self) -> int:
        return len(self._items)

    def first(self) -> Optional[Any]:
        return self._items[0] if self._items else None

    def last(self) -> Optional[Any]:
        return self._items[-1] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(total={self.total_count}, "
            f"offset={self.offset}, limit={self.limit}, loaded={len(self._items)})"
        )


class SearchResults(ResultList):
    """Items from a search function, with navigation between pages.

    Navigating re-sends the original query with an adjusted ``offset`` and
    replaces this object's items and window in place. Instances are
    therefore not safe to share between threads.

    Examples:
        >>> results = client.tv_search(query="This Old House", limit=10)  # doctest: +SKIP
        >>> results.page, results.total_pages  # doctest: +SKIP
        (1, 85)
        >>> results.next_page()  # doctest: +SKIP
        True
        >>> results.offset  # doctest: +SKIP
        10
    """

    def __init__(
        self,
        payload: Mapping[str, Any],
        function: Union[FunctionName, str],
        query: Mapping[str, str],
        client: NewznabClient,
    ) -> None:
        """Initialize SearchResults.

        Parameters:
            payload: Decoded response of the first request.
            function: The function that produced *payload*.
            query: The parameters sent with that request.
            client: Client used to fetch further pages.
        """
        self.function = FunctionName(function)
        self.query: Dict[str, str] = dict(query)
        self._client = client

        limit = self.query.get("limit")
        super().__init__(payload, limit=int(limit) if limit is not None else None)

    def _convert_results(self, records: List[Mapping[str, Any]]) -> List[Item]:
        return [Item.from_record(record) for record in records]

    def next_page(self) -> bool:
        """Move to the next page.

        Returns:
            True if a new page was loaded, False if already on the last one.
        """
        if self.offset + self.limit >= self.total_count:
            return False
        return self._fetch_page(self.offset + self.limit)

    def prev_page(self) -> bool:
        """Move to the previous page.

        Returns:
            True if a new page was loaded, False if already on the first one.
        """
        if self.offset == 0:
            return False
        return self._fetch_page(max(self.offset - self.limit, 0))

    def pages(self) -> Iterator[List[Item]]:
        """Yield the current page, then every following page in turn.

        Each step advances this object with `next_page`.
        """
        yield list(self._items)
        while self.next_page():
            yield list(self._items)

    def _fetch_page(self, offset: int) -> bool:
        query = dict(self.query, offset=str(offset))
        logger.debug(
            "Fetching %s page at offset %d (limit %d)", self.function, offset, self.limit
        )
        payload = self._client.get(self.function, **query)
        self.query = query
        self._update_window(payload)
        return True
