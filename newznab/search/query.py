"""Search queries and their encoding into Newznab request parameters.

Each query class mirrors one search function. Queries are built with named
parameters and converted to the flat parameter mapping sent on the wire with
`to_params`:

    query = TvSearchQuery(query="This Old House", season="S13", limit=10)
    query.to_params()
    # {'extended': '0', 'del': '0', 'q': 'This Old House', 'limit': '10',
    #  'season': 'S13'}

Values are not range-checked; the server decides what it accepts.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, Optional, Sequence, Tuple, Type

from newznab.functions import FunctionName


def _flag(value: bool) -> str:
    return "1" if value else "0"


def _join(values: Sequence[Any]) -> str:
    return ",".join(str(v) for v in values)


@dataclass
class SearchQuery:
    """Options shared by every search function.

    Attributes:
        query: Free text search input. Case insensitive.
        group: Usenet groups to search.
        limit: Upper limit for the number of items returned.
        cat: Category ids to search.
        attrs: Extended attributes to return with each item.
        extended: Return all extended attributes (``attrs`` is then ignored
            by the server).
        delete: Remove the item from the user's cart on download.
        maxage: Only return results posted in the last *maxage* days.
        offset: Zero based index of the first item to return.
    """

    function: ClassVar[FunctionName] = FunctionName.SEARCH
    # Call specific fields, sent as-is when set.
    extra_fields: ClassVar[Tuple[str, ...]] = ()

    query: Optional[str] = None
    group: Sequence[Any] = field(default_factory=list)
    limit: Optional[int] = None
    cat: Sequence[Any] = field(default_factory=list)
    attrs: Sequence[Any] = field(default_factory=list)
    extended: bool = False
    delete: bool = False
    maxage: Optional[int] = None
    offset: Optional[int] = None

    def to_params(self) -> Dict[str, str]:
        """Encode the query as Newznab request parameters."""
        params = {
            "extended": _flag(self.extended),
            "del": _flag(self.delete),
        }

        if self.query is not None:
            params["q"] = str(self.query)

        for key in ("maxage", "offset", "limit"):
            value = getattr(self, key)
            if value is not None:
                params[key] = str(int(value))

        if self.group:
            params["group"] = _join(self.group)
        if self.cat:
            params["cat"] = _join(self.cat)
        if self.attrs:
            params["attrs"] = _join(self.attrs)

        for key in self.extra_fields:
            value = getattr(self, key)
            if value is not None:
                params[key] = str(value)

        return params

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def __repr__(self) -> str:
        set_fields = ", ".join(
            f"{name}={getattr(self, name)!r}"
            for name in self.field_names()
            if getattr(self, name) not in (None, [], (), False)
        )
        return f"{self.__class__.__name__}({set_fields})"


@dataclass(repr=False)
class TvSearchQuery(SearchQuery):
    """TV search. ``season`` and ``ep`` accept ``"S13"``/``"E13"`` or ``13``."""

    function: ClassVar[FunctionName] = FunctionName.TV_SEARCH
    extra_fields: ClassVar[Tuple[str, ...]] = (
        "rid",
        "tvdbid",
        "imdbid",
        "season",
        "ep",
    )

    rid: Optional[Any] = None
    tvdbid: Optional[Any] = None
    imdbid: Optional[str] = None
    season: Optional[Any] = None
    ep: Optional[Any] = None


@dataclass(repr=False)
class MovieSearchQuery(SearchQuery):
    """Movie search by IMDB id (e.g. ``"0058935"``) and genre."""

    function: ClassVar[FunctionName] = FunctionName.MOVIE
    extra_fields: ClassVar[Tuple[str, ...]] = ("imdbid", "genre")

    imdbid: Optional[str] = None
    genre: Optional[str] = None


@dataclass(repr=False)
class MusicSearchQuery(SearchQuery):
    function: ClassVar[FunctionName] = FunctionName.MUSIC
    extra_fields: ClassVar[Tuple[str, ...]] = (
        "album",
        "artist",
        "label",
        "track",
        "year",
        "genre",
    )

    album: Optional[str] = None
    artist: Optional[str] = None
    label: Optional[str] = None
    track: Optional[str] = None
    year: Optional[Any] = None
    genre: Optional[str] = None


@dataclass(repr=False)
class BookSearchQuery(SearchQuery):
    function: ClassVar[FunctionName] = FunctionName.BOOK
    extra_fields: ClassVar[Tuple[str, ...]] = ("title", "author")

    title: Optional[str] = None
    author: Optional[str] = None


QUERY_TYPES: Dict[FunctionName, Type[SearchQuery]] = {
    cls.function: cls
    for cls in (
        SearchQuery,
        TvSearchQuery,
        MovieSearchQuery,
        MusicSearchQuery,
        BookSearchQuery,
    )
}
