"""Newznab API functions and the allowlist the client dispatches against."""

import logging
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Union

logger = logging.getLogger(__name__)


class FunctionName(str, Enum):
    """Server-side operations the client knows how to call."""

    CAPS = "caps"
    SEARCH = "search"
    TV_SEARCH = "tvsearch"
    MOVIE = "movie"
    MUSIC = "music"
    BOOK = "book"
    DETAILS = "details"
    GETNFO = "getnfo"

    def __str__(self) -> str:
        return self.value


# Functions every Newznab server must expose; capabilities never narrow them.
CORE_FUNCTIONS = frozenset(
    {FunctionName.CAPS, FunctionName.DETAILS, FunctionName.GETNFO}
)

# Keys of the capabilities `searching` block, per function.
CAPS_SEARCH_KEYS: Dict[str, FunctionName] = {
    "search": FunctionName.SEARCH,
    "tv-search": FunctionName.TV_SEARCH,
    "movie-search": FunctionName.MOVIE,
    "audio-search": FunctionName.MUSIC,
    "music-search": FunctionName.MUSIC,
    "book-search": FunctionName.BOOK,
}


def function_value(function: Union[FunctionName, str]) -> str:
    """Return the wire name of *function*, as sent in the `t` parameter."""
    return function.value if isinstance(function, FunctionName) else str(function)


class FunctionRegistry:
    """The set of functions a client is allowed to invoke.

    Defaults to every `FunctionName`. Servers expose different capability
    profiles, so the allowlist can be narrowed explicitly or from a
    capabilities document with `from_caps`, or extended with functions of
    other profiles by passing their names.
    """

    def __init__(
        self, functions: Optional[Iterable[Union[FunctionName, str]]] = None
    ) -> None:
        if functions is None:
            functions = FunctionName
        self._functions: FrozenSet[str] = frozenset(
            function_value(f) for f in functions
        )
        if "" in self._functions:
            raise ValueError("Function names must not be empty")

    @classmethod
    def from_caps(cls, caps: Mapping[str, Any]) -> "FunctionRegistry":
        """Build a registry from a decoded `caps` response.

        Only search functions whose `searching` entry is marked
        `available="yes"` are kept, in addition to the core functions.

        Parameters:
            caps: Capabilities payload as returned by `NewznabClient.caps`.

        Returns:
            A registry restricted to what the server advertises.
        """
        functions = set(CORE_FUNCTIONS)
        searching = caps.get("searching") or {}
        for key, function in CAPS_SEARCH_KEYS.items():
            entry = searching.get(key)
            if not isinstance(entry, Mapping):
                continue
            attributes = entry.get("@attributes", entry)
            if str(attributes.get("available", "")).lower() == "yes":
                functions.add(function)
        logger.debug("Functions advertised by server: %s", sorted(functions))
        return cls(functions)

    def is_supported(self, function: Union[FunctionName, str]) -> bool:
        """Return True if *function* may be dispatched."""
        return function_value(function) in self._functions

    def __contains__(self, function: object) -> bool:
        if not isinstance(function, (FunctionName, str)):
            return False
        return self.is_supported(function)

    def __iter__(self):
        return iter(sorted(self._functions))

    def __len__(self) -> int:
        return len(self._functions)

    def __repr__(self) -> str:
        names = ", ".join(self)
        return f"{self.__class__.__name__}({names})"
