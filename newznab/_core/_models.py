"""Simple data models shared across the package."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping


def _as_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def normalize_records(records: Any) -> List[Mapping[str, Any]]:
    """Return *records* as a list; a lone record is wrapped, None is empty."""
    if records is None:
        return []
    if isinstance(records, Mapping):
        return [records]
    return list(records)


@dataclass(frozen=True)
class PageWindow:
    """One page of a Newznab multi-item response."""

    total_count: int = 0
    offset: int = 0
    records: List[Mapping[str, Any]] = field(default_factory=list)
    attributes: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> PageWindow:
        channel = payload.get("channel") or {}
        response = (channel.get("response") or {}).get("@attributes", {})
        records = normalize_records(channel.get("item"))
        return cls(
            total_count=_as_int(response.get("total"), len(records)),
            offset=_as_int(response.get("offset")),
            records=records,
            attributes=dict(payload.get("@attributes") or {}),
        )
