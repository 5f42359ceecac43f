"""Validation helpers used by the client before any request is sent."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from newznab.exceptions import UsageError


def require_non_empty(mapping: Mapping[str, Any], keys: Sequence[str]) -> None:
    """Raise ``UsageError`` if any of *keys* are missing or empty in *mapping*."""
    missing = [k for k in keys if not mapping.get(k)]
    if missing:
        raise UsageError(f"Missing required settings: {', '.join(missing)}")
