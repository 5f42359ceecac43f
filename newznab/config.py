"""Client settings, seeded once from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

URI_ENV = "NEWZNAB_URI"
API_KEY_ENV = "NEWZNAB_API_KEY"

DEFAULT_TIMEOUT = 10
DEFAULT_RATE_LIMIT = 0.0


@dataclass
class ClientSettings:
    """Endpoint, credentials and request policy for one client.

    Attributes:
        api_uri: Base URI of the indexer, with or without the ``/api`` suffix.
        api_key: The user's API key.
        timeout: Per-request timeout in seconds.
        rate_limit: Seconds to sleep before every request; 0 disables it.
    """

    api_uri: Optional[str] = None
    api_key: Optional[str] = None
    timeout: int = DEFAULT_TIMEOUT
    rate_limit: float = DEFAULT_RATE_LIMIT

    @classmethod
    def from_env(
        cls,
        uri: Optional[str] = None,
        key: Optional[str] = None,
        timeout: int = DEFAULT_TIMEOUT,
        rate_limit: float = DEFAULT_RATE_LIMIT,
    ) -> ClientSettings:
        """Build settings, falling back to the environment for uri and key.

        Explicit arguments take precedence over ``NEWZNAB_URI`` and
        ``NEWZNAB_API_KEY``. The environment is read only here.
        """
        return cls(
            api_uri=uri if uri is not None else os.environ.get(URI_ENV),
            api_key=key if key is not None else os.environ.get(API_KEY_ENV),
            timeout=int(timeout),
            rate_limit=float(rate_limit),
        )
