"""Core HTTP request wrapper used by the newznab client."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Mapping, MutableMapping, Optional
from urllib.parse import urlsplit, urlunsplit
from xml.etree import ElementTree as ET

import requests

from newznab._core._errors import translate_error
from newznab._core._xml import parse_document
from newznab.exceptions import ProtocolError, TransportError

log = logging.getLogger(__name__)

API_PATH = "api"
API_FORMAT = "json"
FORMAT_CONTENT_TYPE = "application/json"

_APIKEY_RE = re.compile(r"(apikey=)[^&]*", re.IGNORECASE)


@dataclass
class RequestConfig:
    """Configuration for a single request."""

    method: str = "GET"
    url: str = ""
    params: Mapping[str, Any] = field(default_factory=dict)
    headers: MutableMapping[str, str] = field(default_factory=dict)
    timeout: int = 10


def api_url(base: str) -> str:
    """Return the API endpoint for *base*, appending ``/api`` once.

    Calling it on its own output returns the same URL.
    """
    parts = urlsplit(base.strip())
    path = parts.path.rstrip("/")
    if path.rsplit("/", 1)[-1] != API_PATH:
        path = f"{path}/{API_PATH}"
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, ""))


def mask_api_key(url: str) -> str:
    """Hide the API key in a URL before it is logged."""
    return _APIKEY_RE.sub(r"\1***", url)


def default_headers() -> MutableMapping[str, str]:
    return {"Accept": FORMAT_CONTENT_TYPE, "Content-Type": FORMAT_CONTENT_TYPE}


def request(
    config: RequestConfig, session: Optional[requests.Session] = None
) -> Any:
    """Perform a single HTTP request and decode the Newznab response.

    There is no retry: any failure is raised once.

    Args:
        config: Fully populated ``RequestConfig`` instance.
        session: Session to send the request with; a bare ``requests``
            call is made when omitted.

    Returns:
        The decoded payload.

    Raises:
        TransportError: The request failed at the network level or the
            endpoint answered 404.
        ProtocolError: Non-success status, undecodable body or an
            unexpected content type.
        ServerError: The server reported a Newznab error code.
    """
    sender = session if session is not None else requests
    try:
        resp = sender.request(
            method=config.method,
            url=config.url,
            params=config.params,
            headers=dict(config.headers),
            timeout=config.timeout,
        )
    except requests.Timeout as exc:
        log.warning("Request to %s timed out: %s", mask_api_key(config.url), exc)
        raise TransportError(f"Request timed out: {exc}") from exc
    except requests.RequestException as exc:
        log.warning("Request to %s failed: %s", mask_api_key(config.url), exc)
        raise TransportError(f"Request failed: {exc}") from exc

    log.debug("%s %s -> %s", config.method, mask_api_key(resp.url), resp.status_code)

    if resp.status_code == 404:
        raise TransportError(
            f"404 Not Found: {mask_api_key(resp.url)}", status_code=404
        )
    if not 200 <= resp.status_code < 300:
        raise ProtocolError(
            f"Unexpected HTTP status {resp.status_code}",
            status_code=resp.status_code,
        )

    return decode_response(resp)


def decode_response(resp: requests.Response) -> Any:
    """Decode a successful response according to its content type."""
    content_type = resp.headers.get("Content-Type", "").split(";")[0].strip().lower()

    if "json" in content_type:
        return _decode_json(resp)
    if "xml" in content_type:
        return _decode_xml(resp)

    raise ProtocolError(
        f"Unsupported content type: {content_type or 'none'}",
        status_code=resp.status_code,
    )


def _decode_json(resp: requests.Response) -> Any:
    try:
        payload = resp.json()
    except ValueError as exc:
        raise ProtocolError(
            f"Invalid JSON response: {exc}", status_code=resp.status_code
        ) from exc

    if not payload:
        raise ProtocolError("Empty JSON response", status_code=resp.status_code)

    if not isinstance(payload, dict):
        raise ProtocolError(
            f"Unsupported response shape: {type(payload).__name__}",
            status_code=resp.status_code,
        )

    error = payload.get("error")
    if error is not None:
        if isinstance(error, dict):
            attributes = error.get("@attributes", error)
            raise translate_error(
                attributes.get("code"), attributes.get("description")
            )
        # Some servers send a bare message instead of a code
        raise translate_error(None, str(error))

    return payload


def _decode_xml(resp: requests.Response) -> Any:
    try:
        document = parse_document(resp.text)
    except ET.ParseError as exc:
        raise ProtocolError(
            f"Invalid XML response: {exc}", status_code=resp.status_code
        ) from exc

    if "error" in document:
        attributes = document["error"].get("@attributes", {})
        raise translate_error(attributes.get("code"), attributes.get("description"))

    root = next(iter(document))
    raise ProtocolError(
        f"Unsupported response shape: <{root}>", status_code=resp.status_code
    )
