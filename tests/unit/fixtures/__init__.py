"""Test fixture utilities for Newznab responses.

- `responses/` - response bodies captured from a Newznab indexer, with the
  API key replaced by ``test-key``
- `build_search_payload` - synthetic search responses of any size, for
  pagination tests

Usage:
    from fixtures import build_search_payload

    def test_page():
        payload = build_search_payload(total=844, offset=50, count=10)
"""

import json
from pathlib import Path
from typing import Any, Dict, List
from urllib.parse import parse_qs, urlsplit

FIXTURES_DIR = Path(__file__).parent

API_URI = "https://indexer.example"
API_URL = "https://indexer.example/api"
API_KEY = "test-key"


def _resolve_fixture_path(name: str) -> Path:
    path = FIXTURES_DIR / "responses" / name
    if not path.is_file():
        raise FileNotFoundError(f"Fixture not found: {path}")
    return path


def load_json_fixture(name: str) -> Any:
    """Load a JSON response fixture, e.g. ``"caps.json"``."""
    with open(_resolve_fixture_path(name)) as f:
        return json.load(f)


def load_text_fixture(name: str) -> str:
    """Load a raw response body, e.g. ``"error.xml"``."""
    return _resolve_fixture_path(name).read_text(encoding="utf-8")


def build_record(index: int) -> Dict[str, Any]:
    """Return one ``item`` record as a Newznab server encodes it in JSON."""
    guid = f"{index:012x}"
    link = f"{API_URI}/getnzb/{guid}.nzb&i=1&r={API_KEY}"
    return {
        "title": f"This.Old.House.S40E{index:02d}.720p.HDTV.x264",
        "guid": guid,
        "link": link,
        "pubDate": "Thu, 04 Oct 2018 23:15:01 +0000",
        "description": f"This.Old.House.S40E{index:02d}.720p.HDTV.x264",
        "enclosure": {
            "@attributes": {
                "url": link,
                "length": str(1000 + index),
                "type": "application/x-nzb",
            }
        },
        "attr": [
            {"@attributes": {"name": "category", "value": "5000"}},
            {"@attributes": {"name": "category", "value": "5040"}},
            {"@attributes": {"name": "size", "value": str(1000 + index)}},
        ],
    }


def build_search_payload(
    total: int, offset: int, count: int, version: str = "2.0"
) -> Dict[str, Any]:
    """Return a search response holding *count* items starting at *offset*.

    A response with a single item carries it as an object rather than a
    list, as servers do.
    """
    records: List[Dict[str, Any]] = [build_record(offset + i) for i in range(count)]
    channel: Dict[str, Any] = {
        "title": "Example Indexer",
        "description": "Example Indexer API Results",
        "response": {"@attributes": {"offset": str(offset), "total": str(total)}},
    }
    if count == 1:
        channel["item"] = records[0]
    elif count > 1:
        channel["item"] = records
    return {"@attributes": {"version": version}, "channel": channel}


def sent_params(call) -> Dict[str, str]:
    """Return the query parameters of a recorded ``responses`` call."""
    query = parse_qs(urlsplit(call.request.url).query, keep_blank_values=True)
    return {key: values[-1] for key, values in query.items()}
