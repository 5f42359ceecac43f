"""Pytest configuration and shared fixtures for unit tests."""

import pytest
from fixtures import (
    API_KEY,
    API_URI,
    build_search_payload,
    load_json_fixture,
    load_text_fixture,
)
from newznab import NewznabClient
from newznab.config import API_KEY_ENV, URI_ENV


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's own indexer settings out of the tests."""
    monkeypatch.delenv(URI_ENV, raising=False)
    monkeypatch.delenv(API_KEY_ENV, raising=False)


@pytest.fixture
def client():
    newznab = NewznabClient(uri=API_URI, key=API_KEY)
    yield newznab
    newznab.close()


@pytest.fixture
def search_payload():
    """Factory fixture building search responses."""
    return build_search_payload


@pytest.fixture
def caps_payload():
    return load_json_fixture("caps.json")


@pytest.fixture
def details_payload():
    return load_json_fixture("details.json")


@pytest.fixture
def error_xml():
    return load_text_fixture("error.xml")
