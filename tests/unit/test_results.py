"""Tests for Item, the flattened view of one search result."""

import datetime as dt

import pytest
from fixtures import build_record
from newznab.search import Item


@pytest.fixture
def item(details_payload):
    return Item.from_record(details_payload["channel"]["item"])


def test_fields(item):
    assert item.title == "This.Old.House.S40E01.720p.HDTV.x264"
    assert item.guid == "0a1b2c3d4e5f"
    assert item.link.startswith("https://indexer.example/getnzb/0a1b2c3d4e5f.nzb")
    assert item.description == "This.Old.House.S40E01.720p.HDTV.x264"


def test_pub_date(item):
    assert item.pub_date == dt.datetime(2018, 10, 4, 23, 15, 1, tzinfo=dt.timezone.utc)


def test_metadata_groups_repeated_attributes(item):
    assert item.metadata["category"] == ["5000", "5040"]
    assert item.metadata["season"] == ["S40"]
    assert item.category == ["5000", "5040"]


def test_enclosure(item):
    assert item.url == item.enclosure["url"]
    assert item.length == 1234567890
    assert item.type == "application/x-nzb"


def test_size(item):
    assert item.size == 1234567890


def test_get_attribute(item):
    assert item.get_attribute("type") == "application/x-nzb"
    assert item.get_attribute("rageid") == ["3795"]
    assert item.get_attribute("nonexistent") is None


def test_item_is_immutable(item):
    with pytest.raises(AttributeError):
        item.title = "Another title"


def test_items_are_hashable():
    first = Item.from_record(build_record(1))
    again = Item.from_record(build_record(1))

    assert first == again
    assert len({first, again, Item.from_record(build_record(2))}) == 2


def test_single_attr_object():
    record = {"title": "t", "attr": {"@attributes": {"name": "size", "value": "42"}}}
    item = Item.from_record(record)

    assert item.metadata == {"size": ["42"]}
    assert item.size == 42


def test_attr_without_value_is_skipped():
    record = {
        "enclosure": {"@attributes": {"length": "7"}},
        "attr": {"@attributes": {"name": "size"}},
    }
    item = Item.from_record(record)

    assert item.metadata == {}
    assert item.size == 7


def test_sparse_record():
    item = Item.from_record({"title": "Only a title"})

    assert item.guid is None
    assert item.pub_date is None
    assert item.metadata == {}
    assert item.enclosure == {}
    assert item.size is None
    assert item.category == []


def test_xml_style_values():
    """Test records converted from XML, where text sits under ``#text``."""
    record = {
        "guid": {"@attributes": {"isPermaLink": "true"}, "#text": "abc"},
        "pubDate": "2018-10-04T23:15:01+00:00",
    }
    item = Item.from_record(record)

    assert item.guid == "abc"
    assert item.pub_date == dt.datetime(2018, 10, 4, 23, 15, 1, tzinfo=dt.timezone.utc)


def test_unparseable_pub_date():
    assert Item.from_record({"pubDate": "yesterday"}).pub_date is None
