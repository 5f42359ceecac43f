"""Conversion of Newznab XML documents into the JSON payload shape."""

from __future__ import annotations

from typing import Any, Dict
from xml.etree import ElementTree as ET


def _local_name(tag: str) -> str:
    # "{http://www.newznab.com/DTD/2010/feeds/attributes/}attr" -> "attr"
    return tag.rsplit("}", 1)[-1]


def element_to_dict(element: ET.Element) -> Dict[str, Any]:
    """Convert an element into the dict layout Newznab uses for JSON output.

    Attributes are grouped under ``@attributes``, text under ``#text`` and
    repeated child tags are collected into lists.
    """
    result: Dict[str, Any] = {}

    if element.attrib:
        result["@attributes"] = {
            _local_name(k): v for k, v in element.attrib.items()
        }

    if element.text and element.text.strip():
        result["#text"] = element.text.strip()

    for child in element:
        tag = _local_name(child.tag)
        value = element_to_dict(child)
        if tag in result:
            if not isinstance(result[tag], list):
                result[tag] = [result[tag]]
            result[tag].append(value)
        else:
            result[tag] = value

    return result


def parse_document(text: str) -> Dict[str, Any]:
    """Parse *text* and return ``{root_tag: element_to_dict(root)}``.

    Raises:
        xml.etree.ElementTree.ParseError: if the document is malformed.
    """
    root = ET.fromstring(text)
    return {_local_name(root.tag): element_to_dict(root)}
