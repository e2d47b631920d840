"""JSON and XML encoders for response envelopes."""

import json
import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Any

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
DEFAULT_XML_ROOT = "members"
XML_ITEM_TAG = "item"

_XML_NAME = re.compile(r"^[A-Za-z_][\w.\-]*$")


def encode_json(payload: Mapping[str, Any]) -> str:
    """Encode a payload as compact JSON text."""
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), default=str)


def encode_xml(payload: Mapping[str, Any], root: str = DEFAULT_XML_ROOT) -> str:
    """Encode a payload as an XML document.

    Mapping keys become child elements. A list under a key repeats that key's
    element once per item. Keys that are not valid XML names (numeric ids,
    keys with spaces) become ``<item key="...">`` elements.

    Args:
        payload: Nested mapping to encode
        root: Name of the document element

    Returns:
        XML text including the declaration
    """
    root_element = ET.Element(root)
    _append_mapping(root_element, payload)
    return XML_DECLARATION + ET.tostring(root_element, encoding="unicode")


def _append_mapping(parent: ET.Element, mapping: Mapping[str, Any]) -> None:
    for key, value in mapping.items():
        if isinstance(value, list | tuple):
            for item in value:
                _append_value(parent, str(key), item)
        else:
            _append_value(parent, str(key), value)


def _append_value(parent: ET.Element, key: str, value: Any) -> None:
    if _XML_NAME.match(key) and not key.lower().startswith("xml"):
        element = ET.SubElement(parent, key)
    else:
        element = ET.SubElement(parent, XML_ITEM_TAG, {"key": key})

    if isinstance(value, Mapping):
        _append_mapping(element, value)
    elif isinstance(value, list | tuple):
        for item in value:
            _append_value(element, XML_ITEM_TAG, item)
    elif isinstance(value, bool):
        element.text = "true" if value else "false"
    elif value is not None:
        element.text = str(value)
