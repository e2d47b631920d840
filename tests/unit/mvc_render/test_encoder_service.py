"""Unit tests for the JSON and XML encoders."""

import json
import xml.etree.ElementTree as ET

from mvc_render.services.encoder_service import XML_DECLARATION, encode_json, encode_xml


class TestEncodeJson:
    """Tests for encode_json()."""

    def test_compact_output(self):
        assert encode_json({"id": 7, "name": "Ada"}) == '{"id":7,"name":"Ada"}'

    def test_error_envelope(self):
        body = encode_json({"error": {"code": 404, "message": "Error 404 has occurred"}})

        assert body == '{"error":{"code":404,"message":"Error 404 has occurred"}}'

    def test_non_ascii_kept_readable(self):
        assert encode_json({"name": "Zoë"}) == '{"name":"Zoë"}'

    def test_unknown_types_fall_back_to_str(self):
        from datetime import date

        assert json.loads(encode_json({"day": date(2024, 1, 2)})) == {"day": "2024-01-02"}


class TestEncodeXml:
    """Tests for encode_xml()."""

    def test_declaration_and_members_root(self):
        body = encode_xml({"id": 7})

        assert body.startswith(XML_DECLARATION)
        assert ET.fromstring(body.removeprefix(XML_DECLARATION)).tag == "members"

    def test_scalars_become_child_elements(self):
        root = ET.fromstring(encode_xml({"id": 7, "name": "Ada", "active": True, "note": None}))

        assert root.findtext("id") == "7"
        assert root.findtext("name") == "Ada"
        assert root.findtext("active") == "true"
        assert root.find("note") is not None
        assert root.find("note").text is None

    def test_nested_mapping(self):
        root = ET.fromstring(encode_xml({"error": {"code": 500, "message": "Error 500 has occurred"}}))

        assert root.findtext("error/code") == "500"
        assert root.findtext("error/message") == "Error 500 has occurred"

    def test_list_repeats_element(self):
        root = ET.fromstring(encode_xml({"member": [{"name": "Ada"}, {"name": "Grace"}]}))

        assert [m.findtext("name") for m in root.findall("member")] == ["Ada", "Grace"]

    def test_invalid_names_become_items(self):
        root = ET.fromstring(encode_xml({"1": "first", "two words": "x"}))

        items = root.findall("item")
        assert [item.get("key") for item in items] == ["1", "two words"]
        assert items[0].text == "first"

    def test_custom_root(self):
        assert ET.fromstring(encode_xml({}, root="users")).tag == "users"

    def test_text_is_escaped(self):
        root = ET.fromstring(encode_xml({"html": "<b>&</b>"}))

        assert root.findtext("html") == "<b>&</b>"
