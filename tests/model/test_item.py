"""
Tests for the item, labeled value and linked page sub-models.
"""

import xml.etree.ElementTree as ET

import pytest

from sitemap_model.model.icon_format import IconFormat
from sitemap_model.model.item import Item, ItemType, to_item_type
from sitemap_model.model.labeled_value import LabeledValue, labeled_value_from_json
from sitemap_model.model.linked_page import LinkedPage


class TestItemType:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Switch", ItemType.SWITCH),
            ("SwitchItem", ItemType.SWITCH),
            ("Color", ItemType.COLOR),
            ("String", ItemType.STRING),
            ("Number", ItemType.NUMBER),
            ("Number:Temperature", ItemType.NUMBER_WITH_DIMENSION),
            ("Bogus", ItemType.NONE),
            (None, ItemType.NONE),
        ],
    )
    def test_wire_names(self, raw, expected):
        assert to_item_type(raw) == expected


class TestItemFromJson:

    def test_full_item(self):
        item = Item.from_json(
            {
                "name": "Temp",
                "label": " Temperature ",
                "type": "Number:Temperature",
                "category": "temperature",
                "link": "http://demo/rest/items/Temp",
                "state": "21.5 °C",
                "tags": ["Measurement"],
                "stateDescription": {
                    "pattern": "%.1f %unit%",
                    "readOnly": True,
                    "options": [{"value": "1", "label": "One"}, {"value": "2"}],
                },
            }
        )
        assert item.name == "Temp"
        assert item.label == "Temperature"
        assert item.type == ItemType.NUMBER_WITH_DIMENSION
        assert item.read_only is True
        assert item.options == (LabeledValue(value="1", label="One"), LabeledValue(value="2", label="2"))
        assert item.state.as_number.format == "%.1f %unit%"
        assert item.tags == ("Measurement",)

    @pytest.mark.parametrize("state", ["NULL", "UNDEF", "undefined"])
    def test_undefined_state(self, state):
        item = Item.from_json({"name": "X", "type": "Switch", "state": state})
        assert item.state is None

    @pytest.mark.parametrize(
        "raw, expected",
        [(True, True), ("true", True), ("false", False), ("False", False), (None, False), ("maybe", False)],
    )
    def test_read_only_flag(self, raw, expected):
        item = Item.from_json({"name": "X", "stateDescription": {"readOnly": raw}})
        assert item.read_only is expected

    def test_group_members(self):
        item = Item.from_json(
            {
                "name": "Lights",
                "type": "Group",
                "groupType": "Color",
                "members": [{"name": "Bulb", "type": "Color", "state": "0,0,0"}],
            }
        )
        assert item.group_type == ItemType.COLOR
        assert item.is_of_type_or_group_type(ItemType.COLOR)
        assert item.members[0].name == "Bulb"

    def test_no_options_is_distinct_from_empty_options(self):
        assert Item.from_json({"name": "A"}).options is None
        assert Item.from_json({"name": "A", "stateDescription": {"options": []}}).options == ()


class TestItemFromXml:

    def test_xml_item(self):
        node = ET.fromstring(
            "<item><type>DimmerItem</type><name>Dim</name><state>30</state>"
            "<link>http://demo/rest/items/Dim</link></item>"
        )
        item = Item.from_xml(node)
        assert item.type == ItemType.DIMMER
        assert item.name == "Dim"
        assert item.state.as_string == "30"
        assert item.link == "http://demo/rest/items/Dim"


class TestItemUpdateFromEvent:

    def test_missing_payload_keeps_item(self):
        item = Item(name="A", type=ItemType.SWITCH)
        assert Item.update_from_event(item, None) is item

    def test_event_replaces_item_and_keeps_link(self):
        item = Item.from_json(
            {"name": "A", "type": "Switch", "state": "OFF", "link": "http://demo/rest/items/A"}
        )
        updated = Item.update_from_event(item, {"name": "A", "type": "Switch", "state": "ON"})
        assert updated.state.as_string == "ON"
        assert updated.link == "http://demo/rest/items/A"

    def test_event_without_previous_item(self):
        updated = Item.update_from_event(None, {"name": "B", "type": "Contact", "state": "OPEN"})
        assert updated.type == ItemType.CONTACT
        assert updated.state.as_boolean is True


class TestLabeledValue:

    def test_label_defaults_to_value(self):
        assert labeled_value_from_json({"command": "ON"}) == LabeledValue(value="ON", label="ON")


class TestLinkedPage:

    def test_from_json(self):
        page = LinkedPage.from_json(
            {"id": "0001", "title": "Kitchen", "icon": "kitchen", "link": "http://demo/0001"},
            IconFormat.PNG,
        )
        assert page.id == "0001"
        assert page.icon_path == "icon/kitchen?format=PNG&anyFormat=true"

    def test_absent_page(self):
        assert LinkedPage.from_json(None, IconFormat.SVG) is None

    def test_from_xml(self):
        node = ET.fromstring(
            "<linkedPage><id>0002</id><title>Cellar</title><icon>cellar</icon></linkedPage>"
        )
        page = LinkedPage.from_xml(node)
        assert page.title == "Cellar"
        assert page.icon_path == "images/cellar.png"
        assert page.link is None

    def test_icon_format_coercion(self):
        assert IconFormat.coerce("svg") == IconFormat.SVG
        assert IconFormat.coerce("gif", default=IconFormat.PNG) == IconFormat.PNG
        with pytest.raises(ValueError):
            IconFormat.coerce("gif")
