"""
Tests for the JSON widget tree builder.
"""

import json

import pytest

from sitemap_model.config.settings import configure_sitemap_runtime
from sitemap_model.error_codes import ERROR_MISSING_FIELD, MalformedWidgetPayloadError
from sitemap_model.model.icon_format import IconFormat
from sitemap_model.model.item import ItemType
from sitemap_model.model.labeled_value import LabeledValue
from sitemap_model.widget.json_builder import collect_widgets_from_json, parse_sitemap_json
from sitemap_model.widget.protocol import WidgetType


def frame_payload():
    return {
        "widgetId": "01",
        "type": "Frame",
        "label": "Living",
        "icon": "none",
        "widgets": [
            {
                "widgetId": "0100",
                "type": "Switch",
                "label": "Lamp",
                "icon": "light",
                "item": {
                    "name": "Lamp",
                    "type": "Dimmer",
                    "state": "0",
                    "link": "http://demo/rest/items/Lamp",
                },
                "widgets": [],
            },
            {
                "widgetId": "0101",
                "type": "Slider",
                "icon": "slider",
                "state": "42",
                "minValue": 10,
                "maxValue": 5,
                "step": -3,
                "refresh": 50,
                "legend": False,
                "switchSupport": True,
                "visibility": False,
                "height": 4,
                "period": "W",
                "service": "rrd4j",
                "url": "http://demo/camera",
                "encoding": "mjpeg",
                "iconcolor": "#00ff00",
                "labelcolor": "red",
                "valuecolor": "blue",
                "item": {"name": "Bulb", "type": "Color", "state": "120,100,40"},
                "mappings": [{"command": "ON", "label": "On"}],
                "linkedPage": {"id": "0102", "title": "Sub", "icon": "sub", "link": "http://demo/0102"},
                "someFutureKey": {"ignored": True},
            },
        ],
    }


class TestJsonTreeShape:

    def test_preorder_with_parent_references(self):
        widgets = collect_widgets_from_json(frame_payload(), icon_format=IconFormat.PNG)
        assert [(w.id, w.parent_id) for w in widgets] == [
            ("01", None),
            ("0100", "01"),
            ("0101", "01"),
        ]

    def test_page_payload_emits_children_as_roots(self):
        page = {"id": "demo", "title": "Demo", "widgets": [frame_payload()]}
        widgets = parse_sitemap_json(json.dumps(page), IconFormat.SVG)
        assert [w.id for w in widgets] == ["01", "0100", "0101"]
        assert widgets[0].parent_id is None

    def test_sitemap_homepage(self):
        sitemap = {"name": "demo", "homepage": {"id": "demo", "widgets": [frame_payload()]}}
        assert len(parse_sitemap_json(sitemap)) == 3


class TestJsonRequiredFields:

    @pytest.mark.parametrize("key", ["type", "widgetId"])
    def test_missing_required_key_raises(self, key):
        payload = {"widgetId": "x", "type": "Text"}
        del payload[key]
        with pytest.raises(MalformedWidgetPayloadError) as exc_info:
            collect_widgets_from_json(payload)
        assert exc_info.value.field == key
        assert exc_info.value.code == ERROR_MISSING_FIELD

    def test_missing_id_in_nested_widget_fails_whole_call(self):
        payload = frame_payload()
        del payload["widgets"][1]["widgetId"]
        with pytest.raises(MalformedWidgetPayloadError):
            collect_widgets_from_json(payload)

    def test_widgets_without_page_id_or_widget_id_raises(self):
        payload = {"label": "x", "widgets": [{"widgetId": "a", "type": "Text"}]}
        with pytest.raises(MalformedWidgetPayloadError) as exc_info:
            parse_sitemap_json(payload)
        assert exc_info.value.field == "type"

    def test_non_object_payload_raises(self):
        with pytest.raises(MalformedWidgetPayloadError):
            collect_widgets_from_json(["not", "an", "object"])


class TestJsonWidgetFields:

    @pytest.fixture
    def widgets(self):
        return collect_widgets_from_json(frame_payload(), icon_format=IconFormat.PNG)

    def test_frame_defaults(self, widgets):
        frame = widgets[0]
        assert frame.type == WidgetType.FRAME
        assert frame.icon is None
        assert frame.icon_path == "icon/none?state=&format=PNG&anyFormat=true"
        assert frame.mappings == ()
        assert frame.item is None
        assert frame.linked_page is None
        assert frame.legend is None
        assert frame.switch_support is False
        assert frame.visibility is True
        assert frame.period == "D"
        assert frame.service == ""
        assert frame.refresh == 0
        assert frame.height == 0
        assert frame.url is None

    def test_plain_switch_over_dimmer(self, widgets):
        lamp = widgets[1]
        assert lamp.item.type == ItemType.DIMMER
        assert lamp.icon_path == "icon/light?state=OFF&format=PNG&anyFormat=true"
        assert lamp.state.as_string == "0"

    def test_slider_fields(self, widgets):
        slider = widgets[2]
        assert slider.icon_path == "icon/slider?state=40&format=PNG&anyFormat=true"
        assert slider.state.as_string == "42"
        assert (slider.min_value, slider.max_value, slider.step) == (10.0, 10.0, 3.0)
        assert slider.refresh == 100
        assert slider.legend is False
        assert slider.switch_support is True
        assert slider.visibility is False
        assert slider.height == 4
        assert slider.period == "W"
        assert slider.service == "rrd4j"
        assert slider.url == "http://demo/camera"
        assert slider.encoding == "mjpeg"
        assert slider.icon_color == "#00ff00"
        assert slider.label_color == "red"
        assert slider.value_color == "blue"
        assert slider.label == ""
        assert slider.mappings == (LabeledValue(value="ON", label="On"),)
        assert slider.linked_page.icon_path == "icon/sub?format=PNG&anyFormat=true"

    def test_unknown_type_maps_to_unknown(self):
        widget = collect_widgets_from_json({"widgetId": "u", "type": "Hologram"})[0]
        assert widget.type == WidgetType.UNKNOWN

    def test_legend_true(self):
        widget = collect_widgets_from_json({"widgetId": "c", "type": "Chart", "legend": True})[0]
        assert widget.legend is True

    def test_configured_icon_format_is_default(self):
        configure_sitemap_runtime({"sitemap_config": {"icon_format": "png"}})
        widget = collect_widgets_from_json({"widgetId": "t", "type": "Text", "icon": "x"})[0]
        assert widget.icon_path.endswith("format=PNG&anyFormat=true")

    def test_mappings_or_item_options(self):
        widget = collect_widgets_from_json(
            {
                "widgetId": "s",
                "type": "Selection",
                "item": {
                    "name": "Mode",
                    "type": "String",
                    "stateDescription": {"options": [{"value": "a", "label": "A"}]},
                },
            }
        )[0]
        assert widget.mappings == ()
        assert widget.mappings_or_item_options == (LabeledValue(value="a", label="A"),)
