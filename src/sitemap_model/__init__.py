"""
sitemap_model: normalize home-automation sitemap payloads into flat widget trees.
"""

from .error_codes import MalformedWidgetPayloadError
from .model import IconFormat, Item, ItemType, LabeledValue, LinkedPage
from .state import NumberState, ParsedState, parse_state
from .widget import (
    Widget,
    WidgetType,
    apply_event,
    collect_widgets_from_json,
    collect_widgets_from_xml,
    parse_sitemap_json,
    parse_sitemap_xml,
    resolve_icon_path,
    resolve_state,
)

__all__ = [
    "IconFormat",
    "Item",
    "ItemType",
    "LabeledValue",
    "LinkedPage",
    "MalformedWidgetPayloadError",
    "NumberState",
    "ParsedState",
    "Widget",
    "WidgetType",
    "apply_event",
    "collect_widgets_from_json",
    "collect_widgets_from_xml",
    "parse_sitemap_json",
    "parse_sitemap_xml",
    "parse_state",
    "resolve_icon_path",
    "resolve_state",
]
