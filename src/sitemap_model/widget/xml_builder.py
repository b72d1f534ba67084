from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional
from xml.etree import ElementTree as ET
from xml.etree.ElementTree import Element

from sitemap_model.config.settings import get_sitemap_runtime_settings
from sitemap_model.model.item import Item
from sitemap_model.model.labeled_value import labeled_value_from_xml
from sitemap_model.model.linked_page import LinkedPage
from sitemap_model.util.xml_utils import element_text, iter_child_elements
from sitemap_model.widget.protocol import Widget, to_widget_type
from sitemap_model.widget.sanitizers import (
    NO_ICON,
    sanitize_icon,
    sanitize_min_max_step,
    sanitize_period,
    sanitize_refresh_rate,
)

logger = logging.getLogger(__name__)

_FieldHandler = Callable[[Dict[str, Any], Element], None]


def _new_accumulator() -> Dict[str, Any]:
    return {
        "item": None,
        "linked_page": None,
        "children": [],
        "mappings": [],
        "type": to_widget_type(None),
        "id": None,
        "label": None,
        "icon": None,
        "url": None,
        "min_value": 0.0,
        "max_value": 100.0,
        "step": 1.0,
        "refresh": 0,
        "period": "",
        "service": "",
        "height": 0,
        "icon_color": None,
        "value_color": None,
        "label_color": None,
        "encoding": None,
        "switch_support": False,
    }


def _text(field: str) -> _FieldHandler:
    def _handler(acc: Dict[str, Any], node: Element) -> None:
        acc[field] = element_text(node)

    return _handler


def _number(field: str, parse: Callable[[str], Any]) -> _FieldHandler:
    def _handler(acc: Dict[str, Any], node: Element) -> None:
        text = element_text(node).strip()
        try:
            acc[field] = parse(text)
        except ValueError:
            logger.debug("Ignoring non-numeric <%s> value %r.", node.tag, text)

    return _handler


def _item(acc: Dict[str, Any], node: Element) -> None:
    acc["item"] = Item.from_xml(node)


def _linked_page(acc: Dict[str, Any], node: Element) -> None:
    acc["linked_page"] = LinkedPage.from_xml(node)


def _child_widget(acc: Dict[str, Any], node: Element) -> None:
    acc["children"].append(node)


def _widget_type(acc: Dict[str, Any], node: Element) -> None:
    acc["type"] = to_widget_type(element_text(node))


def _switch_support(acc: Dict[str, Any], node: Element) -> None:
    acc["switch_support"] = element_text(node).strip().lower() == "true"


def _mapping(acc: Dict[str, Any], node: Element) -> None:
    acc["mappings"].append(labeled_value_from_xml(node))


_XML_FIELD_HANDLERS: Dict[str, _FieldHandler] = {
    "item": _item,
    "linkedPage": _linked_page,
    "widget": _child_widget,
    "type": _widget_type,
    "widgetId": _text("id"),
    "label": _text("label"),
    "icon": _text("icon"),
    "url": _text("url"),
    "minValue": _number("min_value", float),
    "maxValue": _number("max_value", float),
    "step": _number("step", float),
    "refresh": _number("refresh", int),
    "period": _text("period"),
    "service": _text("service"),
    "height": _number("height", int),
    "iconcolor": _text("icon_color"),
    "valuecolor": _text("value_color"),
    "labelcolor": _text("label_color"),
    "encoding": _text("encoding"),
    "switchSupport": _switch_support,
    "mapping": _mapping,
}


def collect_widgets_from_xml(node: Element, parent: Optional[Widget] = None) -> List[Widget]:
    """
    Flatten one legacy XML ``<widget>`` node and its nested widgets.

    A node without ``<widgetId>`` is dropped together with everything below
    it. The result lists each widget before its descendants.
    """
    acc = _new_accumulator()
    for child in iter_child_elements(node):
        handler = _XML_FIELD_HANDLERS.get(child.tag)
        if handler is not None:
            handler(acc, child)

    widget_id = acc["id"]
    if widget_id is None:
        if get_sitemap_runtime_settings().log_dropped_widgets:
            logger.debug(
                "Dropping XML <%s> without widgetId and its %d nested widget(s).",
                node.tag,
                len(acc["children"]),
            )
        return []

    min_value, max_value, step = sanitize_min_max_step(
        acc["min_value"], acc["max_value"], acc["step"]
    )
    item: Optional[Item] = acc["item"]
    icon = acc["icon"]
    widget = Widget(
        id=widget_id,
        parent_id=parent.id if parent is not None else None,
        label=acc["label"] or "",
        icon=sanitize_icon(icon),
        # Absent icon maps to the server's "none" image, as in resolve_icon_path.
        icon_path=f"images/{icon or NO_ICON}.png",
        state=item.state if item is not None else None,
        type=acc["type"],
        url=acc["url"],
        item=item,
        linked_page=acc["linked_page"],
        mappings=tuple(acc["mappings"]),
        encoding=acc["encoding"],
        icon_color=acc["icon_color"],
        label_color=acc["label_color"],
        value_color=acc["value_color"],
        refresh=sanitize_refresh_rate(acc["refresh"]),
        min_value=min_value,
        max_value=max_value,
        step=step,
        period=sanitize_period(acc["period"]),
        service=acc["service"],
        legend=None,
        switch_support=acc["switch_support"],
        height=acc["height"],
        visibility=True,
    )

    result = [widget]
    for child_node in acc["children"]:
        result.extend(collect_widgets_from_xml(child_node, widget))
    return result


def _widget_container(root: Element) -> Element:
    # <sitemap> documents wrap the top-level page in <homepage>.
    for child in iter_child_elements(root):
        if child.tag == "homepage":
            return child
    return root


def parse_sitemap_xml(text) -> List[Widget]:
    """Build the widget list of a whole XML page or sitemap document."""
    root = ET.fromstring(text)
    if root.tag == "widget":
        return collect_widgets_from_xml(root)
    widgets: List[Widget] = []
    for child in iter_child_elements(_widget_container(root)):
        if child.tag == "widget":
            widgets.extend(collect_widgets_from_xml(child))
    return widgets
