from __future__ import annotations

import logging
from typing import Optional

from sitemap_model.model.icon_format import IconFormat
from sitemap_model.model.item import Item, ItemType
from sitemap_model.state.color import format_hex_color, hsv_to_rgb
from sitemap_model.state.parsed_state import ParsedState
from sitemap_model.widget.protocol import WidgetType
from sitemap_model.widget.sanitizers import NO_ICON

logger = logging.getLogger(__name__)

ICON_STATE_ON = "ON"
ICON_STATE_OFF = "OFF"


def _binary_icon_state(text: str) -> str:
    return ICON_STATE_OFF if text in ("0", ICON_STATE_OFF) else ICON_STATE_ON


def _brightness_icon_state(state: ParsedState, widget_type: WidgetType) -> Optional[str]:
    """Brightness-derived icon state, or None when the state has no brightness."""
    brightness = state.as_brightness
    if brightness is None:
        return None
    text = str(brightness)
    if widget_type == WidgetType.SWITCH:
        return _binary_icon_state(text)
    return text


def _color_icon_state(state: ParsedState) -> Optional[str]:
    if state.as_hsv is None:
        return None
    return format_hex_color(hsv_to_rgb(state.as_hsv))


def resolve_icon_state(
    item: Optional[Item],
    widget_type: WidgetType,
    has_mappings: bool,
) -> str:
    """
    Work out the ``state`` query value used to pick an icon variant.

    Color items drive sliders and plain switches by brightness, and other
    widgets by their RGB color. Plain switches over anything but a
    rollershutter only ever need an ON/OFF variant.
    """
    state = item.state if item is not None else None
    if state is None:
        return ""

    icon_state = state.as_string
    plain_switch = widget_type == WidgetType.SWITCH and not has_mappings
    if item.is_of_type_or_group_type(ItemType.COLOR):
        if widget_type == WidgetType.SLIDER or plain_switch:
            icon_state = _brightness_icon_state(state, widget_type)
            if icon_state is None:
                logger.debug(
                    "No brightness in state %r of color item %s; using %s icon.",
                    state.as_string,
                    item.name,
                    ICON_STATE_OFF,
                )
                icon_state = ICON_STATE_OFF
        else:
            icon_state = _color_icon_state(state) or icon_state
    elif plain_switch and not item.is_of_type_or_group_type(ItemType.ROLLERSHUTTER):
        icon_state = _binary_icon_state(state.as_string)
    return icon_state


def resolve_icon_path(
    item: Optional[Item],
    widget_type: WidgetType,
    icon: Optional[str],
    icon_format: IconFormat,
    has_mappings: bool,
) -> str:
    """
    Build the icon request path ``icon/<name>?state=<state>&format=<FMT>&anyFormat=true``.

    An absent or empty icon name is written as the server's ``none`` icon
    rather than ``null`` or an empty segment. The state value is not
    URL-encoded.
    """
    icon_state = resolve_icon_state(item, widget_type, has_mappings)
    icon_name = icon if icon else NO_ICON
    return f"icon/{icon_name}?state={icon_state}&format={icon_format.value}&anyFormat=true"
