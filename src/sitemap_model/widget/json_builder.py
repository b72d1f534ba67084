from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from sitemap_model.config.settings import get_sitemap_runtime_settings
from sitemap_model.error_codes import MalformedWidgetPayloadError
from sitemap_model.model.icon_format import IconFormat
from sitemap_model.model.item import Item
from sitemap_model.model.labeled_value import labeled_value_from_json
from sitemap_model.model.linked_page import LinkedPage
from sitemap_model.widget.icon_path import resolve_icon_path
from sitemap_model.util.json_fields import (
    opt_bool,
    opt_float,
    opt_int,
    opt_text,
    require_text,
)
from sitemap_model.widget.protocol import Widget, to_widget_type
from sitemap_model.widget.sanitizers import (
    sanitize_icon,
    sanitize_min_max_step,
    sanitize_period,
    sanitize_refresh_rate,
)
from sitemap_model.widget.widget_state import resolve_state

logger = logging.getLogger(__name__)

# JSON key -> Widget field for values copied through as optional text.
_OPTIONAL_TEXT_FIELDS: Dict[str, str] = {
    "url": "url",
    "encoding": "encoding",
    "iconcolor": "icon_color",
    "labelcolor": "label_color",
    "valuecolor": "value_color",
}


def resolve_icon_format(icon_format: Optional[Union[IconFormat, str]]) -> IconFormat:
    if icon_format is None:
        return get_sitemap_runtime_settings().icon_format
    return IconFormat.coerce(icon_format)


def _read_mappings(payload: Mapping[str, Any]) -> tuple:
    raw = payload.get("mappings")
    if not isinstance(raw, list):
        return ()
    return tuple(
        labeled_value_from_json(entry, "command", "label")
        for entry in raw
        if isinstance(entry, Mapping)
    )


def _read_item(payload: Mapping[str, Any]) -> Optional[Item]:
    raw = payload.get("item")
    if not isinstance(raw, Mapping):
        return None
    return Item.from_json(raw)


def collect_widgets_from_json(
    payload: Mapping[str, Any],
    parent: Optional[Widget] = None,
    icon_format: Optional[Union[IconFormat, str]] = None,
) -> List[Widget]:
    """
    Flatten one JSON widget object and its ``widgets`` array.

    ``type`` and ``widgetId`` are required; a missing one raises
    `MalformedWidgetPayloadError` for the whole call.
    """
    if not isinstance(payload, Mapping):
        raise MalformedWidgetPayloadError(
            f"JSON widget payload must be an object, got {type(payload).__name__}."
        )
    fmt = resolve_icon_format(icon_format)

    mappings = _read_mappings(payload)
    item = _read_item(payload)
    widget_type = to_widget_type(require_text(payload, "type"))
    widget_id = require_text(payload, "widgetId")
    icon = opt_text(payload, "icon")
    min_value, max_value, step = sanitize_min_max_step(
        opt_float(payload, "minValue", 0.0),
        opt_float(payload, "maxValue", 100.0),
        opt_float(payload, "step", 1.0),
    )
    optional_text = {
        field: opt_text(payload, key) for key, field in _OPTIONAL_TEXT_FIELDS.items()
    }

    widget = Widget(
        id=widget_id,
        parent_id=parent.id if parent is not None else None,
        label=opt_text(payload, "label", ""),
        icon=sanitize_icon(icon),
        icon_path=resolve_icon_path(item, widget_type, icon, fmt, bool(mappings)),
        state=resolve_state(opt_text(payload, "state"), item),
        type=widget_type,
        item=item,
        linked_page=LinkedPage.from_json(payload.get("linkedPage"), fmt),
        mappings=mappings,
        refresh=sanitize_refresh_rate(opt_int(payload, "refresh", 0)),
        min_value=min_value,
        max_value=max_value,
        step=step,
        period=sanitize_period(opt_text(payload, "period", "")),
        service=opt_text(payload, "service", ""),
        legend=opt_bool(payload, "legend", None),
        switch_support=opt_bool(payload, "switchSupport", False),
        height=opt_int(payload, "height", 0),
        visibility=opt_bool(payload, "visibility", True),
        **optional_text,
    )

    result = [widget]
    children = payload.get("widgets")
    if isinstance(children, list):
        for child in children:
            result.extend(collect_widgets_from_json(child, widget, fmt))
    return result


def _is_page(payload: Mapping[str, Any]) -> bool:
    # A page has its own id; anything else without widgetId is a broken widget.
    return (
        "id" in payload
        and "widgetId" not in payload
        and "type" not in payload
        and isinstance(payload.get("widgets"), list)
    )


def parse_sitemap_json(
    source: Union[str, bytes, Mapping[str, Any]],
    icon_format: Optional[Union[IconFormat, str]] = None,
) -> List[Widget]:
    """
    Build the widget list from a JSON widget, page or sitemap.

    Pages and the sitemap ``homepage`` carry no widget identity of their own
    and are not emitted; their top-level widgets become roots.
    """
    payload = json.loads(source) if isinstance(source, (str, bytes, bytearray)) else source
    if not isinstance(payload, Mapping):
        raise MalformedWidgetPayloadError("JSON sitemap payload must be an object.")
    homepage = payload.get("homepage")
    if isinstance(homepage, Mapping) and "widgetId" not in payload:
        payload = homepage
    fmt = resolve_icon_format(icon_format)
    if not _is_page(payload):
        return collect_widgets_from_json(payload, None, fmt)

    widgets: List[Widget] = []
    for child in payload["widgets"]:
        widgets.extend(collect_widgets_from_json(child, None, fmt))
    logger.debug("Built %d widget(s) from JSON page %r.", len(widgets), payload.get("id"))
    return widgets
