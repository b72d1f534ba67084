from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from sitemap_model.error_codes import MalformedWidgetPayloadError
from sitemap_model.model.icon_format import IconFormat
from sitemap_model.model.item import Item
from sitemap_model.widget.icon_path import resolve_icon_path
from sitemap_model.widget.json_builder import resolve_icon_format
from sitemap_model.util.json_fields import opt_bool, opt_text
from sitemap_model.widget.protocol import Widget
from sitemap_model.widget.sanitizers import sanitize_icon
from sitemap_model.widget.widget_state import resolve_state

logger = logging.getLogger(__name__)


def apply_event(
    existing: Widget,
    delta: Mapping[str, Any],
    icon_format: Optional[Union[IconFormat, str]] = None,
) -> Widget:
    """
    Return a copy of `existing` with the display fields of a widget event applied.

    Only item, icon, label, colors, visibility and state can change;
    structural and configuration fields are always carried over. The icon
    path and state are recomputed from the merged item for every non-empty
    event; an empty event returns the widget unchanged.
    """
    if not isinstance(delta, Mapping):
        raise MalformedWidgetPayloadError(
            f"Widget event payload must be an object, got {type(delta).__name__}."
        )

    if not delta:
        return existing

    item = Item.update_from_event(existing.item, delta.get("item"))
    raw_icon = opt_text(delta, "icon")
    icon = raw_icon if raw_icon is not None else existing.icon

    update: Dict[str, Any] = {
        "item": item,
        "icon": sanitize_icon(icon),
        "icon_path": resolve_icon_path(
            item,
            existing.type,
            icon,
            resolve_icon_format(icon_format),
            bool(existing.mappings),
        ),
        "label": opt_text(delta, "label", existing.label),
        "label_color": opt_text(delta, "labelcolor", existing.label_color),
        "value_color": opt_text(delta, "valuecolor", existing.value_color),
        "visibility": opt_bool(delta, "visibility", existing.visibility),
        "state": resolve_state(opt_text(delta, "state"), item),
    }

    logger.debug("Applied event to widget %s (fields: %s).", existing.id, sorted(delta.keys()))
    return existing.model_copy(update=update)
