from .event_patcher import apply_event
from .icon_path import resolve_icon_path, resolve_icon_state
from .json_builder import collect_widgets_from_json, parse_sitemap_json
from .protocol import Widget, WidgetType, to_widget_type
from .sanitizers import (
    sanitize_icon,
    sanitize_min_max_step,
    sanitize_period,
    sanitize_refresh_rate,
)
from .widget_state import resolve_state
from .xml_builder import collect_widgets_from_xml, parse_sitemap_xml

__all__ = [
    "Widget",
    "WidgetType",
    "apply_event",
    "collect_widgets_from_json",
    "collect_widgets_from_xml",
    "parse_sitemap_json",
    "parse_sitemap_xml",
    "resolve_icon_path",
    "resolve_icon_state",
    "resolve_state",
    "sanitize_icon",
    "sanitize_min_max_step",
    "sanitize_period",
    "sanitize_refresh_rate",
    "to_widget_type",
]
