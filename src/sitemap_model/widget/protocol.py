from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from sitemap_model.model.item import Item
from sitemap_model.model.labeled_value import LabeledValue
from sitemap_model.model.linked_page import LinkedPage
from sitemap_model.state.parsed_state import ParsedState


class WidgetType(str, Enum):
    CHART = "Chart"
    COLORPICKER = "Colorpicker"
    DEFAULT = "Default"
    FRAME = "Frame"
    GROUP = "Group"
    IMAGE = "Image"
    MAPVIEW = "Mapview"
    SELECTION = "Selection"
    SETPOINT = "Setpoint"
    SLIDER = "Slider"
    SWITCH = "Switch"
    TEXT = "Text"
    VIDEO = "Video"
    WEBVIEW = "Webview"
    UNKNOWN = "Unknown"


_WIDGET_TYPES_BY_WIRE_NAME = {widget_type.value: widget_type for widget_type in WidgetType}


def to_widget_type(raw: Any) -> WidgetType:
    if raw is None:
        return WidgetType.UNKNOWN
    return _WIDGET_TYPES_BY_WIRE_NAME.get(str(raw), WidgetType.UNKNOWN)


class Widget(BaseModel):
    """
    One renderable sitemap element, normalized from either wire format.

    Widgets form a flat, pre-ordered tree: `parent_id` is a plain
    back-reference to a widget that precedes this one in the same list.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    parent_id: Optional[str] = None
    label: str = ""
    icon: Optional[str] = None
    icon_path: str
    state: Optional[ParsedState] = None
    type: WidgetType = WidgetType.UNKNOWN
    url: Optional[str] = None
    item: Optional[Item] = None
    linked_page: Optional[LinkedPage] = None
    mappings: Tuple[LabeledValue, ...] = Field(default_factory=tuple)
    encoding: Optional[str] = None
    icon_color: Optional[str] = None
    label_color: Optional[str] = None
    value_color: Optional[str] = None
    refresh: int = 0
    min_value: float = 0.0
    max_value: float = 100.0
    step: float = 1.0
    period: str = "D"
    service: str = ""
    legend: Optional[bool] = None
    switch_support: bool = False
    height: int = 0
    visibility: bool = True

    @property
    def mappings_or_item_options(self) -> Tuple[LabeledValue, ...]:
        if not self.mappings and self.item is not None and self.item.options is not None:
            return self.item.options
        return self.mappings
