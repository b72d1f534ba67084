from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, Tuple
from xml.etree.ElementTree import Element

from pydantic import BaseModel, ConfigDict, Field

from sitemap_model.model.labeled_value import LabeledValue, labeled_value_from_json
from sitemap_model.state.parsed_state import ParsedState, parse_state
from sitemap_model.util.json_fields import opt_bool
from sitemap_model.util.xml_utils import element_text, iter_child_elements


class ItemType(str, Enum):
    NONE = "None"
    CALL = "Call"
    COLOR = "Color"
    CONTACT = "Contact"
    DATETIME = "DateTime"
    DIMMER = "Dimmer"
    GROUP = "Group"
    IMAGE = "Image"
    LOCATION = "Location"
    NUMBER = "Number"
    NUMBER_WITH_DIMENSION = "NumberWithDimension"
    PLAYER = "Player"
    ROLLERSHUTTER = "Rollershutter"
    STRING = "String"
    SWITCH = "Switch"


_ITEM_TYPES_BY_WIRE_NAME = {item_type.value: item_type for item_type in ItemType}


def to_item_type(raw: Any) -> ItemType:
    """
    Map a wire type name onto `ItemType`.

    Dimensioned numbers (``Number:Temperature``) collapse to
    `NUMBER_WITH_DIMENSION`, legacy names ending in ``Item`` are accepted,
    and anything unknown becomes `NONE`.
    """
    text = str(raw or "").strip()
    if not text:
        return ItemType.NONE
    if text.startswith("Number:"):
        return ItemType.NUMBER_WITH_DIMENSION
    if text.endswith("Item") and text != "Item":
        text = text[: -len("Item")]
    return _ITEM_TYPES_BY_WIRE_NAME.get(text, ItemType.NONE)


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text or None


def _state_text(raw: Any) -> Optional[str]:
    if raw is None:
        return None
    text = str(raw)
    if text.lower() == "undefined":
        return None
    return text


class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    label: str = ""
    category: Optional[str] = None
    type: ItemType = ItemType.NONE
    group_type: Optional[ItemType] = None
    link: Optional[str] = None
    read_only: bool = False
    members: Tuple["Item", ...] = Field(default_factory=tuple)
    options: Optional[Tuple[LabeledValue, ...]] = None
    state: Optional[ParsedState] = None
    tags: Tuple[str, ...] = Field(default_factory=tuple)

    def is_of_type_or_group_type(self, item_type: ItemType) -> bool:
        return self.type == item_type or self.group_type == item_type

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "Item":
        state_description = payload.get("stateDescription")
        if not isinstance(state_description, Mapping):
            state_description = {}

        options: Optional[Tuple[LabeledValue, ...]] = None
        raw_options = state_description.get("options")
        if isinstance(raw_options, list):
            options = tuple(
                labeled_value_from_json(option, "value", "label")
                for option in raw_options
                if isinstance(option, Mapping)
            )

        raw_members = payload.get("members")
        members = tuple(
            cls.from_json(member)
            for member in (raw_members if isinstance(raw_members, list) else [])
            if isinstance(member, Mapping)
        )

        raw_tags = payload.get("tags")
        tags = tuple(str(tag) for tag in raw_tags) if isinstance(raw_tags, list) else ()

        raw_group_type = payload.get("groupType")
        return cls(
            name=str(payload.get("name") or ""),
            label=str(payload.get("label") or "").strip(),
            category=_optional_text(payload.get("category")),
            type=to_item_type(payload.get("type")),
            group_type=to_item_type(raw_group_type) if raw_group_type else None,
            link=_optional_text(payload.get("link")),
            read_only=opt_bool(state_description, "readOnly", False),
            members=members,
            options=options,
            state=parse_state(
                _state_text(payload.get("state")),
                _optional_text(state_description.get("pattern")),
            ),
            tags=tags,
        )

    @classmethod
    def from_xml(cls, node: Element) -> "Item":
        fields: dict[str, str] = {}
        for child in iter_child_elements(node):
            fields[child.tag] = element_text(child)
        raw_group_type = fields.get("groupType")
        return cls(
            name=fields.get("name", ""),
            label=fields.get("label", "").strip(),
            type=to_item_type(fields.get("type")),
            group_type=to_item_type(raw_group_type) if raw_group_type else None,
            link=_optional_text(fields.get("link")),
            state=parse_state(_state_text(fields.get("state"))),
        )

    @classmethod
    def update_from_event(
        cls,
        item: Optional["Item"],
        payload: Optional[Mapping[str, Any]],
    ) -> Optional["Item"]:
        """
        Merge the ``item`` block of a widget event into a known item.

        Events replace the whole item snapshot, except that they never carry
        the REST link, so the previous one is kept.
        """
        if not isinstance(payload, Mapping):
            return item
        parsed = cls.from_json(payload)
        if item is not None and item.link and not parsed.link:
            return parsed.model_copy(update={"link": item.link})
        return parsed
