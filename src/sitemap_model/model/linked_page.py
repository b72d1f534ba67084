from __future__ import annotations

from typing import Any, Mapping, Optional
from xml.etree.ElementTree import Element

from pydantic import BaseModel, ConfigDict

from sitemap_model.model.icon_format import IconFormat
from sitemap_model.util.xml_utils import element_text, iter_child_elements


class LinkedPage(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    icon: Optional[str] = None
    icon_path: Optional[str] = None
    link: Optional[str] = None

    @classmethod
    def from_json(
        cls,
        payload: Optional[Mapping[str, Any]],
        icon_format: IconFormat,
    ) -> Optional["LinkedPage"]:
        if not isinstance(payload, Mapping):
            return None
        icon = payload.get("icon")
        icon = None if icon is None else str(icon)
        return cls(
            id=str(payload.get("id") or ""),
            title=str(payload.get("title") or ""),
            icon=icon,
            icon_path=f"icon/{icon or 'none'}?format={icon_format.value}&anyFormat=true",
            link=None if payload.get("link") is None else str(payload.get("link")),
        )

    @classmethod
    def from_xml(cls, node: Optional[Element]) -> Optional["LinkedPage"]:
        if node is None:
            return None
        fields: dict[str, str] = {}
        for child in iter_child_elements(node):
            fields[child.tag] = element_text(child)
        icon = fields.get("icon")
        return cls(
            id=fields.get("id", ""),
            title=fields.get("title", ""),
            icon=icon,
            icon_path=f"images/{icon}.png" if icon else None,
            link=fields.get("link"),
        )
