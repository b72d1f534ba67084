from __future__ import annotations

from typing import Any, Mapping
from xml.etree.ElementTree import Element

from pydantic import BaseModel, ConfigDict

from sitemap_model.util.xml_utils import element_text, iter_child_elements


class LabeledValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str


def labeled_value_from_json(
    payload: Mapping[str, Any],
    value_key: str = "command",
    label_key: str = "label",
) -> LabeledValue:
    """Read a value/label pair; the label falls back to the value when absent."""
    raw_value = payload.get(value_key)
    value = "" if raw_value is None else str(raw_value)
    raw_label = payload.get(label_key)
    label = value if raw_label is None else str(raw_label)
    return LabeledValue(value=value, label=label)


def labeled_value_from_xml(node: Element) -> LabeledValue:
    command = ""
    label = ""
    for child in iter_child_elements(node):
        if child.tag == "command":
            command = element_text(child)
        elif child.tag == "label":
            label = element_text(child)
    return LabeledValue(value=command, label=label)
