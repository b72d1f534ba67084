from .icon_format import IconFormat
from .item import Item, ItemType, to_item_type
from .labeled_value import LabeledValue, labeled_value_from_json, labeled_value_from_xml
from .linked_page import LinkedPage

__all__ = [
    "IconFormat",
    "Item",
    "ItemType",
    "LabeledValue",
    "LinkedPage",
    "labeled_value_from_json",
    "labeled_value_from_xml",
    "to_item_type",
]
