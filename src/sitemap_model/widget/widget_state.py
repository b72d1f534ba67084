from __future__ import annotations

from typing import Optional

from sitemap_model.model.item import Item
from sitemap_model.state.parsed_state import ParsedState, parse_state


def _item_number_pattern(item: Optional[Item]) -> Optional[str]:
    if item is None or item.state is None or item.state.as_number is None:
        return None
    return item.state.as_number.format


def resolve_state(explicit_state: Optional[str], item: Optional[Item]) -> Optional[ParsedState]:
    """Prefer a widget-level state override; fall back to the linked item's state."""
    parsed = parse_state(explicit_state, _item_number_pattern(item))
    if parsed is not None:
        return parsed
    return item.state if item is not None else None
