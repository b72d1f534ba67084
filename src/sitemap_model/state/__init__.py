from .color import format_hex_color, hsv_to_rgb
from .parsed_state import NumberState, ParsedState, parse_state

__all__ = [
    "NumberState",
    "ParsedState",
    "format_hex_color",
    "hsv_to_rgb",
    "parse_state",
]
