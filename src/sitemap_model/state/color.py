from __future__ import annotations

import colorsys
from typing import Sequence, Tuple


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def hsv_to_rgb(hsv: Sequence[float]) -> Tuple[int, int, int]:
    """Convert ``(hue degrees, saturation %, value %)`` into 8-bit RGB channels."""
    hue, saturation, value = (float(component) for component in hsv)
    red, green, blue = colorsys.hsv_to_rgb(
        (hue % 360.0) / 360.0,
        _clamp(saturation, 0.0, 100.0) / 100.0,
        _clamp(value, 0.0, 100.0) / 100.0,
    )
    return (round(red * 255), round(green * 255), round(blue * 255))


def format_hex_color(rgb: Sequence[int]) -> str:
    red, green, blue = rgb
    return f"#{red:02x}{green:02x}{blue:02x}"
