from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class IconFormat(str, Enum):
    PNG = "PNG"
    SVG = "SVG"

    @classmethod
    def coerce(cls, value: Any, default: Optional["IconFormat"] = None) -> "IconFormat":
        """Accept an IconFormat or a case-insensitive name such as ``"svg"``."""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().upper()
        try:
            return cls(text)
        except ValueError:
            if default is not None:
                return default
            raise ValueError(
                f"Unsupported icon format: {value!r}. Allowed: {[item.value for item in cls]}"
            )
