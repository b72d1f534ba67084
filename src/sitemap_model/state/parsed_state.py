from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

# Placeholders the server sends for items without a usable value.
UNDEFINED_STATES = frozenset({"NULL", "UNDEF"})


@dataclass(frozen=True)
class NumberState:
    value: float
    unit: Optional[str] = None
    format: Optional[str] = None

    def _plain(self) -> str:
        if float(self.value).is_integer():
            text = str(int(self.value))
        else:
            text = str(self.value)
        if self.unit:
            return f"{text} {self.unit}"
        return text

    def __str__(self) -> str:
        if self.format:
            pattern = self.format.replace("%unit%", (self.unit or "").replace("%", "%%"))
            try:
                return (pattern % self.value).strip()
            except (TypeError, ValueError) as exc:
                logger.debug("Number pattern %r not applicable to %s: %s", self.format, self.value, exc)
        return self._plain()


@dataclass(frozen=True)
class ParsedState:
    """
    One item state as sent by the server, together with the typed views
    derived from it.

    `as_string` is the raw text; the other views are `None` (or False) when
    the text has no such interpretation.
    """

    as_string: str
    as_boolean: bool = False
    as_number: Optional[NumberState] = None
    as_hsv: Optional[Tuple[float, float, float]] = None
    as_brightness: Optional[int] = None

    def __str__(self) -> str:
        return self.as_string


def _parse_as_number(state: str, number_pattern: Optional[str]) -> Optional[NumberState]:
    if state == "ON":
        return NumberState(100.0, format=number_pattern)
    if state == "OFF":
        return NumberState(0.0, format=number_pattern)
    value_text, _, unit = state.strip().partition(" ")
    try:
        value = float(value_text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return NumberState(value, unit.strip() or None, number_pattern)


def _parse_as_hsv(state: str) -> Optional[Tuple[float, float, float]]:
    parts = state.split(",")
    if len(parts) != 3:
        return None
    try:
        hue, saturation, value = (float(part) for part in parts)
    except ValueError:
        return None
    if not all(math.isfinite(component) for component in (hue, saturation, value)):
        return None
    return (hue, saturation, value)


def _parse_as_brightness(
    number: Optional[NumberState],
    hsv: Optional[Tuple[float, float, float]],
) -> Optional[int]:
    if hsv is not None:
        return int(hsv[2])
    if number is not None:
        return int(number.value)
    return None


def _parse_as_boolean(
    state: str,
    number: Optional[NumberState],
    hsv: Optional[Tuple[float, float, float]],
) -> bool:
    if state in ("ON", "OPEN"):
        return True
    if state in ("OFF", "CLOSED"):
        return False
    if hsv is not None:
        return hsv[2] > 0
    if number is not None:
        return number.value > 0
    return False


def parse_state(text: Optional[str], number_pattern: Optional[str] = None) -> Optional[ParsedState]:
    """Parse a raw state string; `None` for absent text and undefined placeholders."""
    if text is None:
        return None
    state = str(text)
    if state in UNDEFINED_STATES:
        return None
    number = _parse_as_number(state, number_pattern)
    hsv = _parse_as_hsv(state)
    return ParsedState(
        as_string=state,
        as_boolean=_parse_as_boolean(state, number, hsv),
        as_number=number,
        as_hsv=hsv,
        as_brightness=_parse_as_brightness(number, hsv),
    )
