from __future__ import annotations

from typing import Optional, Tuple

NO_ICON = "none"
MIN_REFRESH_MS = 100
DEFAULT_PERIOD = "D"


def sanitize_icon(icon: Optional[str]) -> Optional[str]:
    return None if icon == NO_ICON else icon


def sanitize_refresh_rate(refresh: int) -> int:
    # Intervals below 100ms are treated as a request for the fastest polling we allow.
    return MIN_REFRESH_MS if 1 <= refresh <= 99 else refresh


def sanitize_period(period: Optional[str]) -> str:
    return period if period else DEFAULT_PERIOD


def sanitize_min_max_step(min_value: float, max_value: float, step: float) -> Tuple[float, float, float]:
    return (min_value, max(min_value, max_value), abs(step))
