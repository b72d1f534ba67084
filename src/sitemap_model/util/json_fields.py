from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from sitemap_model.error_codes import missing_field_error


def require_text(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        raise missing_field_error(key)
    return str(value)


def opt_text(payload: Mapping[str, Any], key: str, default: Optional[str] = None) -> Optional[str]:
    value = payload.get(key)
    if value is None:
        return default
    return str(value)


def _to_finite_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def opt_float(payload: Mapping[str, Any], key: str, default: float) -> float:
    parsed = _to_finite_number(payload.get(key))
    return default if parsed is None else parsed


def opt_int(payload: Mapping[str, Any], key: str, default: int = 0) -> int:
    parsed = _to_finite_number(payload.get(key))
    return default if parsed is None else int(parsed)


def opt_bool(payload: Mapping[str, Any], key: str, default: Optional[bool]) -> Optional[bool]:
    value = payload.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        token = value.strip().lower()
        if token == "true":
            return True
        if token == "false":
            return False
    return default
