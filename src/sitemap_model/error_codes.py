from __future__ import annotations

from typing import Optional

ERROR_MISSING_FIELD = "missing_required_field"
ERROR_INVALID_PAYLOAD = "invalid_payload"


class MalformedWidgetPayloadError(ValueError):
    """A JSON widget payload lacks a field the builder cannot default."""

    def __init__(self, message: str, *, code: str = ERROR_INVALID_PAYLOAD, field: Optional[str] = None):
        super().__init__(message)
        self.code = code
        self.field = field


def missing_field_error(field: str, *, context: str = "widget") -> MalformedWidgetPayloadError:
    return MalformedWidgetPayloadError(
        f"JSON {context} payload is missing required key '{field}'.",
        code=ERROR_MISSING_FIELD,
        field=field,
    )
