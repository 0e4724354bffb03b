from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_INTEGER = re.compile(r"[+-]?[0-9]+")


def require_non_empty(value: str | None, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_int(value: str | None, field_name: str) -> int:
    """Parse a required integer field typed into a form (ASCII digits only)."""
    text = require_non_empty(value, field_name)
    if not _INTEGER.fullmatch(text):
        raise ValidationError(f"{field_name} must be a number")
    return int(text)
