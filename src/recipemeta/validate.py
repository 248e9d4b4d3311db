from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime
import re
from typing import Any
from urllib.parse import urlsplit

from .errors import ValidationError


SLUG_RE = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")
URL_SCHEMES = ("http", "https")


def require_text(field: str, value: Any) -> str:
    if value is None:
        raise ValidationError(field, value, "is required")
    if not isinstance(value, str):
        raise ValidationError(field, value, "must be a string")
    if not value.strip():
        raise ValidationError(field, value, "must not be empty")
    return value


def validate_slug(value: Any) -> str:
    slug = require_text("slug", value)
    if not SLUG_RE.fullmatch(slug):
        raise ValidationError("slug", value, "must be lowercase words separated by hyphens")
    return slug


def coerce_date(field: str, value: Any) -> date:
    """Return ``value`` as a calendar date.

    ``datetime`` values lose their time of day and ISO ``YYYY-MM-DD``
    strings are parsed. Anything else is rejected.
    """
    if value is None:
        raise ValidationError(field, value, "is required")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError as exc:
            raise ValidationError(field, value, "must be a valid ISO date (YYYY-MM-DD)") from exc
    raise ValidationError(field, value, "must be a date")


def validate_url(field: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError(field, value, "must be a string")
    if not value or any(ch.isspace() for ch in value):
        raise ValidationError(field, value, "is not a valid URL")
    try:
        parts = urlsplit(value)
        port = parts.port
    except ValueError as exc:
        raise ValidationError(field, value, "is not a valid URL") from exc
    if parts.scheme not in URL_SCHEMES or not parts.hostname or port == 0:
        raise ValidationError(field, value, "must be an absolute http(s) URL")
    return value


def validate_choice(field: str, value: Any, choices: Sequence[str]) -> str:
    if not isinstance(value, str) or value not in choices:
        raise ValidationError(field, value, f"must be one of {', '.join(choices)}")
    return value


__all__ = ["coerce_date", "require_text", "validate_choice", "validate_slug", "validate_url"]
