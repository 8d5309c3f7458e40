"""Leaf predicates for SBOM fields.

Each predicate takes an already-parsed value and returns ``None`` when the
value is acceptable, or a ``ValidationError`` describing the violation.
"""

from __future__ import annotations

import re
from datetime import datetime

from bomcheck.models.enums import ToolKind
from bomcheck.validation import ValidationError

_SLASH_DATE_RE = re.compile(r"^\d{4}/\d{2}/\d{2}$")
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_PHONE_RE = re.compile(r"^[0-9+\-() ]+$")


def validate_serial_number(serial_number: str) -> ValidationError | None:
    if not serial_number.strip():
        return ValidationError("serial number must not be empty")
    if any(ch.isspace() for ch in serial_number):
        return ValidationError("serial number must not contain whitespace")
    return None


def validate_not_blank(value: str) -> ValidationError | None:
    if not value.strip():
        return ValidationError("value must not be empty")
    return None


def validate_slash_date(timestamp: str) -> ValidationError | None:
    """1.3 timestamps: calendar date written as ``YYYY/MM/DD``."""
    if not _SLASH_DATE_RE.match(timestamp):
        return ValidationError("unsupported date format, expected YYYY/MM/DD")
    try:
        datetime.strptime(timestamp, "%Y/%m/%d")
    except ValueError:
        return ValidationError(f"invalid calendar date '{timestamp}'")
    return None


def validate_iso_datetime(timestamp: str) -> ValidationError | None:
    """1.4+ timestamps: ISO-8601 date-time, e.g. ``2024-02-04T10:00:00Z``."""
    if "T" not in timestamp:
        return ValidationError("unsupported date format, expected ISO-8601 date-time")
    try:
        datetime.fromisoformat(timestamp)
    except ValueError:
        return ValidationError(f"invalid ISO-8601 date-time '{timestamp}'")
    return None


def validate_tool_kind(kind: ToolKind) -> ValidationError | None:
    if kind is ToolKind.UNKNOWN:
        return ValidationError("tool kind must be specified")
    return None


def validate_tool_kind_pre_1_5(kind: ToolKind) -> ValidationError | None:
    """Before 1.5 tools can not be services."""
    if kind is ToolKind.SERVICE:
        return ValidationError("service tools require spec version 1.5")
    return validate_tool_kind(kind)


def validate_email(email: str) -> ValidationError | None:
    if not _EMAIL_RE.match(email):
        return ValidationError(f"invalid email address '{email}'")
    return None


def validate_phone(phone: str) -> ValidationError | None:
    if not _PHONE_RE.match(phone) or not any(ch.isdigit() for ch in phone):
        return ValidationError(f"invalid phone number '{phone}'")
    return None
