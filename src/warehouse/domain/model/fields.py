"""Parsing and formatting of the scalar fields records are built from.

These functions are shared by the storage codec and the use-case
handlers, so a value accepted from the keyboard is exactly a value
that can be read back from disk. All of them raise ValidationError.
"""

from __future__ import annotations

import re
from datetime import date

from warehouse.domain.exceptions import ValidationError

DATE_FORMAT_HINT = "YYYY-MM-DD"

_ID_PATTERN = re.compile(r"[0-9]+")
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_record_id(text: str) -> int:
    """Parse a positive decimal record id.

    Only ASCII digits are accepted; signs, whitespace and underscores
    are rejected even though ``int()`` would take them.
    """
    if not _ID_PATTERN.fullmatch(text):
        raise ValidationError(f"Invalid ID: {text!r}")
    value = int(text)
    if value < 1:
        raise ValidationError(f"ID must be a positive integer, got {value}")
    return value


def parse_date(text: str) -> date:
    """Parse a calendar date written as YYYY-MM-DD."""
    if not _DATE_PATTERN.fullmatch(text):
        raise ValidationError(
            f"Invalid date {text!r}, expected {DATE_FORMAT_HINT}"
        )
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise ValidationError(f"Invalid date {text!r}: {exc}") from exc


def format_date(value: date) -> str:
    return value.isoformat()


def clean_name(text: str, kind: str) -> str:
    """Trim a name and reject empty or multi-line values."""
    name = text.strip()
    if not name:
        raise ValidationError(f"{kind} name is required")
    if "\n" in name or "\r" in name:
        raise ValidationError(f"{kind} name must fit on a single line")
    return name
