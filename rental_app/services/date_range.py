from __future__ import annotations

import re
from datetime import date

from rental_app.core.errors import InvalidDateFormat, InvalidDateRange

# Canonical yyyy-MM-dd only; fromisoformat alone also takes 20240605 and similar forms
_CANONICAL_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_date(text: str | None) -> date:
    if not text or not _CANONICAL_DATE.fullmatch(text):
        raise InvalidDateFormat(text or "")
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise InvalidDateFormat(text)


def validate_order(start: date, end: date) -> None:
    # Equal dates describe an empty stay
    if start >= end:
        raise InvalidDateRange(format_date(start), format_date(end))


def format_date(value: date) -> str:
    return value.isoformat()
