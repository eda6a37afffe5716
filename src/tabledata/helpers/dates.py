"""
Date Helpers - Parsing and Formatting of Loosely-Typed Date Values.

Row data and filter inputs carry dates as strings shaped like
``{year}-{month}-{day}`` with an optional time of day. All parsed values
are naive ``datetime`` objects in local time; no UTC adjustment is applied,
so ``"2024-12-01"`` always means local midnight of that day.

Invalid input never raises: parsers return ``None``.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Dict, Optional

_DATE_PATTERN = re.compile(
    r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})"
    r"(?:[ T](\d{1,2}):(\d{1,2})(?::(\d{1,2}))?)?\s*$"
)

_FORMAT_TOKENS = re.compile(r"yyyy|yy|MMMM|MMM|MM|M|dd|d|HH|H|hp|hh|h|mm|m|ss|s")

MONTHS_LONG = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
MONTHS_SHORT = [m[:3] for m in MONTHS_LONG]


def is_date(value: Any) -> bool:
    """Check whether value is already a date object."""
    return isinstance(value, (datetime, date))


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a value into a local datetime, keeping the time of day.

    Args:
        value: String, ``datetime`` or ``date``

    Returns:
        Parsed datetime, or None when the value cannot be parsed
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        return None

    match = _DATE_PATTERN.match(value)
    if match:
        parts = [int(p) if p is not None else 0 for p in match.groups()]
        try:
            return datetime(*parts)
        except ValueError:
            return None

    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    # Aware values are shifted into local time and made naive.
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def parse_date_only(value: Any) -> Optional[datetime]:
    """Parse a value into a local datetime truncated to midnight."""
    parsed = parse_date(value)
    if parsed is None:
        return None
    return datetime(parsed.year, parsed.month, parsed.day)


def _leading_zero(num: int) -> str:
    return f"{num:02d}"


def format_date(
    value: Any,
    template: str = "MM/dd/yyyy",
    add_time: bool = False,
) -> str:
    """
    Format a date value using a token template.

    Supported tokens: ``yyyy yy MMMM MMM MM M dd d`` and, when
    ``add_time`` is set, ``HH H hh h mm m ss s hp`` (``hp`` renders AM/PM).

    Args:
        value: Date string or date object
        template: Format template, e.g. ``"yyyy-MM-dd"``
        add_time: Also substitute time-of-day tokens

    Returns:
        Formatted string, or an empty string when value is not a date
    """
    if value is None:
        return ""

    parsed = parse_date(value)
    if parsed is None:
        return ""

    formats: Dict[str, str] = {
        "d": str(parsed.day),
        "dd": _leading_zero(parsed.day),
        "M": str(parsed.month),
        "MM": _leading_zero(parsed.month),
        "MMM": MONTHS_SHORT[parsed.month - 1],
        "MMMM": MONTHS_LONG[parsed.month - 1],
        "yy": str(parsed.year)[-2:],
        "yyyy": str(parsed.year),
    }

    if add_time:
        hours12 = 12 if parsed.hour % 12 == 0 else parsed.hour % 12
        formats.update(
            {
                "s": str(parsed.second),
                "ss": _leading_zero(parsed.second),
                "m": str(parsed.minute),
                "mm": _leading_zero(parsed.minute),
                "h": str(hours12),
                "hh": _leading_zero(hours12),
                "H": str(parsed.hour),
                "HH": _leading_zero(parsed.hour),
                "hp": "AM" if parsed.hour < 12 else "PM",
            }
        )

    return _FORMAT_TOKENS.sub(lambda m: formats.get(m.group(0), m.group(0)), template)
