"""
Value Coercion - The Single Gate for Filter Input.

Converts loosely-typed input into values comparable with a column's typed
row values. Coercion fails closed: a ``None`` result means "do not build a
filter for this field", never "filter on None".
"""

from __future__ import annotations

import math
from typing import Any, Optional, Union

from tabledata.domain.entities import ColumnType
from tabledata.helpers.dates import parse_date, parse_date_only


def to_number(value: Any) -> Optional[Union[int, float]]:
    """Parse a number; None when the value is not a finite number."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, str):
        return None

    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _coerce_scalar(value: Any, target_type: Union[ColumnType, str, None]) -> Any:
    if target_type == ColumnType.NUMBER:
        return to_number(value)
    if target_type == ColumnType.DATE:
        return parse_date_only(value)
    if target_type == ColumnType.DATETIME:
        return parse_date(value)
    return value


def coerce(value: Any, target_type: Union[ColumnType, str, None]) -> Any:
    """
    Convert value to the column's target type.

    ``None`` and the empty string are returned unchanged; an empty string
    means "unset" and callers skip it before building a condition.

    Args:
        value: Raw input value (scalar or list for between/in)
        target_type: Column type name

    Returns:
        Typed value, or None when the value cannot be converted
    """
    if value is None or (isinstance(value, str) and value == ""):
        return value

    if isinstance(value, (list, tuple)):
        converted = [_coerce_scalar(v, target_type) for v in value]
        return None if any(v is None for v in converted) else converted

    return _coerce_scalar(value, target_type)
