"""
Sort Comparators - Pure Functions Keyed by Column Type.

Every comparator takes two raw row values and a direction and returns
-1, 0 or 1. Empty values sort before any non-empty value; ``desc``
negates the result.

Usage:
    registry = SorterRegistry.default()
    compare = registry.get("string")
    rows = sorted(rows, key=cmp_to_key(lambda a, b: compare(a["name"], b["name"], "asc")))
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from tabledata.domain.entities import ColumnType, SortDirection
from tabledata.filters.coercion import to_number
from tabledata.helpers.dates import parse_date

logger = logging.getLogger(__name__)

Comparator = Callable[[Any, Any, Union[SortDirection, str]], int]


def _directed(comparison: int, direction: Union[SortDirection, str]) -> int:
    return -comparison if direction == SortDirection.DESC else comparison


def _compare_present(a: Any, b: Any) -> Optional[int]:
    """Order missing values first; None when both are present."""
    if a is None:
        return 0 if b is None else -1
    if b is None:
        return 1
    return None


def compare_number(a: Any, b: Any, direction: Union[SortDirection, str] = SortDirection.ASC) -> int:
    num_a, num_b = to_number(a), to_number(b)
    comparison = _compare_present(num_a, num_b)
    if comparison is None:
        comparison = (num_a > num_b) - (num_a < num_b)
    return _directed(comparison, direction)


def compare_string(a: Any, b: Any, direction: Union[SortDirection, str] = SortDirection.ASC) -> int:
    """Case-insensitive ordering; empty values sort first."""
    comparison = _compare_present(a or None, b or None)
    if comparison is None:
        upper_a, upper_b = str(a).upper(), str(b).upper()
        comparison = (upper_a > upper_b) - (upper_a < upper_b)
    return _directed(comparison, direction)


def compare_date(a: Any, b: Any, direction: Union[SortDirection, str] = SortDirection.ASC) -> int:
    """Chronological ordering; unparsable values count as empty."""
    date_a, date_b = parse_date(a), parse_date(b)
    if date_a is None and date_b is None:
        return 0
    comparison = _compare_present(date_a, date_b)
    if comparison is None:
        comparison = (date_a > date_b) - (date_a < date_b)
    return _directed(comparison, direction)


class SorterRegistry:
    """Maps column types to comparators."""

    def __init__(self) -> None:
        self._sorters: Dict[str, Comparator] = {}

    @classmethod
    def default(cls) -> "SorterRegistry":
        """Registry with the built-in number, string, date and datetime sorters."""
        registry = cls()
        registry.register(ColumnType.NUMBER, compare_number)
        registry.register(ColumnType.STRING, compare_string)
        registry.register(ColumnType.DATE, compare_date)
        registry.register(ColumnType.DATETIME, compare_date)
        return registry

    def register(self, column_type: Union[ColumnType, str], comparator: Comparator) -> None:
        """
        Register (or replace) the comparator for a column type.

        Raises:
            ValueError: For icon columns, which are never sorted
        """
        key = str(getattr(column_type, "value", column_type))
        if key == ColumnType.ICON.value:
            raise ValueError("Icon columns cannot be sorted")
        self._sorters[key] = comparator
        logger.debug(f"Registered sorter for type '{key}'")

    def get(self, column_type: Union[ColumnType, str]) -> Comparator:
        """
        Comparator for column_type.

        Raises:
            KeyError: If no comparator is registered for the type
        """
        key = str(getattr(column_type, "value", column_type))
        if key not in self._sorters:
            raise KeyError(f"No sorter registered for column type '{key}'")
        return self._sorters[key]

    def __contains__(self, column_type: object) -> bool:
        return str(getattr(column_type, "value", column_type)) in self._sorters

    @property
    def types(self) -> List[str]:
        return list(self._sorters)
