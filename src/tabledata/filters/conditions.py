"""
Filter Conditions - Typed Predicates Bound to One Field.

Three condition variants share the ``evaluate(row_value, row)`` contract:

    - ComparisonCondition: built-in operator over coerced values
    - DateCondition: built-in operator over datetimes (compared by value)
    - FunctionCondition: user predicate receiving the raw filter value

Operators read as ``row_value <operator> filter_value``; ``between`` takes a
``[low, high]`` range and ``in`` a list of accepted values.

Design Notes:
    - Operators are a closed enum; the operation table must cover every
      member, which is checked when this module is imported
    - Ordering against missing or incomparable row values is False
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from tabledata.domain.entities import ColumnType, FilterOperator
from tabledata.domain.value_objects import Record
from tabledata.filters.coercion import coerce

logger = logging.getLogger(__name__)


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _ordered(compare: Callable[[Any, Any], bool]) -> Callable[[Any, Any], bool]:
    def operation(row_value: Any, filter_value: Any) -> bool:
        if _is_blank(row_value):
            return False
        try:
            return bool(compare(row_value, filter_value))
        except TypeError:
            return False

    return operation


def _like(row_value: Any, filter_value: Any) -> bool:
    if _is_blank(row_value):
        return False
    return str(filter_value).lower() in str(row_value).lower()


def _between(row_value: Any, filter_value: Any) -> bool:
    if not isinstance(filter_value, (list, tuple)) or len(filter_value) != 2:
        logger.warning(f"Filter error - 'between' value is not a [low, high] pair: {filter_value!r}")
        return False
    if _is_blank(row_value):
        return False
    low, high = filter_value
    try:
        return bool(low <= row_value <= high)
    except TypeError:
        return False


def _in(row_value: Any, filter_value: Any) -> bool:
    if not isinstance(filter_value, (list, tuple, set, frozenset)):
        logger.warning(f"Filter error - 'in' value is not a list: {filter_value!r}")
        return False
    if not filter_value:
        return True
    return row_value in filter_value


_OPERATIONS: Dict[FilterOperator, Callable[[Any, Any], bool]] = {
    FilterOperator.EQUALS: lambda row_value, filter_value: row_value == filter_value,
    FilterOperator.LIKE: _like,
    FilterOperator.LT: _ordered(lambda a, b: a < b),
    FilterOperator.LTE: _ordered(lambda a, b: a <= b),
    FilterOperator.GT: _ordered(lambda a, b: a > b),
    FilterOperator.GTE: _ordered(lambda a, b: a >= b),
    FilterOperator.NE: lambda row_value, filter_value: row_value != filter_value,
    FilterOperator.BETWEEN: _between,
    FilterOperator.IN: _in,
}

_unhandled = set(FilterOperator) - set(_OPERATIONS)
if _unhandled:
    raise RuntimeError(f"Filter operators without an operation: {sorted(_unhandled)}")


class FilterCondition(ABC):
    """A single predicate bound to one field."""

    field: str
    value: Any
    field_type: Optional[ColumnType]

    @abstractmethod
    def evaluate(self, row_value: Any, row: Record) -> bool:
        """Return True when the row matches this condition."""

    def row_value(self, row: Record) -> Any:
        """Extract this condition's field from row, coerced to its type."""
        raw = row.get(self.field)
        if self.field_type is None:
            return raw
        return coerce(raw, self.field_type)

    def matches(self, row: Record) -> bool:
        return self.evaluate(self.row_value(row), row)


class ComparisonCondition(FilterCondition):
    """Built-in operator comparison against a coerced filter value."""

    def __init__(
        self,
        value: Any,
        field: str,
        operator: Union[FilterOperator, str],
        field_type: Union[ColumnType, str] = ColumnType.STRING,
    ) -> None:
        """
        Args:
            value: Filter value already coerced to field_type
            field: Row field name
            operator: Operator name; unknown names raise ValueError
            field_type: Column type used to coerce row values
        """
        self.value = value
        self.field = field
        self.operator = FilterOperator(operator)
        self.field_type = ColumnType(field_type or ColumnType.STRING)

    def evaluate(self, row_value: Any, row: Record) -> bool:
        return _OPERATIONS[self.operator](row_value, self.value)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(field={self.field!r}, "
            f"operator={self.operator.value!r}, value={self.value!r})"
        )


class DateCondition(ComparisonCondition):
    """Comparison over datetimes; non-date row values never match."""

    def __init__(
        self,
        value: Union[datetime, List[datetime]],
        field: str,
        operator: Union[FilterOperator, str],
        field_type: Union[ColumnType, str] = ColumnType.DATE,
    ) -> None:
        super().__init__(value, field, operator, field_type)

    def evaluate(self, row_value: Any, row: Record) -> bool:
        if not isinstance(row_value, datetime):
            return False
        return super().evaluate(row_value, row)


class FunctionCondition(FilterCondition):
    """Delegates matching to a user supplied predicate."""

    def __init__(
        self,
        value: Any,
        field: str,
        predicate: Callable[..., bool],
        params: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.value = value
        self.field = field
        self.predicate = predicate
        self.params = params if params is not None else {}
        self.field_type = None

    def evaluate(self, row_value: Any, row: Record) -> bool:
        return self.predicate(self.value, row_value, row, self.params)

    def __repr__(self) -> str:
        return f"FunctionCondition(field={self.field!r}, value={self.value!r})"


def build_condition(
    value: Any,
    field: str,
    field_type: Union[ColumnType, str, None],
    operator: Union[FilterOperator, str, Callable[..., bool]],
    params: Optional[Dict[str, Any]] = None,
) -> Optional[FilterCondition]:
    """
    Build the condition variant matching operator and field type.

    Args:
        value: Raw filter value
        field: Row field name
        field_type: Column type of the field
        operator: Operator name or predicate callable
        params: Extra parameters for predicate callables

    Returns:
        A condition, or None when value cannot be coerced to field_type
    """
    if callable(operator):
        return FunctionCondition(value=value, field=field, predicate=operator, params=params)

    field_type = ColumnType(field_type or ColumnType.STRING)
    converted = coerce(value, field_type)

    if converted is None:
        logger.debug(f"Dropping filter on '{field}': {value!r} is not a valid {field_type.value}")
        return None

    if field_type.is_temporal:
        return DateCondition(value=converted, field=field, operator=operator, field_type=field_type)

    return ComparisonCondition(value=converted, field=field, operator=operator, field_type=field_type)


def apply_conditions(rows: Iterable[Record], conditions: List[FilterCondition]) -> List[Record]:
    """Return the rows matching every condition, in their original order."""
    return [row for row in rows if all(c.matches(row) for c in conditions)]
