"""
Header Filter - Current Input State of a Column's Filter Control.

The UI widget that edits this value lives outside the engine; it writes
``value`` and the filter module reads it during each render cycle.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from tabledata.domain.entities import Column, ColumnType, FilterElement, FilterType


class HeaderFilter:
    """Filter input bound to one filterable column."""

    def __init__(self, column: Column) -> None:
        if not column.has_filter:
            raise ValueError(f"Column '{column.field}' has no filter defined")

        self.field = column.field
        self.filter_type: Optional[FilterType] = column.filter_type
        self.field_type: ColumnType = column.type
        self.filter_params: Dict[str, Any] = column.filter_params
        self.element: FilterElement = column.filter_element or FilterElement.INPUT
        self.options = self._build_options(column.filter_values)
        self.value: Any = [] if self.element in (FilterElement.BETWEEN, FilterElement.MULTI) else ""

    @property
    def filter_is_function(self) -> bool:
        return callable(self.filter_type)

    @property
    def is_set(self) -> bool:
        """False when the input holds nothing to filter on."""
        if self.value is None or self.value == "":
            return False
        if isinstance(self.value, (list, tuple)):
            return any(v not in (None, "") for v in self.value)
        return True

    def clear(self) -> None:
        self.value = [] if isinstance(self.value, list) else ""

    @staticmethod
    def _build_options(filter_values: Any) -> List[Dict[str, Any]]:
        # A string source is fetched by the UI; only static values become options.
        if isinstance(filter_values, dict):
            return [{"value": k, "label": v} for k, v in filter_values.items()]
        if isinstance(filter_values, list):
            return [{"value": v, "label": v} for v in filter_values]
        return []

    def __repr__(self) -> str:
        return f"HeaderFilter(field={self.field!r}, value={self.value!r})"
