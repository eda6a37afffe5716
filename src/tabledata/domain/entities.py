"""
Core Domain Entities.

This module defines the fundamental entities of the tabledata domain:
column types, filter operators, sort directions and the Column itself.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Union

if TYPE_CHECKING:
    from tabledata.config.models import ColumnDefinition
    from tabledata.filters.header import HeaderFilter
    from tabledata.sorting.header import SortHeader


class ColumnType(str, Enum):
    """Declared value type of a column."""

    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    DATETIME = "datetime"
    ICON = "icon"

    @property
    def is_temporal(self) -> bool:
        return self in (ColumnType.DATE, ColumnType.DATETIME)


class FilterOperator(str, Enum):
    """Built-in comparison operators for filter conditions."""

    EQUALS = "equals"
    LIKE = "like"
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="
    NE = "!="
    BETWEEN = "between"
    IN = "in"


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @property
    def toggled(self) -> "SortDirection":
        return SortDirection.ASC if self is SortDirection.DESC else SortDirection.DESC


class FilterElement(str, Enum):
    """Kind of header input a filterable column exposes."""

    INPUT = "input"
    BETWEEN = "between"
    SELECT = "select"
    MULTI = "multi"


FilterType = Union[FilterOperator, Callable[..., bool]]


class Column:
    """
    A single grid column built from a user definition.

    The column is immutable after creation except for the UI-state objects
    it owns (``header_cell`` and ``header_filter``), which are attached once.
    """

    def __init__(self, definition: "ColumnDefinition", index: int = 0) -> None:
        """
        Initialize column from its definition.

        Args:
            definition: Validated column definition
            index: Position of the column at creation time
        """
        self.index = index

        if definition.field is None:
            self.field = f"column{index}"
            self.type = ColumnType.ICON
            self.label = ""
        else:
            self.field = definition.field
            self.type = definition.type
            self.label = definition.label or definition.field[:1].upper() + definition.field[1:]

        if definition.formatter_module_name:
            self.formatter: Optional[Union[str, Callable[..., Any]]] = "module"
            self.formatter_module_name: Optional[str] = definition.formatter_module_name
        else:
            self.formatter = definition.formatter
            self.formatter_module_name = None
        self.formatter_params: Dict[str, Any] = dict(definition.formatter_params or {})

        self.width = definition.width
        self.column_size = (
            f"tabledata-col-{definition.column_size}" if definition.column_size else ""
        )

        self.tooltip_field = definition.tooltip_field
        self.tooltip_layout = definition.tooltip_layout if definition.tooltip_field else None

        self.has_filter = self.type != ColumnType.ICON and definition.filter_type is not None
        self.filter_type: Optional[FilterType] = None
        self.filter_params: Dict[str, Any] = {}
        self.filter_values: Any = None
        self.filter_multi_select = False
        self.filter_element: Optional[FilterElement] = None

        if self.has_filter:
            self.filter_type = definition.filter_type
            self.filter_params = dict(definition.filter_params or {})
            self.filter_element = (
                FilterElement.BETWEEN
                if self.filter_type == FilterOperator.BETWEEN
                else FilterElement.INPUT
            )
            if definition.filter_values is not None:
                self.filter_values = definition.filter_values
                self.filter_multi_select = definition.filter_multi_select
                self.filter_element = (
                    FilterElement.MULTI if definition.filter_multi_select else FilterElement.SELECT
                )

        self.header_cell: Optional["SortHeader"] = None
        self.header_filter: Optional["HeaderFilter"] = None

    @property
    def is_sortable(self) -> bool:
        return self.type != ColumnType.ICON

    def __repr__(self) -> str:
        return f"Column(field={self.field!r}, type={self.type.value!r})"
