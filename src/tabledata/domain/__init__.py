"""
Domain Layer - Core Entities and Value Objects.

Entities:
    - Column: a grid column with its owned UI state
    - ColumnType, FilterOperator, SortDirection, FilterElement: closed enums

Value Objects:
    - SortState: the single active sort
    - RemotePage: remote paged response (rowCount + data)
    - PagerButton: pager navigation entry
"""

from tabledata.domain.entities import (
    Column,
    ColumnType,
    FilterElement,
    FilterOperator,
    FilterType,
    SortDirection,
)
from tabledata.domain.value_objects import PagerButton, Record, RemotePage, SortState

__all__ = [
    "Column",
    "ColumnType",
    "FilterElement",
    "FilterOperator",
    "FilterType",
    "PagerButton",
    "Record",
    "RemotePage",
    "SortDirection",
    "SortState",
]
