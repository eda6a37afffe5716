"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe characteristics of the
grid state but have no conceptual identity.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from tabledata.domain.entities import ColumnType, SortDirection

# A single data row: field name -> raw value
Record = Dict[str, Any]


class SortState(BaseModel):
    """The single active sort of the grid."""

    column: str
    direction: SortDirection
    type: ColumnType = ColumnType.STRING

    model_config = {"frozen": True}


class RemotePage(BaseModel):
    """One page of rows returned by a remote paged source."""

    row_count: int = Field(default=0, ge=0, alias="rowCount")
    data: List[Record] = Field(default_factory=list)

    model_config = {"frozen": True, "populate_by_name": True}


class PagerButton(BaseModel):
    """A pager navigation entry; rendering is left to the UI."""

    label: str
    page: int = Field(ge=1)
    is_current: bool = False

    model_config = {"frozen": True}
