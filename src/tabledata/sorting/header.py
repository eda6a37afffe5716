"""
Sort Header - Per-Column Sort State Machine.

States: Unsorted -> SortedDesc -> SortedAsc -> SortedDesc ... A newly
selected column always starts descending; removing the flag returns it to
Unsorted.
"""

from __future__ import annotations

from tabledata.domain.entities import Column, ColumnType, SortDirection


class SortHeader:
    """Sort flags for one column, read by the header UI for display."""

    def __init__(self, column: Column) -> None:
        self.name = column.field
        self.type: ColumnType = column.type
        self.direction = SortDirection.DESC
        self.direction_next = SortDirection.DESC
        self.is_current_sort = False

    def set_sort_flag(self) -> None:
        """Apply the pending direction and queue the opposite one."""
        self.direction = self.direction_next
        self.direction_next = self.direction.toggled
        self.is_current_sort = True

    def remove_sort_flag(self) -> None:
        """Return to the unsorted state."""
        self.direction = SortDirection.DESC
        self.direction_next = SortDirection.DESC
        self.is_current_sort = False

    def __repr__(self) -> str:
        state = self.direction.value if self.is_current_sort else "unsorted"
        return f"SortHeader(name={self.name!r}, state={state})"
