"""
Row Renderer Protocol.

Defines the abstract interface of the row rendering collaborator. The
engine decides which rows to show and in what order; drawing them is the
renderer's job.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - ``total_count`` overrides the displayed count (paged views)
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from tabledata.domain.value_objects import Record


@runtime_checkable
class RowRenderer(Protocol):
    """Abstract interface for row rendering."""

    @property
    def row_count(self) -> int:
        """Number of rows the grid currently reports."""
        ...

    def render_rows(self, rows: List[Record], total_count: Optional[int] = None) -> None:
        """
        Display rows.

        Args:
            rows: Ordered rows to display
            total_count: Optional count override (e.g. total across all pages)
        """
        ...
