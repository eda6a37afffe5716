"""
Column Manager - Builds and Holds the Grid's Columns.

Each definition becomes a ``Column`` that owns a ``SortHeader`` created
exactly once, here, at construction or ``add_column`` time.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from tabledata.config.models import ColumnDefinition
from tabledata.domain.entities import Column
from tabledata.sorting.header import SortHeader

logger = logging.getLogger(__name__)

ColumnInput = Union[ColumnDefinition, Mapping[str, Any]]


class ColumnManager:
    """Creates and manages the grid's columns."""

    def __init__(self, columns: Iterable[ColumnInput]) -> None:
        self._columns: List[Column] = []
        self._index_counter = 0

        for definition in columns:
            self._columns.append(self._create(definition))

    @property
    def columns(self) -> List[Column]:
        return self._columns

    @property
    def has_header_filters(self) -> bool:
        return any(c.has_filter for c in self._columns)

    def get_column(self, field: str) -> Optional[Column]:
        return next((c for c in self._columns if c.field == field), None)

    def add_column(self, definition: ColumnInput, index: Optional[int] = None) -> Column:
        """
        Add a column, appended unless a valid insert index is given.

        Args:
            definition: Column definition
            index: Insert position; out-of-range values append

        Returns:
            The created column
        """
        column = self._create(definition)

        if index is not None and 0 <= index < len(self._columns):
            self._columns.insert(index, column)
        else:
            self._columns.append(column)

        logger.debug(f"Added column '{column.field}' at position {self._columns.index(column)}")
        return column

    def _create(self, definition: ColumnInput) -> Column:
        if not isinstance(definition, ColumnDefinition):
            definition = ColumnDefinition.model_validate(dict(definition))

        column = Column(definition, self._index_counter)
        column.header_cell = SortHeader(column)
        self._index_counter += 1
        return column

    def __len__(self) -> int:
        return len(self._columns)
