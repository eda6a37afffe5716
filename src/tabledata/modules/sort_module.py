"""
Sort Module - Single-Column Sorting.

Local mode: subscribes to ``render`` at ``Stage.SORT`` and stably sorts the
live view by the current column. Remote mode: contributes ``sort`` and
``direction`` to the ``remoteParams`` chain, starting from the configured
default sort.

Only one column holds the current sort. Selecting a new column resets the
previous one and applies ``desc`` first; selecting it again toggles.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Any, Dict, List, Optional

from tabledata.domain.entities import ColumnType, SortDirection
from tabledata.domain.value_objects import SortState
from tabledata.events.bus import REMOTE_PARAMS_EVENT, RENDER_EVENT, Stage
from tabledata.modules.base import GridModule
from tabledata.sorting.comparators import SorterRegistry
from tabledata.sorting.header import SortHeader

logger = logging.getLogger(__name__)


class SortModule(GridModule):
    """Tracks the current sort and applies it to the grid's rows."""

    module_name = "sort"

    def __init__(self, context) -> None:
        super().__init__(context)
        self.header_cells: List[SortHeader] = []
        self.current_sort_column = ""
        self.current_direction = ""
        self.current_type = ""
        self.is_remote = False
        self.sorters: Optional[SorterRegistry] = None

    def initialize(self) -> None:
        settings = self.context.settings
        self.is_remote = settings.is_remote

        if self.is_remote:
            self.current_sort_column = settings.remote_sort_default_column
            self.current_direction = settings.remote_sort_default_direction
            self.context.events.subscribe(REMOTE_PARAMS_EVENT, self.remote_params)
        else:
            self.sorters = SorterRegistry.default()
            self.context.events.subscribe(RENDER_EVENT, self.render_local, priority=Stage.SORT)

        self._init_header_cells()

    def _init_header_cells(self) -> None:
        for column in self.context.column_manager.columns:
            if column.is_sortable and column.header_cell is not None:
                self.header_cells.append(column.header_cell)

    @property
    def sort_state(self) -> Optional[SortState]:
        if not self.current_sort_column:
            return None
        column = self.context.column_manager.get_column(self.current_sort_column)
        return SortState(
            column=self.current_sort_column,
            direction=SortDirection(self.current_direction),
            type=column.type if column else ColumnType.STRING,
        )

    def remote_params(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Add the current sort column and direction to remote parameters."""
        params["sort"] = self.current_sort_column
        params["direction"] = self.current_direction
        return params

    def update_sort_state(self, header_cell: SortHeader) -> None:
        """Make header_cell the current sort and advance its state."""
        self.current_sort_column = header_cell.name
        self.current_direction = header_cell.direction_next.value
        self.current_type = header_cell.type.value

        if not header_cell.is_current_sort:
            self.reset_sort()

        header_cell.set_sort_flag()

    def reset_sort(self) -> None:
        """Clear the flag of the column currently holding the sort."""
        cell = next((c for c in self.header_cells if c.is_current_sort), None)
        if cell is not None:
            cell.remove_sort_flag()

    async def handle_sort(self, field: str) -> None:
        """
        Select field for sorting and re-render.

        Args:
            field: Field of a sortable column
        """
        header_cell = next((c for c in self.header_cells if c.name == field), None)
        if header_cell is None:
            logger.warning(f"Column '{field}' is not sortable")
            return

        self.update_sort_state(header_cell)
        logger.debug(f"Sorting by '{field}' {self.current_direction}")

        await self.context.events.trigger(RENDER_EVENT)

    def render_local(self) -> None:
        if not self.current_sort_column or self.sorters is None:
            return

        compare = self.sorters.get(self.current_type)
        field = self.current_sort_column
        direction = self.current_direction
        persistence = self.context.persistence

        persistence.data = sorted(
            persistence.data,
            key=cmp_to_key(lambda a, b: compare(a.get(field), b.get(field), direction)),
        )
