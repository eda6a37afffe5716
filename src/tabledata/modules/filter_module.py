"""
Filter Module - Header and Ad-Hoc Filter Conditions.

Header filters mirror the filter inputs of filterable columns and are
recompiled into conditions on every render. Grid filters are set through
``set_filter`` and hold at most one condition per field.

Local mode: subscribes to ``render`` at ``Stage.FILTER`` and rebuilds the
live view from the baseline snapshot.
Remote mode: contributes filter values to the ``remoteParams`` chain.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from tabledata.domain.entities import ColumnType, FilterOperator
from tabledata.events.bus import REMOTE_PARAMS_EVENT, RENDER_EVENT, Stage
from tabledata.filters.conditions import FilterCondition, apply_conditions, build_condition
from tabledata.filters.header import HeaderFilter
from tabledata.modules.base import GridModule

logger = logging.getLogger(__name__)


def _is_unset(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


class FilterModule(GridModule):
    """Applies filter conditions to the grid's rows."""

    module_name = "filter"

    def __init__(self, context) -> None:
        super().__init__(context)
        self.header_filters: List[HeaderFilter] = []
        self.grid_filters: List[FilterCondition] = []

    def initialize(self) -> None:
        if self.context.settings.is_remote:
            self.context.events.subscribe(REMOTE_PARAMS_EVENT, self.remote_params)
        else:
            self.context.events.subscribe(RENDER_EVENT, self.render_local, priority=Stage.FILTER)

        self._init_header_filters()

    def _init_header_filters(self) -> None:
        for column in self.context.column_manager.columns:
            if not column.has_filter:
                continue
            if column.header_filter is None:
                column.header_filter = HeaderFilter(column)
            self.header_filters.append(column.header_filter)

    def get_header_filter(self, field: str) -> Optional[HeaderFilter]:
        return next((f for f in self.header_filters if f.field == field), None)

    def remote_params(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Add header and grid filter values to remote query parameters.

        Args:
            params: Accumulated parameters

        Returns:
            The same mapping with filter values added
        """
        for header_filter in self.header_filters:
            if header_filter.is_set:
                params[header_filter.field] = header_filter.value

        for condition in self.grid_filters:
            params[condition.field] = condition.value

        return params

    def compile_filters(self) -> List[FilterCondition]:
        """
        Build the active condition set.

        Header inputs that are unset or fail coercion are skipped; grid
        filters are appended after them.

        Returns:
            Conditions to apply, header filters first
        """
        results: List[FilterCondition] = []

        for header_filter in self.header_filters:
            if not header_filter.is_set:
                continue

            condition = build_condition(
                header_filter.value,
                header_filter.field,
                header_filter.field_type,
                header_filter.filter_type,
                header_filter.filter_params,
            )
            if condition is not None:
                results.append(condition)

        results.extend(self.grid_filters)
        return results

    def apply_filters(self, conditions: List[FilterCondition]) -> None:
        """Replace the live view with baseline rows matching all conditions."""
        persistence = self.context.persistence
        persistence.data = apply_conditions(persistence.data_cache, conditions)
        logger.debug(
            f"Applied {len(conditions)} filters: "
            f"{persistence.row_count}/{len(persistence.data_cache)} rows match"
        )

    def render_local(self) -> None:
        conditions = self.compile_filters()

        if conditions:
            self.apply_filters(conditions)
        else:
            self.context.persistence.restore_data()

    def set_filter(
        self,
        field: str,
        value: Any,
        filter_type: Union[FilterOperator, str, Callable[..., bool]] = FilterOperator.EQUALS,
        field_type: Union[ColumnType, str] = ColumnType.STRING,
        filter_params: Optional[Dict[str, Any]] = None,
    ) -> Optional[FilterCondition]:
        """
        Set the grid filter for field, replacing any existing one.

        An unset value or one that cannot be coerced removes the field's
        filter instead.

        Args:
            field: Row field name
            value: Raw filter value
            filter_type: Operator name or predicate callable
            field_type: Type used to coerce value and row values
            filter_params: Extra parameters for predicate callables

        Returns:
            The stored condition, or None if no filter is active for field
        """
        condition = None
        if not _is_unset(value):
            condition = build_condition(value, field, field_type, filter_type, filter_params)

        index = next((i for i, f in enumerate(self.grid_filters) if f.field == field), None)

        if condition is None:
            if index is not None:
                del self.grid_filters[index]
            return None

        if index is not None:
            self.grid_filters[index] = condition
        else:
            self.grid_filters.append(condition)

        return condition

    def remove_filter(self, field: str) -> None:
        self.grid_filters = [f for f in self.grid_filters if f.field != field]
