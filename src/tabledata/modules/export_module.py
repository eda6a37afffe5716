"""
Export Module - Tabular Export of Grid Data.

Builds a header row plus one row of values per record, ready to be
encoded by an external writer (CSV, spreadsheet, ...). Local grids export
the baseline snapshot, ignoring filters; when ``export_remote_source`` is
set the rows are fetched from that url instead.

Formatting is limited so exported values stay close to the
raw data:

    - callable formatter: ``formatter(row, formatter_params)``
    - ``"date"`` / ``"datetime"`` formatter: the grid's date formats
    - ``"module"`` formatter: the named module's ``apply_csv``

Icon columns are excluded.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from tabledata.domain.entities import Column, ColumnType
from tabledata.domain.value_objects import Record
from tabledata.events.bus import POST_INIT_EVENT
from tabledata.helpers.dates import format_date
from tabledata.modules.base import GridModule

logger = logging.getLogger(__name__)


class ExportModule(GridModule):
    """Converts grid rows into header and value rows."""

    module_name = "export"

    def __init__(self, context) -> None:
        super().__init__(context)
        self.data_url = context.settings.export_remote_source

    def initialize(self) -> None:
        self.context.events.subscribe(POST_INIT_EVENT, self.verify_formatters)

    def verify_formatters(self) -> None:
        """Warn about module formatters that cannot format exported values."""
        for column in self.context.column_manager.columns:
            if column.formatter != "module":
                continue
            if self.context.csv_formatter_for(column) is None:
                logger.warning(
                    f"Column '{column.field}' uses module '{column.formatter_module_name}' "
                    f"which cannot format exported values; raw values will be used"
                )

    def identify_columns(self, columns: List[Column]) -> Tuple[List[str], List[Column]]:
        """
        Select the columns to export.

        Args:
            columns: Grid columns

        Returns:
            Tuple of (header labels, exported columns)
        """
        headers: List[str] = []
        exported: List[Column] = []

        for column in columns:
            if column.type == ColumnType.ICON:
                continue
            headers.append(column.label)
            exported.append(column)

        return headers, exported

    def format_value(self, column: Column, row_data: Record) -> str:
        """Export text of one cell."""
        value: Any = row_data.get(column.field)
        formatter = column.formatter
        settings = self.context.settings

        if callable(formatter):
            value = formatter(row_data, column.formatter_params)
        elif formatter == "date":
            value = format_date(value, settings.date_format)
        elif formatter == "datetime":
            value = format_date(value, settings.date_time_format, add_time=True)
        elif formatter == "module":
            module = self.context.csv_formatter_for(column)
            if module is not None:
                value = module.apply_csv(row_data, column)

        return "" if value is None else str(value)

    def build_rows(self, dataset: List[Record]) -> List[List[str]]:
        """Header row followed by one value row per record."""
        headers, columns = self.identify_columns(self.context.column_manager.columns)

        rows = [headers]
        rows.extend([self.format_value(c, record) for c in columns] for record in dataset)
        return rows

    async def export_rows(self, dataset: Optional[List[Record]] = None) -> List[List[str]]:
        """
        Build export rows for dataset, the remote source or the baseline.

        Args:
            dataset: Explicit records to export

        Returns:
            Header row plus value rows
        """
        if dataset is None:
            if self.data_url:
                dataset = await self.context.dataloader.request_data(self.data_url)
                if not isinstance(dataset, list):
                    logger.warning(
                        f"Expected a list of rows from {self.data_url}, "
                        f"got {type(dataset).__name__}"
                    )
                    dataset = []
            else:
                dataset = self.context.persistence.data_cache

        rows = self.build_rows(dataset)
        logger.info(f"Exported {len(rows) - 1} rows")
        return rows
