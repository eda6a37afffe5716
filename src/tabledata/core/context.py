"""
Grid Context - Shared State for All Modules.

Holds settings, the event bus, the data pipeline, the loader, the
persistence store, the columns, the row renderer and the module
instances. Every module receives the same context at construction.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import httpx

from tabledata.adapters.memory_renderer import InMemoryRowRenderer
from tabledata.config.models import GridSettings
from tabledata.core.columns import ColumnInput, ColumnManager
from tabledata.data.loader import DataLoader
from tabledata.data.persistence import DataPersistence
from tabledata.data.pipeline import DataPipeline
from tabledata.domain.entities import Column
from tabledata.domain.value_objects import Record
from tabledata.events.bus import EventBus
from tabledata.interfaces.row_renderer import RowRenderer
from tabledata.modules.base import CsvFormattable, Formattable, GridModule


class GridContext:
    """Core state of a grid."""

    def __init__(
        self,
        columns: Iterable[ColumnInput],
        settings: GridSettings,
        data: Optional[List[Record]] = None,
        *,
        renderer: Optional[RowRenderer] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize grid context.

        Args:
            columns: Column definitions
            settings: Validated grid settings
            data: Initial rows
            renderer: Row rendering collaborator (defaults to in-memory)
            transport: Optional httpx transport for the data loader
        """
        self.settings = settings
        self.events = EventBus()
        self.pipeline = DataPipeline()
        self.dataloader = DataLoader(settings, transport=transport)
        self.persistence = DataPersistence(data if data is not None else [])
        self.column_manager = ColumnManager(columns)
        self.renderer: RowRenderer = renderer if renderer is not None else InMemoryRowRenderer()
        self.modules: Dict[str, GridModule] = {}

    def formatter_for(self, column: Column) -> Optional[Formattable]:
        """Display formatter module for a column using ``formatter_module_name``."""
        module = self._formatter_module(column)
        return module if isinstance(module, Formattable) else None

    def csv_formatter_for(self, column: Column) -> Optional[CsvFormattable]:
        """Export formatter module for a column using ``formatter_module_name``."""
        module = self._formatter_module(column)
        return module if isinstance(module, CsvFormattable) else None

    def _formatter_module(self, column: Column) -> Optional[GridModule]:
        if column.formatter != "module" or not column.formatter_module_name:
            return None
        return self.modules.get(column.formatter_module_name)
