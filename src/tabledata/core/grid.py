"""
Grid Core - Main Orchestrator.

GridCore owns the context and coordinates module registration, module
initialization and render cycles. TableData is the batteries-included
grid that registers the standard module set.

Lifecycle:
    1. ``GridCore(settings)`` validates settings and builds the context
    2. ``add_modules`` / ``add_column`` customize the grid
    3. ``init`` initializes modules, runs the ``init`` pipeline, renders

Design Notes:
    - Exactly one row-producing module is guaranteed: the pager when
      paging is enabled, otherwise the row module
    - Module initialization happens once; later calls are no-ops
    - A grid without columns is invalid; lifecycle calls on it do nothing
"""

from __future__ import annotations

import logging
from typing import Any, Callable, ClassVar, Dict, List, Mapping, Optional, Type, Union

import httpx

from tabledata.config.loader import ConfigLoader
from tabledata.config.models import GridSettings
from tabledata.core.context import GridContext
from tabledata.domain.entities import Column, ColumnType, FilterOperator
from tabledata.events.bus import POST_INIT_EVENT, RENDER_EVENT
from tabledata.interfaces.row_renderer import RowRenderer
from tabledata.modules.base import GridModule
from tabledata.modules.export_module import ExportModule
from tabledata.modules.filter_module import FilterModule
from tabledata.modules.pager_module import PagerModule
from tabledata.modules.row_count_module import RowCountModule
from tabledata.modules.row_module import RowModule
from tabledata.modules.sort_module import SortModule

logger = logging.getLogger(__name__)

INIT_PIPELINE = "init"
REFRESH_PIPELINE = "refresh"


class GridCore:
    """
    Core grid orchestrator.

    Register modules with ``add_modules`` before calling ``init``.

    Example:
        >>> grid = GridCore({"columns": [{"field": "id", "type": "number"}]})
        >>> grid.add_modules(FilterModule, SortModule)
        >>> await grid.init()
    """

    def __init__(
        self,
        settings: Union[GridSettings, Mapping[str, Any]],
        *,
        renderer: Optional[RowRenderer] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize grid.

        Args:
            settings: Validated settings, or user settings merged over the defaults
            renderer: Row rendering collaborator (defaults to in-memory)
            transport: Optional httpx transport for remote requests

        Raises:
            ValidationError: If a raw settings mapping is invalid
        """
        if not isinstance(settings, GridSettings):
            settings = ConfigLoader().load_from_dict(settings)

        self.settings = settings
        self.enable_paging = settings.enable_paging
        self.is_valid = True
        self._module_types: List[Type[GridModule]] = []
        self._modules_created = False
        self.context: Optional[GridContext] = None

        if not settings.columns:
            logger.error("Missing required columns definition")
            self.is_valid = False
        else:
            self.context = GridContext(
                settings.columns,
                settings,
                settings.data,
                renderer=renderer,
                transport=transport,
            )

    @property
    def modules(self) -> Dict[str, GridModule]:
        return self.context.modules if self.context else {}

    def add_modules(self, *modules: Type[GridModule]) -> None:
        """
        Register module classes; call before ``init``.

        Args:
            *modules: GridModule subclasses, initialized in this order
        """
        self._module_types.extend(modules)

    def add_column(
        self, definition: Mapping[str, Any], index: Optional[int] = None
    ) -> Optional[Column]:
        """
        Add a column; call before ``init``.

        Args:
            definition: Column definition
            index: Insert position; None or out-of-range appends

        Returns:
            The created column, or None when the grid is invalid
        """
        if not self.is_valid:
            logger.warning(f"Grid is invalid; column '{definition.get('field')}' not added")
            return None

        return self.context.column_manager.add_column(definition, index)

    def _has_module(self, name: str) -> bool:
        return any(m.module_name == name for m in self._module_types)

    async def init_modules(self) -> None:
        """
        Instantiate and initialize every registered module exactly once.

        Adds the default row-producing module when none was registered,
        then fires ``postInitMod`` for cross-module wiring.
        """
        if self._modules_created or not self.is_valid:
            return

        if self.settings.enable_paging:
            if not self._has_module(PagerModule.module_name):
                self._module_types.append(PagerModule)
        elif not self._has_module(RowModule.module_name):
            self._module_types.append(RowModule)

        for module_type in self._module_types:
            module = module_type(self.context)
            self.context.modules[module_type.module_name] = module
            module.initialize()
            logger.debug(f"Initialized module '{module_type.module_name}'")

        self._modules_created = True
        await self.context.events.trigger(POST_INIT_EVENT)

    async def init(self) -> None:
        """Initialize modules, load data and render the first view."""
        if not self.is_valid:
            logger.error("Missing required columns definition; grid not initialized")
            return

        await self.init_modules()

        if not self.settings.is_remote and self.settings.remote_url:
            # Local processing over rows fetched once from the remote url.
            self.context.pipeline.add_step(INIT_PIPELINE, self._load_remote_rows)
            self.context.pipeline.add_step(REFRESH_PIPELINE, self._load_remote_rows)

        if self.context.pipeline.has_pipeline(INIT_PIPELINE):
            await self.context.pipeline.execute(INIT_PIPELINE)

        await self.render()

    async def _load_remote_rows(self) -> None:
        data = await self.context.dataloader.request_grid_data()
        self.context.persistence.set_data(data)
        logger.info(f"Loaded {self.context.persistence.row_count} rows from remote source")

    async def render(self) -> None:
        """Run one render cycle."""
        if not self.is_valid:
            logger.warning("Grid is invalid; nothing to render")
            return

        await self.context.events.trigger(RENDER_EVENT)

    async def refresh(self) -> None:
        """Reload data through the ``refresh`` pipeline, then render."""
        if not self.is_valid:
            logger.warning("Grid is invalid; nothing to refresh")
            return

        if self.context.pipeline.has_pipeline(REFRESH_PIPELINE):
            await self.context.pipeline.execute(REFRESH_PIPELINE)

        await self.render()

    async def set_filter(
        self,
        field: str,
        value: Any,
        filter_type: Union[FilterOperator, str, Callable[..., bool]] = FilterOperator.EQUALS,
        field_type: Union[ColumnType, str] = ColumnType.STRING,
        filter_params: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Apply a filter condition outside the header filter inputs.

        Args:
            field: Target field
            value: Filter value; empty or invalid values remove the filter
            filter_type: Operator name or predicate callable
            field_type: Type used to coerce values
            filter_params: Extra parameters for predicate callables
        """
        module = self.modules.get(FilterModule.module_name)
        if module is None:
            logger.warning(
                "Filter module is not enabled; set TableData.default_options['enable_filter']"
            )
            return

        module.set_filter(field, value, filter_type, field_type, filter_params)
        await self.render()

    async def remove_filter(self, field: str) -> None:
        """Remove the ad-hoc filter condition for field."""
        module = self.modules.get(FilterModule.module_name)
        if module is None:
            logger.warning(
                "Filter module is not enabled; set TableData.default_options['enable_filter']"
            )
            return

        module.remove_filter(field)
        await self.render()

    async def sort(self, field: str) -> None:
        """Select field for sorting, as a header click would."""
        module = self.modules.get(SortModule.module_name)
        if module is None:
            logger.warning(
                "Sort module is not enabled; set TableData.default_options['enable_sort']"
            )
            return

        await module.handle_sort(field)


class TableData(GridCore):
    """Grid with the standard module set registered."""

    default_options: ClassVar[Dict[str, bool]] = {
        "enable_sort": True,
        "enable_filter": True,
    }

    def __init__(
        self,
        settings: Union[GridSettings, Mapping[str, Any]],
        *,
        renderer: Optional[RowRenderer] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(settings, renderer=renderer, transport=transport)

        if self.default_options.get("enable_filter"):
            self.add_modules(FilterModule)

        if self.default_options.get("enable_sort"):
            self.add_modules(SortModule)

        if self.settings.row_count_id:
            self.add_modules(RowCountModule)

        if self.settings.enable_export:
            self.add_modules(ExportModule)
