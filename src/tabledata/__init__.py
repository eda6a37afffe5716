"""
TableData - Client-Side Tabular Data Engine.

Filters, sorts and pages an in-memory or remotely sourced record set and
decides exactly which rows to display, in which order. Work is split
across pluggable modules coordinated through a priority-ordered event bus.

Architecture:
    - Event bus with explicit render-cycle stages (filter, sort, rows, count)
    - Async data pipelines for load and refresh phases
    - Type-aware filter conditions behind a single coercion gate
    - Pluggable sort comparators keyed by column type
    - Configuration-driven behavior via Pydantic models and YAML

Main Components:
    - domain: Column, enums and value objects
    - config: Settings models and loaders
    - events: Event bus and render stages
    - data: Persistence store, pipelines and remote loader
    - filters / sorting: Filter conditions and sort comparators
    - modules: Filter, sort, row, pager, row count and export modules
    - core: GridCore / TableData orchestrators

Example:
    >>> from tabledata import TableData
    >>> grid = TableData({"columns": [{"field": "id", "type": "number"}], "data": rows})
    >>> await grid.init()
    >>> await grid.set_filter("id", 10, ">=", "number")
    >>> grid.context.renderer.rows

"""

import logging

from tabledata.config.loader import load_config
from tabledata.config.models import ColumnDefinition, GridSettings
from tabledata.core.grid import GridCore, TableData

__version__ = "0.4.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for TableData.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import tabledata
        >>> tabledata.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("tabledata").setLevel(level)


__all__ = [
    "ColumnDefinition",
    "GridCore",
    "GridSettings",
    "TableData",
    "configure_logging",
    "load_config",
]
