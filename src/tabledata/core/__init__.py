"""
Core Package - Grid Orchestration.

    - GridCore: module registration, initialization and render cycles
    - TableData: GridCore with the standard module set
    - GridContext: shared state handed to every module
    - ColumnManager: builds and holds the grid's columns
"""

from tabledata.core.columns import ColumnManager
from tabledata.core.context import GridContext
from tabledata.core.grid import GridCore, TableData

__all__ = ["ColumnManager", "GridContext", "GridCore", "TableData"]
