"""
Grid Module Base and Capability Protocols.

Every processing module subclasses ``GridModule``: it is built with the
shared context and wires itself to the event bus in ``initialize``.
Optional capabilities are expressed as protocols and detected with
``isinstance``:

    - Formattable: formats a cell for display
    - CsvFormattable: formats a cell for export
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

from tabledata.domain.entities import Column
from tabledata.domain.value_objects import Record

if TYPE_CHECKING:
    from tabledata.core.context import GridContext


class GridModule(ABC):
    """Base class for pluggable grid modules."""

    module_name: ClassVar[str]

    def __init__(self, context: "GridContext") -> None:
        self.context = context

    @abstractmethod
    def initialize(self) -> None:
        """Subscribe to bus events; called exactly once by the grid."""


@runtime_checkable
class Formattable(Protocol):
    """Module able to format a cell for display."""

    def apply(self, row_data: Record, column: Column, element: Any, row: Any) -> Any:
        ...


@runtime_checkable
class CsvFormattable(Protocol):
    """Module able to format a cell value for export."""

    def apply_csv(self, row_data: Record, column: Column) -> Any:
        ...
