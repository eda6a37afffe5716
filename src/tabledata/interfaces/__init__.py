"""
Interfaces Layer - Abstract Protocols for Collaborators.

Protocols:
    - RowRenderer: receives the rows chosen by a render cycle

Module capability protocols (Formattable, CsvFormattable) live with the
module base class in ``tabledata.modules.base``.
"""

from tabledata.interfaces.row_renderer import RowRenderer

__all__ = ["RowRenderer"]
