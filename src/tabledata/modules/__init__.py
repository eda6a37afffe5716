"""
Modules Package - Pluggable Grid Processing Modules.

Modules (render-cycle stage in brackets):
    - FilterModule [FILTER]: header and ad-hoc filter conditions
    - SortModule [SORT]: single-column sorting
    - RowModule / PagerModule [ROWS]: hand rows to the renderer
    - RowCountModule [COUNT]: publishes the rendered row count
    - ExportModule: header + value rows for export

Capabilities:
    - Formattable / CsvFormattable: optional cell formatting protocols
"""

from tabledata.modules.base import CsvFormattable, Formattable, GridModule
from tabledata.modules.export_module import ExportModule
from tabledata.modules.filter_module import FilterModule
from tabledata.modules.pager_module import PagerModule
from tabledata.modules.row_count_module import RowCountModule
from tabledata.modules.row_module import RowModule
from tabledata.modules.sort_module import SortModule

__all__ = [
    "CsvFormattable",
    "ExportModule",
    "FilterModule",
    "Formattable",
    "GridModule",
    "PagerModule",
    "RowCountModule",
    "RowModule",
    "SortModule",
]
