"""
Sorting Package - Comparators and Sort State.
"""

from tabledata.sorting.comparators import (
    Comparator,
    SorterRegistry,
    compare_date,
    compare_number,
    compare_string,
)
from tabledata.sorting.header import SortHeader

__all__ = [
    "Comparator",
    "SortHeader",
    "SorterRegistry",
    "compare_date",
    "compare_number",
    "compare_string",
]
