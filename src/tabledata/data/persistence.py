"""
Data Persistence - Live Row View and Baseline Snapshot.

``data`` is the live, filterable/sortable view. ``data_cache`` is a deep
copy taken whenever rows are replaced wholesale and is the baseline that
filtering always starts from.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, List, Optional

from tabledata.domain.value_objects import Record

logger = logging.getLogger(__name__)


class DataPersistence:
    """Holds the active row set and its pristine snapshot."""

    def __init__(self, data: Optional[List[Record]] = None) -> None:
        self.data: List[Record] = []
        self.data_cache: List[Record] = []
        self.set_data(data if data is not None else [])

    @property
    def row_count(self) -> int:
        return len(self.data)

    def set_data(self, data: Any) -> None:
        """
        Replace the rows and re-derive the baseline snapshot.

        Args:
            data: Row list; anything else clears the store
        """
        if not isinstance(data, list):
            logger.warning(f"Expected a list of rows, got {type(data).__name__}; clearing data")
            self.data = []
            self.data_cache = []
            return

        self.data = data
        self.data_cache = copy.deepcopy(data)

    def restore_data(self) -> None:
        """Reset the live view to a copy of the baseline snapshot."""
        self.data = copy.deepcopy(self.data_cache)

    def __len__(self) -> int:
        return self.row_count
