"""
In-Memory Row Renderer.

A renderer that keeps the last rendered rows in memory. Used as the
default collaborator and in tests.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from tabledata.domain.value_objects import Record

logger = logging.getLogger(__name__)


class InMemoryRowRenderer:
    """Records rendered rows instead of drawing them."""

    def __init__(self) -> None:
        self.rows: List[Record] = []
        self.render_count = 0
        self._row_count = 0

    @property
    def row_count(self) -> int:
        return self._row_count

    def render_rows(self, rows: List[Record], total_count: Optional[int] = None) -> None:
        """Store rows and the count to report."""
        self.rows = list(rows)
        self._row_count = total_count if total_count is not None else len(self.rows)
        self.render_count += 1
        logger.debug(f"Rendered {len(self.rows)} rows (count={self._row_count})")
