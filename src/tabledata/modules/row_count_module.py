"""
Row Count Module - Publishes the Rendered Row Count.

Runs at ``Stage.COUNT``, after rows were handed to the renderer, and
reads the count the renderer reports (the overall total for paged views).
"""

from __future__ import annotations

import logging
from typing import Callable, List

from tabledata.events.bus import RENDER_EVENT, Stage
from tabledata.modules.base import GridModule

logger = logging.getLogger(__name__)


class RowCountModule(GridModule):
    """Tracks the row count shown next to the grid."""

    module_name = "rowcount"

    def __init__(self, context) -> None:
        super().__init__(context)
        self.target_id = context.settings.row_count_id
        self.count = 0
        self._listeners: List[Callable[[int], None]] = []

    def initialize(self) -> None:
        self.context.events.subscribe(RENDER_EVENT, self.handle_count, priority=Stage.COUNT)

    def add_listener(self, listener: Callable[[int], None]) -> None:
        """Call listener with the new count after every render."""
        self._listeners.append(listener)

    def handle_count(self) -> None:
        self.count = self.context.renderer.row_count
        logger.debug(f"Row count for '{self.target_id}': {self.count}")

        for listener in self._listeners:
            listener(self.count)
