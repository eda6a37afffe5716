"""
Row Module - Default Row Producer Without Paging.

Hands the live view (local) or the remote result (remote) to the row
renderer at ``Stage.ROWS``, after filtering and sorting have run.
"""

from __future__ import annotations

import logging

from tabledata.events.bus import REMOTE_PARAMS_EVENT, RENDER_EVENT, Stage
from tabledata.modules.base import GridModule

logger = logging.getLogger(__name__)


class RowModule(GridModule):
    """Renders every row of the current view."""

    module_name = "row"

    def initialize(self) -> None:
        if self.context.settings.is_remote:
            self.context.events.subscribe(
                RENDER_EVENT, self.render_remote, is_async=True, priority=Stage.ROWS
            )
        else:
            self.context.events.subscribe(RENDER_EVENT, self.render_local, priority=Stage.ROWS)

    def render_local(self) -> None:
        self.context.renderer.render_rows(self.context.persistence.data)

    async def render_remote(self) -> None:
        """Fetch rows using the parameters every module contributes."""
        params = self.context.events.chain(REMOTE_PARAMS_EVENT) or {}
        data = await self.context.dataloader.request_grid_data(params)

        if not isinstance(data, list):
            logger.warning(f"Expected a list of rows from remote source, got {type(data).__name__}")
            data = []

        self.context.renderer.render_rows(data)
