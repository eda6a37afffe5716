"""
Pager Module - Paged Row Producer.

Replaces the row module when paging is enabled. Each render cycle shows
the first page; ``go_to_page`` renders another page without re-running
filtering or sorting.

Local mode slices the live view. Remote mode adds ``page`` and
``pageSize`` to the ``remoteParams`` chain and expects a
``{"rowCount": int, "data": [...]}`` response, where ``rowCount`` is the
total used for page math.

Design Notes:
    - Page math never raises: bad counts fall back to a single page
    - Buttons are plain value objects; drawing them is the UI's job
"""

from __future__ import annotations

import logging
import math
from typing import Any, List, Optional

from pydantic import ValidationError

from tabledata.domain.value_objects import PagerButton, RemotePage
from tabledata.events.bus import REMOTE_PARAMS_EVENT, RENDER_EVENT, Stage
from tabledata.modules.base import GridModule

logger = logging.getLogger(__name__)

FIRST_PAGE_LABEL = "«"
LAST_PAGE_LABEL = "»"


class PagerModule(GridModule):
    """Pages the grid's rows and tracks pager navigation state."""

    module_name = "page"

    def __init__(self, context) -> None:
        super().__init__(context)
        self.total_rows: Optional[int] = 0
        self.pages_to_display = context.settings.pager_pages_to_display
        self.rows_per_page = context.settings.pager_rows_per_page
        self.current_page = 1
        self.buttons: List[PagerButton] = []

    def initialize(self) -> None:
        if self.context.settings.is_remote:
            self.context.events.subscribe(
                RENDER_EVENT, self.render_remote, is_async=True, priority=Stage.ROWS
            )
        else:
            self.context.events.subscribe(RENDER_EVENT, self.render_local, priority=Stage.ROWS)

    def total_pages(self) -> int:
        """
        Number of pages for the current row total.

        Returns:
            At least 1, also when rows per page is 0 or the total is unknown
        """
        if not self.rows_per_page or not isinstance(self.total_rows, int):
            return 1
        return max(1, math.ceil(self.total_rows / self.rows_per_page))

    def validate_page(self, page: Any) -> int:
        """Clamp page into ``1..total_pages``; unparsable input means page 1."""
        try:
            number = int(page)
        except (TypeError, ValueError):
            return 1

        return min(max(number, 1), self.total_pages())

    def first_display_page(self, current_page: int) -> int:
        """
        First page number of the button window around current_page.

        The current page sits in the middle of the window unless it is
        near either end of the range.
        """
        middle = self.pages_to_display // 2 + self.pages_to_display % 2

        if current_page < middle:
            return 1

        total = self.total_pages()
        if total < current_page + self.pages_to_display - middle:
            return max(total - self.pages_to_display + 1, 1)

        return current_page - middle + 1

    def pager_buttons(self, current_page: int) -> List[PagerButton]:
        """
        Navigation entries for current_page.

        Args:
            current_page: Page being displayed

        Returns:
            First, numbered window and last entries; empty for a single page
        """
        total = self.total_pages()
        if total <= 1:
            return []

        first = self.first_display_page(current_page)
        last = min(first + self.pages_to_display - 1, total)

        buttons = [PagerButton(label=FIRST_PAGE_LABEL, page=1)]
        buttons.extend(
            PagerButton(label=str(page), page=page, is_current=page == current_page)
            for page in range(first, last + 1)
        )
        buttons.append(PagerButton(label=LAST_PAGE_LABEL, page=total))
        return buttons

    async def go_to_page(self, page: Any) -> None:
        """Render page without a full render cycle."""
        if self.context.settings.is_remote:
            await self.render_remote(page)
        else:
            self.render_local(page)

    def render_local(self, page: Any = 1) -> None:
        persistence = self.context.persistence
        self.total_rows = persistence.row_count
        self.current_page = self.validate_page(page)

        start = (self.current_page - 1) * self.rows_per_page
        rows = (
            persistence.data[start:start + self.rows_per_page]
            if self.rows_per_page
            else persistence.data
        )

        self.context.renderer.render_rows(rows, self.total_rows)
        self.buttons = self.pager_buttons(self.current_page)

    async def render_remote(self, page: Any = 1) -> None:
        """Fetch one page using the parameters every module contributes."""
        params = self.context.events.chain(REMOTE_PARAMS_EVENT) or {}

        try:
            params["page"] = max(int(page), 1)
        except (TypeError, ValueError):
            params["page"] = 1
        params["pageSize"] = self.rows_per_page

        payload = await self.context.dataloader.request_grid_data(params)

        try:
            result = RemotePage.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Invalid paged response from remote source: {e.error_count()} errors")
            result = RemotePage()

        self.total_rows = result.row_count
        self.current_page = self.validate_page(params["page"])

        self.context.renderer.render_rows(result.data, result.row_count)
        self.buttons = self.pager_buttons(self.current_page)
