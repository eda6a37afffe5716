"""
Configuration Models - Pydantic Models for Type-Safe Config.

All grid settings and column definitions are validated at load time using
Pydantic. Unknown filter operators are rejected here, before any module
is initialized.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Literal, Optional, Union
from urllib.parse import quote

from pydantic import BaseModel, Field

from tabledata.domain.entities import ColumnType, FilterOperator, SortDirection


class ColumnDefinition(BaseModel):
    """User supplied column definition."""

    field: Optional[str] = None
    type: ColumnType = ColumnType.STRING
    label: Optional[str] = None
    formatter: Optional[Union[str, Callable[..., Any]]] = None
    formatter_params: Optional[Dict[str, Any]] = None
    formatter_module_name: Optional[str] = None
    width: Optional[Union[int, str]] = None
    column_size: Optional[Union[int, str]] = None
    filter_type: Optional[Union[FilterOperator, Callable[..., bool]]] = None
    filter_params: Optional[Dict[str, Any]] = None
    filter_values: Optional[Union[Dict[str, Any], List[Any], str]] = None
    filter_multi_select: bool = False
    tooltip_field: Optional[str] = None
    tooltip_layout: Literal["left", "right"] = "left"


class RemoteSortDefault(BaseModel):
    """Default sort sent to a remote source."""

    column: str
    direction: SortDirection = SortDirection.DESC


class GridSettings(BaseModel):
    """Root configuration object."""

    base_id_name: str = "tabledata"
    data: List[Dict[str, Any]] = Field(default_factory=list)
    columns: List[ColumnDefinition] = Field(default_factory=list)
    enable_paging: bool = True
    pager_pages_to_display: int = Field(default=5, ge=1)
    pager_rows_per_page: int = Field(default=25, ge=0)
    date_format: str = "MM/dd/yyyy"
    date_time_format: str = "MM/dd/yyyy HH:mm:ss"
    remote_url: str = ""
    remote_params: Dict[str, Any] = Field(default_factory=dict)
    remote_processing: Union[bool, RemoteSortDefault] = False
    row_count_id: str = ""
    enable_export: bool = False
    export_remote_source: str = ""

    @property
    def is_remote(self) -> bool:
        """True when filter/sort/paging run on the remote source."""
        return isinstance(self.remote_processing, RemoteSortDefault) or bool(
            self.remote_processing
        )

    @property
    def remote_sort_default_column(self) -> str:
        if isinstance(self.remote_processing, RemoteSortDefault):
            return self.remote_processing.column
        if not self.remote_processing:
            return ""
        first = next((c for c in self.columns if c.field is not None), None)
        return first.field if first else ""

    @property
    def remote_sort_default_direction(self) -> str:
        if isinstance(self.remote_processing, RemoteSortDefault):
            return self.remote_processing.direction.value
        return SortDirection.DESC.value if self.remote_processing else ""

    @property
    def ajax_url(self) -> str:
        """Remote url with the static ``remote_params`` appended."""
        if not self.remote_url or not self.remote_params:
            return self.remote_url
        query = "&".join(
            f"{quote(str(k), safe='')}={quote(str(v), safe='')}"
            for k, v in self.remote_params.items()
        )
        return f"{self.remote_url}?{query}"
