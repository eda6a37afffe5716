"""
Unit Tests for ExportModule.

Test Aspects Covered:
    ✅ Business Logic: Header and value rows, formatter handling
    ✅ Edge Cases: Icon columns excluded, missing values, filters ignored
    ✅ Remote Mode: Export from a remote source
"""

from __future__ import annotations

import httpx
import pytest

from tabledata.modules.base import GridModule
from tabledata.modules.export_module import ExportModule


class StarModule(GridModule):
    """Formatter module exposing both capabilities."""

    module_name = "stars"

    def initialize(self) -> None:
        pass

    def apply(self, row_data, column, element, row):
        return "*" * row_data[column.field]

    def apply_csv(self, row_data, column):
        return f"{row_data[column.field]} stars"


class PlainModule(GridModule):
    """Module without any formatting capability."""

    module_name = "plain"

    def initialize(self) -> None:
        pass


@pytest.fixture
def export_columns():
    return [
        {"field": "id", "type": "number", "formatter_module_name": "stars"},
        {"field": "name", "label": "Name", "formatter": lambda row, params: row["name"].upper()},
        {"field": "pcoe", "label": "PCOE", "type": "date", "formatter": "date"},
        {"field": "task", "type": "datetime", "formatter": "datetime"},
        {"label": "Edit"},
        {"field": "comments"},
    ]


class TestExportModule:
    """Test cases for ExportModule."""

    def test_identify_columns_skips_icons(self, make_context, export_columns) -> None:
        module = ExportModule(make_context(export_columns))

        headers, columns = module.identify_columns(module.context.column_manager.columns)

        assert headers == ["Id", "Name", "PCOE", "Task", "Comments"]
        assert "column4" not in [c.field for c in columns]

    def test_format_value_variants(self, make_context, export_columns, sample_rows) -> None:
        """
        SCENARIO: Columns using module, callable, date and datetime formatters
        EXPECTED: Each value formatted by its formatter
        """
        # Arrange
        context = make_context(export_columns, date_time_format="yyyy-MM-dd HH:mm")
        context.modules["stars"] = StarModule(context)
        module = ExportModule(context)
        row = sample_rows[0]
        get = context.column_manager.get_column

        # Act & Assert
        assert module.format_value(get("id"), row) == "18 stars"
        assert module.format_value(get("name"), row) == "AMY"
        assert module.format_value(get("pcoe"), row) == "12/22/2002"
        assert module.format_value(get("task"), row) == "2002-12-22 08:31"
        assert module.format_value(get("comments"), row) == "comment 1"

    def test_context_resolves_formatter_capabilities(self, make_context, export_columns) -> None:
        context = make_context(export_columns)
        stars = StarModule(context)
        context.modules["stars"] = stars
        get = context.column_manager.get_column

        assert context.formatter_for(get("id")) is stars
        assert context.csv_formatter_for(get("id")) is stars
        assert context.formatter_for(get("name")) is None

    def test_missing_value_is_empty(self, make_context) -> None:
        context = make_context()
        module = ExportModule(context)

        assert module.format_value(context.column_manager.get_column("comments"), {"id": 1}) == ""

    def test_module_without_csv_capability_uses_raw_value(self, make_context, caplog) -> None:
        context = make_context([{"field": "id", "formatter_module_name": "plain"}])
        context.modules["plain"] = PlainModule(context)
        module = ExportModule(context)
        module.initialize()

        module.verify_formatters()

        assert module.format_value(context.column_manager.get_column("id"), {"id": 3}) == "3"
        assert "cannot format exported values" in caplog.text

    @pytest.mark.asyncio
    async def test_exports_baseline_ignoring_filters(self, make_context) -> None:
        context = make_context()
        context.persistence.data = context.persistence.data[:1]
        module = ExportModule(context)

        rows = await module.export_rows()

        assert rows[0] == ["Id", "Some Name", "PCOE", "Task", "Comments"]
        assert len(rows) == 7
        assert rows[1][:2] == ["18", "Amy"]

    @pytest.mark.asyncio
    async def test_exports_remote_source(self, make_context) -> None:
        context = make_context(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[{"id": 1, "name": "Zed"}])),
            export_remote_source="http://example.test/export",
        )
        module = ExportModule(context)

        rows = await module.export_rows()

        assert rows[1] == ["1", "Zed", "", "", ""]
