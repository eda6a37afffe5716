"""
Unit Tests for Column, HeaderFilter and ColumnManager.

Test Aspects Covered:
    ✅ Business Logic: Column defaults, filter elements, owned UI state
    ✅ Edge Cases: Icon columns, insert positions
    ✅ Error Handling: Invalid definitions
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tabledata.config.models import ColumnDefinition
from tabledata.core.columns import ColumnManager
from tabledata.domain.entities import Column, ColumnType, FilterElement, FilterOperator
from tabledata.filters.header import HeaderFilter
from tabledata.sorting.header import SortHeader


class TestColumn:
    """Test cases for Column."""

    def test_label_defaults_to_capitalized_field(self) -> None:
        column = Column(ColumnDefinition(field="comments"), 4)

        assert column.label == "Comments"
        assert column.type is ColumnType.STRING

    def test_empty_field_gets_empty_label(self) -> None:
        column = Column(ColumnDefinition(field=""), 0)

        assert column.field == ""
        assert column.label == ""

    def test_missing_field_becomes_icon(self) -> None:
        """
        SCENARIO: Definition without a field
        EXPECTED: Icon column named by index; never filtered or sorted
        """
        column = Column(ColumnDefinition(filter_type="equals"), 3)

        assert column.field == "column3"
        assert column.type is ColumnType.ICON
        assert column.label == ""
        assert not column.has_filter
        assert not column.is_sortable

    def test_formatter_module_name_sets_module_formatter(self) -> None:
        column = Column(ColumnDefinition(field="id", formatter_module_name="stars"))

        assert column.formatter == "module"
        assert column.formatter_module_name == "stars"

    def test_filter_elements(self) -> None:
        between = Column(ColumnDefinition(field="id", filter_type="between"))
        select = Column(ColumnDefinition(field="id", filter_type="equals", filter_values=["a"]))
        multi = Column(
            ColumnDefinition(field="id", filter_type="in", filter_values=["a"], filter_multi_select=True)
        )

        assert between.filter_element is FilterElement.BETWEEN
        assert select.filter_element is FilterElement.SELECT
        assert multi.filter_element is FilterElement.MULTI

    def test_layout_metadata(self) -> None:
        column = Column(ColumnDefinition(field="id", column_size=2, tooltip_field="name"))

        assert column.column_size == "tabledata-col-2"
        assert column.tooltip_layout == "left"


class TestHeaderFilter:
    """Test cases for HeaderFilter."""

    def test_reads_column_filter(self) -> None:
        column = Column(
            ColumnDefinition(field="name", filter_type="equals", filter_values={"1": "one", "2": "two"})
        )

        header_filter = HeaderFilter(column)

        assert header_filter.filter_type is FilterOperator.EQUALS
        assert header_filter.field_type is ColumnType.STRING
        assert header_filter.options == [
            {"value": "1", "label": "one"},
            {"value": "2", "label": "two"},
        ]
        assert not header_filter.filter_is_function

    def test_unset_values(self) -> None:
        header_filter = HeaderFilter(Column(ColumnDefinition(field="id", filter_type="between")))

        assert header_filter.value == []
        assert not header_filter.is_set

        header_filter.value = ["", ""]
        assert not header_filter.is_set

        header_filter.value = ["2", ""]
        assert header_filter.is_set

        header_filter.clear()
        assert header_filter.value == []

    def test_function_filter(self) -> None:
        column = Column(ColumnDefinition(field="id", filter_type=lambda *args: True))

        assert HeaderFilter(column).filter_is_function

    def test_column_without_filter_raises(self) -> None:
        with pytest.raises(ValueError, match="no filter"):
            HeaderFilter(Column(ColumnDefinition(field="id")))


class TestColumnManager:
    """Test cases for ColumnManager."""

    def test_builds_columns_with_sort_headers(self, columns) -> None:
        manager = ColumnManager(columns)

        assert len(manager) == 5
        assert all(isinstance(c.header_cell, SortHeader) for c in manager.columns)
        assert manager.get_column("name").label == "Some Name"

    def test_has_header_filters(self, columns, filter_columns) -> None:
        assert not ColumnManager(columns).has_header_filters
        assert ColumnManager(filter_columns).has_header_filters

    def test_add_column_appends(self, columns) -> None:
        manager = ColumnManager(columns)

        column = manager.add_column({"field": "status"})

        assert manager.columns[-1] is column
        assert column.header_cell is not None

    def test_add_column_at_index(self, columns) -> None:
        manager = ColumnManager(columns)

        manager.add_column({"field": "status"}, 1)

        assert [c.field for c in manager.columns][:3] == ["id", "status", "name"]

    def test_add_column_out_of_range_appends(self, columns) -> None:
        manager = ColumnManager(columns)

        manager.add_column({"field": "status"}, 99)

        assert manager.columns[-1].field == "status"

    def test_unknown_column_is_none(self, columns) -> None:
        assert ColumnManager(columns).get_column("missing") is None

    def test_invalid_definition_raises(self) -> None:
        with pytest.raises(ValidationError):
            ColumnManager([{"field": "id", "type": "money"}])
