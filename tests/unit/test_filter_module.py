"""
Unit Tests for FilterModule.

Test Aspects Covered:
    ✅ Business Logic: Header filters, grid filters, baseline rebuild
    ✅ Edge Cases: Unset and uncoercible inputs, filter replacement
    ✅ Remote Mode: Filter values contributed to remote parameters
"""

from __future__ import annotations

import pytest

from tabledata.events.bus import REMOTE_PARAMS_EVENT, RENDER_EVENT
from tabledata.modules.filter_module import FilterModule


@pytest.fixture
def module(make_context, filter_columns) -> FilterModule:
    context = make_context(filter_columns)
    module = FilterModule(context)
    module.initialize()
    return module


def _ids(module: FilterModule):
    return [r["id"] for r in module.context.persistence.data]


class TestFilterModuleInitialize:
    """Tests for initialize."""

    def test_creates_header_filters_for_filterable_columns(self, module: FilterModule) -> None:
        assert [f.field for f in module.header_filters] == ["id", "name", "pcoe", "comments"]
        assert module.context.column_manager.get_column("task").header_filter is None

    def test_header_filter_created_once(self, module: FilterModule) -> None:
        """
        SCENARIO: Second module over the same columns
        EXPECTED: Column keeps its original header filter object
        """
        original = module.context.column_manager.get_column("id").header_filter

        FilterModule(module.context).initialize()

        assert module.context.column_manager.get_column("id").header_filter is original

    def test_local_mode_subscribes_render(self, module: FilterModule) -> None:
        assert module.context.events.has_subscribers(RENDER_EVENT)
        assert not module.context.events.has_subscribers(REMOTE_PARAMS_EVENT)


class TestFilterModuleLocal:
    """Tests for local filtering."""

    def test_header_filter_applied(self, module: FilterModule) -> None:
        module.get_header_filter("comments").value = "hello"

        module.render_local()

        assert _ids(module) == [5, 12]

    def test_date_header_filter(self, module: FilterModule) -> None:
        module.get_header_filter("pcoe").value = "2002-12-01"

        module.render_local()

        assert _ids(module) == [18, 5]

    def test_invalid_header_value_is_skipped(self, module: FilterModule) -> None:
        """
        SCENARIO: Text typed into the numeric id filter
        EXPECTED: Condition dropped, all rows shown
        """
        module.get_header_filter("id").value = "abc"

        module.render_local()

        assert len(module.context.persistence.data) == 6

    def test_filters_always_start_from_baseline(self, module: FilterModule) -> None:
        """
        SCENARIO: Filter narrowed, then changed to a disjoint value
        EXPECTED: Second result is not narrowed by the first
        """
        header = module.get_header_filter("comments")
        header.value = "westminster"
        module.render_local()

        header.value = "comment"
        module.render_local()

        assert _ids(module) == [18, 11, 8]

    def test_clearing_filters_restores_baseline(self, module: FilterModule) -> None:
        persistence = module.context.persistence
        module.set_filter("id", 10, ">=", "number")
        module.render_local()

        module.remove_filter("id")
        module.render_local()

        assert persistence.data == persistence.data_cache
        assert len(persistence.data) == 6

    def test_header_and_grid_filters_combine(self, module: FilterModule) -> None:
        module.get_header_filter("comments").value = "comment"
        module.set_filter("id", 15, "<", "number")

        module.render_local()

        assert _ids(module) == [11, 8]


class TestFilterModuleGridFilters:
    """Tests for set_filter / remove_filter."""

    def test_one_condition_per_field(self, module: FilterModule) -> None:
        module.set_filter("id", 10, ">=", "number")
        module.set_filter("id", 12, "equals", "number")

        assert len(module.grid_filters) == 1
        assert module.grid_filters[0].value == 12

    def test_empty_value_removes_filter(self, module: FilterModule) -> None:
        module.set_filter("id", 10, ">=", "number")

        result = module.set_filter("id", "", ">=", "number")

        assert result is None
        assert module.grid_filters == []

    def test_uncoercible_value_removes_filter(self, module: FilterModule) -> None:
        module.set_filter("id", 10, ">=", "number")

        module.set_filter("id", "ten", ">=", "number")

        assert module.grid_filters == []

    def test_function_filter(self, module: FilterModule) -> None:
        module.set_filter("name", "d", lambda value, row_value, row, params: row_value.lower().startswith(value))

        module.render_local()

        assert _ids(module) == [11, 5, 8]

    def test_unknown_operator_raises(self, module: FilterModule) -> None:
        with pytest.raises(ValueError):
            module.set_filter("id", 1, "contains", "number")


class TestFilterModuleRemote:
    """Tests for remote parameter contribution."""

    def test_contributes_set_values(self, make_context, filter_columns) -> None:
        context = make_context(filter_columns, remote_url="http://example.test", remote_processing=True)
        module = FilterModule(context)
        module.initialize()
        module.get_header_filter("name").value = "Amy"
        module.set_filter("status", "open")

        params = context.events.chain(REMOTE_PARAMS_EVENT)

        assert params == {"name": "Amy", "status": "open"}
        assert not context.events.has_subscribers(RENDER_EVENT)
