"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

from tabledata.config.models import GridSettings
from tabledata.core.context import GridContext

ROWS: List[Dict[str, Any]] = [
    {"id": 18, "name": "Amy", "pcoe": "2002-12-22", "task": "2002-12-22T8:31:01", "comments": "comment 1"},
    {"id": 11, "name": "David", "pcoe": "2002-11-23", "task": "2002-12-22T10:31:01", "comments": "comment 2"},
    {"id": 5, "name": "Dolly", "pcoe": "2002-12-24", "task": "2002-12-22T22:31:01", "comments": "hello westminster"},
    {"id": 7, "name": "Abc", "pcoe": "2002-09-25", "task": "2002-12-22T4:31:01", "comments": "unique string"},
    {"id": 8, "name": "Dolly", "pcoe": "2002-10-25", "task": "2002-12-22T4:31:01", "comments": "comment 3"},
    {"id": 12, "name": "Lance Mike", "pcoe": "2002-10-25", "task": "2002-12-22T4:31:01", "comments": "hello DENISE"},
]


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def sample_rows() -> List[Dict[str, Any]]:
    """Fresh copy of the shared sample rows."""
    return copy.deepcopy(ROWS)


@pytest.fixture
def columns() -> List[Dict[str, Any]]:
    """Column definitions without filters."""
    return [
        {"field": "id", "type": "number"},
        {"field": "name", "label": "Some Name", "type": "string"},
        {"field": "pcoe", "label": "PCOE", "type": "date"},
        {"field": "task", "type": "datetime"},
        {"field": "comments", "type": "string"},
    ]


@pytest.fixture
def filter_columns() -> List[Dict[str, Any]]:
    """Column definitions with header filters."""
    return [
        {"field": "id", "type": "number", "filter_type": "equals"},
        {
            "field": "name",
            "label": "Some Name",
            "type": "string",
            "filter_type": "equals",
            "filter_values": {"1": "one", "2": "two"},
        },
        {"field": "pcoe", "label": "PCOE", "type": "date", "filter_type": ">"},
        {"field": "task", "type": "datetime"},
        {"field": "comments", "type": "string", "filter_type": "like"},
    ]


@pytest.fixture
def make_context(
    columns: List[Dict[str, Any]],
    sample_rows: List[Dict[str, Any]],
) -> Callable[..., GridContext]:
    """Factory building a GridContext; keyword arguments become settings."""

    def factory(column_defs=None, data=None, transport=None, **settings: Any) -> GridContext:
        column_defs = column_defs if column_defs is not None else columns
        return GridContext(
            column_defs,
            GridSettings.model_validate({**settings, "columns": column_defs}),
            data if data is not None else sample_rows,
            transport=transport,
        )

    return factory


@pytest.fixture
def context(make_context: Callable[..., GridContext]) -> GridContext:
    """Local-mode context over the sample rows."""
    return make_context()
