"""
Configuration Loader - Merging User Settings over Grid Defaults.

User settings arrive as a mapping (from code or a YAML file) and are merged
over the defaults declared on ``GridSettings`` before validation:

    - unknown keys are ignored with a warning
    - ``None`` keeps the default
    - mapping values (``remote_params``) merge key-wise over the default
    - ``remote_processing`` is normalized to ``False`` or a sort default

The defaults are rebuilt for every merge, so user settings never leak
into another grid.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from tabledata.config.models import ColumnDefinition, GridSettings, RemoteSortDefault
from tabledata.domain.entities import SortDirection

logger = logging.getLogger(__name__)


def default_options() -> Dict[str, Any]:
    """Fresh copy of every ``GridSettings`` default, keyed by field name."""
    return {
        name: field.get_default(call_default_factory=True)
        for name, field in GridSettings.model_fields.items()
    }


class ConfigLoader:
    """Builds validated grid settings from user settings."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
        """
        self._base_path = base_path or Path(".")

    def load(self, config_path: Union[str, Path]) -> GridSettings:
        """
        Load settings from a YAML file.

        Args:
            config_path: Path to YAML config file

        Returns:
            Validated GridSettings object

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config is invalid
        """
        path = Path(config_path)
        if not path.is_absolute():
            path = self._base_path / path

        with open(path, encoding="utf-8") as f:
            source = yaml.safe_load(f) or {}

        if not isinstance(source, Mapping):
            raise ValueError(f"Grid settings in {path} must be a mapping, got {type(source).__name__}")

        return self.load_from_dict(source)

    def load_from_dict(self, source: Optional[Mapping[str, Any]]) -> GridSettings:
        """
        Merge source over the defaults and validate.

        Args:
            source: User settings; None or empty yields the defaults

        Returns:
            Validated GridSettings object
        """
        return GridSettings.model_validate(self.merge(source))

    def merge(self, source: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Merge user settings over a fresh copy of the defaults.

        Args:
            source: User settings

        Returns:
            Merged settings mapping, ready for validation
        """
        result = default_options()
        if not source:
            return result

        for key, value in source.items():
            if key not in result:
                logger.warning(f"Ignoring unknown grid setting '{key}'")
                continue
            if value is None:
                continue
            if isinstance(result[key], dict) and isinstance(value, Mapping):
                result[key] = {**result[key], **value}
            else:
                result[key] = value

        result["remote_processing"] = self._remote_processing(
            result["remote_processing"], result["columns"]
        )
        return result

    def _remote_processing(
        self, value: Any, columns: List[Any]
    ) -> Union[bool, Dict[str, Any], RemoteSortDefault]:
        """
        Normalize the remote processing switch.

        ``True`` sorts by the first column with a field, descending; a
        mapping without a column turns remote processing off.
        """
        if isinstance(value, RemoteSortDefault):
            return value

        if isinstance(value, Mapping):
            if not value.get("column"):
                return False
            return {
                "column": value["column"],
                "direction": value.get("direction") or SortDirection.DESC.value,
            }

        if value is True:
            field = next((f for f in map(self._column_field, columns) if f), None)
            if field is None:
                logger.warning("Remote processing needs a column with a field to sort by")
                return True
            return {"column": field, "direction": SortDirection.DESC.value}

        return value

    @staticmethod
    def _column_field(column: Any) -> Optional[str]:
        if isinstance(column, ColumnDefinition):
            return column.field
        if isinstance(column, Mapping):
            return column.get("field")
        return None


def load_config(
    config_path: Union[str, Path],
    base_path: Optional[Path] = None,
) -> GridSettings:
    """Convenience function to load grid settings from YAML."""
    loader = ConfigLoader(base_path=base_path)
    return loader.load(config_path)
