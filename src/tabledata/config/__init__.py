"""
Configuration Package - Models and Loaders.

    - GridSettings: root settings object (paging, remote source, formats)
    - ColumnDefinition: user column definition, validated on load
    - RemoteSortDefault: default remote sort column and direction
    - ConfigLoader / load_config: user settings merged over the defaults
"""

from tabledata.config.loader import ConfigLoader, load_config
from tabledata.config.models import ColumnDefinition, GridSettings, RemoteSortDefault

__all__ = [
    "ColumnDefinition",
    "ConfigLoader",
    "GridSettings",
    "RemoteSortDefault",
    "load_config",
]
