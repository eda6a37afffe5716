"""
Helpers Package - Small Shared Utilities.

    - dates: date parsing (fails closed to None) and template formatting
"""

from tabledata.helpers.dates import format_date, is_date, parse_date, parse_date_only

__all__ = ["format_date", "is_date", "parse_date", "parse_date_only"]
