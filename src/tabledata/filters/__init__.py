"""
Filters Package - Coercion and Filter Conditions.

Conditions:
    - ComparisonCondition: built-in operators over coerced values
    - DateCondition: built-in operators over datetimes
    - FunctionCondition: user supplied predicate

Design Principles:
    - All filter input passes through ``coerce`` before a condition exists
    - A row matches only when every condition matches (logical AND)
    - Filtering always starts from the baseline snapshot
"""

from tabledata.filters.coercion import coerce, to_number
from tabledata.filters.conditions import (
    ComparisonCondition,
    DateCondition,
    FilterCondition,
    FunctionCondition,
    apply_conditions,
    build_condition,
)
from tabledata.filters.header import HeaderFilter

__all__ = [
    "ComparisonCondition",
    "DateCondition",
    "FilterCondition",
    "FunctionCondition",
    "HeaderFilter",
    "apply_conditions",
    "build_condition",
    "coerce",
    "to_number",
]
