"""
Facility filters module

Compiles filter expressions and decides which facilities produce output.
"""

from facility_logger.filters.facility_filter import (
    FacilityFilter,
    FilterRule,
    evaluate_filters,
    parse_filters,
)

__all__ = [
    "FacilityFilter",
    "FilterRule",
    "evaluate_filters",
    "parse_filters",
]
