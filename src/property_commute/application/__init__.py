"""Application layer - use cases and pure result interpretation."""

from property_commute.application.commute_service import CommuteService
from property_commute.application.journey_selector import (
    calculate_journey_time,
    format_duration,
    select_best_point,
)
from property_commute.application.search_input_builder import (
    build_search_input,
    create_filters,
)

__all__ = [
    "CommuteService",
    "build_search_input",
    "calculate_journey_time",
    "create_filters",
    "format_duration",
    "select_best_point",
]
