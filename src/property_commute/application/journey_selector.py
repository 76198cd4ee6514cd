"""Pick journey endpoints and measure planned journeys."""

import math
from collections.abc import Sequence

from property_commute.domain.models.journey import JourneyPlan
from property_commute.domain.models.journey_time import JourneyTime
from property_commute.domain.models.transit_point import STOP_AREA, TransitPoint


def select_best_point(
    points: Sequence[TransitPoint], prefer_stop_area: bool = True
) -> TransitPoint | None:
    """Select the point to use as a journey endpoint.

    A fixed stop is a more reliable endpoint than a geocoded address, so the
    first STOP_AREA wins when ``prefer_stop_area`` is set. Otherwise, or when
    there is no stop area, the first point is used.

    Returns:
        The selected point, or None if ``points`` is empty.
    """
    if not points:
        return None

    if prefer_stop_area:
        for point in points:
            if point.type == STOP_AREA:
                return point

    return points[0]


def format_duration(total_minutes: int) -> str:
    """Format minutes as "1h 30m", or "47m" below an hour."""
    hours, minutes = divmod(total_minutes, 60)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def calculate_journey_time(plan: JourneyPlan, journey_index: int = 0) -> JourneyTime | None:
    """Calculate the door-to-door time of one journey in a plan.

    The duration runs from the first leg's departure to the last leg's arrival,
    rounded to whole minutes.

    Args:
        plan: Plan returned by the journey planner.
        journey_index: Which journey to measure (0 is the planner's first choice).

    Returns:
        JourneyTime, or None if the plan has no such journey or it has no legs.
    """
    if not plan.journeys or not 0 <= journey_index < len(plan.journeys):
        return None

    route_links = plan.journeys[journey_index].route_links
    if not route_links:
        return None

    start_time = route_links[0].from_stop.time
    end_time = route_links[-1].to_stop.time

    # Half-up rounding, not banker's rounding
    total_minutes = math.floor((end_time - start_time).total_seconds() / 60 + 0.5)
    hours, minutes = divmod(total_minutes, 60)

    return JourneyTime(
        total_minutes=total_minutes,
        hours=hours,
        minutes=minutes,
        formatted=format_duration(total_minutes),
        start_time=start_time,
        end_time=end_time,
    )
