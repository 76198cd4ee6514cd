"""Transit repository port."""

from datetime import datetime
from typing import Protocol

from property_commute.domain.models.journey import JourneyPlan
from property_commute.domain.models.transit_point import (
    GeocodedPoint,
    ResolvedPoint,
    TransitPoint,
)


class TransitRepository(Protocol):
    """Port for looking up transit points and planning journeys."""

    async def search_points(self, query: str) -> list[TransitPoint]:
        """Find stops and addresses matching a free-text query."""
        ...

    async def plan_journey(
        self,
        from_point: TransitPoint | ResolvedPoint | GeocodedPoint,
        to_point: TransitPoint | ResolvedPoint | GeocodedPoint,
        departure_time: datetime | None = None,
    ) -> JourneyPlan:
        """Plan journeys between two points."""
        ...
