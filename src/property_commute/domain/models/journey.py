"""Journey plan domain models."""

import math
from dataclasses import dataclass
from datetime import datetime

WALK = "Walk"


@dataclass(frozen=True)
class LinkEndpoint:
    """Start or end of a route link."""

    name: str
    time: datetime  # Timezone-aware (UTC)
    lat: float | None = None
    lon: float | None = None


@dataclass(frozen=True)
class Line:
    """The line travelled on a route link; walk legs use type ``Walk``."""

    type: str  # Walk, Bus, Train, ...
    name: str
    no: str | None = None
    towards: str | None = None
    distance: str | None = None  # Walk legs only, e.g. "327 m"

    @property
    def is_walk(self) -> bool:
        """Whether this leg is walked rather than ridden."""
        return self.type == WALK


@dataclass(frozen=True)
class RouteLink:
    """One leg of a journey."""

    from_stop: LinkEndpoint
    to_stop: LinkEndpoint
    line: Line

    @property
    def duration_minutes(self) -> int:
        """Whole minutes spent on this leg."""
        elapsed = (self.to_stop.time - self.from_stop.time).total_seconds() / 60
        return math.floor(elapsed + 0.5)


@dataclass(frozen=True)
class Journey:
    """A single itinerary; route links are in temporal order."""

    id: str
    no_of_changes: int
    route_links: tuple[RouteLink, ...]


@dataclass(frozen=True)
class JourneyPlan:
    """Itineraries returned by the journey planner, best first."""

    journeys: tuple[Journey, ...] = ()
