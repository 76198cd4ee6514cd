"""HTTP client for the Skånetrafiken journey planner.

API: https://www.skanetrafiken.se/gw-tps/api/v2 (public, no auth)
"""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from property_commute.adapters.http_json import get_json
from property_commute.adapters.skanetrafiken_api.constants import (
    DEFAULT_HEADERS,
    DEFAULT_JOURNEYS_AFTER,
    DEFAULT_MAX_WALK_DISTANCE,
    DEFAULT_PRIORITY,
    DEFAULT_WALK_SPEED,
    JOURNEY_PATH,
    POINTS_PATH,
    SKANETRAFIKEN_API_URL,
)
from property_commute.adapters.skanetrafiken_api.journey_parser import JourneyParser
from property_commute.domain.models.journey import JourneyPlan
from property_commute.domain.models.transit_point import (
    GeocodedPoint,
    ResolvedPoint,
    TransitPoint,
    point_reference,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

API_NAME = "Skånetrafiken API"


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_departure(departure_time: datetime) -> str:
    """Serialize a time as UTC ISO 8601 with milliseconds, e.g. 2025-12-23T17:35:00.000Z.

    Naive datetimes are taken to be local time.
    """
    utc_time = departure_time.astimezone(UTC)
    return utc_time.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SkanetrafikenClient:
    """Client for point search and journey planning."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = SKANETRAFIKEN_API_URL,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            session: Optional aiohttp session to reuse across requests.
            base_url: API root URL.
            headers: Headers merged over the default header set.
        """
        self._session = session
        self.base_url = base_url.rstrip("/")
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}

    async def search_points(self, query: str) -> list[TransitPoint]:
        """Search for stops and addresses by name.

        Args:
            query: Free-text query, e.g. "Hyllie, Malmö".

        Returns:
            Matching points in the order the API ranks them (possibly empty).

        Raises:
            TransportError: If the HTTP status is not 2xx.
        """
        url = f"{self.base_url}{POINTS_PATH}"
        data = await get_json(self._session, url, {"name": query}, self.headers, API_NAME)

        points = data.get("points") if isinstance(data, dict) else None
        return JourneyParser.parse_points(points or [])

    async def plan_journey(
        self,
        from_point: TransitPoint | ResolvedPoint | GeocodedPoint,
        to_point: TransitPoint | ResolvedPoint | GeocodedPoint,
        departure_time: datetime | None = None,
        arrival: bool = False,
        priority: str = DEFAULT_PRIORITY,
        journeys_after: int = DEFAULT_JOURNEYS_AFTER,
        walk_speed: str = DEFAULT_WALK_SPEED,
        max_walk_distance: int = DEFAULT_MAX_WALK_DISTANCE,
        allow_walk_to_other_stop: bool = True,
    ) -> JourneyPlan:
        """Plan journeys between two points.

        Points found by ``search_points`` can be passed directly; address points
        are sent by their coordinates.

        Args:
            from_point: Origin point or point reference.
            to_point: Destination point or point reference.
            departure_time: Time to plan for (default: now).
            arrival: Treat ``departure_time`` as the latest arrival time instead.
            priority: Planner priority, e.g. SHORTEST_TIME.
            journeys_after: Minimum number of journeys to return.
            walk_speed: Walking speed, e.g. NORMAL.
            max_walk_distance: Maximum walking distance in meters.
            allow_walk_to_other_stop: Allow walking between stops when changing.

        Returns:
            The plan; it may hold no journeys.

        Raises:
            TransportError: If the HTTP status is not 2xx.
        """
        from_point_id, from_point_type = point_reference(from_point).to_query()
        to_point_id, to_point_type = point_reference(to_point).to_query()

        params = {
            "fromPointId": from_point_id,
            "fromPointType": from_point_type,
            "toPointId": to_point_id,
            "toPointType": to_point_type,
            "departure": format_departure(departure_time or datetime.now(UTC)),
            "arrival": _format_bool(arrival),
            "priority": priority,
            "isBobCapable": "false",
            "journeysAfter": str(journeys_after),
            "walkSpeed": walk_speed,
            "maxWalkDistance": str(max_walk_distance),
            "allowWalkToOtherStop": _format_bool(allow_walk_to_other_stop),
        }

        url = f"{self.base_url}{JOURNEY_PATH}"
        data = await get_json(self._session, url, params, self.headers, API_NAME)

        plan = JourneyParser.parse_plan(data)
        logger.debug(
            f"Planned {len(plan.journeys)} journey(s) from {from_point_id} to {to_point_id}"
        )
        return plan
