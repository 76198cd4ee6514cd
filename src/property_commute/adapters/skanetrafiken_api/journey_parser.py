"""Parser for Skånetrafiken Points and Journey responses."""

import logging
from datetime import UTC, datetime
from typing import Any

from property_commute.domain.models.journey import (
    Journey,
    JourneyPlan,
    Line,
    LinkEndpoint,
    RouteLink,
)
from property_commute.domain.models.transit_point import TransitPoint

logger = logging.getLogger(__name__)


def _parse_time(value: str) -> datetime:
    """Parse an ISO 8601 timestamp into an aware UTC datetime."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def _optional_float(value: Any) -> float | None:
    try:
        return float(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def _optional_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


class JourneyParser:
    """Parses Skånetrafiken API payloads into domain objects."""

    @staticmethod
    def parse_points(points: list[Any]) -> list[TransitPoint]:
        """Parse the ``points`` array of a Points response, keeping its order."""
        results = []
        for point in points:
            if not isinstance(point, dict):
                continue
            results.append(
                TransitPoint(
                    id2=str(point.get("id2", "")),
                    type=point.get("type", ""),
                    name=point.get("name", ""),
                    lat=_optional_float(point.get("lat")),
                    lon=_optional_float(point.get("lon")),
                )
            )
        return results

    @staticmethod
    def parse_plan(data: Any) -> JourneyPlan:
        """Parse a Journey response. A missing ``journeys`` array yields an empty plan."""
        if not isinstance(data, dict):
            return JourneyPlan()

        journeys = tuple(
            JourneyParser._parse_journey(journey_data)
            for journey_data in data.get("journeys") or []
        )
        return JourneyPlan(journeys=journeys)

    @staticmethod
    def _parse_journey(data: Any) -> Journey:
        """Parse one journey, keeping its slot even when it is malformed.

        A journey whose route links cannot be read is returned without links,
        so positions in the plan still match the upstream ``journeys`` array.
        """
        if not isinstance(data, dict):
            logger.warning(f"Journey entry is not an object: {data!r}")
            return Journey(id="", no_of_changes=0, route_links=())

        try:
            route_links = tuple(
                JourneyParser._parse_route_link(link) for link in data.get("routeLinks") or []
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Journey {data.get('id')} has malformed route links: {e}")
            route_links = ()

        return Journey(
            id=str(data.get("id", "")),
            no_of_changes=_optional_int(data.get("noOfChanges")),
            route_links=route_links,
        )

    @staticmethod
    def _parse_endpoint(data: dict[str, Any]) -> LinkEndpoint:
        coordinate = data.get("coordinate") or {}
        return LinkEndpoint(
            name=data.get("name", ""),
            time=_parse_time(data["time"]),
            lat=_optional_float(coordinate.get("lat")),
            lon=_optional_float(coordinate.get("lon")),
        )

    @staticmethod
    def _parse_line(data: dict[str, Any]) -> Line:
        return Line(
            type=data.get("type", ""),
            name=data.get("name", ""),
            no=data.get("no") or None,
            towards=data.get("towards") or None,
            distance=data.get("distance") or None,
        )

    @staticmethod
    def _parse_route_link(data: dict[str, Any]) -> RouteLink:
        return RouteLink(
            from_stop=JourneyParser._parse_endpoint(data["from"]),
            to_stop=JourneyParser._parse_endpoint(data["to"]),
            line=JourneyParser._parse_line(data.get("line") or {}),
        )
