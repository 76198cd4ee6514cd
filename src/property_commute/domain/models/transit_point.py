"""Transit point domain models."""

from dataclasses import dataclass

STOP_AREA = "STOP_AREA"
LOCATION = "LOCATION"
ADDRESS = "ADDRESS"


def format_coordinate(value: float) -> str:
    """Render a coordinate without a trailing ``.0`` for whole degrees."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class TransitPoint:
    """A location in the transit network: a fixed stop or a geocoded address."""

    id2: str
    type: str  # STOP_AREA, LOCATION, ADDRESS, ... (unknown types pass through)
    name: str
    lat: float | None = None
    lon: float | None = None


@dataclass(frozen=True)
class ResolvedPoint:
    """Journey endpoint identified by the transit service's own id and type."""

    id: str
    type: str

    def to_query(self) -> tuple[str, str]:
        """Return the (point id, point type) pair sent to the journey planner."""
        return self.id, self.type


@dataclass(frozen=True)
class GeocodedPoint:
    """Journey endpoint given by coordinates."""

    lat: float
    lon: float

    def to_query(self) -> tuple[str, str]:
        """Return the (point id, point type) pair sent to the journey planner."""
        return f"{format_coordinate(self.lat)}#{format_coordinate(self.lon)}", LOCATION


PointReference = ResolvedPoint | GeocodedPoint


def point_reference(point: TransitPoint | ResolvedPoint | GeocodedPoint) -> PointReference:
    """Normalize a point into the reference used as a journey endpoint.

    Address points cannot be used by id and are re-encoded by their coordinates;
    every other point keeps its native id and type.
    """
    if isinstance(point, ResolvedPoint | GeocodedPoint):
        return point

    if point.type == ADDRESS:
        if point.lat is None or point.lon is None:
            raise ValueError(f"Address point '{point.name}' has no coordinates")
        return GeocodedPoint(lat=point.lat, lon=point.lon)

    return ResolvedPoint(id=point.id2, type=point.type)
