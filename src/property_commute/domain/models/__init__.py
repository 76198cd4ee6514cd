"""Domain models for listings, transit points and journeys."""

from property_commute.domain.models.area_suggestion import AreaSuggestion
from property_commute.domain.models.digest_entry import ListingImage, PropertyDigestEntry
from property_commute.domain.models.journey import (
    Journey,
    JourneyPlan,
    Line,
    LinkEndpoint,
    RouteLink,
)
from property_commute.domain.models.journey_time import JourneyTime
from property_commute.domain.models.listing import Listing
from property_commute.domain.models.search_input import SearchFilter, SearchInput
from property_commute.domain.models.transit_point import (
    GeocodedPoint,
    PointReference,
    ResolvedPoint,
    TransitPoint,
    point_reference,
)

__all__ = [
    "AreaSuggestion",
    "GeocodedPoint",
    "Journey",
    "JourneyPlan",
    "JourneyTime",
    "Line",
    "LinkEndpoint",
    "Listing",
    "ListingImage",
    "PointReference",
    "PropertyDigestEntry",
    "ResolvedPoint",
    "RouteLink",
    "SearchFilter",
    "SearchInput",
    "TransitPoint",
    "point_reference",
]
