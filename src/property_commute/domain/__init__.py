"""Domain layer - models, errors and ports."""

from property_commute.domain.errors import (
    CommuteApiError,
    ProtocolError,
    ResponseDecodeError,
    TransportError,
    UnknownOperationError,
)
from property_commute.domain.models import (
    AreaSuggestion,
    JourneyPlan,
    Listing,
    SearchInput,
    TransitPoint,
)
from property_commute.domain.ports import (
    DigestPublisher,
    ListingRepository,
    TransitRepository,
)

__all__ = [
    "AreaSuggestion",
    "CommuteApiError",
    "DigestPublisher",
    "JourneyPlan",
    "Listing",
    "ListingRepository",
    "ProtocolError",
    "ResponseDecodeError",
    "SearchInput",
    "TransitPoint",
    "TransitRepository",
    "TransportError",
    "UnknownOperationError",
]
