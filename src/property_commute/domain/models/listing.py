"""Listing domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Listing:
    """Read-only view of the listing fields the commute digest uses.

    The full upstream record is kept untouched in the search result; this view
    only names the handful of fields forwarded to the transit layer and digest.
    """

    booli_id: str
    street_address: str
    descriptive_area_name: str
    object_type: str
    municipality_name: str
    list_price: str | None  # Preformatted by the service, e.g. "2 495 000 kr"
    url: str  # Path relative to the listing site
    primary_image_id: str | None

    @property
    def destination_query(self) -> str:
        """Free-text address used to look the listing up in the transit network."""
        return f"{self.street_address}, {self.descriptive_area_name}"
