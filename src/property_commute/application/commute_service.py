"""Application service (use case) combining listing search with journey planning."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any

from property_commute.application.journey_selector import (
    calculate_journey_time,
    select_best_point,
)
from property_commute.application.listing_view import listings_from_result
from property_commute.domain.models import Listing, PropertyDigestEntry, SearchInput

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from property_commute.domain.ports import ImageSource, ListingRepository, TransitRepository

NOT_AVAILABLE = "N/A"


class CommuteService:
    """Finds listings and estimates the commute from a fixed origin to each one."""

    def __init__(
        self,
        listing_repository: "ListingRepository",
        transit_repository: "TransitRepository",
        origin_address: str,
        prefer_stop_area: bool = True,
        listing_base_url: str = "https://www.booli.se",
        image_url_template: str | None = None,
        image_source: "ImageSource | None" = None,
    ) -> None:
        """Initialize with the listing and transit repositories.

        Args:
            listing_repository: Listing search port.
            transit_repository: Transit point and journey port.
            origin_address: Free-text origin every commute starts from.
            prefer_stop_area: Prefer fixed stops over addresses when picking points.
            listing_base_url: Site root that listing URLs are relative to.
            image_url_template: Format string with an ``{image_id}`` placeholder.
            image_source: Optional downloader for listing images.
        """
        self._listings = listing_repository
        self._transit = transit_repository
        self._origin_address = origin_address
        self._prefer_stop_area = prefer_stop_area
        self._listing_base_url = listing_base_url.rstrip("/")
        self._image_url_template = image_url_template
        self._image_source = image_source

    async def resolve_area(self, area_name: str, area_type: str | None = None) -> str | None:
        """Resolve an area name to the listing service's area id."""
        area_id = await self._listings.find_area_id(area_name, type=area_type)
        if area_id is None:
            logger.warning(f"No area found for '{area_name}' (type={area_type})")
        else:
            logger.info(f"Resolved area '{area_name}' to id {area_id}")
        return area_id

    async def find_listings(
        self, search_input: SearchInput, limit: int = 35
    ) -> tuple[dict[str, Any], list[Listing]]:
        """Search listings and return the raw result together with listing views."""
        result = await self._listings.search(search_input, limit=limit)
        listings = listings_from_result(result)
        for_sale = result.get("forSale") or {}
        logger.info(
            f"Found {for_sale.get('totalCount', len(listings))} listing(s) "
            f"over {for_sale.get('pages', 1)} page(s), {len(listings)} on this page"
        )
        return result, listings

    async def travel_time_to(self, listing: Listing, departure_time: datetime | None = None) -> str:
        """Estimate the commute from the origin to a listing.

        Returns:
            Formatted duration such as "47m", or "N/A" when any lookup fails or
            no journey is found.
        """
        try:
            destination_points = await self._transit.search_points(listing.destination_query)
            destination = select_best_point(destination_points, self._prefer_stop_area)
            if destination is None:
                logger.info(f"No transit point found for '{listing.destination_query}'")
                return NOT_AVAILABLE

            origin_points = await self._transit.search_points(self._origin_address)
            origin = select_best_point(origin_points, self._prefer_stop_area)
            if origin is None:
                logger.warning(f"No transit point found for origin '{self._origin_address}'")
                return NOT_AVAILABLE

            plan = await self._transit.plan_journey(
                origin, destination, departure_time=departure_time
            )
        except Exception as e:
            logger.error(f"Error calculating travel time for {listing.street_address}: {e}")
            return NOT_AVAILABLE

        journey_time = calculate_journey_time(plan)
        if journey_time is None:
            return NOT_AVAILABLE
        return journey_time.formatted

    def image_url_for(self, listing: Listing) -> str | None:
        """Return the CDN URL of a listing's primary image, if it has one."""
        if not listing.primary_image_id or not self._image_url_template:
            return None
        return self._image_url_template.format(image_id=listing.primary_image_id)

    async def build_entry(self, listing: Listing, position: int) -> PropertyDigestEntry:
        """Build the digest entry for one listing, including its travel time."""
        travel_time = await self.travel_time_to(listing)
        image_url = self.image_url_for(listing)

        image = None
        if image_url and self._image_source is not None:
            property_id = listing.booli_id or str(position)
            image = await self._image_source.fetch(image_url, property_id)

        return PropertyDigestEntry(
            address=listing.street_address,
            object_type=listing.object_type,
            location=f"{listing.descriptive_area_name}, {listing.municipality_name}",
            price=listing.list_price or NOT_AVAILABLE,
            travel_time=travel_time,
            url=f"{self._listing_base_url}{listing.url}",
            image_url=image_url,
            image=image,
        )

    async def build_entries(self, listings: list[Listing]) -> list[PropertyDigestEntry]:
        """Build digest entries for listings one at a time."""
        entries = []
        for position, listing in enumerate(listings):
            entry = await self.build_entry(listing, position)
            logger.debug(f"{listing.street_address}: travel time {entry.travel_time}")
            entries.append(entry)
        return entries
