"""Read the fields the digest needs out of an opaque listing search result."""

import logging
from typing import Any

from property_commute.domain.models.listing import Listing

logger = logging.getLogger(__name__)


def _nested(record: dict[str, Any], *keys: str) -> Any:
    """Walk nested dicts, returning None as soon as a level is missing."""
    value: Any = record
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def listing_from_record(record: dict[str, Any]) -> Listing:
    """Build a Listing view from one ``forSale.result`` record."""
    return Listing(
        booli_id=str(record.get("booliId") or ""),
        street_address=record.get("streetAddress") or "",
        descriptive_area_name=record.get("descriptiveAreaName") or "",
        object_type=record.get("objectType") or "",
        municipality_name=_nested(record, "location", "region", "municipalityName") or "",
        list_price=_optional_str(_nested(record, "listPrice", "formatted")),
        url=record.get("url") or "",
        primary_image_id=_optional_str(_nested(record, "primaryImage", "id")),
    )


def listings_from_result(result: dict[str, Any]) -> list[Listing]:
    """Build Listing views for every record in a search result."""
    records = _nested(result, "forSale", "result") or []
    listings = []
    for record in records:
        if not isinstance(record, dict):
            logger.debug(f"Skipping non-object listing record: {record!r}")
            continue
        listings.append(listing_from_record(record))
    return listings
