"""Ports (interfaces) for the ports-and-adapters architecture."""

from property_commute.domain.ports.digest_publisher import DigestPublisher
from property_commute.domain.ports.image_source import ImageSource
from property_commute.domain.ports.listing_repository import ListingRepository
from property_commute.domain.ports.transit_repository import TransitRepository

__all__ = [
    "DigestPublisher",
    "ImageSource",
    "ListingRepository",
    "TransitRepository",
]
