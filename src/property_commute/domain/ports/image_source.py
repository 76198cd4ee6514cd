"""Image source port."""

from typing import Protocol

from property_commute.domain.models.digest_entry import ListingImage


class ImageSource(Protocol):
    """Port for downloading listing images."""

    async def fetch(self, url: str, property_id: str) -> ListingImage | None:
        """Download an image, returning None if it cannot be fetched."""
        ...
