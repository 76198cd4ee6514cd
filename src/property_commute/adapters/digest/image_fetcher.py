"""Download listing images for the digest."""

import logging
from typing import TYPE_CHECKING

import aiohttp

from property_commute.domain.models.digest_entry import ListingImage

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

DEFAULT_MIME_TYPE = "image/jpeg"


class ImageFetcher:
    """Fetches images over HTTP; failures are logged and yield None."""

    def __init__(self, session: "ClientSession") -> None:
        """Initialize with the aiohttp session to download with."""
        self._session = session

    async def fetch(self, url: str, property_id: str) -> ListingImage | None:
        """Download an image and wrap it for inlining or attaching."""
        try:
            async with self._session.get(url) as response:
                if response.status != 200:
                    logger.error(f"Error fetching image {url}: HTTP status {response.status}")
                    return None
                content = await response.read()
                mime_type = response.headers.get("Content-Type") or DEFAULT_MIME_TYPE
        except aiohttp.ClientError as e:
            logger.error(f"Error fetching image {url}: {e}")
            return None

        extension = "png" if "png" in mime_type else "jpg"
        return ListingImage(
            content=content,
            mime_type=mime_type,
            cid=f"property-{property_id}",
            filename=f"property-{property_id}.{extension}",
            original_url=url,
        )
