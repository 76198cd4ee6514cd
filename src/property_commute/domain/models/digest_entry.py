"""Digest entry domain models."""

import base64
from dataclasses import dataclass


@dataclass(frozen=True)
class ListingImage:
    """A downloaded listing image, ready to inline or attach."""

    content: bytes
    mime_type: str
    cid: str  # Content-ID used when attached to an email
    filename: str
    original_url: str

    def data_uri(self) -> str:
        """Return the image as a base64 data URI."""
        encoded = base64.b64encode(self.content).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


@dataclass(frozen=True)
class PropertyDigestEntry:
    """One property as shown in the digest."""

    address: str
    object_type: str
    location: str
    price: str
    travel_time: str
    url: str
    image_url: str | None = None
    image: ListingImage | None = None
