"""Digest publisher port."""

from abc import ABC, abstractmethod

from property_commute.domain.models.digest_entry import PropertyDigestEntry


class DigestPublisher(ABC):
    """Port for delivering the property digest."""

    @abstractmethod
    async def publish(self, entries: list[PropertyDigestEntry]) -> bool:
        """Deliver the digest. Returns True when it was delivered."""
        ...
