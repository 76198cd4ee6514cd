"""Listing repository port."""

from typing import Any, Protocol

from property_commute.domain.models.search_input import SearchInput


class ListingRepository(Protocol):
    """Port for searching property listings."""

    async def find_area_id(self, search_term: str, type: str | None = None) -> str | None:
        """Resolve an area name to the listing service's area id."""
        ...

    async def search(
        self,
        search_input: SearchInput | dict[str, Any],
        query_context: str = "SERP_LIST_LISTING",
        limit: int = 35,
    ) -> dict[str, Any]:
        """Search listings in an area."""
        ...
