"""Listing search input domain model."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SearchFilter:
    """A single key/value filter forwarded to the listing search."""

    key: str
    value: str

    def to_dict(self) -> dict[str, str]:
        """Return the wire representation of the filter."""
        return {"key": self.key, "value": self.value}


@dataclass(frozen=True)
class SearchInput:
    """Input for a listing search scoped to one area."""

    area_id: str
    filters: tuple[SearchFilter, ...] = ()  # Ordered, duplicate keys allowed
    page: int = 1
    sort: str = ""
    ascending: bool = False
    exclude_ancestors: bool = True
    facets: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate the page number."""
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")

    def to_variables(self) -> dict[str, Any]:
        """Render the camelCase input object expected by the GraphQL schema."""
        return {
            "areaId": self.area_id,
            "filters": [search_filter.to_dict() for search_filter in self.filters],
            "page": self.page,
            "sort": self.sort,
            "ascending": self.ascending,
            "excludeAncestors": self.exclude_ancestors,
            "facets": list(self.facets),
        }
