"""Build listing search input from a flat parameter mapping."""

from collections.abc import Mapping
from typing import Any

from property_commute.domain.models.search_input import SearchFilter, SearchInput

RESERVED_KEYS = frozenset({"areaId", "page", "sort", "ascending", "excludeAncestors", "facets"})


def _stringify(value: Any) -> str:
    """Render a filter value the way the listing web client does.

    Booleans and None use their JSON spelling; whole floats drop the ``.0``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def create_filters(filters: Mapping[str, Any]) -> tuple[SearchFilter, ...]:
    """Turn key/value pairs into search filters, keeping their order.

    Example:
        >>> create_filters({"maxDistanceToWater": 1000, "objectType": "Villa"})
        (SearchFilter(key='maxDistanceToWater', value='1000'), SearchFilter(key='objectType', value='Villa'))
    """
    return tuple(SearchFilter(key=key, value=_stringify(value)) for key, value in filters.items())


def build_search_input(params: Mapping[str, Any]) -> SearchInput:
    """Build a SearchInput from a flat mapping of parameters.

    ``areaId`` is required. ``page``, ``sort``, ``ascending``, ``excludeAncestors``
    and ``facets`` are taken verbatim when present. Any other key is forwarded as
    a filter without checking that the listing service knows it.

    Args:
        params: Flat mapping, e.g. ``{"areaId": "2", "objectType": "Villa", "page": 2}``.

    Returns:
        SearchInput with filters in the order the keys appear in ``params``.

    Raises:
        ValueError: If ``areaId`` is missing.
    """
    if "areaId" not in params:
        raise ValueError("build_search_input requires an 'areaId'")

    filter_params = {key: value for key, value in params.items() if key not in RESERVED_KEYS}

    return SearchInput(
        area_id=params["areaId"],
        filters=create_filters(filter_params),
        page=params.get("page", 1),
        sort=params.get("sort", ""),
        ascending=params.get("ascending", False),
        exclude_ancestors=params.get("excludeAncestors", True),
        facets=tuple(params.get("facets", ())),
    )
