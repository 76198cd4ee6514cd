"""GraphQL client for the Booli listing API using persisted queries."""

import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from property_commute.adapters.booli_api.constants import (
    BOOLI_GRAPHQL_URL,
    DEFAULT_HEADERS,
    DEFAULT_QUERY_CONTEXT,
    DEFAULT_SEARCH_LIMIT,
    OPERATION_HASHES,
    PERSISTED_QUERY_VERSION,
)
from property_commute.adapters.http_json import get_json
from property_commute.domain.errors import ProtocolError, UnknownOperationError
from property_commute.domain.models.area_suggestion import AreaSuggestion
from property_commute.domain.models.search_input import SearchFilter, SearchInput

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

API_NAME = "Booli API"


class BooliGraphQLClient:
    """Client for Booli's GraphQL endpoint.

    Only pre-registered operations can be executed: the client sends the
    operation name, its persisted-query hash and the variables, never query text.
    Instances hold static configuration only and can be shared between tasks.
    """

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = BOOLI_GRAPHQL_URL,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            session: Optional aiohttp session to reuse across requests.
            base_url: GraphQL endpoint URL.
            headers: Headers merged over the default browser-like header set.
        """
        self._session = session
        self.base_url = base_url
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}

    @staticmethod
    def _build_params(operation_name: str, variables: dict[str, Any]) -> dict[str, str]:
        """Encode an operation as the persisted-query GET parameters."""
        sha256_hash = OPERATION_HASHES.get(operation_name)
        if sha256_hash is None:
            raise UnknownOperationError(operation_name, OPERATION_HASHES.keys())

        extensions = {
            "persistedQuery": {
                "version": PERSISTED_QUERY_VERSION,
                "sha256Hash": sha256_hash,
            }
        }
        return {
            "operationName": operation_name,
            "variables": json.dumps(variables, ensure_ascii=False, separators=(",", ":")),
            "extensions": json.dumps(extensions, separators=(",", ":")),
        }

    async def query(self, operation_name: str, variables: dict[str, Any]) -> dict[str, Any]:
        """Execute a persisted query.

        Args:
            operation_name: Registered operation (search, polygons, ...).
            variables: Variables for the query.

        Returns:
            The ``data`` object of the response.

        Raises:
            UnknownOperationError: If no hash is registered for the operation.
            TransportError: If the HTTP status is not 2xx.
            ProtocolError: If the response carries GraphQL ``errors``.
        """
        params = self._build_params(operation_name, variables)
        logger.debug(f"Executing Booli operation '{operation_name}'")

        body = await get_json(self._session, self.base_url, params, self.headers, API_NAME)

        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            logger.error(f"Booli operation '{operation_name}' returned errors: {errors}")
            raise ProtocolError(errors)

        data = body.get("data") if isinstance(body, dict) else None
        return data or {}

    async def search(
        self,
        search_input: SearchInput | dict[str, Any],
        query_context: str = DEFAULT_QUERY_CONTEXT,
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> dict[str, Any]:
        """Search for listings.

        Args:
            search_input: SearchInput, or an input dict already in wire shape.
            query_context: Context the web client reports for the search.
            limit: Maximum listings on the page.

        Returns:
            Search data, e.g. ``result["forSale"]["totalCount"]``.
        """
        if isinstance(search_input, SearchInput):
            search_input = search_input.to_variables()

        variables = {
            "queryContext": query_context,
            "limit": limit,
            "input": search_input,
        }
        return await self.query("search", variables)

    async def get_polygons(self, polygon_input: dict[str, Any]) -> dict[str, Any]:
        """Get map polygons for areas, e.g. ``{"areaIds": [77104], "filters": [...]}``."""
        return await self.query("polygons", {"input": polygon_input})

    async def get_user_search_history(
        self, param_groups: Iterable[Sequence[SearchFilter | dict[str, str]]]
    ) -> dict[str, Any]:
        """Get human-readable descriptions of saved searches.

        Args:
            param_groups: One group of key/value parameters per saved search.
        """
        params = [
            [p.to_dict() if isinstance(p, SearchFilter) else dict(p) for p in group]
            for group in param_groups
        ]
        return await self.query("userSearchHistoryDescriptions", {"input": {"params": params}})

    async def search_area(self, search_term: str) -> list[AreaSuggestion]:
        """Search for areas by name (e.g. "Stockholm", "Skåne län")."""
        data = await self.query("areaSuggestionSearch", {"search": search_term})
        suggestions = (data.get("areaSuggestionSearch") or {}).get("suggestions") or []
        return [self._build_suggestion(s) for s in suggestions if isinstance(s, dict)]

    async def find_area_id(self, search_term: str, type: str | None = None) -> str | None:
        """Find an area id by name.

        Args:
            search_term: Area name to search for.
            type: Only accept suggestions of this exact type (e.g. "Län", "Kommun").

        Returns:
            Id of the first (matching) suggestion, or None if there is none.
        """
        suggestions = await self.search_area(search_term)
        if not suggestions:
            return None

        if type:
            for suggestion in suggestions:
                if suggestion.type == type:
                    return suggestion.id
            return None

        return suggestions[0].id

    @staticmethod
    def _build_suggestion(data: dict[str, Any]) -> AreaSuggestion:
        """Build an AreaSuggestion from API data."""
        return AreaSuggestion(
            id=str(data.get("id", "")),
            display_name=data.get("displayName", ""),
            type=data.get("type", ""),
            type_display_name=data.get("typeDisplayName", ""),
            parent=data.get("parent", "") or "",
            parent_display_name=data.get("parentDisplayName", "") or "",
        )
