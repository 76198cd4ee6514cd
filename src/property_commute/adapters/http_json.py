"""Single-shot JSON GET requests shared by the API clients."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from property_commute.adapters.api_request_logger import log_api_request
from property_commute.domain.errors import ResponseDecodeError, TransportError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


async def _fetch_json(
    session: "ClientSession",
    url: str,
    params: dict[str, str],
    headers: dict[str, str],
    api_name: str,
) -> Any:
    async with session.get(url, params=params, headers=headers) as response:
        if not 200 <= response.status < 300:
            body = await response.text()
            logger.error(
                f"{api_name} returned status {response.status} for {url}: "
                f"{body[:200] if body else '(empty response body)'}"
            )
            raise TransportError(response.status, response.reason or "", api_name=api_name)

        try:
            return await response.json(content_type=None)
        except ValueError as e:
            logger.error(f"{api_name} returned a non-JSON body for {url}: {e}")
            raise ResponseDecodeError(api_name, str(e)) from e


async def get_json(
    session: "ClientSession | None",
    url: str,
    params: dict[str, str],
    headers: dict[str, str],
    api_name: str,
) -> Any:
    """Issue one GET request and decode the JSON body.

    Uses the borrowed session when given; otherwise opens a session for this
    request only. There are no retries and no timeout beyond aiohttp's default.

    Raises:
        TransportError: If the response status is not 2xx.
        ResponseDecodeError: If a 2xx body is not valid JSON.
    """
    log_api_request(api_name, "GET", url, params=params, headers=headers)

    if session is not None:
        return await _fetch_json(session, url, params, headers, api_name)

    async with aiohttp.ClientSession() as owned_session:
        return await _fetch_json(owned_session, url, params, headers, api_name)
