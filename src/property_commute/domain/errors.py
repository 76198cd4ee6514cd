"""Errors raised by the listing and transit API clients."""

import json
from collections.abc import Iterable
from typing import Any


class CommuteApiError(Exception):
    """Base class for failures talking to an upstream API."""


class TransportError(CommuteApiError):
    """The upstream service answered with a non-success HTTP status."""

    def __init__(self, status: int, reason: str = "", api_name: str = "API") -> None:
        self.status = status
        self.reason = reason
        self.api_name = api_name
        message = f"{api_name} request failed: {status}"
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


class ProtocolError(CommuteApiError):
    """A GraphQL response carried an ``errors`` array despite a success status."""

    def __init__(self, errors: list[Any]) -> None:
        self.errors = errors
        super().__init__(f"GraphQL error: {json.dumps(errors, ensure_ascii=False, default=str)}")


class ResponseDecodeError(CommuteApiError):
    """A success response whose body is not valid JSON (e.g. an HTML block page)."""

    def __init__(self, api_name: str, detail: str) -> None:
        self.api_name = api_name
        self.detail = detail
        super().__init__(f"{api_name} returned a non-JSON response: {detail}")


class UnknownOperationError(CommuteApiError):
    """No persisted-query hash is registered for the requested operation."""

    def __init__(self, operation: str, available: Iterable[str]) -> None:
        self.operation = operation
        self.available = tuple(available)
        super().__init__(
            f"Unknown operation: {operation}. Available operations: {', '.join(self.available)}"
        )


HttpError = TransportError
GraphQLError = ProtocolError
