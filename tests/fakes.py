"""Stand-ins for aiohttp's ClientSession and responses."""

from dataclasses import dataclass, field
from typing import Any


class FakeResponse:
    """Minimal aiohttp response used as an async context manager."""

    def __init__(
        self,
        status: int = 200,
        json_data: Any = None,
        text: str = "",
        reason: str = "OK",
        body: bytes = b"",
        headers: dict[str, str] | None = None,
        json_error: Exception | None = None,
    ) -> None:
        self.status = status
        self.reason = reason
        self.headers = headers or {}
        self._json_data = json_data
        self._text = text
        self._body = body
        self._json_error = json_error

    async def json(self, **_: Any) -> Any:
        if self._json_error is not None:
            raise self._json_error
        return self._json_data

    async def text(self) -> str:
        return self._text

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None


@dataclass
class RecordedRequest:
    url: str
    params: dict[str, str] | None
    headers: dict[str, str] | None


@dataclass
class FakeSession:
    """Returns queued responses in order and records every GET."""

    responses: list[FakeResponse] = field(default_factory=list)
    requests: list[RecordedRequest] = field(default_factory=list)

    def queue(self, response: FakeResponse) -> None:
        self.responses.append(response)

    def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        **_: Any,
    ) -> FakeResponse:
        self.requests.append(RecordedRequest(url=url, params=params, headers=headers))
        if not self.responses:
            raise AssertionError(f"Unexpected request to {url}")
        return self.responses.pop(0)

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]
