"""Utility for logging outbound API requests when PC_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def should_log_requests() -> bool:
    """Check if request logging is enabled via the PC_LOG_REQUESTS environment variable."""
    return os.getenv("PC_LOG_REQUESTS", "").lower() == "true"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact credentials from headers before logging."""
    return {k: "***REDACTED***" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def _expand_param(value: Any) -> Any:
    """Decode JSON-encoded query parameters so they log readably."""
    if isinstance(value, str) and value[:1] in ("{", "["):
        try:
            return json.loads(value)
        except ValueError:
            return value
    return value


def log_api_request(
    api_name: str,
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log an outbound API request if PC_LOG_REQUESTS is enabled.

    Args:
        api_name: Name of the upstream API (e.g. "Booli", "Skånetrafiken").
        method: HTTP method.
        url: Request URL without query string.
        params: Query parameters; JSON-encoded values are decoded for display.
        headers: Request headers; credentials are redacted.
    """
    if not should_log_requests():
        return

    log_parts = [f"{api_name}: {method} {url}"]

    if params:
        expanded = {key: _expand_param(value) for key, value in params.items()}
        log_parts.append(f"Params: {json.dumps(expanded, indent=2, ensure_ascii=False)}")

    if headers:
        safe_headers = _redact_sensitive_headers(headers)
        log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
