"""Structured errors raised by the resource fetcher."""

from __future__ import annotations

import json
from typing import Any

# Status used when no HTTP response was ever received.
TRANSPORT_FAILURE = "FETCH_ERROR"


class FetchError(RuntimeError):
    """A failed request.

    ``status`` is the numeric HTTP status, or :data:`TRANSPORT_FAILURE` when
    the request never produced a response. ``payload`` is the parsed JSON
    error body, the raw body text, or ``None``.
    """

    def __init__(self, message: str, payload: Any = None, status: int | str = TRANSPORT_FAILURE) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload
        self.status = status

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status!r}, message={self.message!r})"


class UnauthorizedError(FetchError):
    """Raised for HTTP 401 responses."""

    def __init__(self, payload: Any = None) -> None:
        super().__init__("Unauthorized request", payload=payload, status=401)


def try_parse_json(text: str) -> Any:
    """Return the decoded JSON value of *text*, or *text* itself if it is not JSON."""
    try:
        return json.loads(text)
    except ValueError:
        return text


def format_payload(payload: Any) -> str:
    if isinstance(payload, str):
        return payload
    return json.dumps(payload, indent=2, ensure_ascii=False)


def build_error_message(status: int, payload: Any) -> str:
    return f"Request failed with status {status}.\nResponse:\n{format_payload(payload)}"
