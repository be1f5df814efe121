"""Resource fetcher: resolve a path against the base URL and return its JSON."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from apifetch.config import Config
from apifetch.errors import (
    TRANSPORT_FAILURE,
    FetchError,
    UnauthorizedError,
    build_error_message,
    try_parse_json,
)
from apifetch.models import RequestOptions, merge_options

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS: dict[str, Any] = {}
_DEFAULT_HEADERS: dict[str, str] = {}


class ResourceFetcher:
    """Issue JSON requests against a fixed base URL.

    Every failure surfaces as a single :class:`~apifetch.errors.FetchError`
    except a 2xx response with a malformed body, which raises the JSON
    decoding error unchanged. Nothing is retried or cached.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("base_url must not be empty")
        if "{{" in base_url and "}}" in base_url:
            raise ValueError(f"Unresolved base URL placeholder: {base_url}")
        self._base_url = base_url
        self._timeout = timeout
        self._client = client

    @classmethod
    def from_config(cls, config: Config, **kwargs: Any) -> ResourceFetcher:
        return cls(config.base_url, timeout=config.timeout, **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> ResourceFetcher:
        return cls.from_config(Config.from_env(), **kwargs)

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_url(self, path: str) -> str:
        return f"{self._base_url}/{path}"

    # ------------------------------------------------------------------
    # Public entry point
    # ------------------------------------------------------------------

    async def fetch(
        self,
        path: str,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> Any:
        request_options = merge_options(options, _DEFAULT_OPTIONS, _DEFAULT_HEADERS)
        url = self.build_url(path)
        kwargs = request_options.to_httpx_kwargs()

        logger.debug("%s %s", kwargs["method"], url)
        try:
            response = await self._send(url, kwargs)
        except httpx.RequestError as exc:
            raise FetchError(str(exc), payload=None, status=TRANSPORT_FAILURE) from exc
        logger.debug("%s %s -> %d", kwargs["method"], url, response.status_code)

        # redirect="error" rejects like a network failure, not an HTTP error.
        if request_options.redirect == "error" and response.is_redirect:
            location = response.headers.get("Location", "")
            raise FetchError(
                f"Redirect to {location} refused for {url}",
                payload=None,
                status=TRANSPORT_FAILURE,
            )

        self._raise_for_status(response)
        return response.json()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _send(self, url: str, kwargs: dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return await self._client.request(url=url, **kwargs)

        client_kwargs: dict[str, Any] = {}
        if self._timeout is not None:
            client_kwargs["timeout"] = self._timeout
        async with httpx.AsyncClient(**client_kwargs) as client:
            return await client.request(url=url, **kwargs)

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        status = response.status_code
        if status == 401:
            raise UnauthorizedError(payload=try_parse_json(response.text))
        if not response.is_success:
            payload = try_parse_json(response.text)
            raise FetchError(build_error_message(status, payload), payload=payload, status=status)


async def fetch_resource(
    path: str,
    options: RequestOptions | Mapping[str, Any] | None = None,
    *,
    config: Config | None = None,
) -> Any:
    """Fetch *path* once with a fetcher built from *config* (default: environment)."""
    fetcher = ResourceFetcher.from_config(config or Config.from_env())
    return await fetcher.fetch(path, options)
