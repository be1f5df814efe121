"""Request option model and merging rules."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# fetch() keys that only mean something inside a browser.
BROWSER_ONLY_KEYS = frozenset(
    {
        "credentials",
        "mode",
        "cache",
        "referrer",
        "referrerPolicy",
        "integrity",
        "keepalive",
        "signal",
        "priority",
    }
)


class RequestOptions(BaseModel, frozen=True, extra="allow", populate_by_name=True):
    """fetch-style request options; unrecognised keys are kept as extras."""

    method: str | None = None
    headers: dict[str, Any] = Field(default_factory=dict)
    body: Any = None
    json_body: Any = Field(default=None, alias="json")
    params: dict[str, Any] | None = None
    redirect: Literal["follow", "manual", "error"] | None = None

    def to_httpx_kwargs(self) -> dict[str, Any]:
        """Translate into keyword arguments for ``httpx.AsyncClient.request``."""
        kwargs: dict[str, Any] = {
            "method": (self.method or "GET").upper(),
            "headers": {
                name: value if isinstance(value, (str, bytes)) else str(value)
                for name, value in self.headers.items()
            },
            "follow_redirects": self.redirect in (None, "follow"),
        }
        if self.body is not None:
            if isinstance(self.body, (str, bytes)):
                kwargs["content"] = self.body
            else:
                kwargs["json"] = self.body
        elif self.json_body is not None:
            kwargs["json"] = self.json_body
        if self.params is not None:
            kwargs["params"] = self.params

        ignored = sorted(self.model_extra or {})
        if ignored:
            browser = [k for k in ignored if k in BROWSER_ONLY_KEYS]
            other = [k for k in ignored if k not in BROWSER_ONLY_KEYS]
            if browser:
                logger.debug("Ignoring browser-only request options: %s", ", ".join(browser))
            if other:
                logger.debug("Ignoring unknown request options: %s", ", ".join(other))
        return kwargs


def _as_dict(options: RequestOptions | Mapping[str, Any] | None) -> dict[str, Any]:
    if options is None:
        return {}
    if isinstance(options, RequestOptions):
        return {
            **options.model_dump(by_alias=True, exclude_unset=True),
            **(options.model_extra or {}),
        }
    return dict(options)


def merge_options(
    options: RequestOptions | Mapping[str, Any] | None,
    defaults: Mapping[str, Any] | None = None,
    default_headers: Mapping[str, Any] | None = None,
) -> RequestOptions:
    """Shallow-merge *options* over *defaults*; ``headers`` merge one level deeper.

    Caller headers override *default_headers* key by key. Every other key the
    caller sets replaces the default value outright.
    """
    user = _as_dict(options)
    merged = {
        **dict(defaults or {}),
        **user,
        "headers": {**dict(default_headers or {}), **dict(user.get("headers") or {})},
    }
    return RequestOptions.model_validate(merged)
