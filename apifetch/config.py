"""Configuration management for apifetch."""

from __future__ import annotations

import os
from dataclasses import dataclass

# Replaced by the deploy/templating step before the code runs.
DEFAULT_BASE_URL = "{{your_site_base_url}}"


@dataclass(frozen=True)
class Config:
    """Process-wide fetcher settings."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = None  # None = httpx default

    @classmethod
    def from_env(cls) -> Config:
        timeout = os.getenv("APIFETCH_TIMEOUT")
        return cls(
            base_url=os.getenv("APIFETCH_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(timeout) if timeout else None,
        )
