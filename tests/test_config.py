"""Tests for Config.from_env."""

from __future__ import annotations

from dataclasses import replace

import pytest

from apifetch.config import DEFAULT_BASE_URL, Config


class TestConfig:
    def test_defaults(self) -> None:
        config = Config()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout is None

    def test_from_env_unset(self) -> None:
        assert Config.from_env() == Config()

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APIFETCH_BASE_URL", "https://api.example.test")
        monkeypatch.setenv("APIFETCH_TIMEOUT", "12.5")
        config = Config.from_env()
        assert config.base_url == "https://api.example.test"
        assert config.timeout == 12.5

    def test_empty_timeout_means_transport_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APIFETCH_TIMEOUT", "")
        assert Config.from_env().timeout is None

    def test_frozen_override_with_replace(self) -> None:
        config = replace(Config(), base_url="https://other.test")
        assert config.base_url == "https://other.test"
        with pytest.raises(AttributeError):
            config.base_url = "x"  # type: ignore[misc]
