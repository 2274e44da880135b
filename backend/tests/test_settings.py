"""Tests for environment-driven settings."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import pytest

from remodelcost.exceptions import ConfigurationMissingError
from remodelcost.settings import DEFAULT_MODEL, Settings

_ENV_VARS = (
    "ANTHROPIC_API_KEY",
    "REMODELCOST_MODEL",
    "LLM_TIMEOUT_SECONDS",
    "REFRESH_INTERVAL_DAYS",
    "MARKET_DATA_PATH",
    "PAST_PROJECTS_PATH",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestFromEnv:
    def test_defaults(self) -> None:
        settings = Settings.from_env(load_dotenv_file=False)

        assert settings.anthropic_api_key == ""
        assert settings.model == DEFAULT_MODEL
        assert settings.refresh_interval == timedelta(days=2)
        assert settings.market_data_path == Path("data") / "marketData.json"
        assert settings.past_projects_path is None

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("ANTHROPIC_API_KEY", " sk-test ")
        monkeypatch.setenv("REMODELCOST_MODEL", "claude-haiku-4-5")
        monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "15")
        monkeypatch.setenv("REFRESH_INTERVAL_DAYS", "0.5")
        monkeypatch.setenv("MARKET_DATA_PATH", str(tmp_path / "market.json"))
        monkeypatch.setenv("PAST_PROJECTS_PATH", str(tmp_path / "past.json"))

        settings = Settings.from_env(load_dotenv_file=False)

        assert settings.anthropic_api_key == "sk-test"
        assert settings.model == "claude-haiku-4-5"
        assert settings.llm_timeout_seconds == 15.0
        assert settings.refresh_interval == timedelta(hours=12)
        assert settings.market_data_path == tmp_path / "market.json"
        assert settings.past_projects_path == tmp_path / "past.json"

    @pytest.mark.parametrize("raw", ["soon", "0", "-2"])
    def test_bad_refresh_interval(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("REFRESH_INTERVAL_DAYS", raw)
        with pytest.raises(ConfigurationMissingError, match="REFRESH_INTERVAL_DAYS"):
            Settings.from_env(load_dotenv_file=False)


class TestRequireApiKey:
    def test_missing(self) -> None:
        with pytest.raises(ConfigurationMissingError, match="ANTHROPIC_API_KEY"):
            Settings().require_api_key()

    def test_present(self) -> None:
        assert Settings(anthropic_api_key="sk-test").require_api_key() == "sk-test"

    def test_key_not_in_repr(self) -> None:
        assert "sk-test" not in repr(Settings(anthropic_api_key="sk-test"))
