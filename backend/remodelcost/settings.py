"""Runtime configuration loaded from environment variables.

Values come from the process environment, with a ``.env`` file loaded first
for local development. Only the Anthropic API key is required, and only by
the benchmark analyzer.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

from remodelcost.exceptions import ConfigurationMissingError

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"
DEFAULT_REFRESH_INTERVAL_DAYS = 2.0
DEFAULT_MARKET_DATA_PATH = Path("data") / "marketData.json"
DEFAULT_LLM_TIMEOUT_SECONDS = 60.0


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        msg = f"{name} must be a number, got '{raw}'"
        raise ConfigurationMissingError(msg) from exc
    if value <= 0:
        msg = f"{name} must be positive, got {value}"
        raise ConfigurationMissingError(msg)
    return value


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    anthropic_api_key: str = field(default="", repr=False)
    model: str = DEFAULT_MODEL
    llm_timeout_seconds: float = DEFAULT_LLM_TIMEOUT_SECONDS
    refresh_interval_days: float = DEFAULT_REFRESH_INTERVAL_DAYS
    market_data_path: Path = DEFAULT_MARKET_DATA_PATH
    past_projects_path: Path | None = None

    @classmethod
    def from_env(cls, *, load_dotenv_file: bool = True) -> Settings:
        """Build settings from the environment.

        Raises:
            ConfigurationMissingError: If a numeric variable is malformed.
        """
        if load_dotenv_file:
            load_dotenv()

        past_projects = os.environ.get("PAST_PROJECTS_PATH", "").strip()
        return cls(
            anthropic_api_key=os.environ.get("ANTHROPIC_API_KEY", "").strip(),
            model=os.environ.get("REMODELCOST_MODEL", "").strip() or DEFAULT_MODEL,
            llm_timeout_seconds=_env_float(
                "LLM_TIMEOUT_SECONDS", DEFAULT_LLM_TIMEOUT_SECONDS
            ),
            refresh_interval_days=_env_float(
                "REFRESH_INTERVAL_DAYS", DEFAULT_REFRESH_INTERVAL_DAYS
            ),
            market_data_path=Path(
                os.environ.get("MARKET_DATA_PATH", "").strip() or DEFAULT_MARKET_DATA_PATH
            ),
            past_projects_path=Path(past_projects) if past_projects else None,
        )

    @property
    def refresh_interval(self) -> timedelta:
        return timedelta(days=self.refresh_interval_days)

    def require_api_key(self) -> str:
        """Return the Anthropic API key or fail fast.

        Raises:
            ConfigurationMissingError: If ANTHROPIC_API_KEY is not set.
        """
        if not self.anthropic_api_key:
            msg = (
                "ANTHROPIC_API_KEY environment variable is not set. "
                "Set it to enable benchmark analysis."
            )
            raise ConfigurationMissingError(msg)
        return self.anthropic_api_key
