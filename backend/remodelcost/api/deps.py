"""Dependency construction for FastAPI endpoints."""

from __future__ import annotations

import logging

from remodelcost.services.benchmark_analyzer import BenchmarkAnalyzer
from remodelcost.settings import Settings

logger = logging.getLogger(__name__)


def create_benchmark_analyzer(settings: Settings | None = None) -> BenchmarkAnalyzer:
    """Create a BenchmarkAnalyzer from configuration.

    Raises ConfigurationMissingError if ANTHROPIC_API_KEY is not set.
    """
    settings = settings or Settings.from_env()
    api_key = settings.require_api_key()
    logger.info("Benchmark analysis enabled with model %s", settings.model)
    return BenchmarkAnalyzer(
        api_key=api_key,
        model=settings.model,
        timeout=settings.llm_timeout_seconds,
    )
