"""Benchmark analysis service: compares an internal estimate with market ranges.

Range lookup is deterministic. The narrative comes from the Anthropic
Messages API, which receives only already-computed numbers and returns
prose; nothing it says feeds back into any calculation.
"""

from __future__ import annotations

import logging

import anthropic
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from remodelcost.exceptions import BenchmarkAnalysisError
from remodelcost.formatting import format_currency, format_per_sqft
from remodelcost.models.enums import ProjectCategory

logger = logging.getLogger(__name__)

ANALYSIS_UNAVAILABLE = "Analysis unavailable at this time."

# Industry-standard $/SF ranges by market segment
_INDUSTRY_RANGES: dict[ProjectCategory, tuple[float, float]] = {
    ProjectCategory.RESIDENTIAL: (80.0, 120.0),
    ProjectCategory.COMMERCIAL: (120.0, 180.0),
    ProjectCategory.INDUSTRIAL: (150.0, 220.0),
}

# Regional market data runs above the national figures
_REGIONAL_LOW_PREMIUM = 10.0
_REGIONAL_HIGH_PREMIUM = 15.0


# ---------------------------------------------------------------------------
# Data models
# ---------------------------------------------------------------------------

_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BenchmarkRange(BaseModel):
    """A third-party cost range for comparison."""

    model_config = _CAMEL_CONFIG

    source: str
    low_per_sq_ft: float
    high_per_sq_ft: float
    low_total: float | None = None
    high_total: float | None = None
    url: str = "#"

    @property
    def description(self) -> str:
        per_sf = (
            f"{format_per_sqft(self.low_per_sq_ft)} - {format_per_sqft(self.high_per_sq_ft)}"
        )
        if self.low_total is None or self.high_total is None:
            return per_sf
        return f"{format_currency(self.low_total)} - {format_currency(self.high_total)} ({per_sf})"


class BenchmarkAnalysisRequest(BaseModel):
    """Everything the analysis collaborator is told about the estimate."""

    model_config = _CAMEL_CONFIG

    internal_estimate: float = Field(gt=0)
    project_type: str
    area: float = Field(gt=0)
    material_quality: str
    timeline: str | None = None
    benchmarks: list[BenchmarkRange] = Field(default_factory=list)


class BenchmarkAnalysis(BaseModel):
    """Prose comparison returned by the collaborator."""

    model_config = _CAMEL_CONFIG

    analysis: str


# ---------------------------------------------------------------------------
# Range lookup
# ---------------------------------------------------------------------------


def resolve_category(value: str | ProjectCategory) -> ProjectCategory:
    """Map a category name to a segment. Anything unrecognized is residential."""
    try:
        return ProjectCategory(str(value).strip().lower())
    except ValueError:
        return ProjectCategory.RESIDENTIAL


def get_benchmark_ranges(
    category: str | ProjectCategory,
    square_footage: float | None = None,
) -> list[BenchmarkRange]:
    """Return industry and regional benchmark ranges for a market segment.

    When ``square_footage`` is given, each range also carries total-cost
    bounds.
    """
    low, high = _INDUSTRY_RANGES[resolve_category(category)]
    ranges = [
        ("Industry Average", low, high),
        ("Regional Market Data", low + _REGIONAL_LOW_PREMIUM, high + _REGIONAL_HIGH_PREMIUM),
    ]
    return [
        BenchmarkRange(
            source=source,
            low_per_sq_ft=range_low,
            high_per_sq_ft=range_high,
            low_total=range_low * square_footage if square_footage else None,
            high_total=range_high * square_footage if square_footage else None,
        )
        for source, range_low, range_high in ranges
    ]


# ---------------------------------------------------------------------------
# Analyzer
# ---------------------------------------------------------------------------

SYSTEM_PROMPT = (
    "You are a construction cost analyst for a family-owned residential "
    "construction business. You explain how an internal estimate compares "
    "with market benchmarks in plain, client-friendly language. Use only "
    "the numbers you are given; do not invent new figures."
)


class BenchmarkAnalyzer:
    """Asks a language model to explain an estimate against benchmark ranges.

    The collaborator is slow and can fail. This class applies the client
    timeout and nothing more; callers own any retry policy.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-5-20250929",
        timeout: float = 60.0,
    ) -> None:
        self._client = anthropic.Anthropic(
            api_key=api_key,
            timeout=timeout,
        )
        self._model = model

    def analyze(self, request: BenchmarkAnalysisRequest) -> BenchmarkAnalysis:
        """Produce a short prose comparison.

        Raises
        ------
        BenchmarkAnalysisError
            If the API call fails.
        """
        prompt = self.build_prompt(request)
        try:
            response = self._client.messages.create(
                model=self._model,
                max_tokens=400,
                temperature=0.3,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as exc:
            logger.warning("Benchmark analysis request failed: %s", exc)
            msg = f"Failed to generate estimate analysis: {exc}"
            raise BenchmarkAnalysisError(msg) from exc

        text_blocks = [block.text for block in response.content if block.type == "text"]
        analysis = "\n".join(text_blocks).strip()
        if not analysis:
            logger.warning("Benchmark analysis returned no text")
            analysis = ANALYSIS_UNAVAILABLE
        return BenchmarkAnalysis(analysis=analysis)

    @staticmethod
    def build_prompt(request: BenchmarkAnalysisRequest) -> str:
        """Render the request as the user message."""
        if request.benchmarks:
            benchmark_text = "\n".join(
                f"- {b.source}: {b.description}" for b in request.benchmarks
            )
        else:
            benchmark_text = "- No benchmark data available"

        cost_per_sqft = request.internal_estimate / request.area
        return (
            "Analyze how our internal estimate compares to market benchmarks.\n\n"
            f"Internal Estimate: {format_currency(request.internal_estimate)} "
            f"({format_per_sqft(cost_per_sqft)})\n"
            f"Project Type: {request.project_type}\n"
            f"Area: {request.area:,.0f} sq ft\n"
            f"Material Quality: {request.material_quality}\n"
            f"Timeline: {request.timeline or 'Standard'}\n\n"
            f"Market Benchmarks:\n{benchmark_text}\n\n"
            "Provide a professional analysis in 2-3 sentences that explains:\n"
            "1. How our estimate compares to market rates (higher/lower/within range)\n"
            "2. Key factors that might explain any differences "
            "(material quality, timeline, overhead, etc.)\n"
            "3. Why this positioning makes sense for our business"
        )
