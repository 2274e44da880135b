"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from remodelcost.exceptions import (
    BenchmarkAnalysisError,
    ConfigurationMissingError,
    InvalidInputError,
)
from remodelcost.models.comparables import ComparisonCriteria  # noqa: TCH001 (FastAPI resolves at runtime)
from remodelcost.models.estimate import CostBreakdown
from remodelcost.models.project import ProjectParameters  # noqa: TCH001 (FastAPI resolves at runtime)
from remodelcost.services.benchmark_analyzer import (
    BenchmarkAnalysisRequest,
    get_benchmark_ranges,
)
from remodelcost.storage import InMemoryRecordStore
from remodelcost.validation import validate_zip_code

if TYPE_CHECKING:
    from remodelcost.comparables import ComparableProjectScorer
    from remodelcost.engine import CostBreakdownCalculator
    from remodelcost.market.cache import MarketDataCache
    from remodelcost.services.benchmark_analyzer import BenchmarkAnalyzer
    from remodelcost.settings import Settings
    from remodelcost.storage import StoredRecord

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


class BenchmarkRangesRequest(BaseModel):
    """Body for POST /api/benchmarks."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    project_category: str = "residential"
    square_footage: float | None = None


class EstimatePayload(BaseModel):
    """Inputs and result of one estimate, as kept in the estimate store."""

    parameters: ProjectParameters
    breakdown: CostBreakdown


class StoredEstimate(BaseModel):
    """A stored estimate as returned by the estimates endpoints."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    created_at: datetime
    parameters: ProjectParameters
    breakdown: CostBreakdown

    @classmethod
    def from_record(cls, record: StoredRecord[EstimatePayload]) -> StoredEstimate:
        return cls(
            id=record.id,
            created_at=record.created_at,
            parameters=record.payload.parameters,
            breakdown=record.payload.breakdown,
        )


def create_app(
    *,
    calculator: CostBreakdownCalculator | None = None,
    scorer: ComparableProjectScorer | None = None,
    market_cache: MarketDataCache | None = None,
    benchmark_analyzer: BenchmarkAnalyzer | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    calculator, scorer, market_cache, benchmark_analyzer
        Optional pre-built components for dependency injection (e.g. tests).
        Any that are not provided are created on first use.
    settings
        Optional settings; read from the environment on first use if absent.
    """
    app = FastAPI(title="remodelcost", version=API_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.calculator = calculator
    app.state.scorer = scorer
    app.state.market_cache = market_cache
    app.state.benchmark_analyzer = benchmark_analyzer
    app.state.settings = settings
    app.state.estimates = InMemoryRecordStore[EstimatePayload]()

    def _get_settings() -> Settings:
        current: Settings | None = app.state.settings
        if current is None:
            from remodelcost.settings import Settings

            current = Settings.from_env()
            app.state.settings = current
        return current

    def _get_calculator() -> CostBreakdownCalculator:
        calc: CostBreakdownCalculator | None = app.state.calculator
        if calc is None:
            from remodelcost.factory import create_default_calculator

            calc = create_default_calculator()
            app.state.calculator = calc
        return calc

    def _get_scorer() -> ComparableProjectScorer:
        sc: ComparableProjectScorer | None = app.state.scorer
        if sc is None:
            from remodelcost.factory import create_default_scorer

            sc = create_default_scorer(_get_settings())
            app.state.scorer = sc
        return sc

    def _get_market_cache() -> MarketDataCache:
        cache: MarketDataCache | None = app.state.market_cache
        if cache is None:
            from remodelcost.factory import create_default_market_cache

            cache = create_default_market_cache(_get_settings())
            app.state.market_cache = cache
        return cache

    def _get_benchmark_analyzer() -> BenchmarkAnalyzer:
        analyzer: BenchmarkAnalyzer | None = app.state.benchmark_analyzer
        if analyzer is None:
            from remodelcost.api.deps import create_benchmark_analyzer

            analyzer = create_benchmark_analyzer(_get_settings())
            app.state.benchmark_analyzer = analyzer
        return analyzer

    # ------------------------------------------------------------------
    # Error mapping
    # ------------------------------------------------------------------

    @app.exception_handler(InvalidInputError)
    async def invalid_input(_: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "detail": str(exc),
                "field": exc.field,
                "constraint": exc.constraint,
            },
        )

    @app.exception_handler(ConfigurationMissingError)
    async def configuration_missing(_: Request, exc: ConfigurationMissingError) -> JSONResponse:
        logger.error("Configuration missing: %s", exc)
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    @app.exception_handler(BenchmarkAnalysisError)
    async def analysis_failed(_: Request, exc: BenchmarkAnalysisError) -> JSONResponse:
        logger.error("Benchmark analysis failed: %s", exc)
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": API_VERSION}

    # ------------------------------------------------------------------
    # Estimates
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(params: ProjectParameters, response: Response) -> dict[str, Any]:
        breakdown = _get_calculator().estimate(params)
        estimates: InMemoryRecordStore[EstimatePayload] = app.state.estimates
        record = estimates.create(EstimatePayload(parameters=params, breakdown=breakdown))
        logger.info("Stored estimate %d (total $%.2f)", record.id, breakdown.total)
        response.headers["Location"] = f"/api/estimates/{record.id}"
        return breakdown.model_dump(mode="json")

    @app.get("/api/estimates")
    def list_estimates() -> list[dict[str, Any]]:
        estimates: InMemoryRecordStore[EstimatePayload] = app.state.estimates
        return [
            StoredEstimate.from_record(r).model_dump(mode="json", by_alias=True)
            for r in estimates.list()
        ]

    @app.get("/api/estimates/{estimate_id}")
    def get_estimate(estimate_id: int) -> dict[str, Any]:
        estimates: InMemoryRecordStore[EstimatePayload] = app.state.estimates
        record = estimates.get(estimate_id)
        if record is None:
            raise HTTPException(status_code=404, detail=f"Estimate {estimate_id} not found")
        return StoredEstimate.from_record(record).model_dump(mode="json", by_alias=True)

    @app.post("/api/estimate/what-if")
    def what_if(params: ProjectParameters) -> dict[str, Any]:
        scenarios = _get_calculator().what_if_scenarios(params)
        return scenarios.model_dump(mode="json", by_alias=True)

    @app.get("/api/regional-insight")
    def regional_insight(zipCode: str | None = None) -> dict[str, Any]:  # noqa: N803
        calc = _get_calculator()
        cleaned = validate_zip_code(zipCode) if zipCode else None
        return {
            "zipCode": cleaned,
            "multiplier": calc.repository.get_regional_multiplier(cleaned),
            "insight": calc.regional_insight(cleaned),
        }

    # ------------------------------------------------------------------
    # POST /api/past-projects/similar
    # ------------------------------------------------------------------

    @app.post("/api/past-projects/similar")
    def similar_projects(criteria: ComparisonCriteria) -> dict[str, Any]:
        result = _get_scorer().find_similar(criteria)
        return result.model_dump(mode="json", by_alias=True)

    # ------------------------------------------------------------------
    # GET /api/market-data
    # ------------------------------------------------------------------

    @app.get("/api/market-data")
    def market_data() -> dict[str, Any]:
        return _get_market_cache().get_market_data().model_dump(mode="json", by_alias=True)

    # ------------------------------------------------------------------
    # Benchmarks
    # ------------------------------------------------------------------

    @app.post("/api/benchmarks")
    def benchmarks(body: BenchmarkRangesRequest) -> dict[str, Any]:
        ranges = get_benchmark_ranges(body.project_category, body.square_footage)
        return {
            "benchmarks": [r.model_dump(mode="json", by_alias=True) for r in ranges],
        }

    @app.post("/api/benchmarks/analyze")
    def analyze_benchmarks(body: BenchmarkAnalysisRequest) -> dict[str, Any]:
        analysis = _get_benchmark_analyzer().analyze(body)
        return analysis.model_dump(mode="json", by_alias=True)

    return app
