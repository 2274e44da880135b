"""Historical project and comparables models."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HistoricalProjectRecord(BaseModel):
    """A completed project from the reference corpus. Never mutated."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    address: str
    zip_code: str
    project_type: str
    square_footage: float = Field(gt=0)
    finish_level: str
    year: int
    final_cost: float = Field(gt=0)
    notes: str = ""

    @property
    def cost_per_sq_ft(self) -> float:
        return self.final_cost / self.square_footage


class ComparisonCriteria(BaseModel):
    """Query describing the project being compared against the corpus."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    project_type: str
    zip_code: str | None = None
    square_footage: float
    material_quality: str
    estimated_cost: float


@dataclass(frozen=True)
class SimilarityScore:
    """Score (0-100) for one corpus record against a query."""

    record: HistoricalProjectRecord
    score: float
    corpus_index: int


class ComparablesResult(BaseModel):
    """Top comparables, their average normalized cost, and a narrative."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    similar_projects: list[HistoricalProjectRecord] = Field(default_factory=list)
    average_cost_per_sq_ft: int = 0
    comparison: str
