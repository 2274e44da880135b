"""Comparable project scorer.

Ranks historical projects by weighted similarity to a query and summarizes
how the query's cost per square foot compares with the closest matches.

Scoring weights (out of 100):

- project type, case-insensitive exact match: 40
- ZIP code exact match, only when the query has one: 20
- square footage closeness, linear decay to zero at 100% difference: 30
- finish level match after mapping the quality tier: 10
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from remodelcost.data.repository import parse_quality_tier
from remodelcost.exceptions import DataUnavailableError
from remodelcost.models.comparables import (
    ComparablesResult,
    ComparisonCriteria,
    HistoricalProjectRecord,
    SimilarityScore,
)
from remodelcost.models.enums import FinishLevel, QualityTier
from remodelcost.validation import validate_numeric, validate_positive, validate_required_text

if TYPE_CHECKING:
    from collections.abc import Sequence

    from remodelcost.data.corpus import CorpusProvider

logger = logging.getLogger(__name__)

PROJECT_TYPE_WEIGHT = 40.0
ZIP_CODE_WEIGHT = 20.0
SIZE_WEIGHT = 30.0
FINISH_LEVEL_WEIGHT = 10.0

# Records at or below this score are not meaningfully similar
MIN_SIMILARITY_SCORE = 30.0
MAX_COMPARABLES = 3
ALIGNMENT_THRESHOLD_PERCENT = 10.0

NO_COMPARABLES_MESSAGE = "No similar past projects found for comparison."

# Budget work is recorded as standard finish on historical jobs
FINISH_LEVEL_FOR_TIER: dict[QualityTier, FinishLevel] = {
    QualityTier.BUDGET: FinishLevel.STANDARD,
    QualityTier.STANDARD: FinishLevel.STANDARD,
    QualityTier.PREMIUM: FinishLevel.PREMIUM,
    QualityTier.LUXURY: FinishLevel.LUXURY,
}


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _validate_criteria(criteria: ComparisonCriteria) -> tuple[str, float, QualityTier, float]:
    project_type = validate_required_text(criteria.project_type, "project_type")
    square_footage = validate_positive(criteria.square_footage, "square_footage")
    quality = parse_quality_tier(criteria.material_quality)
    estimated_cost = validate_numeric(criteria.estimated_cost, "estimated_cost", min_value=0.0)
    return project_type, square_footage, quality, estimated_cost


def score_record(
    record: HistoricalProjectRecord,
    *,
    project_type: str,
    square_footage: float,
    finish_level: FinishLevel,
    zip_code: str | None = None,
) -> float:
    """Compute the 0-100 similarity score of one record against a query."""
    score = 0.0

    if record.project_type.strip().lower() == project_type.strip().lower():
        score += PROJECT_TYPE_WEIGHT

    if zip_code and record.zip_code.strip() == zip_code.strip():
        score += ZIP_CODE_WEIGHT

    size_diff = abs(record.square_footage - square_footage)
    score += max(0.0, SIZE_WEIGHT - (size_diff / square_footage) * SIZE_WEIGHT)

    if record.finish_level.strip().lower() == finish_level.value:
        score += FINISH_LEVEL_WEIGHT

    return score


def rank_comparables(
    criteria: ComparisonCriteria,
    corpus: Sequence[HistoricalProjectRecord],
) -> list[SimilarityScore]:
    """Score, filter, and rank the corpus. Ties keep corpus order."""
    project_type, square_footage, quality, _ = _validate_criteria(criteria)
    finish_level = FINISH_LEVEL_FOR_TIER[quality]

    scored = [
        SimilarityScore(
            record=record,
            score=score_record(
                record,
                project_type=project_type,
                square_footage=square_footage,
                finish_level=finish_level,
                zip_code=criteria.zip_code,
            ),
            corpus_index=index,
        )
        for index, record in enumerate(corpus)
    ]
    retained = [s for s in scored if s.score > MIN_SIMILARITY_SCORE]
    # sorted() is stable, so equal scores stay in corpus order
    retained = sorted(retained, key=lambda s: s.score, reverse=True)
    return retained[:MAX_COMPARABLES]


def build_comparison(
    estimated_cost: float,
    square_footage: float,
    comparables: Sequence[HistoricalProjectRecord],
    average_cost_per_sq_ft: float,
) -> str:
    """Assemble the comparison narrative from already-computed numbers."""
    if not comparables:
        return NO_COMPARABLES_MESSAGE

    current_cost_per_sq_ft = estimated_cost / square_footage
    difference = (
        (current_cost_per_sq_ft - average_cost_per_sq_ft) / average_cost_per_sq_ft * 100
    )

    count = len(comparables)
    plural = "s" if count > 1 else ""
    comparison = f"Based on {count} similar past project{plural}, "

    if abs(difference) < ALIGNMENT_THRESHOLD_PERCENT:
        comparison += "this estimate aligns well with your historical project costs."
    elif difference > 0:
        comparison += (
            f"this estimate is {_round_half_up(difference)}% higher than your "
            "typical costs for similar projects."
        )
    else:
        comparison += (
            f"this estimate is {_round_half_up(abs(difference))}% lower than your "
            "typical costs for similar projects."
        )

    most_similar = comparables[0]
    comparison += f" Most similar to your {most_similar.year} project on {most_similar.address}."
    return comparison


def find_similar(
    criteria: ComparisonCriteria,
    corpus: Sequence[HistoricalProjectRecord],
) -> ComparablesResult:
    """Find the closest historical projects and compare the query against them.

    An empty corpus, or one with no record scoring above the similarity
    floor, yields an empty result rather than an error.

    Raises:
        InvalidInputError: If the criteria are missing fields or out of range.
    """
    _, square_footage, _, estimated_cost = _validate_criteria(criteria)
    ranked = rank_comparables(criteria, corpus)
    similar_projects = [s.record for s in ranked]

    average = (
        sum(p.cost_per_sq_ft for p in similar_projects) / len(similar_projects)
        if similar_projects
        else 0.0
    )

    return ComparablesResult(
        similar_projects=similar_projects,
        average_cost_per_sq_ft=_round_half_up(average),
        comparison=build_comparison(estimated_cost, square_footage, similar_projects, average),
    )


class ComparableProjectScorer:
    """Runs ``find_similar`` against a corpus loaded from a provider.

    Args:
        corpus: Provider of historical records. It is asked for the corpus
            on every call; an unavailable corpus is treated as empty.
    """

    def __init__(self, corpus: CorpusProvider) -> None:
        self._corpus = corpus

    def find_similar(self, criteria: ComparisonCriteria) -> ComparablesResult:
        try:
            records = self._corpus.load()
        except DataUnavailableError:
            logger.warning("Historical corpus unavailable; comparing against none", exc_info=True)
            records = []
        return find_similar(criteria, records)
