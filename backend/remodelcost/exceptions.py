"""Custom exception hierarchy for the remodelcost engine."""

from __future__ import annotations


class RemodelCostError(Exception):
    """Base exception for all remodelcost errors."""


class InvalidInputError(RemodelCostError):
    """Raised when a caller-supplied field is missing, out of range, or unrecognized.

    Always caller-fixable. ``field`` names the offending input and
    ``constraint`` names the rule it violated.
    """

    def __init__(self, field: str, constraint: str, message: str | None = None) -> None:
        self.field = field
        self.constraint = constraint
        super().__init__(message or f"{field}: {constraint}")


class InvalidProjectTypeError(InvalidInputError):
    """Raised when the project type has no entry in the pricing tables."""


class InvalidQualityTierError(InvalidInputError):
    """Raised when the material quality is not a known tier."""


class InvalidTimelineBucketError(InvalidInputError):
    """Raised when the timeline is not a known duration bucket."""


class InvalidNumericInputError(InvalidInputError):
    """Raised when a numeric field is non-finite or violates its bounds."""


class DataUnavailableError(RemodelCostError):
    """Raised when the historical corpus or a persisted snapshot cannot be read."""


class ConfigurationMissingError(RemodelCostError):
    """Raised when a required credential or configuration value is absent."""


class BenchmarkAnalysisError(RemodelCostError):
    """Raised when the external analysis collaborator fails."""
