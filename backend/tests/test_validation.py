"""Tests for the shared input validators."""

from __future__ import annotations

import pytest

from remodelcost.exceptions import InvalidInputError, InvalidNumericInputError
from remodelcost.validation import (
    validate_numeric,
    validate_positive,
    validate_required_text,
    validate_zip_code,
)


class TestValidateNumeric:
    def test_returns_float(self) -> None:
        assert validate_numeric(3, "area") == 3.0

    def test_optional_absent_returns_none(self) -> None:
        assert validate_numeric(None, "labor_rate", required=False) is None

    def test_required_absent_raises(self) -> None:
        with pytest.raises(InvalidNumericInputError) as exc_info:
            validate_numeric(None, "area")
        assert exc_info.value.field == "area"
        assert exc_info.value.constraint == "required"

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite(self, value: float) -> None:
        with pytest.raises(InvalidNumericInputError) as exc_info:
            validate_numeric(value, "area")
        assert exc_info.value.constraint == "must be finite"

    def test_bool_is_not_a_number(self) -> None:
        with pytest.raises(InvalidNumericInputError):
            validate_numeric(True, "area")  # type: ignore[arg-type]

    def test_string_is_not_a_number(self) -> None:
        with pytest.raises(InvalidNumericInputError):
            validate_numeric("lots", "area")  # type: ignore[arg-type]

    def test_inclusive_minimum(self) -> None:
        assert validate_numeric(0, "overhead_cost", min_value=0.0) == 0.0
        with pytest.raises(InvalidNumericInputError) as exc_info:
            validate_numeric(-0.01, "overhead_cost", min_value=0.0)
        assert exc_info.value.constraint == "must be at least 0"

    def test_exclusive_minimum(self) -> None:
        with pytest.raises(InvalidNumericInputError) as exc_info:
            validate_positive(0, "area")
        assert exc_info.value.constraint == "must be greater than 0"

    def test_maximum(self) -> None:
        with pytest.raises(InvalidNumericInputError) as exc_info:
            validate_numeric(101, "score", max_value=100)
        assert exc_info.value.constraint == "cannot exceed 100"

    def test_positive_with_maximum(self) -> None:
        assert validate_positive(1_000_000.0, "area", max_value=1_000_000.0) == 1_000_000.0
        with pytest.raises(InvalidNumericInputError) as exc_info:
            validate_positive(1e307, "area", max_value=1_000_000.0)
        assert exc_info.value.field == "area"
        assert exc_info.value.constraint == "cannot exceed 1,000,000"

    def test_numeric_error_is_input_error(self) -> None:
        with pytest.raises(InvalidInputError):
            validate_positive(-1, "area")


class TestValidateZipCode:
    @pytest.mark.parametrize("raw", ["20814", " 20814 ", "20814-", "2 0 8 1 4"])
    def test_accepts_five_digits(self, raw: str) -> None:
        assert validate_zip_code(raw) == "20814"

    @pytest.mark.parametrize("raw", ["2081", "208145", "abcde", "20814-1234"])
    def test_rejects_other_lengths(self, raw: str) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            validate_zip_code(raw)
        assert exc_info.value.field == "zip_code"
        assert exc_info.value.constraint == "must be 5 digits"

    def test_missing(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            validate_zip_code("  ")
        assert exc_info.value.constraint == "required"


class TestValidateRequiredText:
    def test_strips(self) -> None:
        assert validate_required_text("  deck-construction ", "project_type") == (
            "deck-construction"
        )

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank(self, value: str | None) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            validate_required_text(value, "project_type")
        assert exc_info.value.field == "project_type"
