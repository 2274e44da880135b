"""Input validators shared by the calculator and the comparables scorer.

Each validator raises an ``InvalidInputError`` subclass naming the field and
the bound that was violated; none of them coerce bad input to a default.
"""

from __future__ import annotations

import math
import re

from remodelcost.exceptions import InvalidInputError, InvalidNumericInputError

_NON_DIGITS = re.compile(r"\D")


def validate_numeric(
    value: float | None,
    field: str,
    *,
    required: bool = True,
    min_value: float | None = None,
    max_value: float | None = None,
    exclusive_min: bool = False,
) -> float | None:
    """Validate a numeric input and return it as a float.

    Returns None only when the value is absent and not required.
    """
    if value is None:
        if required:
            raise InvalidNumericInputError(field, "required", f"{field} is required")
        return None

    if isinstance(value, bool):
        raise InvalidNumericInputError(
            field, "must be a number", f"{field} must be a valid number"
        )
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidNumericInputError(
            field, "must be a number", f"{field} must be a valid number"
        ) from exc

    if not math.isfinite(number):
        raise InvalidNumericInputError(
            field, "must be finite", f"{field} must be a finite number"
        )

    if min_value is not None:
        if exclusive_min and number <= min_value:
            raise InvalidNumericInputError(
                field,
                f"must be greater than {min_value:g}",
                f"{field} must be greater than {min_value:g}",
            )
        if not exclusive_min and number < min_value:
            raise InvalidNumericInputError(
                field,
                f"must be at least {min_value:g}",
                f"{field} must be at least {min_value:g}",
            )

    if max_value is not None and number > max_value:
        raise InvalidNumericInputError(
            field,
            f"cannot exceed {max_value:,.10g}",
            f"{field} cannot exceed {max_value:,.10g}",
        )

    return number


def validate_positive(
    value: float | None,
    field: str,
    *,
    required: bool = True,
    max_value: float | None = None,
) -> float | None:
    """Shorthand for a finite value strictly greater than zero."""
    return validate_numeric(
        value,
        field,
        required=required,
        min_value=0.0,
        max_value=max_value,
        exclusive_min=True,
    )


def validate_zip_code(zip_code: str | None, field: str = "zip_code") -> str:
    """Validate a US ZIP code and return its five digits.

    Non-digit characters are stripped before the length check, so
    ``"20814-"`` and ``" 20814 "`` are accepted.
    """
    if zip_code is None or not str(zip_code).strip():
        raise InvalidInputError(field, "required", "ZIP code is required")

    cleaned = _NON_DIGITS.sub("", str(zip_code))
    if len(cleaned) != 5:
        raise InvalidInputError(
            field, "must be 5 digits", "ZIP code must be 5 digits"
        )
    return cleaned


def validate_required_text(value: str | None, field: str) -> str:
    """Reject missing or blank strings."""
    if value is None or not str(value).strip():
        raise InvalidInputError(field, "required", f"{field} is required")
    return str(value).strip()
