"""
Range checks for calculator inputs.

Bounds are enforced by validators rather than ``Field(ge=, le=)`` so that a
422 response carries the calculator's own wording in ``detail[].msg``
(e.g. "Interest rate cannot exceed 50%").
"""

from typing import Optional

from pydantic import AfterValidator


def in_range(
    minimum: Optional[float] = None,
    maximum: Optional[float] = None,
    too_low: str = "",
    too_high: str = "",
) -> AfterValidator:
    """Validator rejecting values outside [minimum, maximum] with the given messages."""

    def check(value):
        if value is None:
            return value
        if minimum is not None and value < minimum:
            raise ValueError(too_low)
        if maximum is not None and value > maximum:
            raise ValueError(too_high)
        return value

    return AfterValidator(check)


def non_negative(label: str) -> AfterValidator:
    return in_range(0, too_low=f"{label} cannot be negative")
