"""
Retirement & long-term planning calculator endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from moneymap.api.validation import in_range, non_negative
from moneymap.calculations import retirement

logger = logging.getLogger(__name__)

router = APIRouter()

ExpectedReturn = Annotated[
    float,
    in_range(5, 25, "Expected return must be at least 5%", "Expected return cannot exceed 25%"),
]


class RetirementInput(BaseModel):
    """Input for retirement corpus calculation."""

    current_age: Annotated[
        int, in_range(18, 65, "Age must be at least 18", "Age must be less than 65")
    ] = 30
    retirement_age: Annotated[
        int,
        in_range(50, 75, "Retirement age must be at least 50", "Retirement age cannot exceed 75"),
    ] = 60
    monthly_expenses: Annotated[
        float, in_range(10000, too_low="Monthly expenses must be at least ₹10,000")
    ] = 50000
    inflation_rate: Annotated[
        float,
        in_range(2, 15, "Inflation rate must be at least 2%", "Inflation rate cannot exceed 15%"),
    ] = 6
    expected_return: ExpectedReturn = 12


class FIREInput(BaseModel):
    """Input for FIRE calculation."""

    current_age: Annotated[
        int, in_range(18, 60, "Age must be at least 18", "Age must be less than 60")
    ] = 25
    current_savings: Annotated[float, non_negative("Current savings")] = 0
    monthly_expenses: Annotated[
        float, in_range(5000, too_low="Monthly expenses must be at least ₹5,000")
    ] = 40000
    monthly_savings: Annotated[
        float, in_range(1000, too_low="Monthly savings must be at least ₹1,000")
    ] = 20000
    expected_return: ExpectedReturn = 12


class InflationInput(BaseModel):
    """Input for inflation-adjusted value."""

    current_value: Annotated[
        float, in_range(1, too_low="Current value must be greater than 0")
    ] = 100000
    inflation_rate: Annotated[
        float,
        in_range(0.1, 20, "Inflation rate must be at least 0.1%", "Inflation rate cannot exceed 20%"),
    ] = 6
    years: Annotated[
        int, in_range(1, 50, "Years must be at least 1", "Years cannot exceed 50")
    ] = 10


@router.post("/retirement-corpus")
async def calculate_retirement_corpus(inputs: RetirementInput):
    """Calculate the retirement corpus and the monthly SIP that builds it."""
    try:
        result = retirement.calculate_retirement_corpus(
            current_age=inputs.current_age,
            retirement_age=inputs.retirement_age,
            monthly_expenses=inputs.monthly_expenses,
            inflation_rate=inputs.inflation_rate,
            expected_return=inputs.expected_return,
        )
    except ValueError as e:
        logger.warning("Rejected retirement input: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    logger.debug("Retirement corpus: %s", result["required_corpus"])
    return result


@router.post("/fire")
async def calculate_fire(inputs: FIREInput):
    """Calculate the FIRE number and years to reach it."""
    try:
        result = retirement.calculate_fire(
            current_age=inputs.current_age,
            current_savings=inputs.current_savings,
            monthly_expenses=inputs.monthly_expenses,
            monthly_savings=inputs.monthly_savings,
            expected_return=inputs.expected_return,
        )
    except ValueError as e:
        logger.warning("Rejected FIRE input: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    for warning in result["warnings"]:
        logger.info("FIRE warning: %s", warning)
    logger.debug("FIRE in %s years", result["years_to_fire"])
    return result


@router.post("/inflation-adjusted")
async def calculate_inflation_adjusted(inputs: InflationInput):
    """Calculate what today's amount will cost in the future."""
    result = retirement.calculate_inflation_adjusted_value(
        inputs.current_value, inputs.inflation_rate, inputs.years
    )
    logger.debug("Inflation-adjusted value: %s", result["future_value"])
    return result
