"""
Utility tool endpoints: compound interest, currency conversion, break-even.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from moneymap.api.validation import in_range, non_negative
from moneymap.calculations import investments, utility

logger = logging.getLogger(__name__)

router = APIRouter()


class CompoundInterestInput(BaseModel):
    """Input for compound interest with optional monthly contributions."""

    principal: Annotated[
        float, in_range(1, too_low="Principal amount must be greater than 0")
    ] = 100000
    interest_rate: Annotated[
        float,
        in_range(0.1, 50, "Interest rate must be at least 0.1%", "Interest rate cannot exceed 50%"),
    ] = 12
    time_period: Annotated[
        int,
        in_range(1, 50, "Time period must be at least 1 year", "Time period cannot exceed 50 years"),
    ] = 10
    compounding_frequency: Annotated[
        int, in_range(1, too_low="Compounding frequency must be at least 1")
    ] = Field(12, description="Compounding periods per year")
    additional_contribution: Annotated[float, non_negative("Additional contribution")] = Field(
        0, description="Monthly contribution"
    )


class CurrencyInput(BaseModel):
    """Input for currency conversion."""

    amount: Annotated[float, in_range(0.01, too_low="Amount must be greater than 0")] = 1000
    from_currency: str = Field("USD", min_length=3, max_length=3)
    to_currency: str = Field("INR", min_length=3, max_length=3)


class BreakEvenInput(BaseModel):
    """Input for break-even analysis."""

    fixed_costs: Annotated[float, non_negative("Fixed costs")] = 500000
    variable_cost_per_unit: Annotated[float, non_negative("Variable cost per unit")] = 200
    price_per_unit: Annotated[
        float, in_range(0.01, too_low="Price per unit must be greater than 0")
    ] = 500
    target_profit: Annotated[Optional[float], non_negative("Target profit")] = 100000
    current_units: Annotated[Optional[float], non_negative("Current units")] = None


@router.post("/compound-interest")
async def calculate_compound_interest(inputs: CompoundInterestInput):
    """Calculate compound growth of a principal and monthly contributions."""
    result = investments.calculate_compound_growth(
        principal=inputs.principal,
        rate=inputs.interest_rate,
        years=inputs.time_period,
        compounding_frequency=inputs.compounding_frequency,
        monthly_contribution=inputs.additional_contribution,
    )
    logger.debug("Compound growth: %s", result["total_future_value"])
    return result


@router.post("/currency-converter")
async def convert_currency(inputs: CurrencyInput):
    """Convert an amount between two currencies."""
    try:
        result = utility.convert_currency(inputs.amount, inputs.from_currency, inputs.to_currency)
    except ValueError as e:
        logger.warning("Rejected currency conversion: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    logger.debug("Converted %s %s at %s", inputs.amount, inputs.from_currency, result["exchange_rate"])
    return result


@router.get("/currencies")
async def list_currencies():
    """List supported currencies."""
    return {
        "currencies": [
            {"code": c.code, "name": c.name, "symbol": c.symbol}
            for c in utility.CURRENCIES.values()
        ],
        "rates_as_of": utility.RATES_AS_OF,
    }


@router.post("/break-even")
async def calculate_break_even(inputs: BreakEvenInput):
    """Calculate the break-even point for a product."""
    try:
        result = utility.calculate_break_even(
            fixed_costs=inputs.fixed_costs,
            variable_cost_per_unit=inputs.variable_cost_per_unit,
            price_per_unit=inputs.price_per_unit,
            target_profit=inputs.target_profit or 0.0,
            current_units=inputs.current_units,
        )
    except ValueError as e:
        logger.warning("Rejected break-even input: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    logger.debug("Break-even units: %s", result["break_even_units"])
    return result
