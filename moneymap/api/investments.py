"""
Investment & wealth calculator endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter
from pydantic import BaseModel, Field

from moneymap.api.validation import in_range
from moneymap.calculations import investments
from moneymap.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()

ExpectedReturn = Annotated[
    float,
    in_range(1, 30, "Expected return must be at least 1%", "Expected return cannot exceed 30%"),
]
InvestmentPeriod = Annotated[
    int,
    in_range(
        1,
        50,
        "Investment period must be at least 1 year",
        "Investment period cannot exceed 50 years",
    ),
]


class SIPInput(BaseModel):
    """Input for SIP calculation."""

    monthly_amount: Annotated[
        float, in_range(100, too_low="Monthly amount must be at least ₹100")
    ] = 5000
    expected_return: ExpectedReturn = 12
    investment_period: InvestmentPeriod = 10


class LumpSumInput(BaseModel):
    """Input for lump sum calculation."""

    principal_amount: Annotated[
        float, in_range(1000, too_low="Principal amount must be at least ₹1,000")
    ] = 100000
    expected_return: ExpectedReturn = 12
    investment_period: InvestmentPeriod = 10


class PPFInput(BaseModel):
    """Input for PPF calculation."""

    yearly_amount: Annotated[
        float,
        in_range(
            500,
            150000,
            "Minimum yearly deposit is ₹500",
            "Maximum yearly deposit is ₹1,50,000",
        ),
    ] = Field(150000, description="Deposit limits are Rs 500 to Rs 1.5 lakh a year")
    tenure: Annotated[
        int,
        in_range(15, 50, "Minimum PPF tenure is 15 years", "Maximum extended tenure is 50 years"),
    ] = 15


@router.post("/sip")
async def calculate_sip(inputs: SIPInput):
    """Calculate SIP maturity value."""
    result = investments.calculate_sip(
        inputs.monthly_amount, inputs.expected_return, inputs.investment_period
    )
    logger.debug("SIP of %s/month: %s", inputs.monthly_amount, result["future_value"])
    return result


@router.post("/lump-sum")
async def calculate_lump_sum(inputs: LumpSumInput):
    """Calculate one-time investment growth."""
    result = investments.calculate_lump_sum(
        inputs.principal_amount, inputs.expected_return, inputs.investment_period
    )
    logger.debug("Lump sum of %s: %s", inputs.principal_amount, result["amount"])
    return result


@router.post("/ppf")
async def calculate_ppf(inputs: PPFInput):
    """Calculate PPF maturity at the configured interest rate."""
    rate = get_settings().ppf_interest_rate
    result = investments.calculate_ppf(inputs.yearly_amount, inputs.tenure, rate)
    logger.debug("PPF maturity at %s%%: %s", rate, result["maturity_amount"])
    return result
