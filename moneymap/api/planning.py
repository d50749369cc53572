"""
Smart life decision tool endpoints.
"""

import logging
from datetime import date
from typing import Annotated, Literal, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from moneymap.api.validation import in_range, non_negative
from moneymap.calculations import planning

logger = logging.getLogger(__name__)

router = APIRouter()


class RentVsBuyInput(BaseModel):
    """Input for rent vs buy comparison."""

    home_price: Annotated[
        float, in_range(100000, too_low="Home price must be at least ₹1,00,000")
    ] = 5000000
    down_payment: Annotated[float, non_negative("Down payment")] = 1000000
    loan_interest_rate: Annotated[
        float,
        in_range(1, 20, "Interest rate must be at least 1%", "Interest rate cannot exceed 20%"),
    ] = 8.5
    loan_tenure: Annotated[
        int,
        in_range(1, 30, "Loan tenure must be at least 1 year", "Loan tenure cannot exceed 30 years"),
    ] = 20
    monthly_rent: Annotated[
        float, in_range(1000, too_low="Monthly rent must be at least ₹1,000")
    ] = 25000
    rent_increase_rate: Annotated[
        float,
        in_range(0, 20, "Rent increase rate cannot be negative", "Rent increase rate cannot exceed 20%"),
    ] = 5
    home_appreciation_rate: Annotated[
        float,
        in_range(
            0,
            20,
            "Home appreciation rate cannot be negative",
            "Home appreciation rate cannot exceed 20%",
        ),
    ] = 7
    investment_return: Annotated[
        float,
        in_range(1, 25, "Investment return must be at least 1%", "Investment return cannot exceed 25%"),
    ] = 12
    maintenance_cost: Annotated[float, non_negative("Maintenance cost")] = Field(
        60000, description="Annual maintenance"
    )
    analysis_years: Annotated[
        int,
        in_range(
            1,
            30,
            "Analysis period must be at least 1 year",
            "Analysis period cannot exceed 30 years",
        ),
    ] = 10


class EmergencyFundInput(BaseModel):
    """Input for emergency fund sizing."""

    monthly_expenses: Annotated[
        float, in_range(5000, too_low="Monthly expenses must be at least ₹5,000")
    ] = 50000
    dependents: Annotated[
        int,
        in_range(
            0,
            10,
            "Number of dependents cannot be negative",
            "Number of dependents cannot exceed 10",
        ),
    ] = 1
    job_stability: Literal["high", "medium", "low"] = "medium"
    has_health_insurance: bool = True
    has_life_insurance: bool = True
    current_emergency_fund: Annotated[float, non_negative("Current emergency fund")] = 0
    monthly_savings_capacity: Annotated[float, non_negative("Monthly savings capacity")] = 10000
    as_of: Optional[date] = None


class NetWorthInput(BaseModel):
    """Assets and liabilities for the net worth tracker."""

    # Liquid assets
    savings_account: Annotated[float, non_negative("Savings account balance")] = 100000
    fixed_deposits: Annotated[float, non_negative("Fixed deposits")] = 200000
    liquid_funds: Annotated[float, non_negative("Liquid funds")] = 50000

    # Investments
    mutual_funds: Annotated[float, non_negative("Mutual funds")] = 500000
    stocks: Annotated[float, non_negative("Stocks value")] = 300000
    bonds: Annotated[float, non_negative("Bonds value")] = 100000
    ppf: Annotated[float, non_negative("PPF value")] = 250000
    epf: Annotated[float, non_negative("EPF value")] = 400000

    # Physical assets
    real_estate: Annotated[float, non_negative("Real estate value")] = 5000000
    gold: Annotated[float, non_negative("Gold value")] = 200000
    vehicle: Annotated[float, non_negative("Vehicle value")] = 800000
    other_assets: Annotated[float, non_negative("Other assets")] = 100000

    # Liabilities
    home_loan: Annotated[float, non_negative("Home loan")] = 3000000
    car_loan: Annotated[float, non_negative("Car loan")] = 400000
    personal_loan: Annotated[float, non_negative("Personal loan")] = 0
    credit_card_debt: Annotated[float, non_negative("Credit card debt")] = 50000
    other_liabilities: Annotated[float, non_negative("Other liabilities")] = 0


@router.post("/rent-vs-buy")
async def calculate_rent_vs_buy(inputs: RentVsBuyInput):
    """Compare renting against buying a home."""
    try:
        result = planning.calculate_rent_vs_buy(**inputs.model_dump())
    except ValueError as e:
        logger.warning("Rejected rent vs buy input: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    logger.debug("Rent vs buy recommendation: %s", result["recommendation"])
    return result


@router.post("/emergency-fund")
async def calculate_emergency_fund(inputs: EmergencyFundInput):
    """Size an emergency fund and the time needed to build it."""
    result = planning.calculate_emergency_fund(
        monthly_expenses=inputs.monthly_expenses,
        dependents=inputs.dependents,
        job_stability=inputs.job_stability,
        has_health_insurance=inputs.has_health_insurance,
        has_life_insurance=inputs.has_life_insurance,
        current_fund=inputs.current_emergency_fund,
        monthly_savings_capacity=inputs.monthly_savings_capacity,
        as_of=inputs.as_of,
    )
    logger.debug("Emergency fund target: %s", result["recommended_amount"])
    return result


@router.post("/net-worth")
async def calculate_net_worth(inputs: NetWorthInput):
    """Calculate net worth and balance sheet ratios."""
    result = planning.calculate_net_worth(**inputs.model_dump())
    logger.debug("Net worth: %s", result["net_worth"])
    return result
