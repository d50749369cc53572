"""
Tax & income calculator endpoints.
"""

import logging
from typing import Annotated, Literal

from fastapi import APIRouter
from pydantic import BaseModel, Field

from moneymap.api.validation import in_range, non_negative
from moneymap.calculations import tax

logger = logging.getLogger(__name__)

router = APIRouter()


def _percent_of_salary(label: str):
    return in_range(0, 100, f"{label} cannot be negative", f"{label} cannot exceed 100%")


class IncomeTaxInput(BaseModel):
    """Input for income tax calculation."""

    gross_income: Annotated[float, non_negative("Gross income")] = 1000000
    regime: Literal["new", "old"] = "new"
    deductions: Annotated[float, non_negative("Deductions")] = Field(
        0, description="Only applied under the old regime"
    )


class HRAInput(BaseModel):
    """Input for HRA exemption calculation."""

    salary: Annotated[float, non_negative("Salary")] = 600000
    hra: Annotated[float, non_negative("HRA")] = 180000
    rent_paid: Annotated[float, non_negative("Rent paid")] = 240000
    is_metro_city: bool = True


class NetSalaryInput(BaseModel):
    """Input for take-home salary calculation."""

    gross_salary: Annotated[float, non_negative("Gross salary")] = 1000000
    pf_contribution: Annotated[float, _percent_of_salary("PF contribution")] = 12
    esic_contribution: Annotated[float, _percent_of_salary("ESIC contribution")] = 0.75
    professional_tax: Annotated[float, non_negative("Professional tax")] = 2400
    other_deductions: Annotated[float, non_negative("Other deductions")] = 0
    regime: Literal["new", "old"] = "new"


@router.post("/income-tax")
async def calculate_income_tax(inputs: IncomeTaxInput):
    """Calculate income tax liability under the chosen regime."""
    result = tax.calculate_income_tax(inputs.gross_income, inputs.regime, inputs.deductions)
    logger.debug("Income tax (%s regime): %s", inputs.regime, result["total_tax"])
    return result


@router.post("/hra-exemption")
async def calculate_hra_exemption(inputs: HRAInput):
    """Calculate the tax-exempt portion of HRA."""
    result = tax.calculate_hra_exemption(
        inputs.salary, inputs.hra, inputs.rent_paid, inputs.is_metro_city
    )
    logger.debug("HRA exemption: %s", result["hra_exemption"])
    return result


@router.post("/net-salary")
async def calculate_net_salary(inputs: NetSalaryInput):
    """Calculate annual and monthly take-home salary."""
    result = tax.calculate_net_salary(**inputs.model_dump())
    logger.debug("Net salary: %s", result["net_salary"])
    return result
