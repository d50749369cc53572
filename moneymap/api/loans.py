"""
Loan & debt calculator endpoints.
"""

import logging
from datetime import date
from typing import Annotated, List, Literal, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from moneymap.api.validation import in_range, non_negative
from moneymap.calculations import loans

logger = logging.getLogger(__name__)

router = APIRouter()

LoanAmount = Annotated[float, in_range(1, too_low="Loan amount must be greater than 0")]
InterestRate = Annotated[
    float,
    in_range(0.1, 50, "Interest rate must be at least 0.1%", "Interest rate cannot exceed 50%"),
]
LoanTenure = Annotated[
    int,
    in_range(1, 50, "Loan tenure must be at least 1 year", "Loan tenure cannot exceed 50 years"),
]


class EMIInput(BaseModel):
    """Input for EMI calculation."""

    loan_amount: LoanAmount = Field(1000000, description="Loan amount")
    interest_rate: InterestRate = Field(8.5, description="Annual rate in percent")
    loan_tenure: LoanTenure = Field(15, description="Tenure in years")


class EMIResponse(BaseModel):
    """EMI figures."""

    emi: float
    total_amount: float
    total_interest: float


class AmortizationInput(EMIInput):
    """Input for the amortization schedule."""

    loan_amount: LoanAmount = 2500000
    interest_rate: InterestRate = 8.5
    loan_tenure: LoanTenure = 20
    start_date: Optional[date] = None
    view: Literal["monthly", "yearly"] = "yearly"


class AmortizationSummary(EMIResponse):
    """Loan totals and monthly averages."""

    total_months: int
    avg_monthly_principal: float
    avg_monthly_interest: float


class AmortizationResponse(BaseModel):
    """Summary plus the schedule in the requested view."""

    summary: AmortizationSummary
    view: str
    schedule: List[dict]


class CarLoanInput(BaseModel):
    """Input for car loan calculation."""

    car_price: Annotated[
        float, in_range(100000, too_low="Car price must be at least ₹1,00,000")
    ] = 1200000
    down_payment: Annotated[float, non_negative("Down payment")] = 240000
    trade_in_value: Annotated[float, non_negative("Trade-in value")] = 0
    interest_rate: Annotated[
        float,
        in_range(0.1, 30, "Interest rate must be at least 0.1%", "Interest rate cannot exceed 30%"),
    ] = 9.5
    loan_tenure: Annotated[
        int,
        in_range(1, 7, "Loan tenure must be at least 1 year", "Car loan tenure cannot exceed 7 years"),
    ] = 5
    processing_fee: Annotated[float, non_negative("Processing fee")] = 15000
    insurance: Annotated[float, non_negative("Insurance amount")] = 45000
    extended_warranty: Annotated[float, non_negative("Extended warranty cost")] = 25000
    car_type: Literal["new", "used"] = "new"


@router.post("/emi", response_model=EMIResponse)
async def calculate_emi(inputs: EMIInput):
    """Calculate the monthly installment for a loan."""
    result = loans.calculate_emi(inputs.loan_amount, inputs.interest_rate, inputs.loan_tenure)
    logger.debug("EMI for %s: %s", inputs.loan_amount, result["emi"])
    return result


@router.post("/loan-amortization", response_model=AmortizationResponse)
async def calculate_amortization(inputs: AmortizationInput):
    """Generate the loan amortization schedule."""
    schedule = loans.generate_amortization_schedule(
        principal=inputs.loan_amount,
        rate=inputs.interest_rate,
        tenure_years=inputs.loan_tenure,
        start_date=inputs.start_date,
    )

    logger.debug("Amortization schedule: %s months, %s view", len(schedule), inputs.view)

    if inputs.view == "yearly":
        rows = loans.summarize_schedule_by_year(schedule)
    else:
        rows = schedule

    return AmortizationResponse(
        summary=AmortizationSummary(
            **loans.amortization_summary(
                inputs.loan_amount, inputs.interest_rate, inputs.loan_tenure
            )
        ),
        view=inputs.view,
        schedule=rows,
    )


@router.post("/car-loan")
async def calculate_car_loan(inputs: CarLoanInput):
    """Calculate car loan EMI and total cost of ownership."""
    try:
        result = loans.calculate_car_loan(
            car_price=inputs.car_price,
            down_payment=inputs.down_payment,
            trade_in_value=inputs.trade_in_value,
            rate=inputs.interest_rate,
            tenure_years=inputs.loan_tenure,
            processing_fee=inputs.processing_fee,
            insurance=inputs.insurance,
            extended_warranty=inputs.extended_warranty,
            car_type=inputs.car_type,
        )
    except ValueError as e:
        logger.warning("Rejected car loan input: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    logger.debug("Car loan EMI for %s: %s", result["loan_amount"], result["emi"])
    return result
