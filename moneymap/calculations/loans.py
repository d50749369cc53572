"""
Loan Calculations

EMI, amortization schedule and car loan calculations. Rates are annual
percentages (8.5 means 8.5%) and tenures are in years, matching how the
figures are quoted by Indian lenders.
"""

from typing import List, Dict, Optional
from datetime import date
from dateutil.relativedelta import relativedelta

CAR_DEPRECIATION_RATES = {"new": 0.15, "used": 0.10}


def monthly_rate(rate: float) -> float:
    """Convert an annual percentage rate to a monthly decimal rate."""
    return rate / (12 * 100)


def calculate_payment(principal: float, rate: float, months: int) -> float:
    """
    Calculate the fixed monthly installment for a loan.

    Args:
        principal: Loan principal amount
        rate: Annual interest rate in percent (e.g., 8.5 for 8.5%)
        months: Number of monthly installments

    Returns:
        Monthly installment (unrounded)
    """
    if principal <= 0 or months <= 0:
        return 0.0

    r = monthly_rate(rate)

    if r == 0:
        return principal / months

    growth = (1 + r) ** months
    return principal * r * growth / (growth - 1)


def calculate_emi(principal: float, rate: float, tenure_years: int) -> Dict:
    """
    Calculate EMI, total amount payable and total interest.

    Args:
        principal: Loan amount
        rate: Annual interest rate in percent
        tenure_years: Loan tenure in years

    Returns:
        Dict with emi, total_amount and total_interest
    """
    months = tenure_years * 12
    emi = calculate_payment(principal, rate, months)

    if monthly_rate(rate) == 0:
        return {
            "emi": round(emi, 2),
            "total_amount": round(principal, 2),
            "total_interest": 0.0,
        }

    total_amount = emi * months
    return {
        "emi": round(emi, 2),
        "total_amount": round(total_amount, 2),
        "total_interest": round(total_amount - principal, 2),
    }


def generate_amortization_schedule(
    principal: float,
    rate: float,
    tenure_years: int,
    start_date: Optional[date] = None,
) -> List[Dict]:
    """
    Generate a month-by-month amortization schedule.

    Every row carries the same installment; the interest share is charged on
    the opening balance and the remainder retires principal.

    Args:
        principal: Loan amount
        rate: Annual interest rate in percent
        tenure_years: Loan tenure in years
        start_date: Date of the first installment (defaults to today)

    Returns:
        List of amortization rows
    """
    months = tenure_years * 12
    r = monthly_rate(rate)
    emi = calculate_payment(principal, rate, months)

    if start_date is None:
        start_date = date.today()

    schedule = []
    balance = principal
    cumulative_principal = 0.0
    cumulative_interest = 0.0

    for month in range(1, months + 1):
        interest_pmt = balance * r
        principal_pmt = emi - interest_pmt

        # Last installment absorbs floating point drift
        if month == months:
            principal_pmt = balance

        balance = max(0.0, balance - principal_pmt)
        cumulative_principal += principal_pmt
        cumulative_interest += interest_pmt

        schedule.append(
            {
                "month": month,
                "date": (start_date + relativedelta(months=month - 1)).isoformat(),
                "emi": round(emi, 2),
                "principal_payment": round(principal_pmt, 2),
                "interest_payment": round(interest_pmt, 2),
                "remaining_balance": round(balance, 2),
                "cumulative_principal": round(cumulative_principal, 2),
                "cumulative_interest": round(cumulative_interest, 2),
            }
        )

    return schedule


def summarize_schedule_by_year(schedule: List[Dict]) -> List[Dict]:
    """Roll monthly amortization rows up into yearly totals."""
    yearly = []

    for start in range(0, len(schedule), 12):
        year_rows = schedule[start:start + 12]
        yearly.append(
            {
                "year": start // 12 + 1,
                "total_emi": round(sum(row["emi"] for row in year_rows), 2),
                "total_principal": round(
                    sum(row["principal_payment"] for row in year_rows), 2
                ),
                "total_interest": round(
                    sum(row["interest_payment"] for row in year_rows), 2
                ),
                "ending_balance": year_rows[-1]["remaining_balance"],
            }
        )

    return yearly


def amortization_summary(principal: float, rate: float, tenure_years: int) -> Dict:
    """EMI figures plus per-month averages for the amortization view."""
    result = calculate_emi(principal, rate, tenure_years)
    total_months = tenure_years * 12

    return {
        **result,
        "total_months": total_months,
        "avg_monthly_principal": round(principal / total_months, 2),
        "avg_monthly_interest": round(result["total_interest"] / total_months, 2),
    }


def calculate_car_loan(
    car_price: float,
    down_payment: float,
    trade_in_value: float,
    rate: float,
    tenure_years: int,
    processing_fee: float = 0.0,
    insurance: float = 0.0,
    extended_warranty: float = 0.0,
    car_type: str = "new",
) -> Dict:
    """
    Calculate car loan EMI together with the total cost of ownership.

    Insurance and extended warranty are financed with the car; the
    processing fee is added to the loan amount.

    Raises:
        ValueError: If the down payment and trade-in cover the car price, or
            the car type is unknown
    """
    if car_type not in CAR_DEPRECIATION_RATES:
        raise ValueError(f"Unknown car type: {car_type}")

    if down_payment + trade_in_value >= car_price:
        raise ValueError("Down payment + trade-in value cannot exceed car price")

    net_financed = (
        car_price - down_payment - trade_in_value + insurance + extended_warranty
    )
    loan_amount = max(0.0, net_financed + processing_fee)

    emi_result = {"emi": 0.0, "total_amount": 0.0, "total_interest": 0.0}
    if loan_amount > 0:
        emi_result = calculate_emi(loan_amount, rate, tenure_years)

    total_interest = emi_result["total_interest"]
    total_cost_of_ownership = (
        car_price + processing_fee + insurance + extended_warranty + total_interest
    )

    # Warranty is only paid upfront on new cars
    upfront_costs = down_payment + processing_fee + insurance
    if car_type == "new":
        upfront_costs += extended_warranty

    depreciation = CAR_DEPRECIATION_RATES[car_type]
    value_after_loan = car_price * (1 - depreciation) ** tenure_years

    effective_rate = 0.0
    if loan_amount > 0:
        effective_rate = total_interest / loan_amount / tenure_years * 100

    return {
        "loan_amount": round(loan_amount, 2),
        "emi": emi_result["emi"],
        "total_interest": total_interest,
        "total_amount_payable": emi_result["total_amount"],
        "net_financed_amount": round(net_financed, 2),
        "upfront_costs": round(upfront_costs, 2),
        "total_cost_of_ownership": round(total_cost_of_ownership, 2),
        "estimated_value_after_loan": round(value_after_loan, 2),
        "total_depreciation": round(car_price - value_after_loan, 2),
        "loan_to_value_ratio": round(loan_amount / car_price * 100, 2),
        "effective_interest_rate": round(effective_rate, 2),
    }
