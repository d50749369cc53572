"""
Life Planning Calculations

Rent vs buy comparison, emergency fund sizing and net worth.
"""

import math
from typing import Dict, Optional
from datetime import date
from dateutil.relativedelta import relativedelta

from moneymap.calculations.loans import calculate_payment

STAMP_DUTY_RATE = 0.03  # Stamp duty + registration, share of home price

EMERGENCY_BASE_MONTHS = 6
JOB_STABILITY_EXTRA_MONTHS = {"high": 0, "medium": 1, "low": 3}
MONTHS_PER_DEPENDENT = 0.5
UNINSURED_EXTRA_MONTHS = 1


def calculate_rent_vs_buy(
    home_price: float,
    down_payment: float,
    loan_interest_rate: float,
    loan_tenure: int,
    monthly_rent: float,
    rent_increase_rate: float,
    home_appreciation_rate: float,
    investment_return: float,
    maintenance_cost: float,
    analysis_years: int,
) -> Dict:
    """
    Compare the cost of renting against buying over an analysis horizon.

    Buying costs are the down payment, stamp duty, EMIs paid within the
    horizon and annual maintenance, offset by the home's appreciated value.
    The down payment also carries the opportunity cost of not investing it.

    Args:
        home_price: Purchase price
        down_payment: Upfront payment
        loan_interest_rate: Home loan rate in percent
        loan_tenure: Home loan tenure in years
        monthly_rent: Current monthly rent
        rent_increase_rate: Annual rent increase in percent
        home_appreciation_rate: Annual appreciation in percent
        investment_return: Return on the down payment if invested, in percent
        maintenance_cost: Annual maintenance cost
        analysis_years: Comparison horizon in years

    Raises:
        ValueError: If the down payment covers the whole price
    """
    if down_payment >= home_price:
        raise ValueError("Down payment cannot be equal to or greater than home price")

    loan_amount = home_price - down_payment
    emi = calculate_payment(loan_amount, loan_interest_rate, loan_tenure * 12)

    stamp_duty = home_price * STAMP_DUTY_RATE
    total_buying_cost = down_payment + stamp_duty
    total_rent_cost = 0.0
    current_rent = monthly_rent
    home_value = home_price

    for year in range(1, analysis_years + 1):
        if year <= loan_tenure:
            total_buying_cost += emi * 12
        total_buying_cost += maintenance_cost

        total_rent_cost += current_rent * 12
        current_rent *= 1 + rent_increase_rate / 100

        home_value *= 1 + home_appreciation_rate / 100

    invested_down_payment = down_payment * (1 + investment_return / 100) ** analysis_years
    net_buying_cost = total_buying_cost - home_value
    total_opportunity_cost = net_buying_cost + (invested_down_payment - down_payment)

    savings = total_rent_cost - max(0.0, total_opportunity_cost)

    monthly_gap = current_rent - emi - maintenance_cost / 12
    break_even_month = None
    if monthly_gap != 0:
        break_even_month = round((total_buying_cost - total_rent_cost) / monthly_gap)

    return {
        "total_buying_cost": round(total_buying_cost, 2),
        "total_rent_cost": round(total_rent_cost, 2),
        "net_buying_cost": round(net_buying_cost, 2),
        "home_value_after_years": round(home_value, 2),
        "emi": round(emi, 2),
        "stamp_duty_and_registration": round(stamp_duty, 2),
        "opportunity_cost_down_payment": round(invested_down_payment, 2),
        "savings": round(abs(savings), 2),
        "recommendation": "Buy" if savings > 0 else "Rent",
        "break_even_month": break_even_month,
    }


def emergency_fund_months(
    job_stability: str, dependents: int, has_insurance: bool
) -> float:
    """Number of months of expenses to hold in an emergency fund."""
    if job_stability not in JOB_STABILITY_EXTRA_MONTHS:
        raise ValueError(f"Unknown job stability: {job_stability}")

    months = EMERGENCY_BASE_MONTHS + JOB_STABILITY_EXTRA_MONTHS[job_stability]
    months += dependents * MONTHS_PER_DEPENDENT
    if not has_insurance:
        months += UNINSURED_EXTRA_MONTHS
    return months


def calculate_emergency_fund(
    monthly_expenses: float,
    dependents: int,
    job_stability: str,
    has_health_insurance: bool,
    has_life_insurance: bool,
    current_fund: float = 0.0,
    monthly_savings_capacity: float = 0.0,
    as_of: Optional[date] = None,
) -> Dict:
    """
    Size an emergency fund and plan how long it takes to build.

    Full insurance cover means both health and life insurance.
    """
    if as_of is None:
        as_of = date.today()

    has_insurance = has_health_insurance and has_life_insurance
    months = emergency_fund_months(job_stability, dependents, has_insurance)
    recommended = monthly_expenses * months

    shortfall = max(0.0, recommended - current_fund)
    months_to_goal = 0
    if monthly_savings_capacity > 0:
        months_to_goal = math.ceil(shortfall / monthly_savings_capacity)

    adequacy = current_fund / recommended * 100 if recommended > 0 else 100.0

    target_date = None
    if months_to_goal > 0:
        target_date = (as_of + relativedelta(months=months_to_goal)).isoformat()

    return {
        "recommended_amount": round(recommended, 2),
        "months": months,
        "monthly_expenses": round(monthly_expenses, 2),
        "current_fund": round(current_fund, 2),
        "shortfall": round(shortfall, 2),
        "months_to_goal": months_to_goal,
        "target_achievement_date": target_date,
        "is_achieved": shortfall == 0,
        "adequacy_percentage": round(adequacy, 2),
    }


def calculate_net_worth(
    savings_account: float = 0.0,
    fixed_deposits: float = 0.0,
    liquid_funds: float = 0.0,
    mutual_funds: float = 0.0,
    stocks: float = 0.0,
    bonds: float = 0.0,
    ppf: float = 0.0,
    epf: float = 0.0,
    real_estate: float = 0.0,
    gold: float = 0.0,
    vehicle: float = 0.0,
    other_assets: float = 0.0,
    home_loan: float = 0.0,
    car_loan: float = 0.0,
    personal_loan: float = 0.0,
    credit_card_debt: float = 0.0,
    other_liabilities: float = 0.0,
) -> Dict:
    """Total assets less total liabilities, with balance sheet ratios."""
    liquid_assets = savings_account + fixed_deposits + liquid_funds
    investments = mutual_funds + stocks + bonds + ppf + epf
    physical_assets = real_estate + gold + vehicle + other_assets
    total_assets = liquid_assets + investments + physical_assets

    total_liabilities = (
        home_loan + car_loan + personal_loan + credit_card_debt + other_liabilities
    )
    net_worth = total_assets - total_liabilities

    liquidity_ratio = 100.0
    if total_liabilities > 0:
        liquidity_ratio = liquid_assets / total_liabilities * 100

    debt_to_asset = 0.0
    investment_share = 0.0
    if total_assets > 0:
        debt_to_asset = total_liabilities / total_assets * 100
        investment_share = investments / total_assets * 100

    return {
        "liquid_assets": round(liquid_assets, 2),
        "investments": round(investments, 2),
        "physical_assets": round(physical_assets, 2),
        "total_assets": round(total_assets, 2),
        "total_liabilities": round(total_liabilities, 2),
        "net_worth": round(net_worth, 2),
        "liquidity_ratio": round(liquidity_ratio, 2),
        "debt_to_asset_ratio": round(debt_to_asset, 2),
        "investment_percentage": round(investment_share, 2),
        "is_positive": net_worth >= 0,
    }
