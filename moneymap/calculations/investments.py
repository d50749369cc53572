"""
Investment Growth Calculations

SIP, lump sum, compound interest and PPF maturity.
"""

from typing import Dict, Optional

from moneymap.calculations.loans import monthly_rate
from moneymap.config import get_settings


def annuity_factor(r: float, periods: int) -> float:
    """Future value of 1 paid at the end of each period: ((1+r)^n - 1) / r."""
    if r == 0:
        return float(periods)
    return ((1 + r) ** periods - 1) / r


def calculate_sip(monthly_amount: float, rate: float, tenure_years: int) -> Dict:
    """
    Calculate the maturity value of a monthly SIP.

    Installments are invested at the start of each month, so the future value
    is an annuity-due.

    Args:
        monthly_amount: Monthly installment
        rate: Expected annual return in percent
        tenure_years: Investment period in years

    Returns:
        Dict with future_value, total_investment and total_returns
    """
    r = monthly_rate(rate)
    months = tenure_years * 12

    future_value = monthly_amount * annuity_factor(r, months) * (1 + r)
    total_investment = monthly_amount * months

    return {
        "future_value": round(future_value, 2),
        "total_investment": round(total_investment, 2),
        "total_returns": round(future_value - total_investment, 2),
    }


def calculate_compound_interest(
    principal: float,
    rate: float,
    years: float,
    compounding_frequency: int = 1,
) -> Dict:
    """
    Calculate compound interest.

    Args:
        principal: Initial amount
        rate: Annual interest rate in percent
        years: Time period in years
        compounding_frequency: Compounding periods per year (1, 4, 12, ...)
    """
    if compounding_frequency < 1:
        raise ValueError("Compounding frequency must be at least 1")

    periodic_rate = rate / 100 / compounding_frequency
    amount = principal * (1 + periodic_rate) ** (compounding_frequency * years)

    return {
        "amount": round(amount, 2),
        "interest": round(amount - principal, 2),
        "principal": round(principal, 2),
    }


def calculate_lump_sum(principal: float, rate: float, years: int) -> Dict:
    """One-time investment growth with annual compounding."""
    return calculate_compound_interest(principal, rate, years, 1)


def calculate_compound_growth(
    principal: float,
    rate: float,
    years: int,
    compounding_frequency: int = 12,
    monthly_contribution: float = 0.0,
) -> Dict:
    """
    Compound interest on a principal plus optional monthly contributions.

    Contributions are made at the end of each month and grow at the monthly
    equivalent of the annual rate, regardless of the compounding frequency
    applied to the principal.
    """
    base = calculate_compound_interest(principal, rate, years, compounding_frequency)

    future_value = principal * (1 + rate / 100 / compounding_frequency) ** (
        compounding_frequency * years
    )
    contributions = principal

    if monthly_contribution > 0:
        months = years * 12
        future_value += monthly_contribution * annuity_factor(monthly_rate(rate), months)
        contributions += monthly_contribution * months

    effective_rate = (future_value / contributions) ** (1 / years) - 1

    return {
        **base,
        "total_future_value": round(future_value, 2),
        "total_contributions": round(contributions, 2),
        "total_interest": round(future_value - contributions, 2),
        "effective_annual_rate": round(effective_rate * 100, 2),
        "monthly_contribution": monthly_contribution,
    }


def calculate_ppf(
    yearly_amount: float,
    tenure_years: int = 15,
    rate: Optional[float] = None,
) -> Dict:
    """
    Calculate PPF maturity.

    Each yearly deposit is made at the start of the financial year and
    compounds annually until maturity.

    Args:
        yearly_amount: Deposit per year
        tenure_years: Account tenure (15 years, extendable)
        rate: Annual PPF rate in percent (defaults to the configured rate)
    """
    if rate is None:
        rate = get_settings().ppf_interest_rate

    annual_rate = rate / 100

    maturity = sum(
        yearly_amount * (1 + annual_rate) ** (tenure_years - year + 1)
        for year in range(1, tenure_years + 1)
    )
    total_investment = yearly_amount * tenure_years

    return {
        "maturity_amount": round(maturity, 2),
        "total_investment": round(total_investment, 2),
        "interest": round(maturity - total_investment, 2),
        "interest_rate": rate,
    }
