"""
Retirement Planning Calculations

Retirement corpus, FIRE number and inflation-adjusted future value.
"""

import math
from typing import Dict, Optional

from moneymap.calculations.investments import annuity_factor
from moneymap.calculations.loans import monthly_rate
from moneymap.config import get_settings


def calculate_retirement_corpus(
    current_age: int,
    retirement_age: int,
    monthly_expenses: float,
    inflation_rate: float,
    expected_return: float,
    life_expectancy: Optional[int] = None,
    corpus_multiple: Optional[float] = None,
) -> Dict:
    """
    Calculate the corpus needed at retirement and the SIP that builds it.

    Today's expenses are inflated to the retirement year and the corpus is
    sized as a multiple of annual expenses (25x for a 4% withdrawal rate).

    Args:
        current_age: Age today
        retirement_age: Planned retirement age
        monthly_expenses: Current monthly expenses
        inflation_rate: Expected annual inflation in percent
        expected_return: Expected annual return on savings in percent
        life_expectancy: Age the corpus must last to (defaults to config)
        corpus_multiple: Multiple of annual expenses (defaults to config)

    Raises:
        ValueError: If retirement age is not after the current age
    """
    settings = get_settings()
    if life_expectancy is None:
        life_expectancy = settings.life_expectancy
    if corpus_multiple is None:
        corpus_multiple = settings.corpus_multiple

    if retirement_age <= current_age:
        raise ValueError("Retirement age must be greater than current age")

    years_to_retirement = retirement_age - current_age
    post_retirement_years = max(0, life_expectancy - retirement_age)

    future_monthly_expenses = monthly_expenses * (1 + inflation_rate / 100) ** (
        years_to_retirement
    )
    required_corpus = future_monthly_expenses * 12 * corpus_multiple

    r = monthly_rate(expected_return)
    months = years_to_retirement * 12
    monthly_sip = required_corpus / (annuity_factor(r, months) * (1 + r))

    return {
        "required_corpus": round(required_corpus, 2),
        "monthly_sip": round(monthly_sip, 2),
        "future_monthly_expenses": round(future_monthly_expenses, 2),
        "current_value": round(monthly_expenses, 2),
        "years_to_retirement": years_to_retirement,
        "post_retirement_years": post_retirement_years,
    }


def calculate_fire(
    current_age: int,
    current_savings: float,
    monthly_expenses: float,
    monthly_savings: float,
    expected_return: float,
    corpus_multiple: Optional[float] = None,
) -> Dict:
    """
    Calculate the FIRE number and how long it takes to get there.

    The remaining shortfall is treated as the future value of the monthly
    savings stream, solved for the number of months.

    Raises:
        ValueError: If there is a shortfall but no monthly savings
    """
    if corpus_multiple is None:
        corpus_multiple = get_settings().corpus_multiple

    fire_number = monthly_expenses * 12 * corpus_multiple
    warnings = []

    if monthly_savings >= monthly_expenses:
        warnings.append(
            "Monthly savings should be less than monthly expenses for realistic planning"
        )

    if current_savings >= fire_number:
        return {
            "fire_number": round(fire_number, 2),
            "years_to_fire": 0,
            "fire_age": current_age,
            "shortfall": 0.0,
            "warnings": warnings,
        }

    if monthly_savings <= 0:
        raise ValueError("Monthly savings must be positive to reach the FIRE number")

    shortfall = fire_number - current_savings
    r = monthly_rate(expected_return)

    if r == 0:
        months = shortfall / monthly_savings
    else:
        months = math.log(1 + shortfall * r / monthly_savings) / math.log(1 + r)

    years_to_fire = math.ceil(months / 12)

    return {
        "fire_number": round(fire_number, 2),
        "years_to_fire": years_to_fire,
        "fire_age": current_age + years_to_fire,
        "shortfall": round(shortfall, 2),
        "warnings": warnings,
    }


def calculate_inflation_adjusted_value(
    current_value: float, inflation_rate: float, years: int
) -> Dict:
    """What today's amount will cost after `years` of inflation."""
    future_value = current_value * (1 + inflation_rate / 100) ** years
    total_inflation = future_value - current_value
    purchasing_power_loss = (
        total_inflation / future_value * 100 if future_value > 0 else 0.0
    )

    return {
        "future_value": round(future_value, 2),
        "total_inflation": round(total_inflation, 2),
        "purchasing_power_loss": round(purchasing_power_loss, 2),
        "equivalent_todays_value": round(current_value, 2),
    }
