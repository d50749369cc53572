"""
Income Tax Calculations

Indian income tax under the new (FY 2023-24) and old regimes, HRA exemption
and take-home salary. Slab tables are data; tax is the progressive sum over
the slabs an income reaches.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from moneymap.config import get_settings


@dataclass(frozen=True)
class TaxSlab:
    """A single income tax bracket."""

    upper_bound: Optional[float]  # None for the top slab
    rate: float  # Marginal rate as decimal


NEW_REGIME_SLABS: List[TaxSlab] = [
    TaxSlab(300000, 0.0),
    TaxSlab(600000, 0.05),
    TaxSlab(900000, 0.10),
    TaxSlab(1200000, 0.15),
    TaxSlab(1500000, 0.20),
    TaxSlab(None, 0.30),
]

OLD_REGIME_SLABS: List[TaxSlab] = [
    TaxSlab(250000, 0.0),
    TaxSlab(500000, 0.05),
    TaxSlab(1000000, 0.20),
    TaxSlab(None, 0.30),
]

REGIME_SLABS = {"new": NEW_REGIME_SLABS, "old": OLD_REGIME_SLABS}

OLD_REGIME_STANDARD_DEDUCTION = 50000

# Salary structure assumptions
NET_SALARY_BASIC_RATIO = 0.4
PF_ANNUAL_CAP = 21600  # 12% of the Rs 15,000 monthly wage ceiling
ESIC_MONTHLY_WAGE_LIMIT = 21000


def get_slabs(regime: str) -> List[TaxSlab]:
    """Return the slab table for a tax regime."""
    try:
        return REGIME_SLABS[regime]
    except KeyError:
        raise ValueError(f"Unknown tax regime: {regime}") from None


def calculate_slab_tax(taxable_income: float, slabs: List[TaxSlab]) -> float:
    """
    Apply progressive slab rates to a taxable income.

    Args:
        taxable_income: Income after deductions
        slabs: Slab table ordered by upper bound

    Returns:
        Tax before cess
    """
    tax = 0.0
    lower = 0.0

    for slab in slabs:
        if taxable_income <= lower:
            break
        upper = taxable_income if slab.upper_bound is None else min(
            taxable_income, slab.upper_bound
        )
        tax += (upper - lower) * slab.rate
        if slab.upper_bound is None:
            break
        lower = slab.upper_bound

    return tax


def _tax_with_cess(taxable_income: float, regime: str) -> Dict:
    tax = calculate_slab_tax(taxable_income, get_slabs(regime))
    cess = tax * get_settings().cess_rate
    return {"tax": tax, "cess": cess, "total_tax": tax + cess}


def calculate_income_tax(
    gross_income: float, regime: str = "new", deductions: float = 0.0
) -> Dict:
    """
    Calculate income tax liability including cess.

    Deductions (80C, 80D, ...) are only allowed under the old regime.
    """
    if regime == "old":
        taxable_income = max(0.0, gross_income - deductions)
    else:
        taxable_income = gross_income

    result = _tax_with_cess(taxable_income, regime)

    return {
        "tax": round(result["tax"], 2),
        "cess": round(result["cess"], 2),
        "total_tax": round(result["total_tax"], 2),
        "net_income": round(gross_income - result["total_tax"], 2),
        "gross_income": round(gross_income, 2),
        "deductions": round(deductions if regime == "old" else 0.0, 2),
        "taxable_income": round(taxable_income, 2),
    }


def calculate_hra_exemption(
    salary: float,
    hra: float,
    rent_paid: float,
    is_metro_city: bool,
    basic_ratio: float = 0.5,
) -> Dict:
    """
    Calculate the exempt portion of HRA under section 10(13A).

    The exemption is the least of: HRA received, 50% (metro) or 40% of basic
    salary, and rent paid in excess of 10% of basic salary.

    Args:
        salary: Annual salary
        hra: Annual HRA received
        rent_paid: Annual rent paid
        is_metro_city: Whether the rented home is in a metro city
        basic_ratio: Share of salary that is basic pay
    """
    basic_salary = salary * basic_ratio

    exemption = min(
        hra,
        basic_salary * (0.5 if is_metro_city else 0.4),
        max(0.0, rent_paid - basic_salary * 0.1),
    )

    return {
        "hra_exemption": round(exemption, 2),
        "taxable_hra": round(hra - exemption, 2),
        "actual_rent": round(rent_paid, 2),
        "basic_salary": round(basic_salary, 2),
    }


def calculate_net_salary(
    gross_salary: float,
    pf_contribution: float = 12.0,
    esic_contribution: float = 0.75,
    professional_tax: float = 2400.0,
    other_deductions: float = 0.0,
    regime: str = "new",
) -> Dict:
    """
    Calculate annual and monthly take-home salary.

    Args:
        gross_salary: Annual gross salary
        pf_contribution: Employee PF contribution as percent of basic
        esic_contribution: Employee ESIC contribution as percent of gross
        professional_tax: Annual professional tax
        other_deductions: Any other annual deductions
        regime: "new" or "old" tax regime
    """
    basic_salary = gross_salary * NET_SALARY_BASIC_RATIO
    pf_deduction = min(basic_salary * pf_contribution / 100, PF_ANNUAL_CAP)

    esic_deduction = 0.0
    if gross_salary / 12 <= ESIC_MONTHLY_WAGE_LIMIT:
        esic_deduction = gross_salary * esic_contribution / 100

    taxable_income = gross_salary
    if regime == "old":
        taxable_income = max(0.0, gross_salary - OLD_REGIME_STANDARD_DEDUCTION)

    tax = _tax_with_cess(taxable_income, regime)

    total_deductions = (
        pf_deduction
        + esic_deduction
        + tax["total_tax"]
        + professional_tax
        + other_deductions
    )
    net_salary = gross_salary - total_deductions
    take_home = net_salary / gross_salary * 100 if gross_salary > 0 else 0.0

    return {
        "gross_salary": round(gross_salary, 2),
        "basic_salary": round(basic_salary, 2),
        "pf_deduction": round(pf_deduction, 2),
        "esic_deduction": round(esic_deduction, 2),
        "income_tax": round(tax["tax"], 2),
        "cess": round(tax["cess"], 2),
        "total_tax": round(tax["total_tax"], 2),
        "professional_tax": round(professional_tax, 2),
        "other_deductions": round(other_deductions, 2),
        "total_deductions": round(total_deductions, 2),
        "net_salary": round(net_salary, 2),
        "monthly_net_salary": round(net_salary / 12, 2),
        "take_home_percentage": round(take_home, 2),
    }
