"""
Financial Calculation Engine

Pure calculation functions behind each calculator, grouped by catalog
category. Rates are annual percentages unless a docstring says otherwise.
"""

from moneymap.calculations import loans, investments, retirement, tax, planning, utility

__all__ = ["loans", "investments", "retirement", "tax", "planning", "utility"]
