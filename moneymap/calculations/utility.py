"""
Utility Calculations

Currency conversion against a reference rate table, and business break-even
analysis.
"""

import math
from dataclasses import dataclass
from typing import Dict, Optional

# Reference rates; not live market data
RATES_AS_OF = "2024-01-15"


@dataclass(frozen=True)
class Currency:
    """A supported currency."""

    code: str
    name: str
    symbol: str


CURRENCIES: Dict[str, Currency] = {
    c.code: c
    for c in [
        Currency("INR", "Indian Rupee", "₹"),
        Currency("USD", "US Dollar", "$"),
        Currency("EUR", "Euro", "€"),
        Currency("GBP", "British Pound", "£"),
        Currency("JPY", "Japanese Yen", "¥"),
        Currency("CAD", "Canadian Dollar", "C$"),
        Currency("AUD", "Australian Dollar", "A$"),
        Currency("CHF", "Swiss Franc", "CHF"),
        Currency("CNY", "Chinese Yuan", "¥"),
        Currency("SGD", "Singapore Dollar", "S$"),
        Currency("HKD", "Hong Kong Dollar", "HK$"),
        Currency("AED", "UAE Dirham", "د.إ"),
        Currency("SAR", "Saudi Riyal", "﷼"),
        Currency("KRW", "South Korean Won", "₩"),
        Currency("MYR", "Malaysian Ringgit", "RM"),
        Currency("THB", "Thai Baht", "฿"),
        Currency("NZD", "New Zealand Dollar", "NZ$"),
        Currency("ZAR", "South African Rand", "R"),
        Currency("BRL", "Brazilian Real", "R$"),
        Currency("RUB", "Russian Ruble", "₽"),
    ]
}

EXCHANGE_RATES: Dict[str, Dict[str, float]] = {
    "USD": {
        "INR": 83.25, "EUR": 0.92, "GBP": 0.79, "JPY": 149.50, "CAD": 1.36,
        "AUD": 1.53, "CHF": 0.88, "CNY": 7.24, "SGD": 1.35, "HKD": 7.82,
        "AED": 3.67, "SAR": 3.75, "KRW": 1320.50, "MYR": 4.68, "THB": 35.80,
        "NZD": 1.63, "ZAR": 18.75, "BRL": 5.12, "RUB": 92.50,
    },
    "INR": {
        "USD": 0.012, "EUR": 0.011, "GBP": 0.0095, "JPY": 1.80, "CAD": 0.016,
        "AUD": 0.018, "CHF": 0.011, "CNY": 0.087, "SGD": 0.016, "HKD": 0.094,
        "AED": 0.044, "SAR": 0.045, "KRW": 15.86, "MYR": 0.056, "THB": 0.43,
        "NZD": 0.020, "ZAR": 0.225, "BRL": 0.061, "RUB": 1.11,
    },
}

DEFAULT_SAFETY_FACTOR = 1.2  # Assumed sales volume relative to break-even


def get_exchange_rate(from_currency: str, to_currency: str) -> float:
    """
    Look up the rate converting one unit of `from_currency`.

    Tries a direct quote, then the inverse quote, then a cross rate via USD.

    Raises:
        ValueError: If either currency is unsupported
    """
    for code in (from_currency, to_currency):
        if code not in CURRENCIES:
            raise ValueError(f"Unsupported currency: {code}")

    if from_currency == to_currency:
        return 1.0

    direct = EXCHANGE_RATES.get(from_currency, {})
    if to_currency in direct:
        return direct[to_currency]

    inverse = EXCHANGE_RATES.get(to_currency, {})
    if from_currency in inverse:
        return 1 / inverse[from_currency]

    usd = EXCHANGE_RATES["USD"]
    return usd[to_currency] / usd[from_currency]


def convert_currency(amount: float, from_currency: str, to_currency: str) -> Dict:
    """Convert an amount between two supported currencies."""
    from_currency = from_currency.upper()
    to_currency = to_currency.upper()
    rate = get_exchange_rate(from_currency, to_currency)

    return {
        "amount": amount,
        "converted_amount": round(amount * rate, 4),
        "exchange_rate": rate,
        "from_currency": from_currency,
        "to_currency": to_currency,
        "from_symbol": CURRENCIES[from_currency].symbol,
        "to_symbol": CURRENCIES[to_currency].symbol,
        "rates_as_of": RATES_AS_OF,
    }


def calculate_break_even(
    fixed_costs: float,
    variable_cost_per_unit: float,
    price_per_unit: float,
    target_profit: float = 0.0,
    current_units: Optional[float] = None,
) -> Dict:
    """
    Calculate the break-even point and margin of safety.

    Args:
        fixed_costs: Total fixed costs
        variable_cost_per_unit: Variable cost of one unit
        price_per_unit: Selling price of one unit
        target_profit: Desired profit (0 to skip)
        current_units: Current sales volume; defaults to 120% of break-even

    Raises:
        ValueError: If the price does not exceed the variable cost
    """
    if price_per_unit <= variable_cost_per_unit:
        raise ValueError("Price per unit must be greater than variable cost per unit")

    margin = price_per_unit - variable_cost_per_unit
    break_even_units = fixed_costs / margin
    break_even_revenue = break_even_units * price_per_unit

    units_for_target = 0
    revenue_for_target = 0.0
    if target_profit > 0:
        units_for_target = math.ceil((fixed_costs + target_profit) / margin)
        revenue_for_target = units_for_target * price_per_unit

    if current_units is None:
        current_units = break_even_units * DEFAULT_SAFETY_FACTOR

    margin_of_safety = max(0.0, current_units - break_even_units)
    margin_of_safety_pct = (
        margin_of_safety / current_units * 100 if current_units > 0 else 0.0
    )

    variable_cost_total = break_even_units * variable_cost_per_unit

    return {
        "break_even_units": round(break_even_units, 2),
        "break_even_revenue": round(break_even_revenue, 2),
        "contribution_margin": round(margin, 2),
        "contribution_margin_percent": round(margin / price_per_unit * 100, 2),
        "target_profit": target_profit,
        "units_for_target_profit": units_for_target,
        "revenue_for_target_profit": round(revenue_for_target, 2),
        "margin_of_safety": round(margin_of_safety, 2),
        "margin_of_safety_percentage": round(margin_of_safety_pct, 2),
        "variable_cost_total": round(variable_cost_total, 2),
        "total_cost_at_break_even": round(fixed_costs + variable_cost_total, 2),
    }
