"""
Number formatting in the Indian numbering system (lakh / crore grouping).
"""

import re
from decimal import Decimal, ROUND_HALF_UP

from moneymap.calculations.utility import CURRENCIES

LAKH = 100_000
CRORE = 10_000_000


def group_indian(digits: str) -> str:
    """Insert Indian-style separators into a string of digits: 1234567 -> 12,34,567."""
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_number(num: float) -> str:
    """Format a number with Indian grouping, keeping up to three decimals."""
    sign = "-" if num < 0 else ""
    text = f"{abs(num):.3f}".rstrip("0").rstrip(".")
    whole, _, fraction = text.partition(".")
    result = sign + group_indian(whole)
    if fraction:
        result += "." + fraction
    return result


def format_currency(amount: float, currency: str = "INR") -> str:
    """Format a whole-unit currency amount, e.g. ₹12,34,567."""
    symbol = CURRENCIES[currency].symbol if currency in CURRENCIES else currency
    # Half away from zero, so 2.5 shows as 3
    whole = Decimal(str(abs(amount))).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 and whole else ""
    return f"{sign}{symbol}{group_indian(str(whole))}"


def format_percentage(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"


def format_compact_currency(amount: float) -> str:
    """Short rupee figure using crore (Cr), lakh (L) and thousand (K) suffixes."""
    if amount >= CRORE:
        return f"₹{amount / CRORE:.1f}Cr"
    if amount >= LAKH:
        return f"₹{amount / LAKH:.1f}L"
    if amount >= 1000:
        return f"₹{amount / 1000:.1f}K"
    return format_currency(amount)


def parse_formatted_number(text: str) -> float:
    """Parse a formatted figure such as '₹12,34,567.50' back to a number."""
    cleaned = re.sub(r"[^\d.-]", "", text)
    # Longest leading number, so "12.5.3" reads as 12.5
    match = re.match(r"-?\d*\.?\d+", cleaned)
    if match is None:
        return 0.0
    return float(match.group())
