"""
Calculator catalog and learn articles.

Static metadata used by the dashboard listing, calculator pages, share links
and the learn section.
"""

from dataclasses import dataclass, asdict, field
from typing import Dict, List, Optional

from moneymap.config import get_settings


@dataclass(frozen=True)
class Calculator:
    """A single calculator entry."""

    id: str
    name: str
    icon: str
    description: str


@dataclass(frozen=True)
class CalculatorCategory:
    """A group of related calculators."""

    id: str
    name: str
    icon: str
    calculators: List[Calculator] = field(default_factory=list)

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Article:
    """A learn-section article. The body lives in templates/articles/<id>.html."""

    id: str
    title: str
    description: str
    read_time: str
    category: str

    @property
    def template(self) -> str:
        return f"articles/{self.id}.html"


CALCULATOR_CATEGORIES: List[CalculatorCategory] = [
    CalculatorCategory(
        "loan-debt",
        "Loan & Debt Management",
        "💳",
        [
            Calculator("emi", "EMI Calculator", "🏠", "Calculate your monthly loan payments"),
            Calculator(
                "loan-amortization",
                "Loan Amortization Schedule",
                "📊",
                "View detailed payment breakdown over time",
            ),
            Calculator("car-loan", "Car Loan Calculator", "🚗", "Calculate car loan EMI and total cost"),
        ],
    ),
    CalculatorCategory(
        "investment-wealth",
        "Investment & Wealth Creation",
        "📈",
        [
            Calculator("sip", "SIP Calculator", "💹", "Calculate SIP returns and plan investments"),
            Calculator(
                "lump-sum",
                "Lump Sum Investment Calculator",
                "💎",
                "Calculate one-time investment returns",
            ),
            Calculator("ppf", "PPF Calculator", "🏛️", "Calculate PPF maturity amount and returns"),
        ],
    ),
    CalculatorCategory(
        "retirement-planning",
        "Retirement & Long-Term Planning",
        "🏖️",
        [
            Calculator(
                "retirement-corpus",
                "Retirement Corpus Calculator",
                "🏖️",
                "Plan your retirement corpus",
            ),
            Calculator(
                "fire",
                "FIRE Calculator",
                "🔥",
                "Calculate Financial Independence Retire Early",
            ),
            Calculator(
                "inflation-adjusted",
                "Inflation-Adjusted Future Value",
                "📊",
                "Calculate future value with inflation",
            ),
        ],
    ),
    CalculatorCategory(
        "tax-income",
        "Tax & Income Planning",
        "🧾",
        [
            Calculator("income-tax", "Income Tax Calculator", "💼", "Calculate income tax liability"),
            Calculator("hra-exemption", "HRA Exemption Calculator", "🏠", "Calculate HRA tax exemption"),
            Calculator("net-salary", "Net Salary Calculator", "💰", "Calculate take-home salary"),
        ],
    ),
    CalculatorCategory(
        "smart-life-tools",
        "Smart Life Decision Tools",
        "🧠",
        [
            Calculator("rent-vs-buy", "Rent vs Buy Calculator", "🏘️", "Compare renting vs buying a home"),
            Calculator(
                "emergency-fund",
                "Emergency Fund Calculator",
                "🆘",
                "Calculate emergency fund requirement",
            ),
            Calculator("net-worth", "Net Worth Tracker", "💯", "Track your net worth over time"),
        ],
    ),
    CalculatorCategory(
        "utility-tools",
        "Other Utility Tools",
        "🔧",
        [
            Calculator(
                "compound-interest",
                "Compound Interest Calculator",
                "⚡",
                "Calculate compound interest growth",
            ),
            Calculator("currency-converter", "Currency Converter", "💱", "Convert between currencies"),
            Calculator("break-even", "Break-even Point Calculator", "⚖️", "Calculate business break-even point"),
        ],
    ),
]

CALCULATORS: Dict[str, Calculator] = {
    calculator.id: calculator
    for category in CALCULATOR_CATEGORIES
    for calculator in category.calculators
}

ARTICLES: Dict[str, Article] = {
    article.id: article
    for article in [
        Article(
            "compound-interest",
            "What is Compound Interest?",
            "Learn how compound interest can make your money grow exponentially over time.",
            "5 min read",
            "Basics",
        ),
        Article(
            "fire-planning",
            "How to Plan for FIRE (Financial Independence, Retire Early)",
            "A comprehensive guide to achieving financial independence and early retirement.",
            "8 min read",
            "Planning",
        ),
        Article(
            "sip-benefits",
            "Benefits of Systematic Investment Plans (SIP)",
            "Understand why SIP is considered one of the best investment strategies.",
            "6 min read",
            "Investment",
        ),
        Article(
            "emi-management",
            "Smart EMI Management Strategies",
            "Tips to manage your loan EMIs effectively and save on interest.",
            "7 min read",
            "Loans",
        ),
    ]
}


def get_calculator(calculator_id: str) -> Optional[Calculator]:
    return CALCULATORS.get(calculator_id)


def get_category_for(calculator_id: str) -> Optional[CalculatorCategory]:
    """Return the category a calculator belongs to."""
    for category in CALCULATOR_CATEGORIES:
        if any(c.id == calculator_id for c in category.calculators):
            return category
    return None


def get_article(article_id: str) -> Optional[Article]:
    return ARTICLES.get(article_id)


def build_share_payload(calculator_id: str) -> Dict[str, str]:
    """
    Build the title/text/url triple for sharing a calculator page.

    Raises:
        KeyError: If the calculator is unknown
    """
    calculator = CALCULATORS[calculator_id]
    settings = get_settings()
    base_url = settings.base_url.rstrip("/")

    return {
        "title": calculator.name,
        "text": f"Check out this {calculator.name} on {settings.app_name}",
        "url": f"{base_url}/calculator/{calculator.id}",
    }
