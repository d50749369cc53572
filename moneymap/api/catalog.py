"""
Calculator catalog and learn article endpoints.
"""

from typing import Dict, Type

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from moneymap import catalog
from moneymap.api.investments import LumpSumInput, PPFInput, SIPInput
from moneymap.api.loans import AmortizationInput, CarLoanInput, EMIInput
from moneymap.api.planning import EmergencyFundInput, NetWorthInput, RentVsBuyInput
from moneymap.api.retirement import FIREInput, InflationInput, RetirementInput
from moneymap.api.tax import HRAInput, IncomeTaxInput, NetSalaryInput
from moneymap.api.utility import BreakEvenInput, CompoundInterestInput, CurrencyInput

router = APIRouter()

CALCULATOR_INPUTS: Dict[str, Type[BaseModel]] = {
    "emi": EMIInput,
    "loan-amortization": AmortizationInput,
    "car-loan": CarLoanInput,
    "sip": SIPInput,
    "lump-sum": LumpSumInput,
    "ppf": PPFInput,
    "retirement-corpus": RetirementInput,
    "fire": FIREInput,
    "inflation-adjusted": InflationInput,
    "income-tax": IncomeTaxInput,
    "hra-exemption": HRAInput,
    "net-salary": NetSalaryInput,
    "rent-vs-buy": RentVsBuyInput,
    "emergency-fund": EmergencyFundInput,
    "net-worth": NetWorthInput,
    "compound-interest": CompoundInterestInput,
    "currency-converter": CurrencyInput,
    "break-even": BreakEvenInput,
}


def _get_calculator_or_404(calculator_id: str) -> catalog.Calculator:
    calculator = catalog.get_calculator(calculator_id)
    if calculator is None:
        raise HTTPException(status_code=404, detail="Calculator not found")
    return calculator


@router.get("/calculators")
async def list_calculators():
    """List calculator categories and their calculators."""
    return {"categories": [c.as_dict() for c in catalog.CALCULATOR_CATEGORIES]}


@router.get("/calculators/{calculator_id}")
async def get_calculator(calculator_id: str):
    """Calculator metadata, its endpoint and default inputs."""
    calculator = _get_calculator_or_404(calculator_id)
    category = catalog.get_category_for(calculator_id)

    return {
        "id": calculator.id,
        "name": calculator.name,
        "icon": calculator.icon,
        "description": calculator.description,
        "category": category.id,
        "endpoint": f"/api/calculate/{calculator.id}",
        "defaults": CALCULATOR_INPUTS[calculator.id]().model_dump(mode="json"),
    }


@router.get("/calculators/{calculator_id}/share")
async def share_calculator(calculator_id: str):
    """Share payload (title, text, url) for a calculator page."""
    calculator = _get_calculator_or_404(calculator_id)
    return catalog.build_share_payload(calculator.id)


@router.get("/articles")
async def list_articles():
    """List learn-section articles."""
    return {
        "articles": [
            {
                "id": a.id,
                "title": a.title,
                "description": a.description,
                "read_time": a.read_time,
                "category": a.category,
                "url": f"/learn/{a.id}",
            }
            for a in catalog.ARTICLES.values()
        ]
    }
