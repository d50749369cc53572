"""
API routes for the calculator suite.
"""

from fastapi import APIRouter

from moneymap.api import catalog, investments, loans, planning, retirement, tax, utility

router = APIRouter()

# Calculator endpoints share the /calculate prefix, one sub-router per category
router.include_router(loans.router, prefix="/calculate", tags=["loans"])
router.include_router(investments.router, prefix="/calculate", tags=["investments"])
router.include_router(retirement.router, prefix="/calculate", tags=["retirement"])
router.include_router(tax.router, prefix="/calculate", tags=["tax"])
router.include_router(planning.router, prefix="/calculate", tags=["planning"])
router.include_router(utility.router, prefix="/calculate", tags=["utility"])
router.include_router(catalog.router, tags=["catalog"])
