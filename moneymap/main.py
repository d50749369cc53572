"""
Main FastAPI application entry point.
"""

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.templating import Jinja2Templates
from fastapi.responses import HTMLResponse

from moneymap import catalog
from moneymap.api import router as api_router
from moneymap.api.catalog import CALCULATOR_INPUTS
from moneymap.calculations.investments import calculate_compound_interest
from moneymap.config import get_settings
from moneymap.formatting import (
    format_compact_currency,
    format_currency,
    format_number,
    format_percentage,
)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Personal finance calculators: loans, investments, retirement, tax and planning",
    version="0.1.0",
    debug=settings.debug,
)

# Set up templates
templates = Jinja2Templates(directory=str(Path(__file__).parent / "ui" / "templates"))
templates.env.filters["inr"] = format_currency
templates.env.filters["compact_inr"] = format_compact_currency
templates.env.filters["number"] = format_number
templates.env.filters["percent"] = format_percentage

# Include API routes
app.include_router(api_router, prefix="/api")


def _not_found(request: Request, message: str):
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"title": "Page Not Found", "message": message},
        status_code=404,
    )


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """Render the calculator dashboard."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"title": settings.app_name, "categories": catalog.CALCULATOR_CATEGORIES},
    )


@app.get("/calculator/{calculator_id}", response_class=HTMLResponse)
async def calculator_view(request: Request, calculator_id: str):
    """Render a calculator's landing page with its default inputs."""
    calculator = catalog.get_calculator(calculator_id)
    if calculator is None:
        return _not_found(request, "The calculator you're looking for doesn't exist.")

    return templates.TemplateResponse(
        request,
        "calculator.html",
        {
            "title": calculator.name,
            "calculator": calculator,
            "category": catalog.get_category_for(calculator_id),
            "endpoint": f"/api/calculate/{calculator.id}",
            "defaults": CALCULATOR_INPUTS[calculator.id]().model_dump(mode="json"),
        },
    )


@app.get("/learn", response_class=HTMLResponse)
async def learn(request: Request):
    """Render the learn section index."""
    return templates.TemplateResponse(
        request,
        "learn.html",
        {"title": "Learn Financial Planning", "articles": list(catalog.ARTICLES.values())},
    )


@app.get("/learn/{article_id}", response_class=HTMLResponse)
async def article_view(request: Request, article_id: str):
    """Render a learn article."""
    article = catalog.get_article(article_id)
    if article is None:
        logger.info("Unknown article requested: %s", article_id)
        return _not_found(request, "The article you're looking for doesn't exist.")

    # Worked example for the compound interest article
    growth = [
        (years, calculate_compound_interest(10000, 8, years)["amount"])
        for years in (1, 5, 10, 20)
    ]

    return templates.TemplateResponse(
        request,
        article.template,
        {"title": article.title, "article": article, "growth": growth},
    )


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": "0.1.0"}
