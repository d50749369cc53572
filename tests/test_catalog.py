"""
Tests for the calculator catalog, share links and learn articles.
"""

import pytest

from moneymap import catalog
from moneymap.api.catalog import CALCULATOR_INPUTS


class TestCatalog:
    """Test static catalog data."""

    def test_six_categories_of_three(self):
        assert len(catalog.CALCULATOR_CATEGORIES) == 6
        for category in catalog.CALCULATOR_CATEGORIES:
            assert len(category.calculators) == 3

    def test_calculator_ids_unique(self):
        assert len(catalog.CALCULATORS) == 18

    def test_every_calculator_has_inputs(self):
        """Each listed calculator is backed by an input model."""
        assert set(CALCULATOR_INPUTS) == set(catalog.CALCULATORS)

    def test_category_lookup(self):
        assert catalog.get_category_for("fire").id == "retirement-planning"
        assert catalog.get_category_for("nope") is None

    def test_article_template(self):
        article = catalog.get_article("sip-benefits")
        assert article.template == "articles/sip-benefits.html"

    def test_share_payload(self):
        payload = catalog.build_share_payload("emi")
        assert payload["title"] == "EMI Calculator"
        assert payload["text"] == "Check out this EMI Calculator on MoneyMap"
        assert payload["url"].endswith("/calculator/emi")

    def test_share_payload_unknown(self):
        with pytest.raises(KeyError):
            catalog.build_share_payload("nope")


class TestCatalogEndpoints:
    """Test catalog API endpoints."""

    def test_list_calculators(self, client):
        response = client.get("/api/calculators")
        assert response.status_code == 200
        categories = response.json()["categories"]
        assert len(categories) == 6
        assert sum(len(c["calculators"]) for c in categories) == 18
        assert categories[0]["id"] == "loan-debt"

    def test_calculator_detail(self, client):
        response = client.get("/api/calculators/emi")
        assert response.status_code == 200
        data = response.json()
        assert data["category"] == "loan-debt"
        assert data["endpoint"] == "/api/calculate/emi"
        assert data["defaults"] == {
            "loan_amount": 1000000,
            "interest_rate": 8.5,
            "loan_tenure": 15,
        }

    def test_calculator_detail_unknown(self, client):
        response = client.get("/api/calculators/nope")
        assert response.status_code == 404

    @pytest.mark.parametrize("calculator_id", sorted(CALCULATOR_INPUTS))
    def test_defaults_are_accepted(self, client, calculator_id):
        """Posting a calculator's defaults back succeeds."""
        defaults = client.get(f"/api/calculators/{calculator_id}").json()["defaults"]
        response = client.post(f"/api/calculate/{calculator_id}", json=defaults)
        assert response.status_code == 200

    def test_share(self, client):
        response = client.get("/api/calculators/ppf/share")
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "PPF Calculator"
        assert data["url"].endswith("/calculator/ppf")

    def test_share_unknown(self, client):
        response = client.get("/api/calculators/nope/share")
        assert response.status_code == 404

    def test_list_articles(self, client):
        response = client.get("/api/articles")
        assert response.status_code == 200
        articles = response.json()["articles"]
        assert len(articles) == 4
        assert articles[0]["url"] == "/learn/compound-interest"
