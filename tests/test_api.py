"""
Tests for calculator API endpoints and HTML pages.
"""

import logging

import pytest


class TestLoanEndpoints:
    """Test loan and debt calculator endpoints."""

    def test_emi_defaults(self, client):
        """Empty body uses the default inputs."""
        response = client.post("/api/calculate/emi", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["emi"] == pytest.approx(9847, abs=1)
        assert data["total_interest"] == pytest.approx(
            data["total_amount"] - 1000000, abs=0.02
        )

    def test_emi_rate_out_of_range(self, client):
        """Rates outside the allowed range are rejected."""
        response = client.post("/api/calculate/emi", json={"interest_rate": 60})
        assert response.status_code == 422

    def test_emi_missing_tenure_uses_default(self, client):
        response = client.post(
            "/api/calculate/emi", json={"loan_amount": 500000, "interest_rate": 10}
        )
        assert response.status_code == 200

    def test_amortization_yearly_view(self, client):
        response = client.post("/api/calculate/loan-amortization", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["view"] == "yearly"
        assert len(data["schedule"]) == 20
        assert data["summary"]["total_months"] == 240
        assert data["schedule"][-1]["ending_balance"] == 0

    def test_amortization_monthly_view(self, client):
        response = client.post(
            "/api/calculate/loan-amortization",
            json={"view": "monthly", "start_date": "2025-04-01"},
        )
        assert response.status_code == 200
        data = response.json()
        assert len(data["schedule"]) == 240
        assert data["schedule"][0]["date"] == "2025-04-01"
        assert data["schedule"][1]["date"] == "2025-05-01"

    def test_amortization_invalid_view(self, client):
        response = client.post(
            "/api/calculate/loan-amortization", json={"view": "weekly"}
        )
        assert response.status_code == 422

    def test_car_loan_defaults(self, client):
        response = client.post("/api/calculate/car-loan", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["loan_amount"] == 1045000
        assert data["upfront_costs"] == 325000

    def test_car_loan_down_payment_exceeds_price(self, client):
        """Business rule violations return 400."""
        response = client.post(
            "/api/calculate/car-loan",
            json={"car_price": 1000000, "down_payment": 1000000},
        )
        assert response.status_code == 400
        assert "car price" in response.json()["detail"]

    def test_car_loan_tenure_limit(self, client):
        response = client.post("/api/calculate/car-loan", json={"loan_tenure": 8})
        assert response.status_code == 422


class TestInvestmentEndpoints:
    """Test investment calculator endpoints."""

    def test_sip(self, client):
        response = client.post("/api/calculate/sip", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["total_investment"] == 600000
        assert data["future_value"] == pytest.approx(1161695, abs=5)

    def test_sip_minimum_installment(self, client):
        response = client.post("/api/calculate/sip", json={"monthly_amount": 50})
        assert response.status_code == 422

    def test_lump_sum(self, client):
        response = client.post("/api/calculate/lump-sum", json={})
        assert response.status_code == 200
        assert response.json()["amount"] == pytest.approx(310584.82, abs=0.01)

    def test_ppf(self, client):
        response = client.post("/api/calculate/ppf", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["total_investment"] == 2250000
        assert data["interest_rate"] == 7.1
        assert data["maturity_amount"] == pytest.approx(4068000, rel=1e-3)

    def test_ppf_deposit_limit(self, client):
        response = client.post("/api/calculate/ppf", json={"yearly_amount": 200000})
        assert response.status_code == 422

    def test_ppf_minimum_tenure(self, client):
        response = client.post("/api/calculate/ppf", json={"tenure": 10})
        assert response.status_code == 422


class TestRetirementEndpoints:
    """Test retirement calculator endpoints."""

    def test_retirement_corpus(self, client):
        response = client.post("/api/calculate/retirement-corpus", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["years_to_retirement"] == 30
        assert data["post_retirement_years"] == 25
        assert data["monthly_sip"] > 0

    def test_retirement_age_before_current_age(self, client):
        response = client.post(
            "/api/calculate/retirement-corpus",
            json={"current_age": 60, "retirement_age": 55},
        )
        assert response.status_code == 400

    def test_fire(self, client):
        response = client.post("/api/calculate/fire", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["fire_number"] == 12000000
        assert data["years_to_fire"] == 17
        assert data["fire_age"] == 42

    def test_fire_warning(self, client):
        response = client.post(
            "/api/calculate/fire",
            json={"monthly_expenses": 20000, "monthly_savings": 30000},
        )
        assert response.status_code == 200
        assert len(response.json()["warnings"]) == 1

    def test_inflation_adjusted(self, client):
        response = client.post("/api/calculate/inflation-adjusted", json={})
        assert response.status_code == 200
        assert response.json()["future_value"] == pytest.approx(179084.77, abs=0.01)


class TestTaxEndpoints:
    """Test tax and income endpoints."""

    def test_income_tax_new_regime(self, client):
        response = client.post("/api/calculate/income-tax", json={})
        assert response.status_code == 200
        assert response.json()["total_tax"] == 62400

    def test_income_tax_old_regime(self, client):
        response = client.post(
            "/api/calculate/income-tax",
            json={"regime": "old", "deductions": 150000},
        )
        assert response.status_code == 200
        assert response.json()["tax"] == 82500

    def test_income_tax_unknown_regime(self, client):
        response = client.post("/api/calculate/income-tax", json={"regime": "flat"})
        assert response.status_code == 422

    def test_hra_exemption(self, client):
        response = client.post("/api/calculate/hra-exemption", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["hra_exemption"] == 150000
        assert data["taxable_hra"] == 30000

    def test_net_salary(self, client):
        response = client.post("/api/calculate/net-salary", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["net_salary"] == 913600
        assert data["take_home_percentage"] == 91.36


class TestPlanningEndpoints:
    """Test life planning endpoints."""

    def test_rent_vs_buy(self, client):
        response = client.post("/api/calculate/rent-vs-buy", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["recommendation"] == "Buy"
        assert data["total_rent_cost"] == pytest.approx(3773368, abs=1)

    def test_rent_vs_buy_full_down_payment(self, client):
        response = client.post(
            "/api/calculate/rent-vs-buy",
            json={"home_price": 5000000, "down_payment": 5000000},
        )
        assert response.status_code == 400

    def test_emergency_fund(self, client):
        response = client.post(
            "/api/calculate/emergency-fund", json={"as_of": "2025-01-15"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["months"] == 7.5
        assert data["recommended_amount"] == 375000
        assert data["months_to_goal"] == 38
        assert data["target_achievement_date"] == "2028-03-15"

    def test_emergency_fund_invalid_stability(self, client):
        response = client.post(
            "/api/calculate/emergency-fund", json={"job_stability": "volatile"}
        )
        assert response.status_code == 422

    def test_net_worth(self, client):
        response = client.post("/api/calculate/net-worth", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["total_assets"] == 8000000
        assert data["total_liabilities"] == 3450000
        assert data["net_worth"] == 4550000


class TestUtilityEndpoints:
    """Test utility endpoints."""

    def test_compound_interest(self, client):
        response = client.post("/api/calculate/compound-interest", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["total_future_value"] == pytest.approx(330038.69, abs=0.01)
        assert data["effective_annual_rate"] == pytest.approx(12.68, abs=0.02)

    def test_compound_interest_with_contribution(self, client):
        response = client.post(
            "/api/calculate/compound-interest", json={"additional_contribution": 1000}
        )
        assert response.status_code == 200
        assert response.json()["total_contributions"] == 220000

    def test_currency_converter(self, client):
        response = client.post("/api/calculate/currency-converter", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["converted_amount"] == 83250
        assert data["rates_as_of"] == "2024-01-15"

    def test_currency_unsupported(self, client):
        response = client.post(
            "/api/calculate/currency-converter",
            json={"from_currency": "USD", "to_currency": "XYZ"},
        )
        assert response.status_code == 400
        assert "XYZ" in response.json()["detail"]

    def test_list_currencies(self, client):
        response = client.get("/api/calculate/currencies")
        assert response.status_code == 200
        codes = [c["code"] for c in response.json()["currencies"]]
        assert len(codes) == 20
        assert "INR" in codes

    def test_break_even(self, client):
        response = client.post("/api/calculate/break-even", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["units_for_target_profit"] == 2000
        assert data["margin_of_safety_percentage"] == pytest.approx(16.67, abs=0.01)

    def test_break_even_price_below_cost(self, client):
        response = client.post(
            "/api/calculate/break-even",
            json={"variable_cost_per_unit": 600, "price_per_unit": 500},
        )
        assert response.status_code == 400


class TestValidationMessages:
    """Out-of-range inputs report the calculator's own wording."""

    @pytest.mark.parametrize(
        "path,body,message",
        [
            ("emi", {"interest_rate": 60}, "Interest rate cannot exceed 50%"),
            ("car-loan", {"loan_tenure": 8}, "Car loan tenure cannot exceed 7 years"),
            ("ppf", {"yearly_amount": 200000}, "Maximum yearly deposit is ₹1,50,000"),
            ("sip", {"monthly_amount": 50}, "Monthly amount must be at least ₹100"),
            ("fire", {"current_age": 16}, "Age must be at least 18"),
            ("retirement-corpus", {"inflation_rate": 20}, "Inflation rate cannot exceed 15%"),
            ("net-salary", {"pf_contribution": 120}, "PF contribution cannot exceed 100%"),
            ("income-tax", {"gross_income": -1}, "Gross income cannot be negative"),
            ("emergency-fund", {"dependents": 11}, "Number of dependents cannot exceed 10"),
            ("net-worth", {"gold": -5}, "Gold value cannot be negative"),
            ("break-even", {"price_per_unit": 0}, "Price per unit must be greater than 0"),
            ("compound-interest", {"time_period": 0}, "Time period must be at least 1 year"),
        ],
    )
    def test_range_message(self, client, path, body, message):
        response = client.post(f"/api/calculate/{path}", json=body)
        assert response.status_code == 422
        errors = response.json()["detail"]
        assert any(message in error["msg"] for error in errors)

    def test_message_names_the_field(self, client):
        """Errors still point at the offending field."""
        response = client.post("/api/calculate/emi", json={"loan_tenure": 0})
        error = response.json()["detail"][0]
        assert error["loc"][-1] == "loan_tenure"
        assert "Loan tenure must be at least 1 year" in error["msg"]

    def test_optional_field_accepts_null(self, client):
        response = client.post("/api/calculate/break-even", json={"current_units": None})
        assert response.status_code == 200


class TestCalculationLogging:
    """Completed calculations are logged at DEBUG."""

    @pytest.mark.parametrize(
        "path,logger_name",
        [
            ("emi", "moneymap.api.loans"),
            ("lump-sum", "moneymap.api.investments"),
            ("inflation-adjusted", "moneymap.api.retirement"),
            ("income-tax", "moneymap.api.tax"),
            ("net-worth", "moneymap.api.planning"),
            ("compound-interest", "moneymap.api.utility"),
        ],
    )
    def test_debug_record(self, client, caplog, path, logger_name):
        caplog.set_level(logging.DEBUG, logger=logger_name)
        response = client.post(f"/api/calculate/{path}", json={})
        assert response.status_code == 200
        assert any(
            record.name == logger_name and record.levelno == logging.DEBUG
            for record in caplog.records
        )


class TestPages:
    """Test HTML pages."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "0.1.0"}

    def test_dashboard(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "EMI Calculator" in response.text
        assert "/calculator/break-even" in response.text

    def test_calculator_page(self, client):
        response = client.get("/calculator/sip")
        assert response.status_code == 200
        assert "SIP Calculator" in response.text
        assert "/api/calculate/sip" in response.text

    def test_unknown_calculator_page(self, client):
        response = client.get("/calculator/does-not-exist")
        assert response.status_code == 404

    def test_learn_index(self, client):
        response = client.get("/learn")
        assert response.status_code == 200
        assert "/learn/fire-planning" in response.text

    def test_compound_interest_article(self, client):
        """Worked example figures are rendered in rupees."""
        response = client.get("/learn/compound-interest")
        assert response.status_code == 200
        assert "₹10,800" in response.text
        assert "₹46,610" in response.text

    @pytest.mark.parametrize(
        "article_id", ["fire-planning", "sip-benefits", "emi-management"]
    )
    def test_articles_render(self, client, article_id):
        response = client.get(f"/learn/{article_id}")
        assert response.status_code == 200

    def test_unknown_article(self, client):
        response = client.get("/learn/does-not-exist")
        assert response.status_code == 404
