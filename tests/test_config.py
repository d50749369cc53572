"""
Tests for application settings.
"""

from moneymap.config import Settings, get_settings


class TestSettings:
    """Test settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        for name in ("PPF_INTEREST_RATE", "BASE_URL", "CESS_RATE"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.app_name == "MoneyMap"
        assert settings.ppf_interest_rate == 7.1
        assert settings.corpus_multiple == 25.0
        assert settings.cess_rate == 0.04

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("PPF_INTEREST_RATE", "7.5")
        monkeypatch.setenv("BASE_URL", "https://moneymap.example")
        settings = Settings(_env_file=None)
        assert settings.ppf_interest_rate == 7.5
        assert settings.base_url == "https://moneymap.example"

    def test_only_used_fields(self):
        """Server binding is left to the ASGI server command line."""
        assert "host" not in Settings.model_fields
        assert "port" not in Settings.model_fields

    def test_cached(self):
        assert get_settings() is get_settings()
