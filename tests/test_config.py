"""Tests des paramètres injectables."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from einvoice_fr.config import EInvoicingSettings, get_settings, resolve_settings


class TestEInvoicingSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("EINVOICE_FR_SME_DEADLINE", raising=False)
        settings = EInvoicingSettings()
        assert settings.public_sector_deadline == date(2017, 1, 1)
        assert settings.large_company_deadline == date(2026, 9, 1)
        assert settings.sme_deadline == date(2027, 9, 1)
        assert settings.large_company_employee_threshold == 250
        assert settings.large_company_revenue_threshold == Decimal("50000000")
        assert settings.default_vat_rate == Decimal("0.20")

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("EINVOICE_FR_SME_DEADLINE", "2028-01-01")
        monkeypatch.setenv("EINVOICE_FR_DEFAULT_VAT_RATE", "0.10")
        settings = EInvoicingSettings()
        assert settings.sme_deadline == date(2028, 1, 1)
        assert settings.default_vat_rate == Decimal("0.10")

    def test_rate_is_a_fraction(self):
        with pytest.raises(ValidationError):
            EInvoicingSettings(default_vat_rate=Decimal("20"))

    def test_frozen(self):
        settings = EInvoicingSettings()
        with pytest.raises(ValidationError):
            settings.default_currency = "USD"


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_explicit_settings_win(self):
        explicit = EInvoicingSettings(default_currency="CHF")
        assert resolve_settings(explicit) is explicit
        assert resolve_settings(None) is get_settings()
