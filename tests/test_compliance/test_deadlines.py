"""Tests du calendrier de la réforme de la facturation électronique."""

from datetime import date
from decimal import Decimal

import pytest

from einvoice_fr.compliance.deadlines import (
    BusinessProfile,
    UrgencyLevel,
    days_until_deadline,
    is_large_company,
    is_subject_to_mandate,
    resolve_deadline,
    urgency_level,
)
from einvoice_fr.config import EInvoicingSettings


@pytest.fixture
def settings() -> EInvoicingSettings:
    return EInvoicingSettings(
        public_sector_deadline=date(2017, 1, 1),
        large_company_deadline=date(2026, 9, 1),
        sme_deadline=date(2027, 9, 1),
    )


class TestResolveDeadline:
    def test_without_siren(self, settings):
        profile = BusinessProfile(employee_count=5000, is_public_sector=True)
        assert not is_subject_to_mandate(profile)
        assert resolve_deadline(profile, settings=settings) is None

    def test_public_sector_wins(self, settings):
        profile = BusinessProfile(siren="732829320", employee_count=10, is_public_sector=True)
        assert resolve_deadline(profile, settings=settings) == date(2017, 1, 1)

    @pytest.mark.parametrize(
        ("employees", "revenue", "expected"),
        [
            (251, None, date(2026, 9, 1)),
            (250, None, date(2027, 9, 1)),
            (None, Decimal("50000001"), date(2026, 9, 1)),
            (None, Decimal("50000000"), date(2027, 9, 1)),
            (10, Decimal("60000000"), date(2026, 9, 1)),
            (None, None, date(2027, 9, 1)),
        ],
    )
    def test_size_thresholds(self, settings, employees, revenue, expected):
        profile = BusinessProfile(
            siren="732829320", employee_count=employees, annual_revenue=revenue
        )
        assert resolve_deadline(profile, settings=settings) == expected

    def test_injected_dates_and_thresholds(self):
        settings = EInvoicingSettings(
            sme_deadline=date(2028, 1, 1),
            large_company_employee_threshold=100,
        )
        assert resolve_deadline(
            BusinessProfile(siren="732829320", employee_count=50), settings=settings
        ) == date(2028, 1, 1)
        assert is_large_company(BusinessProfile(employee_count=101), settings=settings)


class TestDaysUntilDeadline:
    def test_days_left(self, settings):
        profile = BusinessProfile(siren="732829320", employee_count=1000)
        assert days_until_deadline(profile, date(2026, 8, 31), settings=settings) == 1

    def test_deadline_passed(self, settings):
        profile = BusinessProfile(siren="732829320", employee_count=1000)
        assert days_until_deadline(profile, date(2026, 10, 1), settings=settings) == 0

    def test_not_subject(self, settings):
        assert days_until_deadline(BusinessProfile(), date(2026, 1, 1), settings=settings) is None


class TestUrgencyLevel:
    @pytest.mark.parametrize(
        ("days", "expected"),
        [(0, UrgencyLevel.HIGH), (364, UrgencyLevel.HIGH), (365, UrgencyLevel.MEDIUM), (499, UrgencyLevel.MEDIUM), (500, UrgencyLevel.LOW)],
    )
    def test_levels(self, days, expected):
        assert urgency_level(days) == expected
