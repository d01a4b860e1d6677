"""Tests de la mise en forme des identifiants."""

import pytest

from einvoice_fr.formatting import (
    format_french_address,
    format_french_phone,
    format_french_vat,
    format_iban,
    format_postal_code,
    format_siren,
    format_siret,
)
from einvoice_fr.validators.siren import validate_siren


class TestFormatSiren:
    def test_groups(self):
        assert format_siren("732829320") == "732 829 320"

    def test_idempotent(self):
        formatted = format_siren(validate_siren("732829320").formatted_siren)
        assert format_siren(formatted) == formatted

    @pytest.mark.parametrize("value", ["12345", "1234567890", ""])
    def test_wrong_length_returned_unchanged(self, value):
        assert format_siren(value) == value

    def test_none(self):
        assert format_siren(None) == ""


class TestFormatSiret:
    def test_groups(self):
        assert format_siret("73282932000074") == "732 829 320 00074"

    def test_wrong_length_returned_unchanged(self):
        assert format_siret("7328293200007") == "7328293200007"


class TestFormatFrenchVat:
    def test_groups(self):
        assert format_french_vat("FR44732829320") == "FR 44 732 829 320"

    def test_cleans_before_grouping(self):
        assert format_french_vat("fr44 732829320") == "FR 44 732 829 320"

    def test_legacy_key(self):
        assert format_french_vat("FR0E732829320") == "FR 0E 732 829 320"

    @pytest.mark.parametrize("value", ["DE123456789", "FR4473282932"])
    def test_not_french_returned_unchanged(self, value):
        assert format_french_vat(value) == value


class TestFormatOthers:
    def test_phone(self):
        assert format_french_phone("+33123456789") == "01 23 45 67 89"

    def test_invalid_phone_unchanged(self):
        assert format_french_phone("12345") == "12345"

    def test_iban(self):
        assert format_iban("FR1420041010050500013M02606") == (
            "FR14 2004 1010 0505 0001 3M02 606"
        )

    @pytest.mark.parametrize("value", ["hello", "FR14", "not an iban at all"])
    def test_iban_not_canonical_unchanged(self, value):
        assert format_iban(value) == value

    def test_foreign_iban_grouped(self):
        assert format_iban("de89370400440532013000") == "DE89 3704 0044 0532 0130 00"

    def test_non_ascii_siren_unchanged(self):
        assert format_siren("٧٣٢٨٢٩٣٢٠") == "٧٣٢٨٢٩٣٢٠"

    def test_postal_code(self):
        assert format_postal_code("75 001") == "75001"
        assert format_postal_code("7500") == "7500"

    def test_address(self):
        assert format_french_address("12 rue de la Paix", "75002", "Paris") == (
            "12 rue de la Paix, 75002 Paris, France"
        )
