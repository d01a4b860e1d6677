"""Tests de validation des numéros de TVA intracommunautaire."""

import pytest

from einvoice_fr.models.enums import VatCheckScheme
from einvoice_fr.validators.vat import (
    compute_french_vat_key,
    validate_eu_vat_format,
    validate_french_vat,
)


class TestComputeKey:
    def test_known_keys(self):
        assert compute_french_vat_key("732829320") == "44"
        assert compute_french_vat_key("552100554") == "96"

    @pytest.mark.parametrize("siren", ["732829320", "552100554"])
    def test_computed_key_validates(self, siren):
        vat = f"FR{compute_french_vat_key(siren)}{siren}"
        assert validate_french_vat(vat).is_valid


class TestValidateFrenchVat:
    """Tests de validate_french_vat()."""

    def test_valid_numeric_key(self):
        result = validate_french_vat("FR44732829320")
        assert result.is_valid
        assert result.country_code == "FR"
        assert result.check_digits == "44"
        assert result.siren == "732829320"
        assert result.check_scheme == VatCheckScheme.NUMERIC

    def test_separators_and_case(self):
        result = validate_french_vat("fr 44 732 829 320")
        assert result.is_valid
        assert result.formatted_vat == "FR44732829320"

    def test_wrong_numeric_key(self):
        result = validate_french_vat("FR45732829320")
        assert not result.is_valid
        assert not result.checksum_valid

    def test_invalid_embedded_siren(self):
        result = validate_french_vat("FR32123456789")
        assert not result.is_valid
        assert "SIREN invalide" in result.error

    @pytest.mark.parametrize("vat", ["DE123456789", "FR4473282932", "FR"])
    def test_bad_format(self, vat):
        result = validate_french_vat(vat)
        assert not result.is_valid
        assert "Format de TVA" in result.error

    def test_empty(self):
        result = validate_french_vat(None)
        assert not result.is_valid
        assert result.error == "Le numéro de TVA est obligatoire"


class TestLegacyAlphanumericKey:
    """Tests de l'ancienne clé alphanumérique."""

    @pytest.mark.parametrize("vat", ["FR0E732829320", "FRA6732829320"])
    def test_valid(self, vat):
        result = validate_french_vat(vat)
        assert result.is_valid
        assert result.check_scheme == VatCheckScheme.ALPHANUMERIC

    def test_wrong_key(self):
        result = validate_french_vat("FR0F732829320")
        assert not result.is_valid
        assert result.check_scheme == VatCheckScheme.ALPHANUMERIC

    def test_letters_outside_alphabet(self):
        # I et O ne font pas partie de l'alphabet des clés
        assert not validate_french_vat("FR0I732829320").is_valid


class TestValidateEuVatFormat:
    @pytest.mark.parametrize(
        "vat",
        ["DE123456789", "NL123456789B01", "BE0123456789", "ATU12345678", "IT12345678901"],
    )
    def test_valid_formats(self, vat):
        assert validate_eu_vat_format(vat)

    @pytest.mark.parametrize("vat", ["DE12345678", "XX123456789", "", None])
    def test_invalid_formats(self, vat):
        assert not validate_eu_vat_format(vat)
