"""Tests des codes postaux, téléphones et emails."""

import pytest
from pydantic import ValidationError

from einvoice_fr.models.identifiers import PhoneValidationResult, PostalCodeValidationResult
from einvoice_fr.validators.contact import (
    normalize_french_phone,
    validate_email,
    validate_french_phone,
    validate_french_postal_code,
)


class TestPostalCode:
    """Tests de validate_french_postal_code()."""

    @pytest.mark.parametrize(
        ("postal_code", "expected"),
        [
            ("75001", "75001"),
            ("01000", "01000"),
            ("20000", "20000"),
            ("95000", "95000"),
            ("97150", "97150"),
            ("97400", "97400"),
            ("97600", "97600"),
            (" 75 001 ", "75001"),
        ],
    )
    def test_valid(self, postal_code, expected):
        result = validate_french_postal_code(postal_code)
        assert isinstance(result, PostalCodeValidationResult)
        assert result.is_valid
        assert result.formatted_postal_code == expected
        assert result.error is None

    @pytest.mark.parametrize("postal_code", ["", "   ", None])
    def test_empty(self, postal_code):
        result = validate_french_postal_code(postal_code)
        assert not result.is_valid
        assert result.error == "Le code postal est obligatoire"

    @pytest.mark.parametrize("postal_code", ["7500", "750011", "7500A"])
    def test_wrong_length(self, postal_code):
        result = validate_french_postal_code(postal_code)
        assert not result.is_valid
        assert result.error == "Le code postal doit comporter exactement 5 chiffres"

    @pytest.mark.parametrize("postal_code", ["00000", "00100", "96000", "97000", "97900", "98000"])
    def test_unknown_department(self, postal_code):
        result = validate_french_postal_code(postal_code)
        assert not result.is_valid
        assert result.error == "Format de code postal français invalide"

    def test_non_ascii_digits_rejected(self):
        result = validate_french_postal_code("75٠٠١")
        assert not result.is_valid
        assert result.error == "Le code postal doit comporter exactement 5 chiffres"

    def test_result_is_frozen(self):
        result = validate_french_postal_code("75001")
        with pytest.raises(ValidationError):
            result.is_valid = False


class TestPhone:
    """Tests de validate_french_phone() et normalize_french_phone()."""

    @pytest.mark.parametrize(
        ("phone", "expected"),
        [
            ("0123456789", "0123456789"),
            ("01 23 45 67 89", "0123456789"),
            ("01.23.45.67.89", "0123456789"),
            ("06-12-34-56-78", "0612345678"),
            ("+33 1 23 45 67 89", "0123456789"),
            ("+33 (0)1 23 45 67 89", "0123456789"),
            ("0033 6 12 34 56 78", "0612345678"),
            ("33123456789", "0123456789"),
        ],
    )
    def test_normalize(self, phone, expected):
        assert normalize_french_phone(phone) == expected
        result = validate_french_phone(phone)
        assert isinstance(result, PhoneValidationResult)
        assert result.is_valid
        assert result.normalized_phone == expected

    @pytest.mark.parametrize("phone", ["", "  ", None])
    def test_empty(self, phone):
        result = validate_french_phone(phone)
        assert not result.is_valid
        assert result.error == "Le numéro de téléphone est obligatoire"

    @pytest.mark.parametrize("phone", ["01234567", "01 23 45 67 89 01"])
    def test_wrong_length(self, phone):
        result = validate_french_phone(phone)
        assert not result.is_valid
        assert result.normalized_phone == ""
        assert result.error == "Le numéro de téléphone doit comporter 10 chiffres"

    @pytest.mark.parametrize("phone", ["12345", "0012345678", "+44 20 7946 0958"])
    def test_invalid_format(self, phone):
        assert normalize_french_phone(phone) is None
        result = validate_french_phone(phone)
        assert not result.is_valid
        assert result.error == (
            "Le format du numéro de téléphone ne semble pas valide pour la France"
        )

    def test_non_ascii_digits_rejected(self):
        phone = "0١٢٣٤٥٦٧٨٩"
        assert normalize_french_phone(phone) is None
        assert not validate_french_phone(phone).is_valid


class TestEmail:
    @pytest.mark.parametrize("email", ["contact@exemple.fr", " compta@societe.com "])
    def test_valid(self, email):
        assert validate_email(email)

    @pytest.mark.parametrize("email", ["pas-un-email", "a@b", "a b@c.fr", "", None])
    def test_invalid(self, email):
        assert not validate_email(email)
