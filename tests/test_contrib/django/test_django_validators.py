"""Tests des validateurs de champs Django."""

import pytest
from django.core.exceptions import ValidationError

from einvoice_fr.contrib.django.validators import (
    validate_french_iban,
    validate_french_phone,
    validate_french_postal_code,
    validate_french_vat,
    validate_siren,
    validate_siret,
)


class TestValidValues:
    @pytest.mark.parametrize(
        ("validator", "value"),
        [
            (validate_siren, "732 829 320"),
            (validate_siret, "73282932000074"),
            (validate_french_vat, "FR44732829320"),
            (validate_french_iban, "FR14 2004 1010 0505 0001 3M02 606"),
            (validate_french_postal_code, "75001"),
            (validate_french_phone, "01 23 45 67 89"),
        ],
    )
    def test_accepted(self, validator, value):
        assert validator(value) is None


class TestInvalidValues:
    @pytest.mark.parametrize(
        ("validator", "value", "code"),
        [
            (validate_siren, "123456789", "INVALID_SIREN"),
            (validate_siret, "73282932000075", "INVALID_SIRET"),
            (validate_french_vat, "FR45732829320", "INVALID_VAT"),
            (validate_french_iban, "FR1420041010050500013M02607", "INVALID_IBAN"),
            (validate_french_postal_code, "99000", "INVALID_POSTAL_CODE"),
            (validate_french_phone, "12345", "INVALID_PHONE"),
        ],
    )
    def test_rejected_with_code(self, validator, value, code):
        with pytest.raises(ValidationError) as exc_info:
            validator(value)
        assert exc_info.value.code == code


class TestMessages:
    def test_postal_code_length_message(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_french_postal_code("7500")
        assert exc_info.value.messages == [
            "Le code postal doit comporter exactement 5 chiffres"
        ]

    def test_phone_length_message(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_french_phone("01 23 45 67")
        assert exc_info.value.messages == [
            "Le numéro de téléphone doit comporter 10 chiffres"
        ]
