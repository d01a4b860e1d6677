"""Validateurs de champs Django pour les identifiants français.

FR: À utiliser dans ``validators=[...]`` d'un champ de modèle ou de
    formulaire. Lèvent ``django.core.exceptions.ValidationError`` avec le
    code stable du moteur de validation.
EN: For use in a model or form field's ``validators=[...]``. Raise
    ``django.core.exceptions.ValidationError`` with the engine's stable
    code.
"""

from django.core.exceptions import ValidationError

from einvoice_fr import validators
from einvoice_fr.models.enums import ErrorCode


def validate_siren(value: str) -> None:
    result = validators.validate_siren(value)
    if not result.is_valid:
        raise ValidationError(result.error, code=ErrorCode.INVALID_SIREN.value)


def validate_siret(value: str) -> None:
    result = validators.validate_siret(value)
    if not result.is_valid:
        raise ValidationError(result.error, code=ErrorCode.INVALID_SIRET.value)


def validate_french_vat(value: str) -> None:
    result = validators.validate_french_vat(value)
    if not result.is_valid:
        raise ValidationError(result.error, code=ErrorCode.INVALID_VAT.value)


def validate_french_iban(value: str) -> None:
    result = validators.validate_french_iban(value)
    if not result.is_valid:
        raise ValidationError(result.error, code=ErrorCode.INVALID_IBAN.value)


def validate_french_postal_code(value: str) -> None:
    result = validators.validate_french_postal_code(value)
    if not result.is_valid:
        raise ValidationError(result.error, code=ErrorCode.INVALID_POSTAL_CODE.value)


def validate_french_phone(value: str) -> None:
    """Contrairement au contrôle croisé, un téléphone invalide bloque le champ."""
    result = validators.validate_french_phone(value)
    if not result.is_valid:
        raise ValidationError(result.error, code=ErrorCode.INVALID_PHONE.value)
