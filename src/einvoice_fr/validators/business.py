"""Contrôle de cohérence des données d'entreprise.

FR: Valide chaque champ présent avec son validateur, puis applique les
    contrôles croisés SIREN/SIRET et SIREN/TVA. Les erreurs de téléphone
    sont des avertissements ; les autres problèmes sont des erreurs.
EN: Validates each present field with its validator, then applies the
    SIREN/SIRET and SIREN/VAT cross-checks. Phone problems are warnings;
    everything else is an error.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from einvoice_fr.models.enums import ErrorCode
from einvoice_fr.models.validation import ValidationResult
from einvoice_fr.validators.contact import (
    validate_email,
    validate_french_phone,
    validate_french_postal_code,
)
from einvoice_fr.validators.siren import (
    SIREN_LENGTH,
    clean_digits,
    validate_siren,
    validate_siret,
)
from einvoice_fr.validators.vat import (
    clean_vat,
    validate_eu_vat_format,
    validate_french_vat,
)

logger = logging.getLogger(__name__)

_MIN_COMPANY_NAME_LENGTH = 2
_MIN_ADDRESS_LENGTH = 5


class BusinessData(BaseModel):
    """Données d'entreprise à contrôler (tous les champs sont optionnels).

    FR: Un champ absent ou vide n'est pas contrôlé.
    EN: A missing or empty field is not checked.
    """

    siren: str | None = Field(default=None, description="Numéro SIREN")
    siret: str | None = Field(default=None, description="Numéro SIRET")
    vat_number: str | None = Field(default=None, description="Numéro de TVA")
    postal_code: str | None = Field(default=None, description="Code postal")
    phone: str | None = Field(default=None, description="Téléphone")
    email: str | None = Field(default=None, description="Adresse email")
    company_name: str | None = Field(default=None, description="Raison sociale")
    address: str | None = Field(default=None, description="Adresse postale")


def _is_french_vat(cleaned_vat: str) -> bool:
    return cleaned_vat.startswith("FR") or cleaned_vat[:2].isdigit()


def validate_french_business_data(
    data: BusinessData | None = None,
    **fields: str | None,
) -> ValidationResult:
    """Valide un ensemble de données d'entreprise françaises.

    FR: Accepte un ``BusinessData`` ou les mêmes champs en arguments nommés.
        Les contrôles croisés comparent les formes nettoyées dès que les
        deux identifiants sont présents, indépendamment de leur validité
        individuelle.
    EN: Accepts a ``BusinessData`` or the same fields as keyword arguments.
        Cross-checks compare the cleaned forms whenever both identifiers are
        present, regardless of their individual validity.

    Returns:
        ValidationResult avec des codes stables (voir ``ErrorCode``).
    """
    if data is None:
        data = BusinessData(**fields)

    result = ValidationResult()
    siren = clean_digits(data.siren)
    siret = clean_digits(data.siret)

    if data.siren:
        siren_result = validate_siren(data.siren)
        if not siren_result.is_valid:
            result.add_error(
                "siren",
                ErrorCode.INVALID_SIREN,
                siren_result.error or "SIREN invalide",
            )

    if data.siret:
        siret_result = validate_siret(data.siret)
        if not siret_result.is_valid:
            result.add_error(
                "siret",
                ErrorCode.INVALID_SIRET,
                siret_result.error or "SIRET invalide",
            )
        if siren and siret[:SIREN_LENGTH] != siren:
            result.add_error(
                "siret",
                ErrorCode.SIRET_SIREN_MISMATCH,
                "Le SIRET doit commencer par le numéro SIREN de l'entreprise",
                details={"siren": siren, "siret_siren": siret[:SIREN_LENGTH]},
            )

    if data.vat_number:
        cleaned_vat = clean_vat(data.vat_number)
        if _is_french_vat(cleaned_vat):
            vat_result = validate_french_vat(data.vat_number)
            if not vat_result.is_valid:
                result.add_error(
                    "vat_number",
                    ErrorCode.INVALID_VAT,
                    vat_result.error or "Numéro de TVA invalide",
                )
            embedded = vat_result.siren
            if siren and embedded and embedded != siren:
                result.add_error(
                    "vat_number",
                    ErrorCode.VAT_SIREN_MISMATCH,
                    "Le numéro de TVA doit contenir le numéro SIREN de l'entreprise",
                    details={"siren": siren, "vat_siren": embedded},
                )
        elif not validate_eu_vat_format(cleaned_vat):
            result.add_error(
                "vat_number",
                ErrorCode.INVALID_VAT,
                "Le numéro de TVA intracommunautaire européen est invalide",
            )

    if data.postal_code:
        postal_result = validate_french_postal_code(data.postal_code)
        if not postal_result.is_valid:
            result.add_error(
                "postal_code",
                ErrorCode.INVALID_POSTAL_CODE,
                postal_result.error or "Format de code postal français invalide",
            )

    if data.phone:
        phone_result = validate_french_phone(data.phone)
        if not phone_result.is_valid:
            result.add_warning(
                "phone",
                ErrorCode.INVALID_PHONE,
                phone_result.error
                or "Le format du numéro de téléphone ne semble pas valide pour la France",
            )

    if data.email and not validate_email(data.email):
        result.add_error(
            "email",
            ErrorCode.INVALID_EMAIL,
            "L'adresse email est invalide",
        )

    if data.company_name and (
        len(data.company_name.strip()) < _MIN_COMPANY_NAME_LENGTH
    ):
        result.add_error(
            "company_name",
            ErrorCode.INVALID_COMPANY_NAME,
            "La raison sociale doit contenir au moins 2 caractères",
        )

    if data.address and len(data.address.strip()) < _MIN_ADDRESS_LENGTH:
        result.add_error(
            "address",
            ErrorCode.INVALID_ADDRESS,
            "L'adresse doit être complète",
        )

    if not data.siren and not data.siret:
        result.add_warning(
            "siren",
            ErrorCode.MISSING_IDENTIFIER,
            "Il est recommandé de fournir un numéro SIREN ou SIRET",
        )
    if not data.vat_number:
        result.add_warning(
            "vat_number",
            ErrorCode.MISSING_VAT_NUMBER,
            "Le numéro de TVA intracommunautaire est recommandé "
            "pour les échanges européens",
        )

    logger.debug(
        "Contrôle des données d'entreprise : %d erreur(s), %d avertissement(s)",
        len(result.errors),
        len(result.warnings),
    )
    return result

