"""Résultats de validation des identifiants français.

FR: Objets valeur immuables produits à chaque appel de validation :
    entrée brute, forme nettoyée, validité globale, validité de la clé
    de contrôle et message d'erreur éventuel.
EN: Immutable value objects produced by each validation call: raw input,
    cleaned form, overall validity, checksum validity and optional error.
"""

from pydantic import BaseModel, ConfigDict, Field

from einvoice_fr.models.enums import VatCheckScheme


class IdentifierValidationResult(BaseModel):
    """Base commune des résultats de validation d'identifiant."""

    model_config = ConfigDict(frozen=True)

    raw: str = Field(default="", description="Saisie brute / Raw input")
    is_valid: bool = Field(..., description="Identifiant valide / Valid identifier")
    checksum_valid: bool = Field(
        default=False,
        description="Clé de contrôle valide / Checksum valid",
    )
    error: str | None = Field(
        default=None,
        description="Message d'erreur (français) / Error message",
    )


class SirenValidationResult(IdentifierValidationResult):
    """Résultat de validation d'un SIREN (9 chiffres)."""

    formatted_siren: str = Field(
        default="",
        description="SIREN nettoyé (chiffres uniquement) / Cleaned SIREN",
    )


class SiretValidationResult(IdentifierValidationResult):
    """Résultat de validation d'un SIRET (SIREN + NIC)."""

    formatted_siret: str = Field(
        default="",
        description="SIRET nettoyé / Cleaned SIRET",
    )
    siren: str = Field(default="", description="SIREN embarqué / Embedded SIREN")
    establishment_number: str = Field(
        default="",
        description="NIC (5 chiffres) / Establishment number",
    )


class FrenchVatValidationResult(IdentifierValidationResult):
    """Résultat de validation d'un numéro de TVA intracommunautaire français."""

    formatted_vat: str = Field(default="", description="TVA nettoyée / Cleaned VAT")
    country_code: str = Field(default="", description="Code pays / Country code")
    check_digits: str = Field(default="", description="Clé / Check characters")
    siren: str = Field(default="", description="SIREN embarqué / Embedded SIREN")
    check_scheme: VatCheckScheme | None = Field(
        default=None,
        description=(
            "Schéma de clé (numérique ou ancienne clé alphanumérique) / "
            "Check key scheme"
        ),
    )


class IbanValidationResult(IdentifierValidationResult):
    """Résultat de validation d'un IBAN français."""

    formatted_iban: str = Field(default="", description="IBAN nettoyé / Cleaned IBAN")
    bank_code: str = Field(default="", description="Code banque / Bank code")
    branch_code: str = Field(default="", description="Code guichet / Branch code")
    account_number: str = Field(default="", description="Numéro de compte / Account")
    rib_key: str = Field(default="", description="Clé RIB / RIB key")


class PostalCodeValidationResult(IdentifierValidationResult):
    """Résultat de validation d'un code postal français."""

    formatted_postal_code: str = Field(
        default="",
        description="Code postal sans espaces / Postal code without spaces",
    )


class PhoneValidationResult(IdentifierValidationResult):
    """Résultat de validation d'un numéro de téléphone français.

    FR: ``normalized_phone`` est le numéro national à 10 chiffres
        (``0123456789``), vide si le numéro est invalide.
    EN: ``normalized_phone`` is the 10-digit national number, empty when
        the number is invalid.
    """

    normalized_phone: str = Field(
        default="",
        description="Numéro national normalisé / Normalized national number",
    )
