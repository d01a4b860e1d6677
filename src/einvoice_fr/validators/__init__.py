"""Validateurs d'identifiants et de coordonnées d'entreprises françaises.

FR: Chaque validateur retourne un résultat structuré et ne lève jamais
    d'exception, y compris pour une entrée vide ou mal formée.
EN: Every validator returns a structured result and never raises,
    including for empty or malformed input.
"""

from einvoice_fr.validators.business import BusinessData, validate_french_business_data
from einvoice_fr.validators.contact import (
    normalize_french_phone,
    validate_email,
    validate_french_phone,
    validate_french_postal_code,
)
from einvoice_fr.validators.iban import validate_french_iban
from einvoice_fr.validators.siren import (
    validate_siren,
    validate_siren_checksum,
    validate_siret,
    validate_siret_checksum,
)
from einvoice_fr.validators.vat import (
    compute_french_vat_key,
    validate_eu_vat_format,
    validate_french_vat,
)

__all__ = [
    "BusinessData",
    "compute_french_vat_key",
    "normalize_french_phone",
    "validate_email",
    "validate_eu_vat_format",
    "validate_french_business_data",
    "validate_french_iban",
    "validate_french_phone",
    "validate_french_postal_code",
    "validate_french_vat",
    "validate_siren",
    "validate_siren_checksum",
    "validate_siret",
    "validate_siret_checksum",
]
