"""Validation des numéros de TVA intracommunautaire.

FR: Numéro français = ``FR`` + 2 caractères de clé + SIREN (9 chiffres).
    Clé numérique : ``(12 + 3 × (SIREN mod 97)) mod 97``.
    Ancienne clé alphanumérique : algorithme historique sur un alphabet
    de 34 caractères (sans I ni O).
    Les numéros des autres États membres ne font l'objet que d'un contrôle
    de format.
EN: French number = ``FR`` + 2 check characters + SIREN (9 digits).
    Numeric key: ``(12 + 3 × (SIREN mod 97)) mod 97``.
    Legacy alphanumeric key: historical algorithm over a 34-character
    alphabet (no I nor O).
    Numbers from other member states only get a format check.
"""

import logging
import re

from einvoice_fr.models.enums import VatCheckScheme
from einvoice_fr.models.identifiers import FrenchVatValidationResult
from einvoice_fr.validators.siren import validate_siren

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r"[^0-9A-Za-z]")
_FRENCH_VAT_RE = re.compile(r"^FR([0-9A-Z]{2})(\d{9})$", re.ASCII)

# Alphabet des anciennes clés alphanumériques (I et O exclus)
_LEGACY_ALPHABET = "0123456789ABCDEFGHJKLMNPQRSTUVWXYZ"

_EU_VAT_PATTERNS: dict[str, re.Pattern[str]] = {
    "AT": re.compile(r"^ATU\d{8}$", re.ASCII),
    "BE": re.compile(r"^BE[01]\d{9}$", re.ASCII),
    "BG": re.compile(r"^BG\d{9,10}$", re.ASCII),
    "CY": re.compile(r"^CY\d{8}[A-Z]$", re.ASCII),
    "CZ": re.compile(r"^CZ\d{8,10}$", re.ASCII),
    "DE": re.compile(r"^DE\d{9}$", re.ASCII),
    "DK": re.compile(r"^DK\d{8}$", re.ASCII),
    "EE": re.compile(r"^EE\d{9}$", re.ASCII),
    "EL": re.compile(r"^EL\d{9}$", re.ASCII),
    "ES": re.compile(r"^ES[A-Z0-9]\d{7}[A-Z0-9]$", re.ASCII),
    "FI": re.compile(r"^FI\d{8}$", re.ASCII),
    "FR": re.compile(r"^FR[A-Z0-9]{2}\d{9}$", re.ASCII),
    "HR": re.compile(r"^HR\d{11}$", re.ASCII),
    "HU": re.compile(r"^HU\d{8}$", re.ASCII),
    "IE": re.compile(r"^IE[A-Z0-9]{8,9}$"),
    "IT": re.compile(r"^IT\d{11}$", re.ASCII),
    "LT": re.compile(r"^LT(\d{9}|\d{12})$", re.ASCII),
    "LU": re.compile(r"^LU\d{8}$", re.ASCII),
    "LV": re.compile(r"^LV\d{11}$", re.ASCII),
    "MT": re.compile(r"^MT\d{8}$", re.ASCII),
    "NL": re.compile(r"^NL\d{9}B\d{2}$", re.ASCII),
    "PL": re.compile(r"^PL\d{10}$", re.ASCII),
    "PT": re.compile(r"^PT\d{9}$", re.ASCII),
    "RO": re.compile(r"^RO\d{2,10}$", re.ASCII),
    "SE": re.compile(r"^SE\d{12}$", re.ASCII),
    "SI": re.compile(r"^SI\d{8}$", re.ASCII),
    "SK": re.compile(r"^SK\d{10}$", re.ASCII),
}


def clean_vat(value: str | None) -> str:
    """Supprime les séparateurs et passe en majuscules."""
    if not value:
        return ""
    return _NON_ALNUM_RE.sub("", value).upper()


def compute_french_vat_key(siren: str) -> str:
    """Calcule la clé numérique (2 chiffres) d'un numéro de TVA français."""
    return f"{(12 + 3 * (int(siren) % 97)) % 97:02d}"


def _legacy_key_valid(check_digits: str, siren: str) -> bool:
    first, second = check_digits
    if first not in _LEGACY_ALPHABET or second not in _LEGACY_ALPHABET:
        return False
    c0 = _LEGACY_ALPHABET.index(first)
    c1 = _LEGACY_ALPHABET.index(second)
    if first.isdigit():
        check = c0 * 24 + c1 - 10
    else:
        check = c0 * 34 + c1 - 100
    return (int(siren) + 1 + check // 11) % 11 == check % 11


def validate_french_vat(vat: str | None) -> FrenchVatValidationResult:
    """Valide un numéro de TVA intracommunautaire français.

    FR: Vérifie le format, puis le SIREN embarqué, puis la clé.
    EN: Checks the format, then the embedded SIREN, then the key.
    """
    raw = vat or ""
    if not raw.strip():
        return FrenchVatValidationResult(
            raw=raw,
            is_valid=False,
            error="Le numéro de TVA est obligatoire",
        )

    cleaned = clean_vat(raw)
    match = _FRENCH_VAT_RE.match(cleaned)
    if not match:
        return FrenchVatValidationResult(
            raw=raw,
            is_valid=False,
            formatted_vat=cleaned,
            country_code=cleaned[:2],
            error=(
                "Format de TVA français invalide. "
                "Attendu : FR + 2 caractères de clé + SIREN (9 chiffres)"
            ),
        )

    check_digits, siren = match.groups()
    scheme = (
        VatCheckScheme.NUMERIC if check_digits.isdigit() else VatCheckScheme.ALPHANUMERIC
    )

    siren_result = validate_siren(siren)
    if not siren_result.is_valid:
        return FrenchVatValidationResult(
            raw=raw,
            is_valid=False,
            formatted_vat=cleaned,
            country_code="FR",
            check_digits=check_digits,
            siren=siren,
            check_scheme=scheme,
            error=f"SIREN invalide dans le numéro de TVA : {siren_result.error}",
        )

    if scheme is VatCheckScheme.NUMERIC:
        checksum_valid = check_digits == compute_french_vat_key(siren)
    else:
        checksum_valid = _legacy_key_valid(check_digits, siren)
        logger.debug(
            "Clé de TVA alphanumérique %s pour le SIREN %s : %s",
            check_digits,
            siren,
            "valide" if checksum_valid else "invalide",
        )

    return FrenchVatValidationResult(
        raw=raw,
        is_valid=checksum_valid,
        formatted_vat=cleaned,
        country_code="FR",
        check_digits=check_digits,
        siren=siren,
        check_scheme=scheme,
        checksum_valid=checksum_valid,
        error=None if checksum_valid else "Clé de contrôle du numéro de TVA invalide",
    )


def validate_eu_vat_format(vat: str | None) -> bool:
    """Contrôle de format d'un numéro de TVA d'un État membre de l'UE.

    FR: Contrôle de format uniquement, aucune clé n'est vérifiée.
    EN: Format check only, no key is verified.
    """
    cleaned = clean_vat(vat)
    pattern = _EU_VAT_PATTERNS.get(cleaned[:2])
    return bool(pattern and pattern.match(cleaned))
