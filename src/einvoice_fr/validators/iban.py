"""Validation des IBAN français.

FR: IBAN FR = ``FR`` + 2 chiffres de contrôle + code banque (5) +
    code guichet (5) + numéro de compte (11) + clé RIB (2), soit
    27 caractères. La clé IBAN est vérifiée par modulo 97 (reste = 1).
EN: French IBAN = ``FR`` + 2 check digits + bank code (5) + branch code (5)
    + account number (11) + RIB key (2), i.e. 27 characters. The IBAN key
    is verified with modulo 97 (remainder = 1).
"""

import re

from einvoice_fr.checksums import iban_numeral, mod97
from einvoice_fr.models.identifiers import IbanValidationResult

FRENCH_IBAN_LENGTH = 27

_NON_ALNUM_RE = re.compile(r"[^0-9A-Za-z]")
_FRENCH_IBAN_RE = re.compile(r"^FR\d{2}\d{10}[0-9A-Z]{11}\d{2}$", re.ASCII)
IBAN_FORMAT_RE = re.compile(r"^[A-Z]{2}[0-9]{2}[0-9A-Z]{11,30}$")


def clean_iban(value: str | None) -> str:
    if not value:
        return ""
    return _NON_ALNUM_RE.sub("", value).upper()


def validate_french_iban(iban: str | None) -> IbanValidationResult:
    """Valide un IBAN français (format + clé modulo 97)."""
    raw = iban or ""
    if not raw.strip():
        return IbanValidationResult(
            raw=raw,
            is_valid=False,
            error="L'IBAN est obligatoire",
        )

    cleaned = clean_iban(raw)
    if not cleaned.startswith("FR"):
        return IbanValidationResult(
            raw=raw,
            is_valid=False,
            formatted_iban=cleaned,
            error="L'IBAN doit commencer par FR",
        )
    if len(cleaned) != FRENCH_IBAN_LENGTH:
        return IbanValidationResult(
            raw=raw,
            is_valid=False,
            formatted_iban=cleaned,
            error="L'IBAN français doit comporter exactement 27 caractères",
        )
    if not _FRENCH_IBAN_RE.match(cleaned):
        return IbanValidationResult(
            raw=raw,
            is_valid=False,
            formatted_iban=cleaned,
            error="Structure de l'IBAN français invalide",
        )

    checksum_valid = mod97(iban_numeral(cleaned)) == 1
    return IbanValidationResult(
        raw=raw,
        is_valid=checksum_valid,
        formatted_iban=cleaned,
        bank_code=cleaned[4:9],
        branch_code=cleaned[9:14],
        account_number=cleaned[14:25],
        rib_key=cleaned[25:27],
        checksum_valid=checksum_valid,
        error=None if checksum_valid else "Clé de contrôle de l'IBAN invalide",
    )
