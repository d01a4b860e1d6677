"""Validation des coordonnées : code postal, téléphone, email.

FR: Contrôles purement structurels (aucune clé de contrôle).
    Code postal : métropole 01-95 (Corse 20xxx incluse) et outre-mer
    971 à 978. Les codes 96xxx, 970xx, 979xx et 98xxx (Monaco,
    collectivités du Pacifique) sont refusés.
    Téléphone : ``0`` + 9 chiffres, ou indicatif ``+33``/``0033``/``33``
    suivi des 9 chiffres (le ``0`` de tête optionnel après l'indicatif).
    Seuls les chiffres ASCII 0-9 sont acceptés.
EN: Purely structural checks (no checksum). Only ASCII digits 0-9 are
    accepted.
"""

import re

from einvoice_fr.models.identifiers import PhoneValidationResult, PostalCodeValidationResult

POSTAL_CODE_LENGTH = 5
PHONE_LENGTH = 10

_WHITESPACE_RE = re.compile(r"\s")
_FIVE_DIGITS_RE = re.compile(r"^[0-9]{5}$")
_POSTAL_CODE_RE = re.compile(r"^(?:(?:0[1-9]|[1-8][0-9]|9[0-5])[0-9]{3}|97[1-8][0-9]{2})$")
_PHONE_SEPARATORS_RE = re.compile(r"[\s.\-()/]")
_DOMESTIC_PHONE_RE = re.compile(r"^0[1-9][0-9]{8}$")
_DOMESTIC_DIGITS_RE = re.compile(r"^0[0-9]*$")
_INTERNATIONAL_PHONE_RE = re.compile(r"^(?:\+33|0033|33)0?([1-9][0-9]{8})$")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_french_postal_code(postal_code: str | None) -> PostalCodeValidationResult:
    """Valide un code postal français.

    FR: Les espaces sont ignorés. Rejette l'entrée vide, une longueur
        différente de 5 chiffres, puis les départements inexistants.
    EN: Spaces are ignored. Rejects empty input, a length other than
        5 digits, then non-existent departments.
    """
    raw = postal_code or ""
    if not raw.strip():
        return PostalCodeValidationResult(
            raw=raw,
            is_valid=False,
            error="Le code postal est obligatoire",
        )

    cleaned = _WHITESPACE_RE.sub("", raw)
    if not _FIVE_DIGITS_RE.match(cleaned):
        return PostalCodeValidationResult(
            raw=raw,
            is_valid=False,
            formatted_postal_code=cleaned,
            error="Le code postal doit comporter exactement 5 chiffres",
        )

    if not _POSTAL_CODE_RE.match(cleaned):
        return PostalCodeValidationResult(
            raw=raw,
            is_valid=False,
            formatted_postal_code=cleaned,
            error="Format de code postal français invalide",
        )

    return PostalCodeValidationResult(
        raw=raw,
        is_valid=True,
        formatted_postal_code=cleaned,
    )


def normalize_french_phone(phone: str | None) -> str | None:
    """Retourne le numéro au format national (10 chiffres) ou ``None``."""
    if not phone:
        return None
    cleaned = _PHONE_SEPARATORS_RE.sub("", phone)
    if _DOMESTIC_PHONE_RE.match(cleaned):
        return cleaned
    match = _INTERNATIONAL_PHONE_RE.match(cleaned)
    if match:
        return f"0{match.group(1)}"
    return None


def validate_french_phone(phone: str | None) -> PhoneValidationResult:
    """Valide un numéro de téléphone français.

    FR: Un numéro national (commençant par un seul ``0``) de mauvaise
        longueur reçoit une erreur dédiée ; tout autre numéro non reconnu
        reçoit l'erreur de format.
    EN: A national number (starting with a single ``0``) of the wrong
        length gets a dedicated error; any other unrecognised number gets
        the format error.
    """
    raw = phone or ""
    if not raw.strip():
        return PhoneValidationResult(
            raw=raw,
            is_valid=False,
            error="Le numéro de téléphone est obligatoire",
        )

    normalized = normalize_french_phone(raw)
    if normalized is not None:
        return PhoneValidationResult(raw=raw, is_valid=True, normalized_phone=normalized)

    cleaned = _PHONE_SEPARATORS_RE.sub("", raw)
    if (
        _DOMESTIC_DIGITS_RE.match(cleaned)
        and not cleaned.startswith("00")
        and len(cleaned) != PHONE_LENGTH
    ):
        error = "Le numéro de téléphone doit comporter 10 chiffres"
    else:
        error = "Le format du numéro de téléphone ne semble pas valide pour la France"
    return PhoneValidationResult(raw=raw, is_valid=False, error=error)


def validate_email(email: str | None) -> bool:
    if not email:
        return False
    return bool(_EMAIL_RE.match(email.strip()))
