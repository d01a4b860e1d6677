"""Validation des numéros SIREN et SIRET.

FR: SIREN = 9 chiffres identifiant l'entreprise, SIRET = SIREN + NIC
    (5 chiffres) identifiant l'établissement. Les deux utilisent la clé
    de Luhn standard sur l'ensemble des chiffres.
EN: SIREN = 9 digits identifying the company, SIRET = SIREN + NIC
    (5 digits) identifying the establishment. Both use the standard Luhn
    key over all digits.
"""

import re

from einvoice_fr.checksums import luhn_is_valid
from einvoice_fr.models.identifiers import SirenValidationResult, SiretValidationResult

SIREN_LENGTH = 9
SIRET_LENGTH = 14

_NON_DIGIT_RE = re.compile(r"\D", re.ASCII)
_REPEATED_DIGIT_RE = re.compile(r"^(\d)\1+$", re.ASCII)
_SIREN_RE = re.compile(r"^[0-9]{9}$")
_SIRET_RE = re.compile(r"^[0-9]{14}$")


def clean_digits(value: str | None) -> str:
    """Supprime tout caractère non numérique."""
    if not value:
        return ""
    return _NON_DIGIT_RE.sub("", value)


def validate_siren_checksum(siren: str) -> bool:
    """Contrôle de Luhn seul sur un SIREN nettoyé de 9 chiffres."""
    return bool(_SIREN_RE.fullmatch(siren)) and luhn_is_valid(siren)


def validate_siret_checksum(siret: str) -> bool:
    """Contrôle de Luhn seul sur un SIRET nettoyé de 14 chiffres."""
    return bool(_SIRET_RE.fullmatch(siret)) and luhn_is_valid(siret)


def validate_siren(siren: str | None) -> SirenValidationResult:
    """Valide un numéro SIREN.

    FR: Rejette l'entrée vide, une longueur différente de 9 chiffres,
        les suites de chiffres identiques (``000000000`` passe Luhn) puis
        applique la clé de Luhn.
    EN: Rejects empty input, a length other than 9 digits, repeated-digit
        sequences (``000000000`` passes Luhn), then applies the Luhn key.
    """
    raw = siren or ""
    if not raw.strip():
        return SirenValidationResult(
            raw=raw,
            is_valid=False,
            error="Le numéro SIREN est obligatoire",
        )

    cleaned = clean_digits(raw)
    if len(cleaned) != SIREN_LENGTH:
        return SirenValidationResult(
            raw=raw,
            is_valid=False,
            formatted_siren=cleaned,
            error="Le SIREN doit comporter exactement 9 chiffres",
        )

    if _REPEATED_DIGIT_RE.match(cleaned):
        return SirenValidationResult(
            raw=raw,
            is_valid=False,
            formatted_siren=cleaned,
            error="Le SIREN ne peut pas être composé d'un seul chiffre répété",
        )

    checksum_valid = validate_siren_checksum(cleaned)
    return SirenValidationResult(
        raw=raw,
        is_valid=checksum_valid,
        formatted_siren=cleaned,
        checksum_valid=checksum_valid,
        error=None if checksum_valid else "Clé de contrôle du SIREN invalide",
    )


def validate_siret(siret: str | None) -> SiretValidationResult:
    """Valide un numéro SIRET.

    FR: Le SIREN embarqué est validé d'abord (son erreur est propagée avec
        un préfixe), puis la clé de Luhn est vérifiée sur les 14 chiffres.
    EN: The embedded SIREN is validated first (its error is propagated with
        a prefix), then the Luhn key is checked over all 14 digits.
    """
    raw = siret or ""
    if not raw.strip():
        return SiretValidationResult(
            raw=raw,
            is_valid=False,
            error="Le numéro SIRET est obligatoire",
        )

    cleaned = clean_digits(raw)
    siren = cleaned[:SIREN_LENGTH]
    establishment = cleaned[SIREN_LENGTH:]
    if len(cleaned) != SIRET_LENGTH:
        return SiretValidationResult(
            raw=raw,
            is_valid=False,
            formatted_siret=cleaned,
            siren=siren,
            establishment_number=establishment,
            error="Le SIRET doit comporter exactement 14 chiffres",
        )

    siren_result = validate_siren(siren)
    if not siren_result.is_valid:
        return SiretValidationResult(
            raw=raw,
            is_valid=False,
            formatted_siret=cleaned,
            siren=siren,
            establishment_number=establishment,
            error=f"SIREN invalide dans le SIRET : {siren_result.error}",
        )

    checksum_valid = validate_siret_checksum(cleaned)
    return SiretValidationResult(
        raw=raw,
        is_valid=checksum_valid,
        formatted_siret=cleaned,
        siren=siren,
        establishment_number=establishment,
        checksum_valid=checksum_valid,
        error=None if checksum_valid else "Clé de contrôle du SIRET invalide",
    )
