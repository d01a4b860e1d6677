"""Mise en forme lisible des identifiants français.

FR: Fonctions pures : les caractères de séparation sont retirés puis, si la
    longueur correspond à la longueur canonique, les groupes sont séparés
    par des espaces. Sinon l'entrée est retournée telle quelle : la mise en
    forme ne lève jamais d'exception et ne complète jamais une valeur.
EN: Pure functions: separator characters are stripped then, when the length
    matches the canonical length, groups are separated by spaces. Otherwise
    the input is returned unchanged: formatting never raises and never pads.
"""

import re

from einvoice_fr.validators.contact import normalize_french_phone
from einvoice_fr.validators.iban import IBAN_FORMAT_RE, clean_iban
from einvoice_fr.validators.siren import SIREN_LENGTH, SIRET_LENGTH, clean_digits
from einvoice_fr.validators.vat import clean_vat

_FRENCH_VAT_RE = re.compile(r"^(FR)([0-9A-Z]{2})(\d{9})$", re.ASCII)


def _group(value: str, sizes: tuple[int, ...]) -> str:
    groups = []
    start = 0
    for size in sizes:
        groups.append(value[start : start + size])
        start += size
    return " ".join(groups)


def format_siren(siren: str | None) -> str:
    """``732829320`` → ``732 829 320``."""
    if not siren:
        return siren or ""
    cleaned = clean_digits(siren)
    if len(cleaned) != SIREN_LENGTH:
        return siren
    return _group(cleaned, (3, 3, 3))


def format_siret(siret: str | None) -> str:
    """``73282932000074`` → ``732 829 320 00074``."""
    if not siret:
        return siret or ""
    cleaned = clean_digits(siret)
    if len(cleaned) != SIRET_LENGTH:
        return siret
    return _group(cleaned, (3, 3, 3, 5))


def format_french_vat(vat: str | None) -> str:
    """``FR44732829320`` → ``FR 44 732 829 320``.

    FR: Les clés alphanumériques historiques sont conservées telles quelles.
    EN: Legacy alphanumeric keys are kept as is.
    """
    if not vat:
        return vat or ""
    match = _FRENCH_VAT_RE.match(clean_vat(vat))
    if match is None:
        return vat
    country, key, siren = match.groups()
    return f"{country} {key} {_group(siren, (3, 3, 3))}"


def format_french_phone(phone: str | None) -> str:
    """``+33123456789`` → ``01 23 45 67 89``."""
    if not phone:
        return phone or ""
    national = normalize_french_phone(phone)
    if national is None:
        return phone
    return _group(national, (2, 2, 2, 2, 2))


def format_iban(iban: str | None) -> str:
    """Groupes de 4 caractères : ``FR14 2004 1010 0505 0001 3M02 606``."""
    if not iban:
        return iban or ""
    cleaned = clean_iban(iban)
    if not IBAN_FORMAT_RE.fullmatch(cleaned):
        return iban
    return " ".join(cleaned[i : i + 4] for i in range(0, len(cleaned), 4))


def format_postal_code(postal_code: str | None) -> str:
    """Supprime les espaces d'un code postal à 5 chiffres (``75 001`` → ``75001``)."""
    if not postal_code:
        return postal_code or ""
    cleaned = clean_digits(postal_code)
    if len(cleaned) != 5:
        return postal_code
    return cleaned


def format_french_address(address: str, postal_code: str, city: str) -> str:
    """Adresse sur une ligne : ``12 rue X, 75001 Paris, France``."""
    parts = [address.strip(), f"{format_postal_code(postal_code)} {city.strip()}".strip()]
    return ", ".join([part for part in parts if part] + ["France"])
