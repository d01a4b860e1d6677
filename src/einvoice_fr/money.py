"""Montants en centimes : conversion, TVA et formatage localisé.

FR: Les montants sont manipulés en entiers (centimes) pour éviter les
    erreurs d'arrondi. Le formatage prend une locale explicite au lieu de
    dépendre de la locale du processus.
EN: Amounts are handled as integers (minor units) to avoid rounding
    errors. Formatting takes an explicit locale instead of relying on the
    process locale.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import NamedTuple

from einvoice_fr.config import EInvoicingSettings, resolve_settings

_CENT = Decimal("0.01")


class LocaleConventions(NamedTuple):
    """Conventions d'écriture des nombres et dates pour une locale."""

    decimal_separator: str
    group_separator: str
    symbol_first: bool
    symbol_separator: str
    date_format: str
    datetime_format: str


LOCALES: dict[str, LocaleConventions] = {
    # Espace fine insécable pour les milliers, espace insécable avant le symbole
    "fr_FR": LocaleConventions(",", "\u202f", False, "\u00a0", "%d/%m/%Y", "%d/%m/%Y %H:%M"),
    "de_DE": LocaleConventions(",", ".", False, "\u00a0", "%d.%m.%Y", "%d.%m.%Y, %H:%M"),
    "en_GB": LocaleConventions(".", ",", True, "", "%d/%m/%Y", "%d/%m/%Y, %H:%M"),
    "en_US": LocaleConventions(".", ",", True, "", "%m/%d/%Y", "%m/%d/%Y, %I:%M %p"),
}

CURRENCY_SYMBOLS: dict[str, str] = {
    "EUR": "€",
    "USD": "$",
    "GBP": "£",
    "CHF": "CHF",
}


def _conventions(locale: str) -> LocaleConventions:
    conventions = LOCALES.get(locale.replace("-", "_"))
    if conventions is None:
        msg = (
            f"Locale non supportée : {locale!r}. "
            f"Locales disponibles : {', '.join(sorted(LOCALES))}"
        )
        raise ValueError(msg)
    return conventions


# --- Conversion ---


def round_cents(value: Decimal) -> int:
    """Arrondit un montant exprimé en centimes à l'entier le plus proche.

    FR: Arrondi commercial (demi vers le haut, en valeur absolue).
    EN: Commercial rounding (half away from zero).
    """
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_cents(amount: Decimal | int | str) -> int:
    """Convertit un montant en unités (ex. ``"12.34"``) en centimes."""
    return int(
        (Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    )


def from_cents(cents: int) -> Decimal:
    """Convertit des centimes en montant décimal à deux décimales."""
    return (Decimal(cents) / 100).quantize(_CENT)


# --- TVA ---


def compute_vat_cents(
    net_cents: int,
    rate: Decimal | None = None,
    *,
    settings: EInvoicingSettings | None = None,
) -> int:
    """Montant de TVA (centimes) pour un montant HT.

    Args:
        net_cents: Montant HT en centimes.
        rate: Taux (fraction). Par défaut, ``default_vat_rate`` des paramètres.
        settings: Paramètres explicites.
    """
    if rate is None:
        rate = resolve_settings(settings).default_vat_rate
    return round_cents(Decimal(net_cents) * rate)


def gross_from_net_cents(
    net_cents: int,
    rate: Decimal | None = None,
    *,
    settings: EInvoicingSettings | None = None,
) -> int:
    """Montant TTC (centimes) pour un montant HT."""
    return net_cents + compute_vat_cents(net_cents, rate, settings=settings)


# --- Formatage ---


def _group(integer_part: str, separator: str) -> str:
    groups = []
    while len(integer_part) > 3:
        groups.insert(0, integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.insert(0, integer_part)
    return separator.join(groups)


def format_number(value: Decimal | int, locale: str = "fr_FR", decimals: int = 2) -> str:
    """Formate un nombre selon la locale (séparateurs de milliers et décimal)."""
    conventions = _conventions(locale)
    quantum = Decimal(1).scaleb(-decimals)
    text = f"{abs(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)):f}"
    integer_part, _, fraction = text.partition(".")
    formatted = _group(integer_part, conventions.group_separator)
    if decimals:
        formatted = f"{formatted}{conventions.decimal_separator}{fraction}"
    return f"-{formatted}" if Decimal(value) < 0 else formatted


def format_amount(
    cents: int,
    currency: str | None = None,
    locale: str | None = None,
    *,
    settings: EInvoicingSettings | None = None,
) -> str:
    """Formate un montant en centimes avec sa devise.

    Exemple : ``format_amount(123456, "EUR", "fr_FR")`` → ``"1 234,56 €"``
    (espace fine insécable pour les milliers).
    """
    resolved = resolve_settings(settings)
    currency = currency or resolved.default_currency
    conventions = _conventions(locale or resolved.default_locale)
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), currency.upper())
    number = format_number(abs(from_cents(cents)), locale or resolved.default_locale)
    sign = "-" if cents < 0 else ""
    if conventions.symbol_first:
        return f"{sign}{symbol}{conventions.symbol_separator}{number}"
    return f"{sign}{number}{conventions.symbol_separator}{symbol}"


def parse_amount(text: str, locale: str = "fr_FR") -> int:
    """Analyse un montant saisi (ex. ``"1 234,56 €"``) et retourne des centimes.

    Raises:
        ValueError: Si le texte ne contient pas de montant exploitable.
    """
    conventions = _conventions(locale)
    cleaned = re.sub(r"[^0-9,.\-]", "", text)
    cleaned = cleaned.replace(conventions.group_separator, "")
    if conventions.decimal_separator == ",":
        cleaned = cleaned.replace(".", "").replace(",", ".")
    else:
        cleaned = cleaned.replace(",", "")
    try:
        return to_cents(Decimal(cleaned))
    except InvalidOperation as exc:
        msg = f"Montant illisible : {text!r}"
        raise ValueError(msg) from exc


def format_date(value: date, locale: str = "fr_FR") -> str:
    """Formate une date selon la locale (``15/09/2026`` en français)."""
    return value.strftime(_conventions(locale).date_format)


def format_datetime(value: datetime, locale: str = "fr_FR") -> str:
    """Formate un horodatage selon la locale (``15/09/2026 14:30`` en français)."""
    return value.strftime(_conventions(locale).datetime_format)
