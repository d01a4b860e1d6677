"""Configuration de la facturation électronique via settings Django.

FR: Helper pour accéder aux paramètres EINVOICE_FR définis dans settings.py.
    Fournit des valeurs par défaut et construit les ``EInvoicingSettings``
    correspondants.
EN: Helper for accessing EINVOICE_FR settings defined in settings.py.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from django.conf import settings
from pydantic import ValidationError

from einvoice_fr.config import EInvoicingSettings
from einvoice_fr.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULTS: dict[str, object] = {
    "PUBLIC_SECTOR_DEADLINE": date(2017, 1, 1),
    "LARGE_COMPANY_DEADLINE": date(2026, 9, 1),
    "SME_DEADLINE": date(2027, 9, 1),
    "LARGE_COMPANY_EMPLOYEE_THRESHOLD": 250,
    "LARGE_COMPANY_REVENUE_THRESHOLD": Decimal("50000000"),
    "DEFAULT_VAT_RATE": Decimal("0.20"),
    "DEFAULT_CURRENCY": "EUR",
    "DEFAULT_LOCALE": "fr_FR",
}


def get_setting(name: str) -> object:
    """Retourne la valeur d'un paramètre EINVOICE_FR.

    FR: Cherche dans settings.EINVOICE_FR[name], puis dans les défauts.
    EN: Looks up settings.EINVOICE_FR[name], then falls back to defaults.
    """
    if name not in DEFAULTS:
        msg = f"Paramètre EINVOICE_FR inconnu : {name}"
        raise KeyError(msg)
    user_settings = getattr(settings, "EINVOICE_FR", {})
    return user_settings.get(name, DEFAULTS[name])


def get_einvoicing_settings() -> EInvoicingSettings:
    """Construit les paramètres du moteur à partir des settings Django.

    Raises:
        ConfigurationError: Si une valeur de EINVOICE_FR est invalide.
    """
    values = {name.lower(): get_setting(name) for name in DEFAULTS}
    try:
        return EInvoicingSettings(**values)
    except ValidationError as exc:
        logger.warning("Configuration EINVOICE_FR invalide : %s", exc)
        msg = f"Configuration EINVOICE_FR invalide : {exc}"
        raise ConfigurationError(msg) from exc
