"""Configuration injectable du moteur de validation.

FR: Dates d'échéance de la réforme, seuils « grande entreprise », taux de
    TVA par défaut et préférences de formatage. Les valeurs peuvent être
    surchargées par variables d'environnement (préfixe ``EINVOICE_FR_``)
    ou passées explicitement (argument ``settings=``) à chaque opération.
EN: Reform deadlines, large-company thresholds, default VAT rate and
    formatting preferences. Values can be overridden through environment
    variables (``EINVOICE_FR_`` prefix) or passed explicitly (``settings=``
    argument) to each operation.
"""

from datetime import date
from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EInvoicingSettings(BaseSettings):
    """Paramètres de la facturation électronique.

    FR: Toutes les constantes métier susceptibles d'évoluer sans
        modification de code.
    EN: All business constants that may change without a code change.
    """

    model_config = SettingsConfigDict(
        env_prefix="EINVOICE_FR_",
        case_sensitive=False,
        frozen=True,
    )

    # --- Échéances de la réforme ---
    public_sector_deadline: date = Field(
        default=date(2017, 1, 1),
        description="Secteur public (déjà en vigueur) / Public sector deadline",
    )
    large_company_deadline: date = Field(
        default=date(2026, 9, 1),
        description="Grandes entreprises et ETI / Large companies deadline",
    )
    sme_deadline: date = Field(
        default=date(2027, 9, 1),
        description="PME et micro-entreprises / SME deadline",
    )

    # --- Seuils grande entreprise ---
    large_company_employee_threshold: int = Field(
        default=250,
        ge=0,
        description="Effectif au-delà duquel l'entreprise est « grande » / Employee threshold",
    )
    large_company_revenue_threshold: Decimal = Field(
        default=Decimal("50000000"),
        ge=0,
        description="Chiffre d'affaires (EUR) au-delà duquel l'entreprise est « grande »",
    )

    # --- Montants et formatage ---
    default_vat_rate: Decimal = Field(
        default=Decimal("0.20"),
        ge=0,
        le=1,
        description="Taux de TVA par défaut (fraction) / Default VAT rate (fraction)",
    )
    default_currency: str = Field(
        default="EUR",
        min_length=3,
        max_length=3,
        description="Devise par défaut ISO 4217 / Default currency",
    )
    default_locale: str = Field(
        default="fr_FR",
        description="Locale de formatage par défaut / Default formatting locale",
    )


@lru_cache
def get_settings() -> EInvoicingSettings:
    """Retourne les paramètres chargés depuis l'environnement (mis en cache)."""
    return EInvoicingSettings()


def resolve_settings(settings: EInvoicingSettings | None) -> EInvoicingSettings:
    """Paramètres explicites s'ils sont fournis, sinon ceux par défaut."""
    return settings if settings is not None else get_settings()
