"""Échéances de la réforme de la facturation électronique.

FR: Associe un profil d'entreprise (taille, secteur, chiffre d'affaires)
    à la date à laquelle l'obligation de facturation électronique
    s'applique. Les dates et seuils viennent de ``EInvoicingSettings``.
    Règles évaluées dans l'ordre, la première qui s'applique l'emporte :
    1. pas de SIREN : non concerné (``None``) ;
    2. secteur public : date historique (déjà en vigueur) ;
    3. effectif > seuil ou chiffre d'affaires > seuil : grandes entreprises ;
    4. sinon : PME et micro-entreprises.
EN: Maps a company profile (size, sector, revenue) to the date the
    e-invoicing mandate applies. Dates and thresholds come from
    ``EInvoicingSettings``. Rules are evaluated in order, first match wins.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, Field

from einvoice_fr.config import EInvoicingSettings, resolve_settings


class BusinessProfile(BaseModel):
    """Profil d'entreprise utilisé pour déterminer l'échéance."""

    siren: str | None = Field(default=None, description="Numéro SIREN")
    employee_count: int | None = Field(
        default=None,
        ge=0,
        description="Effectif salarié / Employee count",
    )
    annual_revenue: Decimal | None = Field(
        default=None,
        ge=0,
        description="Chiffre d'affaires annuel en euros / Annual revenue (EUR)",
    )
    is_public_sector: bool = Field(
        default=False,
        description="Entité du secteur public / Public sector entity",
    )


class UrgencyLevel(StrEnum):
    """Niveau d'urgence selon le nombre de jours restants."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def is_large_company(
    profile: BusinessProfile,
    *,
    settings: EInvoicingSettings | None = None,
) -> bool:
    """Vrai si l'effectif ou le chiffre d'affaires dépasse le seuil."""
    resolved = resolve_settings(settings)
    if (
        profile.employee_count is not None
        and profile.employee_count > resolved.large_company_employee_threshold
    ):
        return True
    return (
        profile.annual_revenue is not None
        and profile.annual_revenue > resolved.large_company_revenue_threshold
    )


def is_subject_to_mandate(profile: BusinessProfile) -> bool:
    """Vrai si l'entité est concernée (elle dispose d'un SIREN)."""
    return bool(profile.siren and profile.siren.strip())


def resolve_deadline(
    profile: BusinessProfile,
    *,
    settings: EInvoicingSettings | None = None,
) -> date | None:
    """Date d'entrée en vigueur de l'obligation pour ce profil.

    Returns:
        La date applicable, ou ``None`` si l'entité n'est pas concernée.
    """
    if not is_subject_to_mandate(profile):
        return None
    resolved = resolve_settings(settings)
    if profile.is_public_sector:
        return resolved.public_sector_deadline
    if is_large_company(profile, settings=resolved):
        return resolved.large_company_deadline
    return resolved.sme_deadline


def days_until_deadline(
    profile: BusinessProfile,
    today: date | None = None,
    *,
    settings: EInvoicingSettings | None = None,
) -> int | None:
    """Nombre de jours restants avant l'échéance (0 si elle est passée)."""
    deadline = resolve_deadline(profile, settings=settings)
    if deadline is None:
        return None
    return max((deadline - (today or date.today())).days, 0)


def urgency_level(days_left: int) -> UrgencyLevel:
    """Moins d'un an : élevée ; moins de 500 jours : moyenne ; sinon faible."""
    if days_left < 365:
        return UrgencyLevel.HIGH
    if days_left < 500:
        return UrgencyLevel.MEDIUM
    return UrgencyLevel.LOW
