"""Calendrier de la réforme de la facturation électronique."""

from einvoice_fr.compliance.deadlines import (
    BusinessProfile,
    UrgencyLevel,
    days_until_deadline,
    is_large_company,
    is_subject_to_mandate,
    resolve_deadline,
    urgency_level,
)

__all__ = [
    "BusinessProfile",
    "UrgencyLevel",
    "days_until_deadline",
    "is_large_company",
    "is_subject_to_mandate",
    "resolve_deadline",
    "urgency_level",
]
