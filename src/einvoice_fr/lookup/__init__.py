"""Ports vers les services de recherche externes.

FR: Annuaire des codes postaux et répertoire des entreprises, consommés
    mais non implémentés par le moteur de validation.
EN: Postal-code directory and company registry, consumed but not
    implemented by the validation engine.
"""

from einvoice_fr.lookup.base import BaseCompanyRegistry, BasePostalCodeDirectory
from einvoice_fr.lookup.connectors import MemoryCompanyRegistry, MemoryPostalCodeDirectory
from einvoice_fr.lookup.errors import (
    LookupConnectionError,
    LookupNotFoundError,
    LookupServiceError,
)
from einvoice_fr.lookup.models import CompanyRegistryEntry

__all__ = [
    "BaseCompanyRegistry",
    "BasePostalCodeDirectory",
    "CompanyRegistryEntry",
    "LookupConnectionError",
    "LookupNotFoundError",
    "LookupServiceError",
    "MemoryCompanyRegistry",
    "MemoryPostalCodeDirectory",
]
