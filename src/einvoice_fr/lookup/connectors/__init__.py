"""Connecteurs concrets des services de recherche."""

from einvoice_fr.lookup.connectors.memory import (
    MemoryCompanyRegistry,
    MemoryPostalCodeDirectory,
)

__all__ = ["MemoryCompanyRegistry", "MemoryPostalCodeDirectory"]
