"""Connecteurs de recherche en mémoire pour les tests et le développement.

FR: Aucune donnée n'est embarquée : l'appelant alimente les connecteurs
    avec ``add_postal_code`` et ``add_company``.
EN: No data is bundled: the caller seeds the connectors with
    ``add_postal_code`` and ``add_company``.
"""

from __future__ import annotations

from einvoice_fr.lookup.base import BaseCompanyRegistry, BasePostalCodeDirectory
from einvoice_fr.lookup.errors import LookupNotFoundError
from einvoice_fr.lookup.models import CompanyRegistryEntry
from einvoice_fr.validators.contact import validate_french_postal_code
from einvoice_fr.validators.siren import clean_digits, validate_siren


class MemoryPostalCodeDirectory(BasePostalCodeDirectory):
    """Annuaire des codes postaux en mémoire."""

    def __init__(self, entries: dict[str, list[str]] | None = None) -> None:
        self._cities: dict[str, list[str]] = {}
        for postal_code, cities in (entries or {}).items():
            self.add_postal_code(postal_code, cities)

    def add_postal_code(self, postal_code: str, cities: list[str]) -> None:
        """Associe des communes à un code postal."""
        self._cities.setdefault(clean_digits(postal_code), []).extend(cities)

    async def find_cities(self, postal_code: str) -> list[str]:
        """Communes du code postal ; liste vide si le code est inconnu ou invalide."""
        if not validate_french_postal_code(postal_code).is_valid:
            return []
        return list(self._cities.get(clean_digits(postal_code), []))


class MemoryCompanyRegistry(BaseCompanyRegistry):
    """Répertoire des entreprises en mémoire."""

    def __init__(self, entries: list[CompanyRegistryEntry] | None = None) -> None:
        self._companies: dict[str, CompanyRegistryEntry] = {}
        for entry in entries or []:
            self.add_company(entry)

    def add_company(self, entry: CompanyRegistryEntry) -> None:
        """Ajoute une entreprise au répertoire simulé."""
        self._companies[clean_digits(entry.siren)] = entry

    async def get_company(self, siren: str) -> CompanyRegistryEntry:
        result = validate_siren(siren)
        if not result.is_valid:
            msg = f"SIREN invalide : {siren} ({result.error})"
            raise LookupNotFoundError(msg)
        entry = self._companies.get(result.formatted_siren)
        if entry is None:
            msg = f"SIREN introuvable dans le répertoire : {result.formatted_siren}"
            raise LookupNotFoundError(msg)
        return entry
