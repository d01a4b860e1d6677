"""Fixtures partagées pour les tests des services de recherche."""

import pytest

from einvoice_fr.lookup.connectors.memory import (
    MemoryCompanyRegistry,
    MemoryPostalCodeDirectory,
)
from einvoice_fr.lookup.models import CompanyRegistryEntry


@pytest.fixture
def directory() -> MemoryPostalCodeDirectory:
    return MemoryPostalCodeDirectory({"75001": ["Paris"], "20000": ["Ajaccio"]})


@pytest.fixture
def registry_entry() -> CompanyRegistryEntry:
    return CompanyRegistryEntry(
        siren="732829320",
        company_name="Acme SAS",
        legal_form="SAS",
        activity_code="62.01Z",
        head_office_siret="73282932000074",
        postal_code="75002",
        city="Paris",
    )


@pytest.fixture
def registry(registry_entry: CompanyRegistryEntry) -> MemoryCompanyRegistry:
    return MemoryCompanyRegistry([registry_entry])
