"""Tests des connecteurs de recherche en mémoire."""

import pytest

from einvoice_fr.lookup.base import BaseCompanyRegistry, BasePostalCodeDirectory
from einvoice_fr.lookup.connectors.memory import (
    MemoryCompanyRegistry,
    MemoryPostalCodeDirectory,
)
from einvoice_fr.lookup.errors import LookupNotFoundError


class TestMemoryPostalCodeDirectory:
    async def test_known_code(self, directory: MemoryPostalCodeDirectory) -> None:
        assert await directory.find_cities("75001") == ["Paris"]

    async def test_spaces_ignored(self, directory: MemoryPostalCodeDirectory) -> None:
        assert await directory.find_cities("20 000") == ["Ajaccio"]

    async def test_unknown_code(self, directory: MemoryPostalCodeDirectory) -> None:
        assert await directory.find_cities("69001") == []

    async def test_non_ascii_digits(self, directory: MemoryPostalCodeDirectory) -> None:
        assert await directory.find_cities("75٠٠١") == []

    async def test_invalid_code(self, directory: MemoryPostalCodeDirectory) -> None:
        directory.add_postal_code("98000", ["Monaco"])
        assert await directory.find_cities("98000") == []

    async def test_add_postal_code(self, directory: MemoryPostalCodeDirectory) -> None:
        directory.add_postal_code("75001", ["Paris 1er"])
        assert await directory.find_cities("75001") == ["Paris", "Paris 1er"]

    def test_is_a_directory(self, directory: MemoryPostalCodeDirectory) -> None:
        assert isinstance(directory, BasePostalCodeDirectory)


class TestMemoryCompanyRegistry:
    async def test_get_company(self, registry: MemoryCompanyRegistry, registry_entry) -> None:
        assert await registry.get_company("732 829 320") == registry_entry

    async def test_unknown_siren(self, registry: MemoryCompanyRegistry) -> None:
        with pytest.raises(LookupNotFoundError, match="introuvable"):
            await registry.get_company("552100554")

    async def test_invalid_siren(self, registry: MemoryCompanyRegistry) -> None:
        with pytest.raises(LookupNotFoundError, match="SIREN invalide"):
            await registry.get_company("123456789")

    def test_empty_registry(self) -> None:
        assert isinstance(MemoryCompanyRegistry(), BaseCompanyRegistry)

    def test_ports_are_abstract(self) -> None:
        with pytest.raises(TypeError):
            BaseCompanyRegistry()
        with pytest.raises(TypeError):
            BasePostalCodeDirectory()
