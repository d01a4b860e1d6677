"""Interfaces abstraites des services de recherche externes.

FR: Le moteur de validation ne résout jamais un code postal ni un SIREN :
    ces recherches sont confiées à des services externes (API La Poste,
    répertoire SIRENE) derrière ces ports asynchrones.
EN: The validation engine never resolves a postal code or a SIREN: those
    lookups are delegated to external services behind these async ports.
"""

from abc import ABCMeta, abstractmethod

from einvoice_fr.lookup.models import CompanyRegistryEntry


class BasePostalCodeDirectory(metaclass=ABCMeta):
    """Annuaire des codes postaux (code postal → communes)."""

    @abstractmethod
    async def find_cities(self, postal_code: str) -> list[str]:
        """Retourne les communes desservies par un code postal.

        Args:
            postal_code: Code postal français (5 chiffres).

        Returns:
            Noms des communes, éventuellement vide.

        Raises:
            LookupConnectionError: Si le service est injoignable.
        """
        ...


class BaseCompanyRegistry(metaclass=ABCMeta):
    """Répertoire national des entreprises (SIREN → unité légale).

    FR: Les connecteurs concrets (API SIRENE, cache local...) héritent de
        cette classe.
    EN: Concrete connectors (SIRENE API, local cache...) inherit from this
        class.
    """

    @abstractmethod
    async def get_company(self, siren: str) -> CompanyRegistryEntry:
        """Recherche une entreprise par son SIREN.

        Raises:
            LookupNotFoundError: SIREN invalide ou absent du répertoire.
            LookupConnectionError: Si le service est injoignable.
        """
        ...
