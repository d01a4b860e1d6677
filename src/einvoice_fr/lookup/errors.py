"""Hiérarchie d'exceptions des services de recherche externes.

FR: Erreurs levées par les ports de recherche (annuaire des codes
    postaux, répertoire des entreprises). Les validateurs, eux, ne lèvent
    jamais d'exception.
EN: Errors raised by the lookup ports (postal-code directory, company
    registry). Validators never raise.
"""

from einvoice_fr.errors import EInvoiceError


class LookupServiceError(EInvoiceError):
    """Erreur de base pour tous les services de recherche.

    FR: Classe parente des exceptions des ports de recherche.
    EN: Base class for lookup port exceptions.
    """


class LookupNotFoundError(LookupServiceError):
    """Ressource introuvable.

    FR: SIREN absent du répertoire ou code postal inconnu.
    EN: SIREN missing from the registry or unknown postal code.
    """


class LookupConnectionError(LookupServiceError):
    """Erreur de connexion vers le service distant.

    FR: Timeout, DNS, TLS ou autre erreur de transport.
    EN: Timeout, DNS, TLS or other transport error.
    """
