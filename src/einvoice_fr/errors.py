"""Hiérarchie d'exceptions du moteur de facturation.

FR: Les validations ne lèvent jamais d'exception (elles retournent un
    ``ValidationResult``). Ces exceptions signalent des opérations refusées
    (transition de statut) ou une configuration incorrecte.
EN: Validations never raise (they return a ``ValidationResult``). These
    exceptions signal refused operations (status transition) or a wrong
    configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from einvoice_fr.models.validation import ValidationIssue


class EInvoiceError(Exception):
    """Erreur de base du moteur de facturation.

    FR: Classe parente de toutes les exceptions du paquet.
    EN: Base class for all package exceptions.
    """


class InvoiceTransitionError(EInvoiceError):
    """Transition de statut de facture refusée.

    FR: Levée quand la transition n'est pas autorisée par le graphe de
        statuts ou que la facture ne passe pas la validation requise pour
        quitter l'état brouillon.
    EN: Raised when the transition is not allowed by the status graph or
        the invoice fails the validation required to leave draft.
    """

    def __init__(
        self, message: str, errors: list[ValidationIssue] | None = None
    ) -> None:
        super().__init__(message)
        self.errors: list[ValidationIssue] = errors or []


class ConfigurationError(EInvoiceError):
    """Paramètre de configuration inconnu ou invalide."""
