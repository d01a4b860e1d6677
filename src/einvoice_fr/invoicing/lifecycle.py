"""Cycle de vie d'une facture côté émetteur.

FR: Graphe de statuts brouillon → validée → envoyée → payée → archivée,
    avec annulation possible avant paiement. La validation d'un brouillon
    exige une facture conforme (``validate_invoice``). Chaque transition
    retourne une nouvelle facture ; l'originale n'est pas modifiée.
EN: Status graph draft → validated → sent → paid → archived, with
    cancellation allowed before payment. Validating a draft requires a
    compliant invoice (``validate_invoice``). Each transition returns a
    new invoice; the original is left untouched.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from einvoice_fr.config import EInvoicingSettings
from einvoice_fr.errors import InvoiceTransitionError
from einvoice_fr.invoicing.checker import validate_invoice
from einvoice_fr.models.enums import InvoiceStatus
from einvoice_fr.models.invoice import Invoice

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Graphe de transitions autorisées
# ---------------------------------------------------------------------------

TRANSITIONS: dict[InvoiceStatus, list[InvoiceStatus]] = {
    InvoiceStatus.DRAFT: [
        InvoiceStatus.VALIDATED,
        InvoiceStatus.CANCELLED,
    ],
    InvoiceStatus.VALIDATED: [
        InvoiceStatus.SENT,
        InvoiceStatus.CANCELLED,
    ],
    InvoiceStatus.SENT: [
        InvoiceStatus.PAID,
        InvoiceStatus.CANCELLED,
    ],
    InvoiceStatus.PAID: [
        InvoiceStatus.ARCHIVED,
    ],
    InvoiceStatus.CANCELLED: [
        InvoiceStatus.ARCHIVED,
    ],
    # Terminal
    InvoiceStatus.ARCHIVED: [],
}

TERMINAL_STATUSES: frozenset[InvoiceStatus] = frozenset(
    status for status, targets in TRANSITIONS.items() if not targets
)


def can_transition(current: InvoiceStatus, target: InvoiceStatus) -> bool:
    """Vérifie si la transition est autorisée par le graphe."""
    return target in TRANSITIONS.get(current, [])


def transition(
    invoice: Invoice,
    target: InvoiceStatus,
    *,
    settings: EInvoicingSettings | None = None,
    timestamp: datetime | None = None,
) -> Invoice:
    """Fait passer la facture au statut cible.

    FR: Une facture qui quitte l'état brouillon vers ``validated`` est
        contrôlée ; ses erreurs sont reportées dans l'exception et la
        facture retournée porte ``compliance_validated``.
    EN: An invoice leaving draft for ``validated`` is checked; its errors
        are carried by the exception and the returned invoice carries
        ``compliance_validated``.

    Args:
        invoice: Facture courante.
        target: Statut cible.
        settings: Paramètres transmis au contrôle de la facture.
        timestamp: Horodatage du contrôle (UTC now par défaut).

    Returns:
        Une nouvelle facture au statut cible (mêmes vendeur et acheteur).

    Raises:
        InvoiceTransitionError: Transition absente du graphe ou facture
            non conforme.
    """
    if not can_transition(invoice.status, target):
        allowed = [s.value for s in TRANSITIONS.get(invoice.status, [])]
        msg = (
            f"Transition non autorisée : {invoice.status.value} → {target.value}. "
            f"Transitions possibles : {allowed}"
        )
        raise InvoiceTransitionError(msg)

    update: dict[str, object] = {"status": target}
    if invoice.status is InvoiceStatus.DRAFT and target is InvoiceStatus.VALIDATED:
        result = validate_invoice(invoice, settings=settings)
        if not result.is_valid:
            msg = (
                f"La facture {invoice.invoice_number} n'est pas conforme : "
                f"{len(result.errors)} erreur(s)"
            )
            raise InvoiceTransitionError(msg, errors=result.errors)
        update |= {
            "validation_errors": [],
            "compliance_validated": True,
            "compliance_validated_at": timestamp or datetime.now(UTC),
        }

    logger.debug(
        "Facture %s : %s → %s",
        invoice.invoice_number,
        invoice.status.value,
        target.value,
    )
    return invoice.model_copy(update=update)


def is_terminal(status: InvoiceStatus) -> bool:
    """Vérifie si le statut est terminal (aucune transition sortante)."""
    return status in TERMINAL_STATUSES
