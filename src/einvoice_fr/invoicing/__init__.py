"""Calcul, contrôle, cycle de vie et numérotation des factures.

FR: Opérations sur le modèle ``Invoice`` : dérivation des montants,
    contrôle EN16931, transitions de statut et numérotation séquentielle.
EN: Operations on the ``Invoice`` model: amount derivation, EN16931
    checks, status transitions and sequential numbering.
"""

from einvoice_fr.invoicing.calculator import (
    build_vat_breakdown,
    calculate_due_date,
    compute_line_amounts,
    compute_totals,
)
from einvoice_fr.invoicing.checker import validate_invoice
from einvoice_fr.invoicing.lifecycle import (
    TERMINAL_STATUSES,
    TRANSITIONS,
    can_transition,
    is_terminal,
    transition,
)
from einvoice_fr.invoicing.numbering import InvoiceSequence, validate_invoice_number

__all__ = [
    "InvoiceSequence",
    "TERMINAL_STATUSES",
    "TRANSITIONS",
    "build_vat_breakdown",
    "calculate_due_date",
    "can_transition",
    "compute_line_amounts",
    "compute_totals",
    "is_terminal",
    "transition",
    "validate_invoice",
    "validate_invoice_number",
]
