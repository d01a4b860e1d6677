"""Contrôle structurel et numérique d'une facture EN16931.

FR: Vérifie les champs obligatoires, les catégories et taux de TVA, la
    cohérence des montants (lignes, ventilation, totaux), les dates, les
    coordonnées bancaires et les identifiants des parties. Ne lève jamais
    d'exception : tout problème est retourné dans le ``ValidationResult``.
EN: Checks mandatory fields, VAT categories and rates, amount consistency
    (lines, breakdown, totals), dates, bank details and party identifiers.
    Never raises: every problem is returned in the ``ValidationResult``.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation

from einvoice_fr.checksums import iban_numeral, mod97
from einvoice_fr.config import EInvoicingSettings, resolve_settings
from einvoice_fr.invoicing.calculator import build_vat_breakdown, compute_line_amounts
from einvoice_fr.invoicing.numbering import validate_invoice_number
from einvoice_fr.models.company import Company
from einvoice_fr.models.enums import ErrorCode, VATCategory
from einvoice_fr.models.invoice import Invoice, InvoiceLine, InvoiceVatBreakdown
from einvoice_fr.models.validation import ValidationResult
from einvoice_fr.validators.business import BusinessData, validate_french_business_data
from einvoice_fr.validators.iban import IBAN_FORMAT_RE, clean_iban, validate_french_iban

logger = logging.getLogger(__name__)

_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")

# Catégories dont le taux est forcément nul
_ZERO_RATE_CATEGORIES = frozenset(
    {
        VATCategory.ZERO_RATED,
        VATCategory.EXEMPT,
        VATCategory.REVERSE_CHARGE,
        VATCategory.INTRA_COMMUNITY,
        VATCategory.EXPORT,
        VATCategory.NOT_SUBJECT,
    }
)

# Catégories exigeant un motif d'exonération (BR-E-10, BR-AE-10, BR-IC-10, BR-G-10)
_EXEMPTION_REASON_CATEGORIES = frozenset(
    {
        VATCategory.EXEMPT,
        VATCategory.REVERSE_CHARGE,
        VATCategory.INTRA_COMMUNITY,
        VATCategory.EXPORT,
    }
)

_KNOWN_CATEGORIES = frozenset(category.value for category in VATCategory)


def _check_mandatory_fields(invoice: Invoice, result: ValidationResult) -> None:
    if not invoice.invoice_number.strip():
        result.add_error(
            "invoice_number",
            ErrorCode.MISSING_MANDATORY_FIELD,
            "Le numéro de facture (BT-1) est obligatoire",
        )
    elif not validate_invoice_number(invoice.invoice_number):
        result.add_error(
            "invoice_number",
            ErrorCode.INVALID_INVOICE_NUMBER,
            "Le numéro de facture ne doit contenir que des lettres, chiffres, "
            "tirets, soulignés ou barres obliques (50 caractères maximum)",
        )
    if invoice.issue_date is None:
        result.add_error(
            "issue_date",
            ErrorCode.MISSING_MANDATORY_FIELD,
            "La date d'émission (BT-2) est obligatoire",
        )
    if not invoice.supplier.name.strip():
        result.add_error(
            "supplier.name",
            ErrorCode.MISSING_MANDATORY_FIELD,
            "Le nom du vendeur (BT-27) est obligatoire",
        )
    if not invoice.customer.name.strip():
        result.add_error(
            "customer.name",
            ErrorCode.MISSING_MANDATORY_FIELD,
            "Le nom de l'acheteur (BT-44) est obligatoire",
        )
    if not invoice.currency_code:
        result.add_error(
            "currency_code",
            ErrorCode.MISSING_MANDATORY_FIELD,
            "La devise de facturation (BT-5) est obligatoire",
        )
    elif not _CURRENCY_RE.match(invoice.currency_code):
        result.add_error(
            "currency_code",
            ErrorCode.INVALID_CURRENCY,
            f"Code devise ISO 4217 invalide : {invoice.currency_code!r}",
        )
    if not invoice.lines:
        result.add_error(
            "lines",
            ErrorCode.MISSING_MANDATORY_FIELD,
            "La facture doit comporter au moins une ligne (BG-25)",
        )
    if not invoice.vat_breakdown:
        result.add_error(
            "vat_breakdown",
            ErrorCode.MISSING_MANDATORY_FIELD,
            "La facture doit comporter au moins une ventilation TVA (BG-23)",
        )


def _check_vat_category(
    field: str,
    category: str,
    rate: Decimal,
    exemption_reason: str | None,
    result: ValidationResult,
) -> None:
    if category not in _KNOWN_CATEGORIES:
        result.add_error(
            f"{field}.vat_category",
            ErrorCode.UNKNOWN_VAT_CATEGORY,
            f"Catégorie de TVA inconnue : {category!r}",
            details={"vat_category": category},
        )
        return
    if category == VATCategory.STANDARD and rate <= 0:
        result.add_error(
            f"{field}.vat_rate",
            ErrorCode.INVALID_VAT_RATE,
            "Le taux normal (S) doit être strictement positif",
            details={"vat_category": category, "vat_rate": str(rate)},
        )
    elif category in _ZERO_RATE_CATEGORIES and rate != 0:
        result.add_error(
            f"{field}.vat_rate",
            ErrorCode.INVALID_VAT_RATE,
            f"Le taux de TVA doit être nul pour la catégorie {category}",
            details={"vat_category": category, "vat_rate": str(rate)},
        )
    if category in _EXEMPTION_REASON_CATEGORIES and not exemption_reason:
        result.add_error(
            f"{field}.vat_exemption_reason",
            ErrorCode.MISSING_VAT_EXEMPTION_REASON,
            f"Un motif d'exonération est obligatoire pour la catégorie {category}",
        )


def _check_line(index: int, line: InvoiceLine, result: ValidationResult) -> None:
    field = f"lines[{index}]"
    _check_vat_category(
        field, line.vat_category, line.vat_rate, line.vat_exemption_reason, result
    )
    try:
        expected = compute_line_amounts(line)
    except InvalidOperation:
        result.add_error(
            field,
            ErrorCode.AMOUNT_OUT_OF_RANGE,
            f"Les montants de la ligne {line.line_number} dépassent "
            "la précision de calcul",
            details={
                "quantity": str(line.quantity),
                "unit_price_cents": line.unit_price_cents,
            },
        )
        return
    stored = (line.net_amount_cents, line.tax_amount_cents, line.total_amount_cents)
    computed = (
        expected.net_amount_cents,
        expected.tax_amount_cents,
        expected.total_amount_cents,
    )
    if stored != computed:
        result.add_error(
            field,
            ErrorCode.LINE_AMOUNT_MISMATCH,
            f"Les montants de la ligne {line.line_number} ne correspondent pas "
            "à quantité × prix unitaire",
            details={"stored": list(stored), "computed": list(computed)},
        )


def _check_totals(invoice: Invoice, result: ValidationResult) -> None:
    lines_net = sum(line.net_amount_cents for line in invoice.lines)
    breakdown_tax = sum(entry.tax_amount_cents for entry in invoice.vat_breakdown)

    if invoice.lines and invoice.net_amount != lines_net:
        result.add_error(
            "net_amount",
            ErrorCode.NET_AMOUNT_MISMATCH,
            "Le total HT doit être égal à la somme des montants HT des lignes",
            details={"net_amount": invoice.net_amount, "lines_net": lines_net},
        )
    if invoice.vat_breakdown and invoice.tax_amount != breakdown_tax:
        result.add_error(
            "tax_amount",
            ErrorCode.TAX_AMOUNT_MISMATCH,
            "Le total TVA doit être égal à la somme de la ventilation TVA",
            details={"tax_amount": invoice.tax_amount, "breakdown_tax": breakdown_tax},
        )
    if invoice.total_amount != invoice.net_amount + invoice.tax_amount:
        result.add_error(
            "total_amount",
            ErrorCode.TOTAL_AMOUNT_MISMATCH,
            "Le total TTC doit être égal au total HT plus le total TVA",
            details={
                "total_amount": invoice.total_amount,
                "expected": invoice.net_amount + invoice.tax_amount,
            },
        )
    if invoice.paid_amount > invoice.total_amount:
        result.add_error(
            "paid_amount",
            ErrorCode.PAID_AMOUNT_EXCEEDS_TOTAL,
            "Le montant payé ne peut pas dépasser le total TTC",
        )


def _breakdown_key(entry: InvoiceVatBreakdown) -> tuple[str, Decimal, int, int]:
    return (
        entry.vat_category,
        entry.vat_rate,
        entry.taxable_amount_cents,
        entry.tax_amount_cents,
    )


def _check_vat_breakdown(invoice: Invoice, result: ValidationResult) -> None:
    for index, entry in enumerate(invoice.vat_breakdown):
        _check_vat_category(
            f"vat_breakdown[{index}]",
            entry.vat_category,
            entry.vat_rate,
            entry.vat_exemption_reason,
            result,
        )
    if not invoice.lines or not invoice.vat_breakdown:
        return

    expected = sorted(_breakdown_key(e) for e in build_vat_breakdown(invoice.lines))
    stored = sorted(_breakdown_key(e) for e in invoice.vat_breakdown)
    if stored != expected:
        result.add_error(
            "vat_breakdown",
            ErrorCode.VAT_BREAKDOWN_MISMATCH,
            "La ventilation TVA ne correspond pas aux lignes de la facture",
        )


def _check_dates(invoice: Invoice, result: ValidationResult) -> None:
    if invoice.issue_date and invoice.due_date and invoice.due_date < invoice.issue_date:
        result.add_error(
            "due_date",
            ErrorCode.DUE_DATE_BEFORE_ISSUE_DATE,
            "La date d'échéance ne peut pas précéder la date d'émission",
        )


def _iban_valid(iban: str) -> bool:
    cleaned = clean_iban(iban)
    if cleaned.startswith("FR"):
        return validate_french_iban(cleaned).is_valid
    return bool(IBAN_FORMAT_RE.fullmatch(cleaned)) and mod97(iban_numeral(cleaned)) == 1


def _check_payment(invoice: Invoice, result: ValidationResult) -> None:
    instructions = invoice.payment_instructions
    if instructions is None or not instructions.iban:
        return
    if not _iban_valid(instructions.iban):
        result.add_error(
            "payment_instructions.iban",
            ErrorCode.INVALID_IBAN,
            "L'IBAN du bénéficiaire est invalide",
        )


def _check_party(company: Company) -> ValidationResult:
    domestic = company.country_code.upper() == "FR"
    data = BusinessData(
        siren=company.siren,
        siret=company.siret,
        vat_number=company.vat_number,
        postal_code=company.postal_code if domestic else None,
        phone=company.phone if domestic else None,
        email=company.email,
        company_name=company.name,
        address=company.address_line1,
    )
    return validate_french_business_data(data)


def validate_invoice(
    invoice: Invoice,
    *,
    settings: EInvoicingSettings | None = None,
) -> ValidationResult:
    """Contrôle une facture et retourne tous les problèmes détectés.

    FR: Les montants stockés sont comparés aux montants recalculés ; les
        erreurs des parties sont rattachées sous ``supplier.`` et
        ``customer.``. Les codes postaux et téléphones d'une partie
        étrangère ne sont pas contrôlés.
    EN: Stored amounts are compared with recomputed ones; party errors are
        re-rooted under ``supplier.`` and ``customer.``. Postal codes and
        phones of a foreign party are not checked.

    Args:
        invoice: La facture à contrôler.
        settings: Paramètres explicites (devise de comptabilisation).

    Returns:
        Le résultat agrégé.
    """
    resolved = resolve_settings(settings)

    result = ValidationResult()
    _check_mandatory_fields(invoice, result)
    if (
        _CURRENCY_RE.match(invoice.currency_code)
        and invoice.currency_code != resolved.default_currency
    ):
        result.add_warning(
            "currency_code",
            ErrorCode.FOREIGN_CURRENCY,
            "Facture en devise étrangère : le total TVA doit aussi être "
            f"exprimé en {resolved.default_currency} (BT-111)",
        )
    for index, line in enumerate(invoice.lines):
        _check_line(index, line, result)
    _check_vat_breakdown(invoice, result)
    _check_totals(invoice, result)
    _check_dates(invoice, result)
    _check_payment(invoice, result)

    result = result.merge(_check_party(invoice.supplier).prefixed("supplier"))
    result = result.merge(_check_party(invoice.customer).prefixed("customer"))

    logger.debug(
        "Contrôle de la facture %s : %d erreur(s), %d avertissement(s)",
        invoice.invoice_number,
        len(result.errors),
        len(result.warnings),
    )
    return result
