"""Calcul des montants de facture en centimes.

FR: Dérive les montants HT/TVA/TTC des lignes, la ventilation TVA par
    couple (catégorie, taux) et les totaux de la facture. Chaque montant
    de ligne est arrondi une seule fois (arrondi commercial) ; les totaux
    sont des sommes d'entiers, donc exacts.
EN: Derives line net/tax/gross amounts, the VAT breakdown per
    (category, rate) pair and the invoice totals. Each line amount is
    rounded once (commercial rounding); totals are integer sums, hence
    exact.
"""

from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal

from einvoice_fr.models.invoice import Invoice, InvoiceLine, InvoiceVatBreakdown
from einvoice_fr.money import round_cents


def line_net_cents(line: InvoiceLine) -> int:
    """Montant HT remisé de la ligne, arrondi une fois."""
    gross = line.quantity * Decimal(line.unit_price_cents)
    return round_cents(gross * (Decimal(1) - line.discount_percentage))


def compute_line_amounts(line: InvoiceLine) -> InvoiceLine:
    """Retourne une copie de la ligne avec ses montants calculés.

    FR: ``net = arrondi(quantité × prix × (1 - remise))``,
        ``tva = arrondi(net × taux)``, ``ttc = net + tva``. Le montant de
        remise est l'écart entre le brut arrondi et le net.
    EN: ``net = round(quantity × price × (1 - discount))``,
        ``tax = round(net × rate)``, ``total = net + tax``. The discount
        amount is the gap between the rounded gross and the net.
    """
    net = line_net_cents(line)
    tax = round_cents(Decimal(net) * line.vat_rate)
    gross = round_cents(line.quantity * Decimal(line.unit_price_cents))
    return line.model_copy(
        update={
            "net_amount_cents": net,
            "tax_amount_cents": tax,
            "total_amount_cents": net + tax,
            "discount_amount_cents": max(gross - net, 0),
        }
    )


def build_vat_breakdown(lines: Iterable[InvoiceLine]) -> list[InvoiceVatBreakdown]:
    """Ventilation TVA à partir des montants déjà calculés des lignes.

    FR: Une entrée par couple (catégorie, taux), triée. La TVA d'une
        entrée est la somme des TVA de ses lignes.
    EN: One entry per (category, rate) pair, sorted. An entry's tax is the
        sum of its lines' tax.
    """
    summaries: dict[tuple[str, Decimal], tuple[int, int, str | None]] = {}
    for line in lines:
        key = (line.vat_category, line.vat_rate)
        taxable, tax, reason = summaries.get(key, (0, 0, None))
        summaries[key] = (
            taxable + line.net_amount_cents,
            tax + line.tax_amount_cents,
            reason or line.vat_exemption_reason,
        )
    return [
        InvoiceVatBreakdown(
            vat_category=category,
            vat_rate=rate,
            taxable_amount_cents=taxable,
            tax_amount_cents=tax,
            vat_exemption_reason=reason,
        )
        for (category, rate), (taxable, tax, reason) in sorted(summaries.items())
    ]


def compute_totals(invoice: Invoice) -> Invoice:
    """Retourne une copie de la facture avec lignes, ventilation et totaux calculés.

    FR: Copie superficielle : ``supplier`` et ``customer`` restent les mêmes
        objets que ceux de la facture d'origine.
    EN: Shallow copy: ``supplier`` and ``customer`` stay the very objects of
        the original invoice.
    """
    lines = [compute_line_amounts(line) for line in invoice.lines]
    breakdown = build_vat_breakdown(lines)
    net = sum(line.net_amount_cents for line in lines)
    tax = sum(entry.tax_amount_cents for entry in breakdown)
    return invoice.model_copy(
        update={
            "lines": lines,
            "vat_breakdown": breakdown,
            "net_amount": net,
            "tax_amount": tax,
            "total_amount": net + tax,
        }
    )


def calculate_due_date(issue_date: date, payment_terms_days: int = 30) -> date:
    """Date d'échéance à ``payment_terms_days`` jours de la date d'émission.

    FR: Le délai légal par défaut est de 30 jours (art. L441-10 du Code de
        commerce) ; il ne peut dépasser 60 jours.
    EN: The default legal term is 30 days; it cannot exceed 60 days.

    Raises:
        ValueError: Délai négatif ou supérieur à 60 jours.
    """
    if not 0 <= payment_terms_days <= 60:
        msg = f"Délai de paiement invalide : {payment_terms_days} jours (0 à 60)"
        raise ValueError(msg)
    return issue_date + timedelta(days=payment_terms_days)
