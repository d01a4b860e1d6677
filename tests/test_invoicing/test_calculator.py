"""Tests du calcul des montants de facture."""

from datetime import date
from decimal import Decimal

import pytest

from einvoice_fr.invoicing.calculator import (
    build_vat_breakdown,
    calculate_due_date,
    compute_line_amounts,
    compute_totals,
)
from einvoice_fr.models.enums import VATCategory
from einvoice_fr.models.invoice import InvoiceLine


def _line(number: int = 1, **kwargs) -> InvoiceLine:
    values = {
        "line_number": number,
        "item_name": "Article",
        "quantity": Decimal("1"),
        "unit_price_cents": 10000,
    }
    values.update(kwargs)
    return InvoiceLine(**values)


class TestComputeLineAmounts:
    def test_simple_line(self):
        line = compute_line_amounts(_line(quantity=Decimal("10"), unit_price_cents=8500))
        assert line.net_amount_cents == 85000
        assert line.tax_amount_cents == 17000
        assert line.total_amount_cents == 102000

    def test_discount_rounded_once(self):
        line = compute_line_amounts(
            _line(quantity=Decimal("3"), unit_price_cents=999, discount_percentage=Decimal("0.10"))
        )
        # 2 997 × 0,9 = 2 697,3
        assert line.net_amount_cents == 2697
        assert line.discount_amount_cents == 300
        assert line.tax_amount_cents == 539
        assert line.total_amount_cents == 3236

    def test_half_cent_rounds_up(self):
        line = compute_line_amounts(_line(unit_price_cents=5, vat_rate=Decimal("0.10")))
        assert line.tax_amount_cents == 1

    def test_fractional_quantity(self):
        line = compute_line_amounts(_line(quantity=Decimal("1.5"), unit_price_cents=3333))
        # 4 999,5 → 5 000
        assert line.net_amount_cents == 5000

    def test_original_untouched(self):
        line = _line()
        compute_line_amounts(line)
        assert line.net_amount_cents == 0


class TestBuildVatBreakdown:
    def test_groups_by_category_and_rate(self):
        lines = [
            compute_line_amounts(_line(1, unit_price_cents=10000)),
            compute_line_amounts(_line(2, unit_price_cents=5000)),
            compute_line_amounts(_line(3, unit_price_cents=2000, vat_rate=Decimal("0.055"))),
        ]
        breakdown = build_vat_breakdown(lines)
        assert [(b.vat_category, b.vat_rate) for b in breakdown] == [
            ("S", Decimal("0.055")),
            ("S", Decimal("0.20")),
        ]
        assert breakdown[1].taxable_amount_cents == 15000
        assert breakdown[1].tax_amount_cents == 3000
        assert breakdown[0].tax_amount_cents == 110

    def test_tax_is_sum_of_line_taxes(self):
        # Trois lignes à 0,05 € : TVA par ligne arrondie à 0,01 €
        lines = [compute_line_amounts(_line(n, unit_price_cents=5, vat_rate=Decimal("0.10"))) for n in (1, 2, 3)]
        breakdown = build_vat_breakdown(lines)
        assert breakdown[0].tax_amount_cents == 3

    def test_keeps_exemption_reason(self):
        line = compute_line_amounts(
            _line(
                vat_category=VATCategory.EXEMPT,
                vat_rate=Decimal("0"),
                vat_exemption_reason="Article 261 du CGI",
            )
        )
        assert build_vat_breakdown([line])[0].vat_exemption_reason == "Article 261 du CGI"

    def test_empty(self):
        assert build_vat_breakdown([]) == []


class TestComputeTotals:
    def test_totals(self, invoice):
        assert invoice.net_amount == 10000
        assert invoice.tax_amount == 2000
        assert invoice.total_amount == 12000
        assert len(invoice.vat_breakdown) == 1

    def test_parties_keep_identity(self, draft_invoice, supplier, customer):
        computed = compute_totals(draft_invoice)
        assert computed.supplier is supplier
        assert computed.customer is customer

    def test_draft_untouched(self, draft_invoice):
        compute_totals(draft_invoice)
        assert draft_invoice.total_amount == 0
        assert draft_invoice.vat_breakdown == []


class TestCalculateDueDate:
    def test_default_thirty_days(self):
        assert calculate_due_date(date(2026, 9, 15)) == date(2026, 10, 15)

    def test_custom_terms(self):
        assert calculate_due_date(date(2026, 12, 15), 45) == date(2027, 1, 29)

    @pytest.mark.parametrize("days", [-1, 61])
    def test_out_of_range(self, days):
        with pytest.raises(ValueError, match="Délai de paiement invalide"):
            calculate_due_date(date(2026, 9, 15), days)
