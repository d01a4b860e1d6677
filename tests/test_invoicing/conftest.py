"""Fixtures partagées pour les tests de facturation."""

from datetime import date
from decimal import Decimal

import pytest

from einvoice_fr.invoicing.calculator import compute_totals
from einvoice_fr.models.company import Company
from einvoice_fr.models.enums import PaymentMeansCode, UnitOfMeasure
from einvoice_fr.models.invoice import Invoice, InvoiceLine
from einvoice_fr.models.payment import PaymentInstructions


@pytest.fixture
def supplier() -> Company:
    """Vendeur dont tous les identifiants sont valides."""
    return Company(
        name="Acme SAS",
        legal_name="Acme Société par actions simplifiée",
        siren="732829320",
        siret="73282932000074",
        vat_number="FR44732829320",
        address_line1="12 rue de la Paix",
        city="Paris",
        postal_code="75002",
        email="factures@acme.fr",
        phone="01 23 45 67 89",
    )


@pytest.fixture
def customer() -> Company:
    """Acheteur dont tous les identifiants sont valides."""
    return Company(
        name="Client SARL",
        siren="552100554",
        vat_number="FR96552100554",
        address_line1="5 avenue Foch",
        city="Lyon",
        postal_code="69001",
    )


@pytest.fixture
def draft_invoice(supplier: Company, customer: Company) -> Invoice:
    """Facture brouillon, montants non calculés : 100,00 € HT à 20 %."""
    return Invoice(
        invoice_number="F-2026-001",
        issue_date=date(2026, 9, 15),
        due_date=date(2026, 10, 15),
        supplier=supplier,
        customer=customer,
        lines=[
            InvoiceLine(
                line_number=1,
                item_name="Prestation de conseil",
                quantity=Decimal("1"),
                unit_code=UnitOfMeasure.DAY,
                unit_price_cents=10000,
                vat_rate=Decimal("0.20"),
            ),
        ],
        payment_instructions=PaymentInstructions(
            payment_means_code=PaymentMeansCode.SEPA_CREDIT_TRANSFER,
            iban="FR1420041010050500013M02606",
            bic="PSSTFRPPPAR",
        ),
    )


@pytest.fixture
def invoice(draft_invoice: Invoice) -> Invoice:
    """Facture complète : 10 000 HT, 2 000 TVA, 12 000 TTC (centimes)."""
    return compute_totals(draft_invoice)
