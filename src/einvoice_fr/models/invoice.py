"""Modèle sémantique de facture EN16931.

FR: Représentation en mémoire d'une facture (parties, lignes, ventilation
    TVA, totaux, instructions de paiement) consommée par les générateurs
    XML/PDF Factur-X. Tous les montants sont des entiers en centimes.
    Les taux de TVA et de remise sont des fractions (0.20 pour 20 %).
EN: In-memory representation of an invoice (parties, lines, VAT breakdown,
    totals, payment instructions) consumed by Factur-X XML/PDF generators.
    All amounts are integer minor units. VAT and discount rates are
    fractions (0.20 for 20 %).
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, computed_field

from einvoice_fr.models.company import Company
from einvoice_fr.models.enums import (
    Currency,
    FacturXLevel,
    InvoiceStatus,
    InvoiceTypeCode,
    UnitOfMeasure,
    VATCategory,
)
from einvoice_fr.models.payment import PaymentInstructions
from einvoice_fr.models.validation import ValidationIssue


class InvoiceLine(BaseModel):
    """Ligne de facture (EN16931 BG-25).

    FR: Les montants dérivés (HT, TVA, TTC) sont calculés par
        ``compute_line_amounts`` puis contrôlés par ``validate_invoice``.
    EN: Derived amounts (net, tax, total) are computed by
        ``compute_line_amounts`` then checked by ``validate_invoice``.
    """

    line_number: int = Field(..., gt=0, description="Identifiant de ligne BT-126")
    item_name: str = Field(..., description="Désignation BT-153 / Item name")
    item_description: str | None = Field(
        default=None,
        description="Description BT-154 / Item description",
    )
    item_code: str | None = Field(
        default=None,
        description="Référence article vendeur BT-155 / Seller item identifier",
    )

    # --- Quantité et prix ---
    quantity: Decimal = Field(..., description="Quantité facturée BT-129")
    unit_code: str = Field(
        default=UnitOfMeasure.UNIT,
        description="Unité UN/ECE Rec. 20 BT-130 / Unit code",
    )
    unit_price_cents: int = Field(
        ...,
        description="Prix unitaire HT en centimes BT-146 / Unit net price",
    )

    # --- Montants en centimes ---
    net_amount_cents: int = Field(default=0, description="Montant HT BT-131")
    tax_amount_cents: int = Field(default=0, description="Montant de TVA de la ligne")
    total_amount_cents: int = Field(default=0, description="Montant TTC de la ligne")

    # --- TVA ---
    vat_category: str = Field(
        default=VATCategory.STANDARD,
        description="Catégorie de TVA UNTDID 5305 BT-151 / VAT category code",
    )
    vat_rate: Decimal = Field(
        default=Decimal("0.20"),
        ge=0,
        le=1,
        description="Taux de TVA (fraction) BT-152 / VAT rate (fraction)",
    )
    vat_exemption_reason: str | None = Field(
        default=None,
        description="Motif d'exonération BT-120 / VAT exemption reason",
    )

    # --- Remise ---
    discount_percentage: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        le=1,
        description="Remise (fraction) / Discount percentage (fraction)",
    )
    discount_amount_cents: int = Field(
        default=0,
        ge=0,
        description="Montant de la remise BT-136 / Discount amount",
    )


class InvoiceVatBreakdown(BaseModel):
    """Ventilation TVA (EN16931 BG-23).

    FR: Une ligne par couple (catégorie, taux) présent sur les lignes.
    EN: One row per (category, rate) pair present on the lines.
    """

    vat_category: str = Field(..., description="Catégorie BT-118 / Category code")
    vat_rate: Decimal = Field(..., ge=0, le=1, description="Taux BT-119 / Rate")
    taxable_amount_cents: int = Field(..., description="Base HT BT-116 / Taxable")
    tax_amount_cents: int = Field(..., description="Montant TVA BT-117 / Tax amount")
    vat_exemption_reason: str | None = Field(
        default=None,
        description="Motif d'exonération BT-120 / Exemption reason",
    )


class Invoice(BaseModel):
    """Facture électronique EN16931.

    FR: Le vendeur et l'acheteur sont des références partagées vers des
        ``Company`` existantes (jamais copiées). Invariants contrôlés par
        ``validate_invoice`` :
        - ``total_amount == net_amount + tax_amount``
        - ``net_amount == somme des montants HT des lignes``
        - ``tax_amount == somme des montants de TVA de la ventilation``
    EN: Seller and buyer are shared references to existing ``Company``
        objects (never copied).
    """

    # --- Identification ---
    invoice_number: str = Field(..., description="Numéro de facture BT-1")
    invoice_sequence_id: str | None = Field(
        default=None,
        description="Séquence de numérotation / Numbering sequence",
    )
    type_code: InvoiceTypeCode = Field(
        default=InvoiceTypeCode.INVOICE,
        description="Type de document BT-3 / Document type code",
    )

    # --- Dates ---
    issue_date: date | None = Field(default=None, description="Date d'émission BT-2")
    due_date: date | None = Field(default=None, description="Date d'échéance BT-9")
    tax_point_date: date | None = Field(
        default=None,
        description="Date d'exigibilité de la TVA BT-7 / Tax point date",
    )

    # --- Parties ---
    supplier: Company = Field(..., description="Vendeur BG-4 / Seller")
    customer: Company = Field(..., description="Acheteur BG-7 / Buyer")

    # --- Montants en centimes ---
    net_amount: int = Field(default=0, description="Total HT BT-109 / Net total")
    tax_amount: int = Field(default=0, description="Total TVA BT-110 / Tax total")
    total_amount: int = Field(default=0, description="Total TTC BT-112 / Gross total")
    paid_amount: int = Field(
        default=0,
        ge=0,
        description="Montant déjà payé BT-113 / Paid amount",
    )
    currency_code: str = Field(
        default=Currency.EUR,
        description="Code devise ISO 4217 BT-5 / Currency code",
    )

    # --- Références ---
    payment_reference: str | None = Field(default=None, description="BT-83")
    project_reference: str | None = Field(default=None, description="BT-11")
    contract_reference: str | None = Field(default=None, description="BT-12")
    purchase_order_reference: str | None = Field(default=None, description="BT-13")
    preceding_invoice_reference: str | None = Field(default=None, description="BT-25")
    note: str | None = Field(default=None, description="Note libre BT-22")

    # --- Paiement ---
    payment_instructions: PaymentInstructions | None = Field(
        default=None,
        description="Instructions de paiement BG-16 / Payment instructions",
    )

    # --- Factur-X et conformité ---
    facturx_level: FacturXLevel = Field(
        default=FacturXLevel.EN16931,
        description="Profil Factur-X / Factur-X profile",
    )
    status: InvoiceStatus = Field(
        default=InvoiceStatus.DRAFT,
        description="Statut de la facture / Invoice status",
    )
    validation_errors: list[ValidationIssue] = Field(
        default_factory=list,
        description="Erreurs du dernier contrôle / Last check errors",
    )
    compliance_validated: bool = Field(
        default=False,
        description="Facture contrôlée conforme / Compliance validated",
    )
    compliance_validated_at: datetime | None = Field(
        default=None,
        description="Horodatage du contrôle / Compliance check time",
    )

    # --- Lignes et ventilation ---
    lines: list[InvoiceLine] = Field(
        default_factory=list,
        description="Lignes de facture BG-25 / Invoice lines",
    )
    vat_breakdown: list[InvoiceVatBreakdown] = Field(
        default_factory=list,
        description="Ventilation TVA BG-23 / VAT breakdown",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def amount_due(self) -> int:
        """Montant restant à payer BT-115 / Amount due for payment."""
        return self.total_amount - self.paid_amount
