"""Modèles de données Pydantic pour la validation et la facturation électronique."""

from einvoice_fr.models.enums import (
    Currency,
    ErrorCode,
    FacturXLevel,
    InvoiceStatus,
    InvoiceTypeCode,
    PaymentMeansCode,
    Severity,
    UnitOfMeasure,
    VatCheckScheme,
    VATCategory,
)
from einvoice_fr.models.identifiers import (
    FrenchVatValidationResult,
    IbanValidationResult,
    PhoneValidationResult,
    PostalCodeValidationResult,
    SirenValidationResult,
    SiretValidationResult,
)
from einvoice_fr.models.validation import (
    ValidationError,
    ValidationIssue,
    ValidationResult,
)
from einvoice_fr.models.company import Company
from einvoice_fr.models.payment import PaymentInstructions
from einvoice_fr.models.invoice import Invoice, InvoiceLine, InvoiceVatBreakdown

__all__ = [
    "Company",
    "Currency",
    "ErrorCode",
    "FacturXLevel",
    "FrenchVatValidationResult",
    "IbanValidationResult",
    "Invoice",
    "InvoiceLine",
    "InvoiceStatus",
    "InvoiceTypeCode",
    "InvoiceVatBreakdown",
    "PaymentInstructions",
    "PaymentMeansCode",
    "PhoneValidationResult",
    "PostalCodeValidationResult",
    "Severity",
    "SirenValidationResult",
    "SiretValidationResult",
    "UnitOfMeasure",
    "ValidationError",
    "ValidationIssue",
    "ValidationResult",
    "VATCategory",
    "VatCheckScheme",
]
