"""einvoice-fr : validation des identifiants d'entreprises françaises et
modèle de facture électronique EN16931.

FR: Contrôle des SIREN, SIRET, TVA intracommunautaire, IBAN, codes postaux
    et téléphones ; calcul et contrôle des factures ; échéances de la
    réforme de la facturation électronique.
EN: Validation of French SIREN, SIRET, VAT, IBAN, postal codes and phone
    numbers; invoice computation and checks; e-invoicing mandate deadlines.
"""

from einvoice_fr.config import EInvoicingSettings, get_settings
from einvoice_fr.models import (
    Company,
    Invoice,
    InvoiceLine,
    ValidationError,
    ValidationIssue,
    ValidationResult,
)
from einvoice_fr.validators import (
    validate_french_business_data,
    validate_french_iban,
    validate_french_phone,
    validate_french_postal_code,
    validate_french_vat,
    validate_siren,
    validate_siret,
)

__version__ = "0.1.0"

__all__ = [
    "Company",
    "EInvoicingSettings",
    "Invoice",
    "InvoiceLine",
    "ValidationError",
    "ValidationIssue",
    "ValidationResult",
    "__version__",
    "get_settings",
    "validate_french_business_data",
    "validate_french_iban",
    "validate_french_phone",
    "validate_french_postal_code",
    "validate_french_vat",
    "validate_siren",
    "validate_siret",
]
