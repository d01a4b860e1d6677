"""Énumérations pour la validation et la facturation électronique française.

FR: Codes et catégories conformes aux normes EN16931 (UNTDID, UN/ECE)
    et codes d'erreur stables exposés par le moteur de validation.
EN: Codes and categories conforming to EN16931 (UNTDID, UN/ECE)
    and the stable error codes exposed by the validation engine.
"""

from enum import StrEnum


class InvoiceTypeCode(StrEnum):
    """Code du type de facture (UNTDID 1001).

    FR: Nature du document (BT-3). Un avoir référence la facture d'origine.
    EN: Document nature (BT-3). A credit note references the original invoice.
    """

    INVOICE = "380"
    """Facture / Invoice"""

    CREDIT_NOTE = "381"
    """Avoir / Credit note"""

    DEBIT_NOTE = "383"
    """Note de débit"""

    CORRECTED_INVOICE = "384"
    """Facture rectificative / Corrected invoice"""

    PREPAYMENT_INVOICE = "386"
    """Facture d'acompte / Prepayment invoice"""


class VATCategory(StrEnum):
    """Catégorie de TVA (UNTDID 5305).

    FR: Chaque ligne et chaque entrée de ventilation porte une catégorie ;
        seule ``S`` admet un taux non nul.
    EN: Every line and breakdown entry carries a category; only ``S``
        allows a non-zero rate.
    """

    STANDARD = "S"
    """Taux normal / Standard rate"""

    ZERO_RATED = "Z"
    """Taux zéro / Zero rated"""

    EXEMPT = "E"
    """Exonéré / Exempt"""

    REVERSE_CHARGE = "AE"
    """Autoliquidation (motif obligatoire) / Reverse charge"""

    INTRA_COMMUNITY = "K"
    """Livraison intracommunautaire (motif obligatoire)"""

    EXPORT = "G"
    """Export hors UE (motif obligatoire)"""

    NOT_SUBJECT = "O"
    """Non soumis / Not subject to VAT"""

    IGIC = "L"
    """IGIC (Canaries) / Canary Islands General Indirect Tax"""

    IPSI = "M"
    """IPSI (Ceuta et Melilla) / Tax for production, services and importation"""


class UnitOfMeasure(StrEnum):
    """Code unité de mesure (UN/ECE Rec. 20).

    FR: Sous-ensemble utilisé par les lignes de facture (BT-130).
    EN: Subset used by invoice lines (BT-130).
    """

    UNIT = "C62"
    """Unité / One (unit)"""

    HOUR = "HUR"
    """Heure / Hour"""

    DAY = "DAY"
    """Jour / Day"""

    MONTH = "MON"
    """Mois / Month"""

    KILOGRAM = "KGM"
    """Kilogramme / Kilogram"""

    METRE = "MTR"
    """Mètre / Metre"""

    LITRE = "LTR"
    """Litre / Litre"""

    PIECE = "XPP"
    """Pièce / Piece"""

    SET = "SET"
    """Ensemble / Set"""


class PaymentMeansCode(StrEnum):
    """Code moyen de paiement (UNTDID 4461).

    FR: Mode de règlement des instructions de paiement (BT-81). Les
        virements portent un IBAN contrôlé par le moteur.
    EN: Payment means of the payment instructions (BT-81). Transfers carry
        an IBAN checked by the engine.
    """

    CASH = "10"
    """Espèces / Cash"""

    CHEQUE = "20"
    """Chèque / Cheque"""

    CREDIT_TRANSFER = "30"
    """Virement bancaire / Credit transfer"""

    BANK_CARD = "48"
    """Carte bancaire / Bank card"""

    DIRECT_DEBIT = "49"
    """Prélèvement / Direct debit"""

    SEPA_CREDIT_TRANSFER = "58"
    """Virement SEPA"""

    SEPA_DIRECT_DEBIT = "59"
    """Prélèvement SEPA"""


class InvoiceStatus(StrEnum):
    """Statut interne d'une facture.

    FR: Cycle de vie d'une facture côté émetteur, du brouillon à l'archivage.
    EN: Issuer-side invoice lifecycle, from draft to archive.
    """

    DRAFT = "draft"
    """Brouillon / Draft"""

    VALIDATED = "validated"
    """Validée (totaux et mentions contrôlés) / Validated"""

    SENT = "sent"
    """Transmise / Sent"""

    PAID = "paid"
    """Payée / Paid"""

    CANCELLED = "cancelled"
    """Annulée / Cancelled"""

    ARCHIVED = "archived"
    """Archivée / Archived"""


class FacturXLevel(StrEnum):
    """Profil Factur-X.

    FR: Niveau de détail du XML embarqué dans le PDF/A-3.
    EN: Level of detail of the XML embedded in the PDF/A-3.
    """

    MINIMUM = "minimum"
    BASIC_WL = "basicwl"
    BASIC = "basic"
    EN16931 = "en16931"
    EXTENDED = "extended"


class Currency(StrEnum):
    """Devises ISO 4217 usuelles (BT-5).

    FR: Toute devise de trois lettres est acceptée par le contrôle de
        facture ; celles-ci sont les plus fréquentes.
    EN: Any three-letter currency passes the invoice check; these are the
        most frequent ones.
    """

    EUR = "EUR"
    """Euro"""

    USD = "USD"
    """Dollar américain / US Dollar"""

    GBP = "GBP"
    """Livre sterling / British Pound"""

    CHF = "CHF"
    """Franc suisse / Swiss Franc"""


class Severity(StrEnum):
    """Gravité d'un problème de validation.

    FR: Seules les erreurs rendent un résultat invalide.
    EN: Only errors make a result invalid.
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class VatCheckScheme(StrEnum):
    """Schéma de clé de contrôle d'un numéro de TVA français.

    FR: Clé numérique (modulo 97) ou ancienne clé alphanumérique.
    EN: Numeric key (modulo 97) or legacy alphanumeric key.
    """

    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"


class ErrorCode(StrEnum):
    """Codes d'erreur stables exposés aux appelants.

    FR: Les appelants doivent se fier uniquement au code, jamais au message.
        Les codes ne doivent pas être renommés.
    EN: Callers must rely on the code only, never on the message.
        Codes must not be renamed.
    """

    # --- Identifiants ---
    INVALID_SIREN = "INVALID_SIREN"
    INVALID_SIRET = "INVALID_SIRET"
    SIRET_SIREN_MISMATCH = "SIRET_SIREN_MISMATCH"
    INVALID_VAT = "INVALID_VAT"
    VAT_SIREN_MISMATCH = "VAT_SIREN_MISMATCH"
    INVALID_POSTAL_CODE = "INVALID_POSTAL_CODE"
    INVALID_PHONE = "INVALID_PHONE"
    INVALID_IBAN = "INVALID_IBAN"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_COMPANY_NAME = "INVALID_COMPANY_NAME"
    INVALID_ADDRESS = "INVALID_ADDRESS"
    MISSING_IDENTIFIER = "MISSING_IDENTIFIER"
    MISSING_VAT_NUMBER = "MISSING_VAT_NUMBER"

    # --- Facture EN16931 ---
    MISSING_MANDATORY_FIELD = "MISSING_MANDATORY_FIELD"
    UNKNOWN_VAT_CATEGORY = "UNKNOWN_VAT_CATEGORY"
    INVALID_VAT_RATE = "INVALID_VAT_RATE"
    MISSING_VAT_EXEMPTION_REASON = "MISSING_VAT_EXEMPTION_REASON"
    LINE_AMOUNT_MISMATCH = "LINE_AMOUNT_MISMATCH"
    AMOUNT_OUT_OF_RANGE = "AMOUNT_OUT_OF_RANGE"
    NET_AMOUNT_MISMATCH = "NET_AMOUNT_MISMATCH"
    TAX_AMOUNT_MISMATCH = "TAX_AMOUNT_MISMATCH"
    TOTAL_AMOUNT_MISMATCH = "TOTAL_AMOUNT_MISMATCH"
    VAT_BREAKDOWN_MISMATCH = "VAT_BREAKDOWN_MISMATCH"
    INVALID_CURRENCY = "INVALID_CURRENCY"
    DUE_DATE_BEFORE_ISSUE_DATE = "DUE_DATE_BEFORE_ISSUE_DATE"
    PAID_AMOUNT_EXCEEDS_TOTAL = "PAID_AMOUNT_EXCEEDS_TOTAL"
    FOREIGN_CURRENCY = "FOREIGN_CURRENCY"
    INVALID_INVOICE_NUMBER = "INVALID_INVOICE_NUMBER"
