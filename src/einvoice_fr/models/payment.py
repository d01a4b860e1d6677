"""Instructions de paiement (EN16931 BG-16 / BG-17).

FR: Moyen de paiement, coordonnées bancaires du bénéficiaire et conditions
    de paiement, tels que les consomment les générateurs Factur-X.
EN: Payment means, beneficiary bank details and payment terms, as consumed
    by Factur-X generators.
"""

from pydantic import BaseModel, Field

from einvoice_fr.models.enums import PaymentMeansCode


class PaymentInstructions(BaseModel):
    """Instructions de paiement.

    FR: L'IBAN n'est pas validé à la construction ; le contrôle de la
        facture signale un IBAN invalide (``INVALID_IBAN``).
    EN: The IBAN is not validated at construction; the invoice check
        reports an invalid IBAN (``INVALID_IBAN``).
    """

    payment_means_code: PaymentMeansCode = Field(
        default=PaymentMeansCode.SEPA_CREDIT_TRANSFER,
        description="Code du moyen de paiement BT-81 / Payment means code",
    )
    payment_means_text: str | None = Field(
        default=None,
        description="Libellé du moyen de paiement BT-82 / Payment means text",
    )
    remittance_information: str | None = Field(
        default=None,
        description="Référence de paiement BT-83 / Remittance information",
    )
    iban: str | None = Field(
        default=None,
        description="IBAN du bénéficiaire BT-84 / Payment account identifier",
    )
    account_name: str | None = Field(
        default=None,
        description="Titulaire du compte BT-85 / Account name",
    )
    bic: str | None = Field(
        default=None,
        description="BIC du prestataire BT-86 / Payment service provider",
    )
    payment_terms: str | None = Field(
        default=None,
        description="Conditions de paiement BT-20 / Payment terms",
    )
