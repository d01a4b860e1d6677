"""Modèle d'entreprise (partie vendeur ou acheteur).

FR: Identité et adresse postale d'une entreprise, avec trois indicateurs
    de validation indépendants (SIREN, SIRET, TVA). Un indicateur n'est
    vrai que si le validateur a accepté la valeur actuellement stockée :
    toute modification de l'identifiant remet l'indicateur à faux.
EN: Company identity and postal address, with three independent validation
    flags (SIREN, SIRET, VAT). A flag is true only if the validator accepted
    the currently stored value: changing the identifier resets the flag.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from einvoice_fr.validators.siren import validate_siren, validate_siret
from einvoice_fr.validators.vat import validate_french_vat

# Identifiant → indicateur de validation correspondant
_VALIDATION_FLAGS: dict[str, str] = {
    "siren": "siren_validated",
    "siret": "siret_validated",
    "vat_number": "vat_validated",
}
_FLAG_NAMES = frozenset(_VALIDATION_FLAGS.values())


def _is_valid_siren(value: str | None) -> bool:
    return bool(value) and validate_siren(value).is_valid


def _is_valid_siret(value: str | None) -> bool:
    return bool(value) and validate_siret(value).is_valid


def _is_valid_vat(value: str | None) -> bool:
    return bool(value) and validate_french_vat(value).is_valid


_VALIDATORS: dict[str, Callable[[str | None], bool]] = {
    "siren": _is_valid_siren,
    "siret": _is_valid_siret,
    "vat_number": _is_valid_vat,
}


class Company(BaseModel):
    """Entreprise (vendeur ou acheteur) au sens EN16931.

    FR: Correspond aux groupes BG-4 (vendeur) et BG-7 (acheteur).
    EN: Maps to business groups BG-4 (seller) and BG-7 (buyer).
    """

    model_config = ConfigDict(validate_assignment=True)

    # --- Identité ---
    name: str = Field(..., description="Nom commercial BT-27/BT-44 / Trading name")
    legal_name: str | None = Field(
        default=None,
        description="Raison sociale BT-28/BT-45 / Legal name",
    )
    company_type: str | None = Field(
        default=None,
        description="Forme juridique (SA, SARL, SAS...) / Legal form",
    )

    # --- Identifiants français ---
    siren: str | None = Field(
        default=None,
        description="Numéro SIREN BT-30/BT-47 / SIREN number",
    )
    siret: str | None = Field(default=None, description="Numéro SIRET / SIRET number")
    vat_number: str | None = Field(
        default=None,
        description="Numéro de TVA BT-31/BT-48 / VAT identifier",
    )

    # --- Adresse postale ---
    address_line1: str | None = Field(default=None, description="BT-35/BT-50")
    address_line2: str | None = Field(default=None, description="BT-36/BT-51")
    city: str | None = Field(default=None, description="Ville BT-37/BT-52 / City")
    postal_code: str | None = Field(
        default=None,
        description="Code postal BT-38/BT-53 / Postal code",
    )
    country_code: str = Field(
        default="FR",
        min_length=2,
        max_length=2,
        description="Code pays ISO 3166-1 BT-40/BT-55 / Country code",
    )

    # --- Contact ---
    email: str | None = Field(default=None, description="Email BT-43/BT-58")
    phone: str | None = Field(default=None, description="Téléphone BT-42/BT-57")
    website: str | None = Field(default=None, description="Site web / Website")

    # --- Statut de validation ---
    siren_validated: bool = Field(default=False, description="SIREN validé")
    siret_validated: bool = Field(default=False, description="SIRET validé")
    vat_validated: bool = Field(default=False, description="TVA validée")
    validation_date: datetime | None = Field(
        default=None,
        description="Horodatage de la dernière validation / Last validation time",
    )

    def model_post_init(self, __context: Any) -> None:
        # Indicateur fourni à la construction : confirmé par le validateur
        for identifier, flag in _VALIDATION_FLAGS.items():
            value = self.__dict__[identifier]
            if self.__dict__[flag] and not _VALIDATORS[identifier](value):
                self.__dict__[flag] = False

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _FLAG_NAMES:
            msg = (
                f"L'indicateur {name} est en lecture seule : "
                "utiliser with_validation()"
            )
            raise AttributeError(msg)
        flag = _VALIDATION_FLAGS.get(name)
        if flag is not None and value != getattr(self, name):
            super().__setattr__(flag, False)
        super().__setattr__(name, value)

    def with_validation(self, validated_at: datetime | None = None) -> Company:
        """Retourne une copie dont les indicateurs reflètent les validateurs.

        FR: L'instance courante n'est pas modifiée.
        EN: The current instance is left untouched.
        """
        update: dict[str, Any] = {
            flag: _VALIDATORS[identifier](getattr(self, identifier))
            for identifier, flag in _VALIDATION_FLAGS.items()
        }
        update["validation_date"] = validated_at or datetime.now(UTC)
        return self.model_copy(update=update)

    @property
    def is_fully_validated(self) -> bool:
        """Vrai si chaque identifiant renseigné a été validé."""
        return all(
            getattr(self, flag)
            for identifier, flag in _VALIDATION_FLAGS.items()
            if getattr(self, identifier)
        )
