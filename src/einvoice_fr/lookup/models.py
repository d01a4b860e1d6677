"""Modèles de réponse des services de recherche."""

from datetime import date

from pydantic import BaseModel, Field


class CompanyRegistryEntry(BaseModel):
    """Entrée du répertoire des entreprises (SIREN → identité).

    FR: Informations publiques d'une unité légale telles que publiées par
        le répertoire SIRENE.
    EN: Public information about a legal unit as published by the SIRENE
        registry.
    """

    siren: str = Field(..., description="Numéro SIREN")
    company_name: str = Field(..., description="Dénomination / Company name")
    legal_form: str | None = Field(default=None, description="Forme juridique")
    activity_code: str | None = Field(
        default=None,
        description="Code APE/NAF / Activity code",
    )
    head_office_siret: str | None = Field(
        default=None,
        description="SIRET du siège / Head office SIRET",
    )
    address: str | None = Field(default=None, description="Adresse du siège")
    postal_code: str | None = Field(default=None, description="Code postal")
    city: str | None = Field(default=None, description="Ville")
    creation_date: date | None = Field(default=None, description="Date de création")
    is_active: bool = Field(default=True, description="Unité légale active")
