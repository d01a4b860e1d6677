"""Numérotation séquentielle des factures.

FR: La numérotation doit être chronologique, continue et unique
    (art. 242 nonies A de l'annexe II du CGI). Une séquence peut repartir
    à 1 chaque année. Les numéros sont de la forme ``F-2026-001``.
EN: Numbering must be chronological, continuous and unique. A sequence
    may restart at 1 every year. Numbers look like ``F-2026-001``.
"""

from __future__ import annotations

import re
from datetime import date

from pydantic import BaseModel, ConfigDict, Field

INVOICE_NUMBER_MAX_LENGTH = 50

_INVOICE_NUMBER_RE = re.compile(r"^[A-Z0-9\-_/]{1,50}$", re.IGNORECASE)


def validate_invoice_number(invoice_number: str | None) -> bool:
    """Vrai si le numéro ne contient que lettres, chiffres, ``-``, ``_`` ou ``/``."""
    if not invoice_number:
        return False
    return bool(_INVOICE_NUMBER_RE.match(invoice_number))


class InvoiceSequence(BaseModel):
    """Séquence de numérotation d'une entreprise.

    FR: Immuable : ``next_number`` retourne le numéro attribué et la
        séquence suivante, à persister par l'appelant.
    EN: Immutable: ``next_number`` returns the allocated number and the
        next sequence, for the caller to persist.
    """

    model_config = ConfigDict(frozen=True)

    sequence_name: str = Field(default="default", description="Nom de la séquence")
    prefix: str = Field(default="F", description="Préfixe / Prefix")
    suffix: str | None = Field(default=None, description="Suffixe / Suffix")
    year: int = Field(..., ge=1900, description="Exercice courant / Current year")
    current_number: int = Field(
        default=0,
        ge=0,
        description="Dernier numéro attribué / Last allocated number",
    )
    reset_annually: bool = Field(
        default=True,
        description="Remise à 1 chaque année / Yearly reset",
    )
    padding: int = Field(default=3, ge=1, description="Chiffres minimum / Min digits")

    def format_number(self, number: int, year: int | None = None) -> str:
        """Construit le numéro affiché pour ``number``."""
        parts = [self.prefix] if self.prefix else []
        parts += [str(year or self.year), f"{number:0{self.padding}d}"]
        if self.suffix:
            parts.append(self.suffix)
        return "-".join(parts)

    def next_number(self, today: date | None = None) -> tuple[str, InvoiceSequence]:
        """Attribue le numéro suivant.

        Args:
            today: Date d'émission (date du jour par défaut). Une année
                différente de ``year`` redémarre la séquence si
                ``reset_annually`` est vrai.

        Returns:
            Le numéro attribué et la séquence mise à jour.
        """
        today = today or date.today()
        if self.reset_annually and today.year != self.year:
            number = 1
        else:
            number = self.current_number + 1
        updated = self.model_copy(update={"year": today.year, "current_number": number})
        return updated.format_number(number), updated
