"""Résultats de validation structurés.

FR: Toute validation retourne des données (jamais d'exception) : une liste
    d'erreurs bloquantes et une liste d'avertissements non bloquants.
EN: Every validation returns data (never an exception): a list of blocking
    errors and a list of non-blocking warnings.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, computed_field

from einvoice_fr.models.enums import ErrorCode, Severity


class ValidationIssue(BaseModel):
    """Problème de validation sur un champ.

    FR: Le ``code`` est stable et lisible par une machine ; le ``message``
        est destiné à l'utilisateur (en français) et ne doit pas être analysé.
    EN: ``code`` is stable and machine-readable; ``message`` is meant for
        humans (in French) and must not be parsed.
    """

    field: str = Field(..., description="Champ concerné / Offending field")
    code: str = Field(..., description="Code stable / Stable code")
    message: str = Field(..., description="Message lisible / Human message")
    severity: Severity = Field(
        default=Severity.ERROR,
        description="Gravité / Severity",
    )
    details: dict[str, Any] | None = Field(
        default=None,
        description="Données complémentaires / Extra details",
    )


# Nom historique du contrat de données
ValidationError = ValidationIssue


class ValidationResult(BaseModel):
    """Résultat agrégé d'une validation.

    FR: ``is_valid`` est calculé à partir des erreurs : les avertissements
        n'influencent jamais la validité.
    EN: ``is_valid`` is derived from the errors: warnings never affect
        validity.
    """

    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        """Vrai si aucune erreur / True when there is no error."""
        return not self.errors

    @property
    def codes(self) -> list[str]:
        """Codes des erreurs puis des avertissements."""
        return [issue.code for issue in (*self.errors, *self.warnings)]

    def has_code(self, code: str) -> bool:
        return code in self.codes

    def add_error(
        self,
        field: str,
        code: ErrorCode | str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.errors.append(
            ValidationIssue(
                field=field,
                code=code,
                message=message,
                severity=Severity.ERROR,
                details=details,
            )
        )

    def add_warning(
        self,
        field: str,
        code: ErrorCode | str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.warnings.append(
            ValidationIssue(
                field=field,
                code=code,
                message=message,
                severity=Severity.WARNING,
                details=details,
            )
        )

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Retourne un nouveau résultat combinant les deux."""
        return ValidationResult(
            errors=[*self.errors, *other.errors],
            warnings=[*self.warnings, *other.warnings],
        )

    def prefixed(self, path: str) -> ValidationResult:
        """Retourne une copie dont les champs sont préfixés par ``path``.

        FR: Utilisé pour rattacher les erreurs d'une partie à la facture
            (``siren`` devient ``supplier.siren``).
        EN: Used to re-root party errors under the invoice
            (``siren`` becomes ``supplier.siren``).
        """

        def _reroot(issue: ValidationIssue) -> ValidationIssue:
            return issue.model_copy(update={"field": f"{path}.{issue.field}"})

        return ValidationResult(
            errors=[_reroot(e) for e in self.errors],
            warnings=[_reroot(w) for w in self.warnings],
        )
