"""Tests du résultat de validation structuré."""

from einvoice_fr.models.enums import ErrorCode, Severity
from einvoice_fr.models.validation import ValidationError, ValidationIssue, ValidationResult


class TestValidationResult:
    def test_empty_is_valid(self):
        assert ValidationResult().is_valid

    def test_error_invalidates(self):
        result = ValidationResult()
        result.add_error("siren", ErrorCode.INVALID_SIREN, "SIREN invalide")
        assert not result.is_valid
        assert result.errors[0].severity == Severity.ERROR

    def test_warning_keeps_valid(self):
        result = ValidationResult()
        result.add_warning("phone", ErrorCode.INVALID_PHONE, "Téléphone douteux")
        assert result.is_valid
        assert result.codes == ["INVALID_PHONE"]

    def test_is_valid_is_serialized(self):
        result = ValidationResult()
        result.add_error("siret", ErrorCode.INVALID_SIRET, "SIRET invalide")
        dumped = result.model_dump()
        assert dumped["is_valid"] is False
        assert dumped["errors"][0]["code"] == "INVALID_SIRET"

    def test_merge(self):
        first = ValidationResult()
        first.add_error("siren", ErrorCode.INVALID_SIREN, "x")
        second = ValidationResult()
        second.add_warning("phone", ErrorCode.INVALID_PHONE, "y")
        merged = first.merge(second)
        assert merged.codes == ["INVALID_SIREN", "INVALID_PHONE"]
        assert len(first.warnings) == 0

    def test_prefixed(self):
        result = ValidationResult()
        result.add_error("siren", ErrorCode.INVALID_SIREN, "x")
        prefixed = result.prefixed("supplier")
        assert prefixed.errors[0].field == "supplier.siren"
        assert result.errors[0].field == "siren"

    def test_legacy_alias(self):
        assert ValidationError is ValidationIssue
