"""Tests de la hiérarchie d'exceptions des services de recherche."""

import pytest

from einvoice_fr.errors import EInvoiceError
from einvoice_fr.lookup.errors import (
    LookupConnectionError,
    LookupNotFoundError,
    LookupServiceError,
)


class TestHierarchy:
    @pytest.mark.parametrize("error_class", [LookupNotFoundError, LookupConnectionError])
    def test_subclasses_of_base(self, error_class):
        assert issubclass(error_class, LookupServiceError)

    def test_base_is_package_error(self):
        assert issubclass(LookupServiceError, EInvoiceError)

    def test_catchable_as_base(self):
        with pytest.raises(LookupServiceError, match="timeout"):
            raise LookupConnectionError("timeout")
