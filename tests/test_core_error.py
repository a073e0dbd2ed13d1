# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import pytest

from dashview_lib.core.config import CFG
from dashview_lib.core.error import (
    DVError,
    DVInvalidQuotaFileError,
    DVMissingQuotaFieldError,
    DVUnparseableExtendedDataError,
)


@pytest.mark.parametrize(
    "error_cls",
    [DVUnparseableExtendedDataError, DVInvalidQuotaFileError, DVMissingQuotaFieldError],
)
def test_errors_derive_from_dv_error(error_cls):
    assert issubclass(error_cls, DVError)
    assert error_cls.exit_code == CFG.exit_codes.default


def test_missing_field_error_keeps_field_name():
    error = DVMissingQuotaFieldError("file_limit")

    assert error.field_name == "file_limit"
    assert str(error) == "file_limit"
