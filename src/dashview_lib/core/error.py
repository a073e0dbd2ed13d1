# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout dashview.

Every dashview-specific exception derives from `DVError` and carries an exit
code used by dashview commands to report failures consistently. Quota-snapshot
errors are caught and logged by `QuotaSet`, so they never reach the dashboard;
malformed extended job data is raised to the caller.
"""

from dashview_lib.core.config import CFG


class DVError(Exception):
    """Common exception type for all recoverable dashview errors."""

    exit_code = CFG.exit_codes.default


class DVUnparseableExtendedDataError(DVError):
    """Raised when the scheduler-specific payload of a job cannot be parsed."""

    pass


class DVInvalidQuotaFileError(DVError):
    """Raised when a quota snapshot has an unsupported version or layout."""

    pass


class DVMissingQuotaFieldError(DVError):
    """Raised when a quota entry lacks a required field."""

    def __init__(self, field_name: str):
        super().__init__(field_name)
        self.field_name = field_name
