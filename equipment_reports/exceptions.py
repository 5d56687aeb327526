"""
Design (exceptions.py)
- Purpose: Typed failures raised by the validator, the persistence codec and exports.
- Side effects: None.

Validation errors also subclass ValueError and I/O errors subclass OSError, so
callers that only know the builtin types still catch them.
"""


class ReportError(Exception):
    """Base class for every error raised by this package."""


class ReportValidationError(ReportError, ValueError):
    """User input could not be turned into a domain value."""


class InvalidSeverityError(ReportValidationError):
    pass


class InvalidSerialNumberError(ReportValidationError):
    pass


class InvalidVersionFormatError(ReportValidationError):
    pass


class InvalidDateFormatError(ReportValidationError):
    pass


class InvalidEquipmentIdError(ReportValidationError):
    pass


class InvalidReportKindError(ReportValidationError):
    pass


class ReportIOError(ReportError, OSError):
    """Reading or writing the data file or an export file failed."""


class ReportFormatError(ReportIOError):
    """The data file exists but its content cannot be decoded."""
