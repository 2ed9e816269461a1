"""Custom exceptions for the corporate tax calculator."""

from typing import Any

from corptax.models.enums import ErrorKind


class TaxComputationError(Exception):
    """Base exception for tax computation errors."""

    kind: ErrorKind


class InitializationError(TaxComputationError):
    """Raised when the decimal context cannot be built from the calculator config."""

    kind = ErrorKind.INITIALIZATION

    def __init__(self, message: str):
        super().__init__(f"Calculator initialization failed: {message}")


class InvalidInputError(TaxComputationError):
    """Raised when a numeric field cannot be coerced to a finite decimal."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, field: str, value: Any, reason: str | None = None):
        self.field = field
        self.value = value
        self.reason = reason
        detail = f"{value!r}" if reason is None else reason
        super().__init__(f"Invalid numeric value for '{field}': {detail}")


class UnspecifiedFilingMethodError(TaxComputationError):
    """Raised when filing-method dispatch gets no recognized method."""

    kind = ErrorKind.UNSPECIFIED_FILING_METHOD

    def __init__(self, value: Any = None):
        self.value = value
        if value is None:
            message = "Filing method not specified"
        else:
            message = f"Unrecognized filing method: {value!r}"
        super().__init__(f"{message}. Valid: book, standard, audit")
