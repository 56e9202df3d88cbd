"""Domain exceptions for payments-query.

Exception hierarchy:
    DomainException (base)
    └── Validation Errors (also ValueError)
        ├── InvalidPaymentIdError
        ├── InvalidYearMonthError
        ├── InvalidPriceError
        ├── InvalidPaymentDateError
        ├── InvalidDaysError
        └── InvalidThresholdError

An empty query result is never an error: queries return an empty
collection or a zero sum instead.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from collaborator errors.
    """


class ValidationError(DomainException, ValueError):
    """Base class for invalid input to an entity, value object or query."""


class InvalidPaymentIdError(ValidationError):
    """Raised when a payment ID is not a valid UUID."""


class InvalidYearMonthError(ValidationError):
    """Raised when a year/month pair is out of range or cannot be parsed.

    Valid range: year 1..9999, month 1..12. Textual form is ``YYYY-MM``.
    """


class InvalidPriceError(ValidationError):
    """Raised when a payment item price is not a non-negative Decimal.

    Floats are rejected outright; they cannot represent prices exactly.
    """


class InvalidPaymentDateError(ValidationError):
    """Raised when a payment date is a naive datetime."""


class InvalidDaysError(ValidationError):
    """Raised when the "last N days" window is negative or not an integer."""


class InvalidThresholdError(ValidationError):
    """Raised when a value threshold is not an int or Decimal."""
