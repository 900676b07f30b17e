# Domain layer - pure business rules, no framework dependencies

from app.fundamentals.domain.exceptions import (
    AmountOverflowError,
    CurrencyMismatchError,
    DivideByZeroError,
    DomainValidationError,
    InvalidAmountError,
    InvalidCurrencyCodeError,
    InvalidDivisorError,
    InvalidEmailFormatError,
    InvalidFactorError,
    NegativeAmountError,
    NegativeDivisorError,
    NegativeFactorError,
    NegativeResultError,
)
from app.fundamentals.domain.value_objects import DEFAULT_CURRENCY, EmailAddress, Money

__all__ = [
    # Value objects
    "EmailAddress",
    "Money",
    "DEFAULT_CURRENCY",
    # Validation errors
    "DomainValidationError",
    "InvalidEmailFormatError",
    "InvalidAmountError",
    "NegativeAmountError",
    "InvalidCurrencyCodeError",
    "CurrencyMismatchError",
    "NegativeResultError",
    "InvalidFactorError",
    "NegativeFactorError",
    "InvalidDivisorError",
    "DivideByZeroError",
    "NegativeDivisorError",
    "AmountOverflowError",
]
