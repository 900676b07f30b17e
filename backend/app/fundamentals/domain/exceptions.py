"""Domain-layer exceptions raised by value object validation.

Every error is a caller-input problem: it is raised synchronously at
construction or during an operation and leaves no partial state behind.
All errors subclass ValueError so callers that only care about "bad input"
can catch that instead of the specific type.
"""


class DomainValidationError(ValueError):
    """Base class for all value object validation errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidEmailFormatError(DomainValidationError):
    """Raised when a string is not a well-formed email address."""

    def __init__(self, value: object) -> None:
        super().__init__(
            message="Invalid email format",
            code="INVALID_EMAIL_FORMAT"
        )
        self.value = value


class InvalidAmountError(DomainValidationError):
    """Raised when a monetary amount is not numeric."""

    def __init__(self, amount: object) -> None:
        super().__init__(
            message="Amount must be a number",
            code="INVALID_AMOUNT"
        )
        self.amount = amount


class NegativeAmountError(DomainValidationError):
    """Raised when a monetary amount is below zero."""

    def __init__(self, amount: object) -> None:
        super().__init__(
            message="Amount cannot be negative",
            code="NEGATIVE_AMOUNT"
        )
        self.amount = amount


class InvalidCurrencyCodeError(DomainValidationError):
    """Raised when a currency code is not exactly three uppercase letters."""

    def __init__(self, currency: object) -> None:
        super().__init__(
            message="Currency code must be 3 characters",
            code="INVALID_CURRENCY_CODE"
        )
        self.currency = currency


class CurrencyMismatchError(DomainValidationError):
    """Raised when two Money values with different currencies are combined."""

    def __init__(self, left: str, right: str) -> None:
        super().__init__(
            message="Cannot perform operations between different currencies",
            code="CURRENCY_MISMATCH"
        )
        self.left = left
        self.right = right


class NegativeResultError(DomainValidationError):
    """Raised when a subtraction would produce a negative amount."""

    def __init__(self) -> None:
        super().__init__(
            message="Result would be negative",
            code="NEGATIVE_RESULT"
        )


class InvalidFactorError(DomainValidationError):
    """Raised when a multiplication factor is not numeric."""

    def __init__(self, factor: object) -> None:
        super().__init__(
            message="Factor must be a number",
            code="INVALID_FACTOR"
        )
        self.factor = factor


class NegativeFactorError(DomainValidationError):
    """Raised when a multiplication factor is below zero."""

    def __init__(self, factor: object) -> None:
        super().__init__(
            message="Factor cannot be negative",
            code="NEGATIVE_FACTOR"
        )
        self.factor = factor


class InvalidDivisorError(DomainValidationError):
    """Raised when a divisor is not numeric."""

    def __init__(self, divisor: object) -> None:
        super().__init__(
            message="Divisor must be a number",
            code="INVALID_DIVISOR"
        )
        self.divisor = divisor


class DivideByZeroError(DomainValidationError):
    """Raised when dividing Money by zero (integer or floating-point)."""

    def __init__(self) -> None:
        super().__init__(
            message="Cannot divide by zero",
            code="DIVIDE_BY_ZERO"
        )


class NegativeDivisorError(DomainValidationError):
    """Raised when a divisor is below zero."""

    def __init__(self, divisor: object) -> None:
        super().__init__(
            message="Divisor cannot be negative",
            code="NEGATIVE_DIVISOR"
        )
        self.divisor = divisor


class AmountOverflowError(DomainValidationError):
    """Raised when an operation produces an amount beyond the decimal exponent range."""

    def __init__(self) -> None:
        super().__init__(
            message="Result is too large",
            code="AMOUNT_OVERFLOW"
        )
