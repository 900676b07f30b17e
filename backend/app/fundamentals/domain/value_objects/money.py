"""Money value object for currency-aware monetary arithmetic."""

import re
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_UP,
    Decimal,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Self

from app.fundamentals.domain.exceptions import (
    AmountOverflowError,
    CurrencyMismatchError,
    DivideByZeroError,
    InvalidAmountError,
    InvalidCurrencyCodeError,
    InvalidDivisorError,
    InvalidFactorError,
    NegativeAmountError,
    NegativeDivisorError,
    NegativeFactorError,
    NegativeResultError,
)

DEFAULT_CURRENCY = "JPY"

_CURRENCY_PATTERN = re.compile(r"[A-Z]{3}")
_DISPLAY_QUANTUM = Decimal("0.01")

Numeric = int | float | Decimal


def _to_decimal(value: object, accept_strings: bool = True) -> Decimal | None:
    """Convert a numeric value to a finite Decimal.

    Floats go through their string representation so that 0.1 becomes
    Decimal("0.1") rather than the nearest binary fraction.

    Args:
        value: The value to convert.
        accept_strings: Whether decimal strings such as "12.50" are allowed.

    Returns:
        The converted Decimal, or None if the value is not a finite number.
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str) and accept_strings:
        # Decimal() tolerates padding and digit separators; plain literals only.
        if value != value.strip() or "_" in value:
            return None
        try:
            result = Decimal(value)
        except InvalidOperation:
            return None
    else:
        return None

    return result if result.is_finite() else None


@contextmanager
def _arithmetic(prec: int | None = MAX_PREC) -> Iterator[None]:
    """Decimal context for Money arithmetic.

    The exponent range is widened to the maximum. With the default prec the
    result of add, subtract and multiply is exact; pass None to keep the
    current context precision (used for division).

    Raises:
        AmountOverflowError: If a result still exceeds the exponent range.
    """
    with localcontext() as ctx:
        if prec is not None:
            ctx.prec = prec
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        try:
            yield
        except Overflow as e:
            raise AmountOverflowError() from e


@dataclass(frozen=True)
class Money:
    """Immutable value object representing a non-negative amount in a currency.

    The amount is always stored as a Decimal. Arithmetic between two Money
    values requires the same currency and returns a new instance; the
    operands are never modified.

    Attributes:
        amount: The non-negative decimal amount.
        currency: ISO-style currency code, exactly three uppercase letters.

    Example:
        >>> price = Money(1000, "JPY")
        >>> tax = Money(100, "JPY")
        >>> str(price + tax)
        'JPY 1100.00'
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        """Validate the amount and currency, then normalize the amount to Decimal."""
        amount = _to_decimal(self.amount)
        if amount is None:
            raise InvalidAmountError(self.amount)
        if amount < 0:
            raise NegativeAmountError(self.amount)
        if not isinstance(self.currency, str) or not _CURRENCY_PATTERN.fullmatch(self.currency):
            raise InvalidCurrencyCodeError(self.currency)

        # copy_abs() only changes Decimal("-0")
        object.__setattr__(self, "amount", amount.copy_abs())

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> Self:
        """Create a zero amount in the given currency."""
        return cls(Decimal(0), currency)

    @property
    def is_zero(self) -> bool:
        """Check if the amount is zero."""
        return self.amount.is_zero()

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)

        with _arithmetic():
            result = self.amount + other.amount
        return Money(result, self.currency)

    def __sub__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)

        with _arithmetic():
            result = self.amount - other.amount
        if result < 0:
            raise NegativeResultError()

        return Money(result, self.currency)

    def __mul__(self, factor: Numeric) -> "Money":
        value = _to_decimal(factor, accept_strings=False)
        if value is None:
            raise InvalidFactorError(factor)
        if value < 0:
            raise NegativeFactorError(factor)

        with _arithmetic():
            result = self.amount * value
        return Money(result, self.currency)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Numeric) -> "Money":
        value = _to_decimal(divisor, accept_strings=False)
        if value is None:
            raise InvalidDivisorError(divisor)
        if value == 0:
            raise DivideByZeroError()
        if value < 0:
            raise NegativeDivisorError(divisor)

        with _arithmetic(prec=None):
            result = self.amount / value
        return Money(result, self.currency)

    def compare(self, other: object) -> int | None:
        """Three-way comparison against another Money value.

        Args:
            other: The value to compare with.

        Returns:
            -1, 0 or 1 when other is Money in the same currency, or None when
            other is not Money at all (the two values are incomparable).

        Raises:
            CurrencyMismatchError: If other is Money in a different currency.
        """
        if not isinstance(other, Money):
            return None
        self._check_same_currency(other)

        if self.amount < other.amount:
            return -1
        if self.amount > other.amount:
            return 1
        return 0

    def __lt__(self, other: object) -> bool:
        result = self.compare(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: object) -> bool:
        result = self.compare(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: object) -> bool:
        result = self.compare(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: object) -> bool:
        result = self.compare(other)
        if result is None:
            return NotImplemented
        return result >= 0

    def __str__(self) -> str:
        # Widen precision and exponent range so quantize() never overflows on large amounts.
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, self.amount.adjusted() + 3)
            ctx.Emax = MAX_EMAX
            ctx.Emin = MIN_EMIN
            rounded = self.amount.quantize(_DISPLAY_QUANTUM, rounding=ROUND_HALF_UP)
        return f"{self.currency} {rounded:f}"

    def _check_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)
