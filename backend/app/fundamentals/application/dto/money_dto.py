"""Data Transfer Objects for carrying value objects across the API boundary.

These DTOs are the external contract for Money and EmailAddress payloads.
Conversion back into the domain always goes through the value object
constructors, so every domain invariant is re-checked on the way in.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from app.core.logging import get_logger
from app.fundamentals.domain.exceptions import DomainValidationError
from app.fundamentals.domain.value_objects.email_address import EmailAddress
from app.fundamentals.domain.value_objects.money import DEFAULT_CURRENCY, Money

logger = get_logger(__name__)


class MoneyDTO(BaseModel):
    """Monetary amount for API requests and responses.

    The amount is kept as a Decimal and serialized to JSON as a string so no
    precision is lost in transit.
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(description="Non-negative decimal amount (e.g., '1234.567')")
    currency: str = Field(
        default=DEFAULT_CURRENCY,
        description="Three-letter uppercase currency code (e.g., 'JPY', 'USD')"
    )
    display: str | None = Field(
        default=None,
        description="Formatted amount rounded half-up to 2 places (output only, e.g., 'USD 1234.57')"
    )

    @classmethod
    def from_domain(cls, money: Money) -> "MoneyDTO":
        """Build a DTO from a Money value object.

        Args:
            money: The Money value to expose.

        Returns:
            A MoneyDTO with the exact amount, currency and display string.
        """
        return cls(amount=money.amount, currency=money.currency, display=str(money))

    def to_domain(self) -> Money:
        """Convert the payload into a Money value object.

        The display field is ignored; only amount and currency are used.

        Returns:
            A validated Money instance.

        Raises:
            DomainValidationError: If the amount or currency violates a Money invariant.
        """
        try:
            return Money(self.amount, self.currency)
        except DomainValidationError as e:
            logger.debug(f"Rejected money payload ({self.amount!r}, {self.currency!r}): {e.code}")
            raise


class EmailAddressDTO(BaseModel):
    """Email address for API requests and responses."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(description="Email address; normalized to lowercase by the domain")

    @classmethod
    def from_domain(cls, email: EmailAddress) -> "EmailAddressDTO":
        """Build a DTO from an EmailAddress value object."""
        return cls(value=email.value)

    def to_domain(self) -> EmailAddress:
        """Convert the payload into a validated EmailAddress.

        Raises:
            InvalidEmailFormatError: If the value is not a well-formed address.
        """
        try:
            return EmailAddress(self.value)
        except DomainValidationError as e:
            logger.debug(f"Rejected email payload {self.value!r}: {e.code}")
            raise
