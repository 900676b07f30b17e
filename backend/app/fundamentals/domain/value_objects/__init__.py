"""Domain value objects for the fundamentals context.

This module exports immutable value objects:
- EmailAddress: Validated, lowercase-normalized email addresses
- Money: Non-negative decimal amounts tagged with a currency code
"""

from app.fundamentals.domain.value_objects.email_address import EmailAddress
from app.fundamentals.domain.value_objects.money import DEFAULT_CURRENCY, Money

__all__ = ["EmailAddress", "Money", "DEFAULT_CURRENCY"]
