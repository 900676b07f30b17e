"""EmailAddress value object for validated, normalized email storage."""

import re
from dataclasses import dataclass

from app.fundamentals.domain.exceptions import InvalidEmailFormatError


# Basic shape check: local part, "@", domain with at least one dot before an
# alphabetic top-level segment. \w is restricted to ASCII.
_EMAIL_PATTERN = re.compile(
    r"[\w+\-.]+@[a-z\d\-.]+\.[a-z]+",
    re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True)
class EmailAddress:
    """Immutable value object representing a validated email address.

    Validation is case-insensitive, but the stored value is always lowercase,
    so two addresses differing only in case compare (and hash) equal.

    Attributes:
        value: The normalized (lowercase) email address string.

    Example:
        >>> EmailAddress("User@EXAMPLE.COM").value
        'user@example.com'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate the email format and normalize it to lowercase."""
        if not isinstance(self.value, str) or not _EMAIL_PATTERN.fullmatch(self.value):
            raise InvalidEmailFormatError(self.value)

        object.__setattr__(self, "value", self.value.lower())

    def __str__(self) -> str:
        return self.value
