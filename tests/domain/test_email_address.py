"""Unit tests for the EmailAddress value object."""

from dataclasses import FrozenInstanceError

import pytest

from app.fundamentals.domain.exceptions import DomainValidationError, InvalidEmailFormatError
from app.fundamentals.domain.value_objects.email_address import EmailAddress


class TestEmailAddressCreation:
    """Tests for EmailAddress construction and normalization."""

    def test_accepts_simple_address(self) -> None:
        """Test that a plain address is stored as-is."""
        email = EmailAddress("user@example.com")

        assert email.value == "user@example.com"

    def test_normalizes_uppercase_to_lowercase(self) -> None:
        """Test that uppercase letters are lowercased on storage."""
        email = EmailAddress("User@EXAMPLE.COM")

        assert email.value == "user@example.com"

    def test_accepts_complex_address(self) -> None:
        """Test dots, plus tags and subdomains in a valid address."""
        email = EmailAddress("test.user+tag@sub.example.com")

        assert email.value == "test.user+tag@sub.example.com"

    @pytest.mark.parametrize(
        "raw",
        ["user@example.com", "First.Last@Mail.Example.ORG", "a-b_c+d@x-y.io"],
    )
    def test_normalization_is_idempotent(self, raw: str) -> None:
        """Test that re-wrapping a normalized value yields the same value."""
        email = EmailAddress(raw)

        assert email.value == raw.lower()
        assert EmailAddress(email.value).value == email.value

    @pytest.mark.parametrize(
        "raw",
        [
            "invalid-email",
            "user@domain",
            "user@",
            "@example.com",
            "user@example.",
            "user@example.c0m",
            " user@example.com",
            "user@example.com ",
            "",
        ],
    )
    def test_rejects_malformed_address(self, raw: str) -> None:
        """Test that malformed input raises InvalidEmailFormatError."""
        with pytest.raises(InvalidEmailFormatError) as exc_info:
            EmailAddress(raw)

        assert exc_info.value.message == "Invalid email format"
        assert exc_info.value.code == "INVALID_EMAIL_FORMAT"

    def test_rejects_non_string(self) -> None:
        """Test that None is rejected with the same format error."""
        with pytest.raises(InvalidEmailFormatError):
            EmailAddress(None)  # type: ignore[arg-type]

    def test_rejects_non_ascii_local_part(self) -> None:
        """Test that word characters are limited to ASCII."""
        with pytest.raises(InvalidEmailFormatError):
            EmailAddress("jürgen@example.com")

    def test_error_is_a_value_error(self) -> None:
        """Test that validation errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            EmailAddress("invalid-email")

        assert issubclass(InvalidEmailFormatError, DomainValidationError)


class TestEmailAddressEquality:
    """Tests for value-based equality and hashing."""

    def test_same_address_is_equal(self) -> None:
        """Test equality of two identical addresses."""
        assert EmailAddress("user@example.com") == EmailAddress("user@example.com")

    def test_equal_regardless_of_case(self) -> None:
        """Test equality after case normalization."""
        assert EmailAddress("User@EXAMPLE.com") == EmailAddress("user@example.COM")

    def test_different_addresses_are_not_equal(self) -> None:
        """Test inequality of distinct addresses."""
        assert EmailAddress("user1@example.com") != EmailAddress("user2@example.com")

    def test_not_equal_to_plain_string(self) -> None:
        """Test that a str with the same text is not equal."""
        assert EmailAddress("user@example.com") != "user@example.com"

    def test_not_equal_to_none(self) -> None:
        """Test that comparing with None returns False without raising."""
        assert (EmailAddress("user@example.com") == None) is False  # noqa: E711

    def test_usable_as_dict_key(self) -> None:
        """Test that equal addresses retrieve the same dict entry."""
        subscriptions = {EmailAddress("User@Example.com"): "daily"}

        assert subscriptions[EmailAddress("user@example.com")] == "daily"


class TestEmailAddressImmutability:
    """Tests for frozen semantics and string conversion."""

    def test_value_cannot_be_reassigned(self) -> None:
        """Test that the frozen dataclass rejects attribute assignment."""
        email = EmailAddress("user@example.com")

        with pytest.raises(FrozenInstanceError):
            email.value = "other@example.com"  # type: ignore[misc]

    def test_str_returns_normalized_value(self) -> None:
        """Test str() output."""
        assert str(EmailAddress("User@EXAMPLE.COM")) == "user@example.com"
