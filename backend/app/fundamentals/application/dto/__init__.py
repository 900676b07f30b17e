"""Data transfer objects for application layer."""

from app.fundamentals.application.dto.money_dto import EmailAddressDTO, MoneyDTO

__all__ = [
    "MoneyDTO",
    "EmailAddressDTO",
]
