"""Application layer - boundary translation for the value objects.

This layer contains:
- DTOs: Data Transfer Objects for API input/output
"""

from app.fundamentals.application.dto import EmailAddressDTO, MoneyDTO

__all__ = [
    "MoneyDTO",
    "EmailAddressDTO",
]
