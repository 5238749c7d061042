"""Pydantic domain models for the cash desk backend."""

from .constants import (
    ROLES,
    PAYMENT_METHODS,
    CASH_PAYMENT_METHOD,
)  # re-export
from .user import SeedUser, SeedOutcome

__all__ = [
    "ROLES",
    "PAYMENT_METHODS",
    "CASH_PAYMENT_METHOD",
    "SeedUser",
    "SeedOutcome",
]
