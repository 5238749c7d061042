from __future__ import annotations
from pydantic import BaseModel, Field, SecretStr, field_validator

from .constants import ROLES, PASSWORD_MIN_LENGTH, PASSWORD_MAX_BYTES


class SeedUser(BaseModel):
    """Bootstrap account supplied through configuration (never hard-coded)."""

    username: str = Field(..., min_length=1, max_length=64)
    password: SecretStr
    role: str = "user"

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username must not be blank")
        return v

    @field_validator("password")
    @classmethod
    def password_length(cls, v: SecretStr) -> SecretStr:
        raw = v.get_secret_value()
        if len(raw) < PASSWORD_MIN_LENGTH:
            raise ValueError(f"password must be at least {PASSWORD_MIN_LENGTH} characters")
        if len(raw.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
        return v

    @field_validator("role")
    @classmethod
    def valid_role(cls, v: str) -> str:
        if v not in ROLES:
            raise ValueError("unsupported role")
        return v


class SeedOutcome(BaseModel):
    username: str
    role: str
    created: bool
