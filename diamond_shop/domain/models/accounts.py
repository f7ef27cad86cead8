"""Account request and response models.

These are the payloads the authentication endpoints validate before any
business logic runs. Passwords arrive already hashed client-side; the models
only require them to be present.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from .enums import Role

EMAIL_MAX_LENGTH = 50


class AccountRequest(BaseModel):
    """Login credentials."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    email: EmailStr
    password: str = Field(min_length=1)


class AccountTokenRequest(BaseModel):
    """An existing token pair presented for re-generation."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    access_token: str = Field(min_length=1)
    refresh_token: str = Field(min_length=1)


class RegisterRequest(BaseModel):
    """New customer registration."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    username: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def _email_length(cls, v: str) -> str:
        if len(v) > EMAIL_MAX_LENGTH:
            raise ValueError(f"email must be at most {EMAIL_MAX_LENGTH} characters")
        return v


class TokenPair(BaseModel):
    model_config = ConfigDict(frozen=True)

    access_token: str
    refresh_token: str


class AccountResponse(BaseModel):
    """Returned by a successful login."""

    model_config = ConfigDict(frozen=True)

    account_id: int
    email: str
    role: Role
    tokens: TokenPair
