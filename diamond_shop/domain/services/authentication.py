"""Authentication service interface.

Issues and refreshes access/refresh token pairs.  The concrete service lives
with the HTTP layer; repositories and controllers depend only on this
abstraction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from diamond_shop.domain.models.accounts import (
    AccountRequest,
    AccountResponse,
    AccountTokenRequest,
    TokenPair,
)


class JwtSettings(BaseModel):
    """Token issuance parameters, bound from configuration."""

    model_config = ConfigDict(frozen=True)

    issuer: str
    audience: str
    secret_key: str = Field(min_length=16)
    access_token_minutes: int = Field(default=30, gt=0)
    refresh_token_days: int = Field(default=7, gt=0)


class AuthenticationService(ABC):
    """Login and token re-generation.

    Both operations raise BadRequestError for invalid credentials or tokens
    and NotFoundError when the account does not exist.
    """

    @abstractmethod
    async def login(self, request: AccountRequest, jwt_settings: JwtSettings) -> AccountResponse:
        """Authenticate by email/password and issue a fresh token pair."""

    @abstractmethod
    async def regenerate_tokens(
        self, request: AccountTokenRequest, jwt_settings: JwtSettings
    ) -> TokenPair:
        """Exchange a previously issued token pair for a new one."""
