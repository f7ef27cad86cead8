"""Bearer token reading for request handlers."""

from __future__ import annotations

from typing import Any

from jose import jwt

BEARER_PREFIX = "Bearer "


def read_token(authorization: str | None) -> dict[str, Any] | None:
    """Return the claims of the bearer token in an Authorization header.

    The signature is not verified; callers use this only to read claims from
    a token the authentication middleware has already accepted.  Returns None
    when the header is missing or blank.  Malformed tokens raise
    jose.JWTError.
    """
    if authorization is None or not authorization.strip():
        return None
    token = authorization.strip()
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):]
    return jwt.get_unverified_claims(token.strip())
