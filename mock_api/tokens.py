"""
JWT issuing and verification for the mock auth endpoints.

Tokens are signed with HS256 using a shared secret from the app
configuration.  The mock server never stores users, so a token carries
everything ``/api/auth/me`` needs to answer.

Token structure (claims):
    - ``userId``   -- random integer assigned at login.
    - ``username`` -- the name supplied to ``/api/auth/login``.
    - ``iat``      -- issued-at timestamp (UTC epoch seconds).
    - ``exp``      -- expiration timestamp (UTC epoch seconds).

Key Concepts Demonstrated:
- HS256 signing and verification with PyJWT
- Canonical JWT claims (iat, exp) plus custom identity claims
- Returning ``None`` from verification so callers branch instead of catching
"""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

ALGORITHM = "HS256"
REQUIRED_TOKEN_CLAIMS = ["userId", "username", "iat", "exp"]


def create_token(
    username: str,
    secret: str,
    expiry_seconds: int,
    user_id: int | None = None,
) -> str:
    """
    Create an HS256-signed JWT for *username*.

    Args:
        username: Display name of the user.  Must be a non-empty string.
        secret: Shared signing secret.
        expiry_seconds: Number of seconds from now until the token expires.
        user_id: Identity claim.  A random value in ``[0, 1000)`` is used
            when omitted, matching the mock's stateless login.

    Returns:
        A compact JWS string suitable for an ``Authorization: Bearer`` header.

    Raises:
        ValueError: If *username* is blank.
    """
    if not isinstance(username, str) or not username.strip():
        raise ValueError("username must be a non-empty string")

    if user_id is None:
        user_id = random.randrange(1000)

    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "userId": int(user_id),
        "username": username,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=int(expiry_seconds))).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def verify_token(token: str, secret: str) -> dict[str, Any] | None:
    """
    Decode and validate a token issued by :func:`create_token`.

    Args:
        token: The encoded JWT string.
        secret: Shared signing secret.

    Returns:
        The decoded payload, or ``None`` if the signature, expiry, or
        required claims are invalid.
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            options={"require": REQUIRED_TOKEN_CLAIMS},
        )
    except jwt.InvalidTokenError:
        return None

    if not isinstance(payload.get("userId"), int):
        return None
    if not isinstance(payload.get("username"), str) or not payload["username"].strip():
        return None
    return payload


def extract_bearer_token(auth_header: str | None) -> str | None:
    """Return the token part of ``Bearer <token>``, or ``None``."""
    if not auth_header or not auth_header.startswith("Bearer "):
        return None
    token = auth_header[7:].strip()
    return token or None
