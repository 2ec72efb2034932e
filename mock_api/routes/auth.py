"""
Mock authentication endpoints.

Endpoints:
    POST /login -- Issue a signed token for any credentials except the
                   password ``"wrong"``.
    GET  /me    -- Verify a Bearer token and return its identity claims.

No credentials are checked against a store; the only rejected password
is the literal ``"wrong"`` so scenarios can exercise the 401 path on
purpose.
"""

from __future__ import annotations

import logging

from flask import Blueprint, Response, current_app, request

from ..responses import json_error, json_success, request_body
from ..tokens import create_token, extract_bearer_token, verify_token

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)

REJECTED_PASSWORD = "wrong"


@auth_bp.route("/login", methods=["POST"])
def login() -> tuple[Response, int]:
    """
    Issue a token for ``username``.

    Request Body (JSON):
        username: Any non-empty string (required)
        password: Any non-empty string except ``"wrong"`` (required)

    Returns:
        200 with ``{token, expiresIn}``, 400 when a field is missing,
        or 401 when the password is ``"wrong"``.
    """
    data = request_body()
    username = data.get("username")
    password = data.get("password")

    if not username or not password:
        return json_error("username and password are required", 400)

    if password == REJECTED_PASSWORD:
        logger.info("Rejected login for %s", username)
        return json_error("Authentication failed", 401)

    expiry_seconds = current_app.config["JWT_EXPIRY_SECONDS"]
    token = create_token(
        username=str(username),
        secret=current_app.config["JWT_SECRET"],
        expiry_seconds=expiry_seconds,
    )
    return json_success({"token": token, "expiresIn": expiry_seconds})


@auth_bp.route("/me", methods=["GET"])
def me() -> tuple[Response, int]:
    """
    Return the identity carried by the Bearer token.

    Returns:
        200 with ``{userId, username}``, or 401 when the header is
        missing or the token fails verification.
    """
    token = extract_bearer_token(request.headers.get("Authorization"))
    if token is None:
        return json_error("Authentication token required", 401)

    payload = verify_token(token, current_app.config["JWT_SECRET"])
    if payload is None:
        return json_error("Invalid token", 401)

    return json_success({"userId": payload["userId"], "username": payload["username"]})
