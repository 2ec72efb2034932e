"""
Stateless user endpoints.

The handlers accept and echo user data without persisting anything:
a "created" user is never listed afterwards and a "deleted" user can
still be fetched.  Load scenarios only rely on the response shapes.

Endpoints:
    GET    /api/users        - Fixed list of three users
    GET    /api/users/<id>   - Synthesized user for the given ID
    POST   /api/users        - Validate and echo a new user with a random ID
    PUT    /api/users/<id>   - Echo an update acknowledgement
    DELETE /api/users/<id>   - Echo a deletion acknowledgement
"""

from __future__ import annotations

import logging
import random
from typing import Any

from flask import Blueprint, Response

from ..responses import json_error, json_success, request_body, utc_timestamp

logger = logging.getLogger(__name__)

users_bp = Blueprint("users", __name__)

SEED_USERS: list[dict[str, Any]] = [
    {"id": 1, "name": "Taro Tanaka", "email": "tanaka@example.com"},
    {"id": 2, "name": "Hanako Sato", "email": "sato@example.com"},
    {"id": 3, "name": "Ichiro Suzuki", "email": "suzuki@example.com"},
]


def _default_name(user_id: int) -> str:
    return f"User {user_id}"


def _default_email(user_id: int) -> str:
    return f"user{user_id}@example.com"


def _missing_fields(data: dict[str, Any], required_fields: list[str]) -> list[str]:
    """Return the required fields that are absent or blank in *data*."""
    missing = []
    for field in required_fields:
        value = data.get(field)
        if not value or (isinstance(value, str) and not value.strip()):
            missing.append(field)
    return missing


@users_bp.route("", methods=["GET"])
def list_users() -> tuple[Response, int]:
    """Return the fixed seed users."""
    return json_success([dict(user) for user in SEED_USERS])


@users_bp.route("/<int(signed=True):user_id>", methods=["GET"])
def get_user(user_id: int) -> tuple[Response, int]:
    """Synthesize a user for any requested ID."""
    return json_success({
        "id": user_id,
        "name": _default_name(user_id),
        "email": _default_email(user_id),
        "createdAt": utc_timestamp(),
    })


@users_bp.route("", methods=["POST"])
def create_user() -> tuple[Response, int]:
    """
    Validate ``name`` and ``email`` and echo them back with a random ID.

    Returns:
        201 with the new user, or 400 when either field is missing.
    """
    data = request_body()

    missing = _missing_fields(data, ["name", "email"])
    if missing:
        logger.warning("User creation rejected, missing: %s", ", ".join(missing))
        return json_error("name and email are required", 400)

    return json_success({
        "id": random.randrange(10000),
        "name": data["name"],
        "email": data["email"],
        "createdAt": utc_timestamp(),
    }, 201)


@users_bp.route("/<int(signed=True):user_id>", methods=["PUT"])
def update_user(user_id: int) -> tuple[Response, int]:
    """Echo the provided fields, filling gaps with synthesized defaults."""
    data = request_body()
    return json_success({
        "id": user_id,
        "name": data.get("name") or _default_name(user_id),
        "email": data.get("email") or _default_email(user_id),
        "updatedAt": utc_timestamp(),
    })


@users_bp.route("/<int(signed=True):user_id>", methods=["DELETE"])
def delete_user(user_id: int) -> tuple[Response, int]:
    """Acknowledge a deletion; nothing is removed."""
    return json_success(message=f"User ID {user_id} deleted")
