"""Response envelope helpers shared by every mock route."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from flask import Response, jsonify, request


def utc_timestamp() -> str:
    """Return the current time as an ISO-8601 UTC string."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def json_success(data: Any = None, status_code: int = 200, **extra: Any) -> tuple[Response, int]:
    """
    Build a ``{"success": true, ...}`` response.

    Args:
        data: Value placed under the ``data`` key; omitted when ``None``.
        status_code: HTTP status code to return.
        **extra: Additional top-level keys (``message``, ``count``...).

    Returns:
        A ``(Response, int)`` tuple for a Flask view.
    """
    body: dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    body.update(extra)
    return jsonify(body), status_code


def json_error(message: str, status_code: int) -> tuple[Response, int]:
    """Build a ``{"success": false, "error": ...}`` response."""
    return jsonify({"success": False, "error": message}), status_code


def request_body() -> dict[str, Any]:
    """Return the JSON request body as a dict, or ``{}`` when absent or malformed."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return {}
