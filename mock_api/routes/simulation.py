"""
Endpoints that simulate server behaviour for load scenarios.

Endpoints:
    GET  /api/delay/<ms>      - Sleep min(ms, MAX_DELAY_MS) then respond
    GET  /api/random-delay    - Sleep a random 100-2000 ms then respond
    GET  /api/status/<code>   - Respond with the requested status code
    GET  /api/random-error    - Fail with 500 at RANDOM_ERROR_RATE
    GET  /api/large-payload   - Return ``size`` synthetic items
    POST /api/upload          - Return synthetic upload metadata

Randomness comes from the module-level ``random`` functions and delays
from ``time.sleep`` so tests can patch either.
"""

from __future__ import annotations

import logging
import random
import re
import time
from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request

from ..responses import json_error, json_success, request_body, utc_timestamp

logger = logging.getLogger(__name__)

simulation_bp = Blueprint("simulation", __name__)

STATUS_MESSAGES = {
    200: "OK",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}

PAYLOAD_DESCRIPTION = "This is dummy data for testing large payloads. " * 5
DEFAULT_UPLOAD_FILENAME = "uploaded-file.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(value: Any, default: int) -> int:
    """
    Parse the leading integer of *value*, returning *default* when there is none.

    ``"150ms"`` parses as 150 and ``"abc"`` as *default*; a parsed zero
    also yields *default*, so callers treat ``0`` as "not provided".
    """
    if value is None:
        return default
    match = _LEADING_INT.match(str(value))
    if not match:
        return default
    return int(match.group(1)) or default


@simulation_bp.route("/delay/<ms>", methods=["GET"])
def delay(ms: str) -> tuple[Response, int]:
    """Sleep for the requested milliseconds, capped at ``MAX_DELAY_MS``."""
    requested = parse_int(ms, 0)
    actual = max(0, min(requested, current_app.config["MAX_DELAY_MS"]))

    time.sleep(actual / 1000)

    return json_success({
        "requestedDelay": requested,
        "actualDelay": actual,
        "timestamp": utc_timestamp(),
    })


@simulation_bp.route("/random-delay", methods=["GET"])
def random_delay() -> tuple[Response, int]:
    """Sleep a random duration in ``[RANDOM_DELAY_MIN_MS, RANDOM_DELAY_MAX_MS)``."""
    low = current_app.config["RANDOM_DELAY_MIN_MS"]
    high = current_app.config["RANDOM_DELAY_MAX_MS"]
    delay_ms = random.randrange(low, high) if high > low else low

    time.sleep(delay_ms / 1000)

    return json_success({"delay": delay_ms, "timestamp": utc_timestamp()})


@simulation_bp.route("/status/<code>", methods=["GET"])
def status(code: str) -> tuple[Response, int]:
    """Respond with the requested status code and its reason phrase."""
    status_code = parse_int(code, 200)
    if not 200 <= status_code <= 599:
        status_code = 200

    return jsonify({
        "success": status_code < 400,
        "statusCode": status_code,
        "message": STATUS_MESSAGES.get(status_code, "Unknown Status"),
    }), status_code


@simulation_bp.route("/random-error", methods=["GET"])
def random_error() -> tuple[Response, int]:
    """Fail with a 500 at the configured error rate."""
    if random.random() < current_app.config["RANDOM_ERROR_RATE"]:
        logger.info("Injecting random server error")
        return json_error("Randomly generated server error", 500)

    return json_success({"message": "Responded normally"})


@simulation_bp.route("/large-payload", methods=["GET"])
def large_payload() -> tuple[Response, int]:
    """
    Return ``size`` synthetic items for payload-size testing.

    Query Parameters:
        size: Number of items (default ``DEFAULT_PAYLOAD_SIZE``, capped at
            ``MAX_PAYLOAD_SIZE``).
    """
    size = parse_int(request.args.get("size"), current_app.config["DEFAULT_PAYLOAD_SIZE"])
    if size < 1:
        size = current_app.config["DEFAULT_PAYLOAD_SIZE"]
    size = min(size, current_app.config["MAX_PAYLOAD_SIZE"])

    timestamp = utc_timestamp()
    items = [
        {
            "id": index,
            "name": f"Item {index}",
            "description": PAYLOAD_DESCRIPTION,
            "timestamp": timestamp,
        }
        for index in range(1, size + 1)
    ]
    return json_success(items, count=len(items))


@simulation_bp.route("/upload", methods=["POST"])
def upload() -> tuple[Response, int]:
    """
    Pretend to store an upload and return synthetic metadata.

    Accepts a JSON body with an optional ``filename`` or a multipart form
    with a ``file`` part; nothing is written anywhere.
    """
    uploaded = request.files.get("file")
    if uploaded is not None and uploaded.filename:
        filename = uploaded.filename
    else:
        filename = request_body().get("filename")

    return json_success({
        "filename": filename if isinstance(filename, str) and filename else DEFAULT_UPLOAD_FILENAME,
        "size": random.randrange(1000000),
        "uploadedAt": utc_timestamp(),
    })
