"""Health check endpoint used by smoke scenarios and deployment probes."""

from flask import Blueprint, Response, jsonify

from ..responses import utc_timestamp

health_bp = Blueprint("health", __name__)


@health_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Report that the server is up."""
    return jsonify({"status": "ok", "timestamp": utc_timestamp()}), 200
