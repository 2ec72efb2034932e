"""
Flask application factory for the mock API server.

The mock server is a set of stateless route handlers that load-test
scenarios target.  Every handler builds its response from the request
alone (plus randomness), so nothing is shared between requests.

Key Concepts Demonstrated:
- Application factory pattern (create_app)
- Blueprint-based route registration
- Request access logging from an ``after_request`` hook
- JSON error envelopes for unknown routes and server errors
"""

from __future__ import annotations

import logging
import time

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from config import get_config

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)
access_logger = logging.getLogger("mock_api.access")


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the mock API Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    app.json.ensure_ascii = False

    logger.info("Creating mock API app with config: %s", config_class.__name__)

    # Import inside the factory so blueprint modules can import from this package
    from .routes.auth import auth_bp
    from .routes.health import health_bp
    from .routes.simulation import simulation_bp
    from .routes.users import users_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(users_bp, url_prefix="/api/users")
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(simulation_bp, url_prefix="/api")

    _register_request_hooks(app)
    _register_error_handlers(app)

    return app


def _register_request_hooks(app: Flask) -> None:
    """Attach request timing, access logging, and permissive CORS headers."""

    @app.before_request
    def _start_timer() -> None:
        g.request_started = time.perf_counter()

    @app.after_request
    def _finish_request(response: Response) -> Response:
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "Authorization, Content-Type"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, DELETE, OPTIONS"

        started = g.get("request_started")
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        access_logger.info(
            '%s "%s %s" %s %.1fms',
            request.remote_addr,
            request.method,
            request.full_path.rstrip("?"),
            response.status_code,
            elapsed_ms,
        )
        return response


def _register_error_handlers(app: Flask) -> None:
    """Return the ``{success: false, error}`` envelope for every failure."""

    @app.errorhandler(404)
    def not_found(error: Exception) -> tuple[Response, int]:
        return jsonify({"success": False, "error": "Endpoint not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error: Exception) -> tuple[Response, int]:
        return jsonify({"success": False, "error": "Method not allowed"}), 405

    @app.errorhandler(Exception)
    def internal_error(error: Exception) -> tuple[Response, int]:
        if isinstance(error, HTTPException):
            return jsonify({"success": False, "error": error.description}), error.code
        logger.exception("Unhandled error: %s", error)
        return jsonify({"success": False, "error": "Internal server error"}), 500
