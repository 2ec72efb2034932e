"""WSGI entry point for the mock API server."""

import os

from mock_api import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))
