"""
Smoke-test fixtures for the mock API server.

Provides the ``smoke_base_url`` session-scoped fixture that yields a
healthy server URL shared across the entire smoke suite.

Priority:
1. Use an explicit URL from ``TEST_BASE_URL`` (and wait for health).
2. Reuse a server already running at ``http://localhost:3000``.
3. Start the app in-process on a free port, then shut it down on exit.

Key Concepts Demonstrated:
- Session-scoped URL fixtures to share a single live server across all smoke tests
- Running a WSGI app on a background thread with ``werkzeug.serving``
"""

from __future__ import annotations

import os
import threading
import time
from collections.abc import Generator

import pytest
import requests
from werkzeug.serving import make_server

from mock_api import create_app

DEFAULT_BASE_URL = "http://localhost:3000"


def is_server_ready(url: str, timeout: int = 2) -> bool:
    """Return True when the health endpoint responds with 200."""
    try:
        response = requests.get(f"{url}/health", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_healthy(url: str, timeout: int = 30, interval: float = 0.5) -> None:
    """Poll the health endpoint until ready or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_server_ready(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"Mock API at {url} not healthy after {timeout}s")


@pytest.fixture(scope="session")
def smoke_base_url() -> Generator[str, None, None]:
    """Yield a healthy mock API URL for smoke tests."""
    provided_base_url = os.getenv("TEST_BASE_URL")
    if provided_base_url:
        provided_base_url = provided_base_url.rstrip("/")
        wait_for_healthy(provided_base_url)
        yield provided_base_url
        return

    if is_server_ready(DEFAULT_BASE_URL):
        yield DEFAULT_BASE_URL
        return

    # Port 0 lets the OS pick a free port.
    server = make_server("127.0.0.1", 0, create_app("testing"), threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    base_url = f"http://127.0.0.1:{server.server_port}"
    try:
        wait_for_healthy(base_url)
        yield base_url
    finally:
        server.shutdown()
        thread.join(timeout=5)
