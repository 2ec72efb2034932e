"""
Shared pytest fixtures for the load-testing playground test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure test
isolation by providing fresh data for each test.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Fixture dependencies
- Test data factories with Faker
- Test client creation
"""

# Locust monkey-patches ssl via gevent on import; it must load before
# anything else imports ssl (requests, urllib3, jwt).
import locust  # noqa: F401

import os
from typing import Any

import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from mock_api import create_app
from mock_api.tokens import create_token


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create application instance for the test session.

    The mock API keeps no state between requests, so one app instance
    can safely serve every test.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    The test client allows you to make requests to the app
    without running a real server.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def user_payload() -> dict[str, str]:
    """
    Provide a valid body for POST/PUT /api/users.

    Returns:
        Dictionary with a random name and email.
    """
    return {"name": fake.name(), "email": fake.email()}


@pytest.fixture
def credentials() -> dict[str, str]:
    """
    Provide login credentials the mock API accepts.

    Returns:
        Dictionary with a random username and password.
    """
    return {"username": fake.user_name(), "password": fake.password(length=12)}


@pytest.fixture
def token_factory(app):
    """
    Factory fixture for issuing tokens with the app's signing secret.

    Example:
        def test_something(token_factory):
            token = token_factory("alice")
    """

    def _create_token(username: str = "testuser", expiry_seconds: int | None = None, **kwargs: Any) -> str:
        return create_token(
            username,
            app.config["JWT_SECRET"],
            app.config["JWT_EXPIRY_SECONDS"] if expiry_seconds is None else expiry_seconds,
            **kwargs,
        )

    return _create_token


@pytest.fixture
def api_headers() -> dict[str, str]:
    """
    Provide common headers for API requests.

    Returns:
        Dictionary of HTTP headers.
    """
    return {
        "Content-Type": "application/json",
        "Accept": "application/json"
    }
