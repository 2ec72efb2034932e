"""
Routes package for the mock API server.

This package contains route blueprints:
- health: liveness probe at ``/health``
- users: stateless user CRUD under ``/api/users``
- auth: token login and verification under ``/api/auth``
- simulation: latency, status-code, error-injection, payload and upload
  endpoints under ``/api``
"""
