"""
Test suite for the mock API server and the Locust load-testing playground.

This package contains:
- unit/: Pure-function tests (tokens, config, thresholds, stages, settings)
- integration/: Endpoint tests using the Flask test client
- smoke/: Live-server checks using requests
- performance/: Locust scenarios, load patterns and threshold gates
"""
