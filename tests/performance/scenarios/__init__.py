"""
Locust scenario user classes.

Each module in this package groups the ``HttpUser`` subclasses for one
area of load-testing practice:

- :mod:`.basics` — simple requests, HTTP methods, checks, thresholds,
  and environment-driven variables
- :mod:`.realistic` — authentication, user journeys, data correlation,
  file uploads, and batched requests
- :mod:`.metrics` — custom metrics, tagged request names, groups, and
  trends
- :mod:`.cicd` — environment thresholds for CI gates
- :mod:`.load_patterns` — the traffic behind the smoke, load, stress,
  spike, soak, and breakpoint profiles

All concrete scenarios inherit from :class:`.base.MockApiUser`.
"""
