"""Contract tests.

Each port (CenterRegistry, CenterIdGenerator) gets a parametrized fixture in
its folder's conftest.py; adding an adapter means adding a param there. Tests
assert only what callers can observe: outcomes, counts and search results.
"""
