"""Pytest configuration and fixtures for recipe-finder tests."""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "e2e: End-to-end tests requiring a real agent runtime and browser")
