"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration.
For standard test utilities, see tests/__init__.py
"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "api: marks tests that go through the HTTP layer (deselect with '-m \"not api\"')"
    )
