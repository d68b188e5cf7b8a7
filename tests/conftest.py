"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the appcommon test suite.
"""

import io

import pytest

# =============================================================================
# Plugin Registration
# =============================================================================

pytest_plugins = [
    "tests.fixtures.logging",
    "tests.fixtures.commands",
]


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "property: Property-based tests (hypothesis)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (full dispatch through real streams)"
    )


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def out() -> io.StringIO:
    """
    Provide an in-memory output sink for commands.

    Returns:
        io.StringIO: Empty text buffer
    """
    return io.StringIO()


# =============================================================================
# Test Collection Hooks
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """
    Add the 'unit' marker to tests without other markers.

    Args:
        config: Pytest config object
        items: List of collected test items
    """
    for item in items:
        if not any(mark.name == "integration" for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)
