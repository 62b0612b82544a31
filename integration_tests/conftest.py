"""Pytest configuration for the end-to-end training loop tests."""

import pytest


def pytest_collection_modifyitems(items):
    """Mark everything collected from this directory as an integration test."""
    marker = pytest.mark.integration
    for item in items:
        if "integration_tests" in str(item.path):
            item.add_marker(marker)
