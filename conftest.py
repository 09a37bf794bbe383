"""Shared pytest configuration."""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "property: marks property-based tests driven by hypothesis"
    )
