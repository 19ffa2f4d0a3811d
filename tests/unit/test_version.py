"""Test basic package functionality."""

import infra_console_client


def test_version():
    """Test that package version is defined."""
    assert hasattr(infra_console_client, "__version__")
    assert infra_console_client.__version__ == "0.1.0"


def test_public_exports():
    """Test that the top-level names are importable."""
    for name in infra_console_client.__all__:
        assert getattr(infra_console_client, name) is not None
