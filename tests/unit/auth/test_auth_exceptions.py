"""Tests for credential persistence exceptions."""

import pytest

from infra_console_client.auth.exceptions import CredentialError, CredentialStoreError


class TestCredentialError:
    """Test CredentialError base exception."""

    def test_can_be_raised(self):
        """Test that CredentialError can be raised."""
        with pytest.raises(CredentialError):
            raise CredentialError("Test error")

    def test_exception_message(self):
        """Test that exception message is preserved."""
        try:
            raise CredentialError("Custom error message")
        except CredentialError as e:
            assert str(e) == "Custom error message"


class TestCredentialStoreError:
    """Test CredentialStoreError exception."""

    def test_is_credential_error(self):
        """Test that CredentialStoreError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise CredentialStoreError("disk full")

    def test_location_attribute(self):
        """Test that the storage location is kept for reporting."""
        error = CredentialStoreError("disk full", location="/tmp/session.json")
        assert error.location == "/tmp/session.json"
        assert str(error) == "disk full"

    def test_location_defaults_to_none(self):
        assert CredentialStoreError("nope").location is None
