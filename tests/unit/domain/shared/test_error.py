"""Tests for error codes."""

import pytest

from tabsaver.domain.shared.error import (
    ConfigError,
    RemoteError,
    SchemaError,
    TabSaverError,
    TransportError,
    ValidationError,
)


class TestErrorCodes:
    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (TabSaverError("x"), "tab_saver_error"),
            (ConfigError("x"), "config_error"),
            (SchemaError("x"), "schema_error"),
            (RemoteError("x", status=500), "remote_error"),
            (ValidationError("x", field="title"), "validation_error"),
            (TransportError("x"), "transport_error"),
        ],
    )
    def test_codes_are_snake_case(self, error, code):
        assert error.code == code

    def test_explicit_code_wins(self):
        assert ConfigError("x", code="missing_credential").code == "missing_credential"

    def test_transport_error_has_no_status(self):
        error = TransportError("Failed to connect to Notion: boom")
        assert error.status is None
        assert error.message == "Failed to connect to Notion: boom"
