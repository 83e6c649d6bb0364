"""Error hierarchy for Tab Saver.

Error layers:
- TabSaverError: Base class for all Tab Saver errors
- DomainError: Missing configuration, invalid input, unusable collection schema
- InfrastructureError: Failures talking to the remote store

These errors are mapped to ``{"ok": False, "error": ...}`` responses by
``tabsaver.application.response``. Nothing in the core retries.

Every ``code`` is snake_case: either given explicitly or derived from the
class name (``SchemaError`` -> ``schema_error``).
"""

import re

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def default_code(cls: type) -> str:
    return _CAMEL_BOUNDARY.sub("_", cls.__name__).lower()


class TabSaverError(Exception):
    """Base class for all Tab Saver errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or default_code(type(self))
        super().__init__(message)


# =============================================================================
# Domain Errors (terminal, surfaced verbatim to the user)
# =============================================================================


class DomainError(TabSaverError):
    """Base class for domain errors."""


class ConfigError(DomainError):
    """Credential, collection id or other required setting is missing."""


class ValidationError(ConfigError):
    """Required input is missing or malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="validation_error")
        self.field = field


class SchemaError(DomainError):
    """Target collection cannot hold records (no title-typed field)."""


# =============================================================================
# Infrastructure Errors (remote store failures)
# =============================================================================


class InfrastructureError(TabSaverError):
    """Base class for infrastructure/system errors."""


class RemoteError(InfrastructureError):
    """Remote store answered with a non-success status.

    ``status`` is the HTTP status code, or None for transport failures.
    """

    def __init__(self, message: str, status: int | None = None, code: str | None = None) -> None:
        super().__init__(message, code=code)
        self.status = status


class TransportError(RemoteError):
    """Remote store could not be reached (DNS, TLS, connect, timeout)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status=None, code="transport_error")
