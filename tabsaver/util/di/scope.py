"""Custom Dishka scopes for Tab Saver."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """Dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Process lifetime (config, HTTP client, cache store)
    - UOW: One CLI command or boundary call (services, handlers)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
