"""Response envelope for the UI boundary.

Every operation resolves to ``{"ok": True, **data}`` or
``{"ok": False, "error": message}``; nothing raises across this boundary.
"""

import logging
from collections.abc import Awaitable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from tabsaver.domain.shared.command import C, CommandHandler, R
from tabsaver.domain.shared.error import TabSaverError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Outcome(BaseModel, Generic[T]):
    """Result of a best-effort call: either a value or an error message."""

    ok: bool
    value: T | None = None
    error: str | None = None


def error_message(exc: BaseException) -> str:
    if isinstance(exc, TabSaverError):
        return exc.message
    return str(exc) or type(exc).__name__


async def attempt(awaitable: Awaitable[T]) -> Outcome[T]:
    """Await ``awaitable``, capturing any failure as a failed Outcome.

    Used for background refreshes whose failure the caller ignores.
    """
    try:
        value = await awaitable
    except TabSaverError as e:
        logger.debug("Best-effort call failed: %s", e.message)
        return Outcome(ok=False, error=e.message)
    except Exception as e:
        logger.debug("Best-effort call failed", exc_info=True)
        return Outcome(ok=False, error=error_message(e))
    return Outcome(ok=True, value=value)


async def respond(handler: CommandHandler[C, R], cmd: C) -> dict[str, Any]:
    """Run ``handler`` and map the result or failure to the response shape."""
    try:
        result = await handler.run(cmd)
    except TabSaverError as e:
        logger.warning("%s failed: %s", type(cmd).__name__, e.message)
        return {"ok": False, "error": e.message}
    except Exception as e:
        logger.exception("Unhandled error in %s", type(cmd).__name__)
        return {"ok": False, "error": error_message(e)}
    return {"ok": True, **result.model_dump(mode="json")}
