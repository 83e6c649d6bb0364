"""Shared plumbing for CLI commands: config loading and handler execution."""

import asyncio
import logging
import sys
import webbrowser
from collections.abc import Callable
from typing import Any, TypeVar

from dishka import AsyncContainer

from tabsaver.application.di import create_container
from tabsaver.application.response import Outcome, attempt, error_message, respond
from tabsaver.config import Config
from tabsaver.domain.collection.model.value import CollectionListing
from tabsaver.domain.collection.service.discovery import CollectionService
from tabsaver.domain.shared.command import Command, CommandHandler

logger = logging.getLogger(__name__)

H = TypeVar("H", bound=CommandHandler)

# Replaced in tests to run commands against fakes.
container_factory: Callable[[Config], AsyncContainer] = create_container


def load_config(deadline: float | None = None) -> Config:
    """Load configuration, applying a caller-supplied deadline if given."""
    config = Config()  # type: ignore[call-arg]
    if deadline is not None:
        notion = config.notion.model_copy(update={"timeout": deadline})
        config = config.model_copy(update={"notion": notion})
    return config


async def execute(handler_type: type[H], cmd: Command, config: Config) -> dict[str, Any]:
    """Resolve ``handler_type`` in a fresh unit of work and run ``cmd``."""
    try:
        container = container_factory(config)
    except Exception as e:
        logger.exception("Failed to build container for %s", type(cmd).__name__)
        return {"ok": False, "error": error_message(e)}

    try:
        async with container() as uow:
            handler = await uow.get(handler_type)
            return await respond(handler, cmd)
    except Exception as e:
        logger.exception("Failed to run %s", type(cmd).__name__)
        return {"ok": False, "error": error_message(e)}
    finally:
        await container.close()


def run(handler_type: type[H], cmd: Command, config: Config) -> dict[str, Any]:
    return asyncio.run(execute(handler_type, cmd, config))


def fail(console, response: dict[str, Any], hint: str | None = None) -> None:
    console.error(response.get("error") or "Unknown error", hint=hint)
    sys.exit(1)


async def listing_best_effort(config: Config) -> Outcome[CollectionListing]:
    """Discovery whose failure is reported in the Outcome, never raised."""

    async def _list() -> CollectionListing:
        container = container_factory(config)
        try:
            async with container() as uow:
                service = await uow.get(CollectionService)
                return await service.list_collections(config.notion.api_key)
        finally:
            await container.close()

    return await attempt(_list())


def open_in_browser(console, url: str | None) -> None:
    if url:
        console.info(f"Opening {url}")
        webbrowser.open(url)
