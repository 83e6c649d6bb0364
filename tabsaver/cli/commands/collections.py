"""Collection listing and selection commands."""

import asyncio

import cyclopts

from tabsaver.cli.commands.common import fail, listing_best_effort, load_config, run
from tabsaver.cli.console import get_console
from tabsaver.config import write_preferences
from tabsaver.domain.collection.command.list_collections import (
    ListCollections,
    ListCollectionsHandler,
)
from tabsaver.domain.collection.model.value import Collection
from tabsaver.domain.collection.service.selection import choose_collection

app = cyclopts.App(name="collections", help="List databases shared with the integration")


@app.default
def collections(*, refresh: bool = False, deadline: float | None = None) -> None:
    """List databases, newest edits first.

    Args:
        refresh: Ignore the cache and query Notion.
        deadline: Seconds to wait for Notion before giving up.
    """
    console = get_console()
    config = load_config(deadline)

    with console.status("Loading databases..."):
        response = run(ListCollectionsHandler, ListCollections(force_refresh=refresh), config)
    if not response["ok"]:
        fail(console, response, hint="Check TABSAVER_NOTION__API_KEY or run 'tabsaver config show'")

    listed = [Collection.model_validate(c) for c in response["collections"]]
    prefs = config.preferences
    choice = choose_collection(listed, prefs.selected_collection_id, prefs.favorite_collection_ids)
    console.collections(
        listed,
        selected_id=choice.selected_id,
        favorite_ids=prefs.favorite_collection_ids,
        cached=response["cached"],
    )


select_app = cyclopts.App(name="select", help="Choose the database pages are saved to")


@select_app.default
def select(collection_id: str, /) -> None:
    """Store the default database.

    Args:
        collection_id: Database id as shown by 'tabsaver collections'.
    """
    console = get_console()
    config = load_config()
    collection_id = collection_id.strip()
    if not collection_id:
        console.error("Missing database id.")
        raise SystemExit(1)

    prefs = config.preferences.model_copy(update={"selected_collection_id": collection_id})
    write_preferences(prefs)

    outcome = asyncio.run(listing_best_effort(config))
    title = None
    if outcome.ok and outcome.value is not None:
        title = next((c.title for c in outcome.value.collections if c.id == collection_id), None)
    console.success(f"Selected {title or collection_id}")
    if outcome.ok and title is None:
        console.warning("That id is not among the databases shared with the integration.")
