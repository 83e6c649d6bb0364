"""Favorite database commands."""

import cyclopts

from tabsaver.cli.commands.common import load_config
from tabsaver.cli.console import get_console
from tabsaver.config import write_preferences
from tabsaver.domain.collection.service.selection import add_favorite, remove_favorite

app = cyclopts.App(name="favorites", help="Manage favorite databases")


@app.default
def show() -> None:
    """Print favorite database ids."""
    console = get_console()
    favorites = load_config().preferences.favorite_collection_ids
    if not favorites:
        console.info("No favorites. Add one with 'tabsaver favorites add <id>'.")
        return
    for collection_id in favorites:
        console.print(collection_id)


@app.command
def add(collection_id: str, /) -> None:
    """Mark a database as favorite."""
    config = load_config()
    prefs = config.preferences
    updated = add_favorite(prefs.favorite_collection_ids, collection_id)
    write_preferences(prefs.model_copy(update={"favorite_collection_ids": updated}))
    get_console().success(f"{len(updated)} favorite(s)")


@app.command
def remove(collection_id: str, /) -> None:
    """Unmark a favorite database."""
    config = load_config()
    prefs = config.preferences
    updated = remove_favorite(prefs.favorite_collection_ids, collection_id)
    write_preferences(prefs.model_copy(update={"favorite_collection_ids": updated}))
    get_console().success(f"{len(updated)} favorite(s)")
