"""Main CLI application using Cyclopts.

Each command runs one handler in its own unit of work and prints the
``{"ok": ...}`` response through the rich console.
"""

import cyclopts
import logfire

from tabsaver.cli.commands import collections, config, favorites, save, timestamp
from tabsaver.config import Config, configure_logging

app = cyclopts.App(
    name="tabsaver",
    help="Tab Saver - save pages and video timestamps to Notion databases",
)

app.command(collections.app, name="collections")
app.command(collections.select_app, name="select")
app.command(favorites.app, name="favorites")
app.command(save.app, name="save")
app.command(timestamp.app, name="timestamp")
app.command(config.app, name="config")


def main() -> None:
    configure_logging(Config().logging)  # type: ignore[call-arg]
    logfire.configure(send_to_logfire="if-token-present", console=False)
    app()
