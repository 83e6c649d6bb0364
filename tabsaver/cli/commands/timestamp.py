"""Add a video timestamp to the page with the same title."""

import cyclopts

from tabsaver.cli.commands.common import fail, load_config, open_in_browser, run
from tabsaver.cli.console import get_console
from tabsaver.domain.record.command.add_timestamp import AddTimestamp, AddTimestampHandler
from tabsaver.domain.record.util.timestamp import (
    is_video_url,
    note_at,
    parse_position,
    position_from_url,
)

app = cyclopts.App(name="timestamp", help="Append a video timestamp to a page")


@app.default
def timestamp(
    url: str,
    /,
    *,
    title: str,
    at: str | None = None,
    seconds: int | None = None,
    collection: str | None = None,
    deadline: float | None = None,
    open: bool = False,
) -> None:
    """Append a timestamp bullet to the page titled TITLE, creating it if needed.

    Args:
        url: Video URL.
        title: Exact page title to match.
        at: Position such as 90, 1m30s or 1h2m3s.
        seconds: Position in whole seconds.
        collection: Database id; defaults to the selected database.
        deadline: Seconds to wait for each Notion call.
        open: Open the page or database afterwards, per auto_open_after_save.
    """
    console = get_console()
    config = load_config(deadline)

    if seconds is None:
        seconds = parse_position(at) if at else position_from_url(url)
    note = note_at(url, seconds or 0)
    if not is_video_url(url):
        console.warning("Not a YouTube URL; saving the timestamp anyway.")

    with console.status("Saving timestamp..."):
        response = run(
            AddTimestampHandler,
            AddTimestamp(
                collection_id=collection,
                title=title,
                url=url,
                label=note.formatted_label,
                source_url=note.source_url,
            ),
            config,
        )
    if not response["ok"]:
        fail(console, response)

    verb = "Created page with" if response["created"] else "Added"
    console.success(f"{verb} timestamp {note.formatted_label}")
    if open:
        open_in_browser(console, response["open_url"])
