"""Save a page to the selected database."""

import cyclopts

from tabsaver.cli.commands.common import fail, load_config, open_in_browser, run
from tabsaver.cli.console import get_console
from tabsaver.domain.record.command.save_page import SavePage, SavePageHandler

app = cyclopts.App(name="save", help="Save a page as a new database entry")


@app.default
def save(
    url: str,
    /,
    *,
    title: str = "",
    collection: str | None = None,
    deadline: float | None = None,
    open: bool = False,
) -> None:
    """Save a page.

    Args:
        url: Page URL.
        title: Page title; "Untitled" when empty.
        collection: Database id; defaults to the selected database.
        deadline: Seconds to wait for each Notion call.
        open: Open the page or database afterwards, per auto_open_after_save.
    """
    console = get_console()
    config = load_config(deadline)

    with console.status("Saving..."):
        response = run(
            SavePageHandler,
            SavePage(collection_id=collection, title=title, url=url),
            config,
        )
    if not response["ok"]:
        fail(console, response)

    console.success(f"Saved to Notion: {response['url'] or response['record_id']}")
    if response["degraded_fields"]:
        console.warning(
            "Some fields were missing in the database; their values were written "
            "into the page body."
        )
    if open:
        open_in_browser(console, response["open_url"])
