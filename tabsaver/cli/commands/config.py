"""Configuration commands."""

import cyclopts

from tabsaver.cli.commands.common import load_config
from tabsaver.cli.console import get_console
from tabsaver.config import config_file_path, write_section
from tabsaver.domain.collection.model.value import fingerprint

app = cyclopts.App(name="config", help="Show or change configuration")


@app.command
def show() -> None:
    """Print the effective configuration (the API key is masked)."""
    console = get_console()
    config = load_config()
    data = config.model_dump(mode="json")
    key = config.notion.api_key
    data["notion"]["api_key"] = f"...{fingerprint(key)}" if key else ""
    console.print(f"[dim]{config_file_path()}[/dim]")
    console.print_json(data=data)


@app.command(name="set-key")
def set_key(api_key: str, /) -> None:
    """Store the Notion integration token in the config file."""
    config = load_config()
    notion = config.notion.model_copy(update={"api_key": api_key.strip()})
    path = write_section("notion", notion.model_dump(mode="json"))
    get_console().success(f"API key saved to {path}")
