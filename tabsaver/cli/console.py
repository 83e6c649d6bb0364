"""rich-backed terminal output for the tabsaver commands.

Success, warning and info lines go to stdout; errors go to stderr.
"""

from typing import Any

from rich.console import Console as RichConsole
from rich.table import Table

from tabsaver.domain.collection.model.value import Collection


class Console:
    """CLI output manager wrapping rich."""

    def __init__(self) -> None:
        self._console = RichConsole()
        self._err_console = RichConsole(stderr=True)

    # -------------------------------------------------------------------------
    # Status messages
    # -------------------------------------------------------------------------

    def success(self, message: str) -> None:
        self._console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]✗[/red] {message}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def warning(self, message: str) -> None:
        self._console.print(f"[yellow]⚠[/yellow] {message}")

    def info(self, message: str) -> None:
        self._console.print(f"[dim]{message}[/dim]")

    def print(self, *args: Any, **kwargs: Any) -> None:
        self._console.print(*args, **kwargs)

    def print_json(self, *, data: Any) -> None:
        self._console.print_json(data=data)

    # -------------------------------------------------------------------------
    # Collections
    # -------------------------------------------------------------------------

    def collections(
        self,
        collections: list[Collection],
        *,
        selected_id: str | None = None,
        favorite_ids: list[str] | None = None,
        cached: bool = False,
    ) -> None:
        """Print the collection listing, marking favorites and the selection."""
        if not collections:
            self.warning(
                "No databases found. Check the API key and that databases are "
                "shared with the integration."
            )
            return

        favorites = set(favorite_ids or [])
        table = Table(show_header=True, header_style="bold")
        table.add_column("", width=2)
        table.add_column("Title")
        table.add_column("ID", style="dim")

        for collection in collections:
            marks = ""
            if collection.id == selected_id:
                marks += "[green]>[/green]"
            if collection.id in favorites:
                marks += "[yellow]*[/yellow]"
            table.add_row(marks, collection.title, collection.id)

        self._console.print(table)
        suffix = " (cached)" if cached else ""
        count = len(collections)
        self.info(f"{count} database{'s' if count != 1 else ''} loaded{suffix}.")

    def status(self, message: str):
        """Return a status context manager for long operations."""
        return self._console.status(message)


_default: Console | None = None


def get_console() -> Console:
    global _default
    if _default is None:
        _default = Console()
    return _default
