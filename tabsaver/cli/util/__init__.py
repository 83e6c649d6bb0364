"""CLI utilities (XDG paths)."""

from tabsaver.cli.util.paths import TabSaverPaths

__all__ = ["TabSaverPaths"]
