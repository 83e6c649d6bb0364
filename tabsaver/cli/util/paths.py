"""Manages Tab Saver directory structure following XDG Base Directory spec.

Directory layout:
    ~/.config/tabsaver/
        config.yaml         # Credential, preferences, cache and logging settings

    ~/.cache/tabsaver/
        collections.json    # Collection discovery cache

When TABSAVER_HOME is set, both roots live under it instead
(``$TABSAVER_HOME/config``, ``$TABSAVER_HOME/cache``).
"""

import os
from pathlib import Path


class TabSaverPaths:
    """Manages Tab Saver paths following XDG Base Directory specification.

    Supports overriding individual directories for testing.
    """

    def __init__(
        self,
        *,
        config_dir: Path | None = None,
        cache_dir: Path | None = None,
    ) -> None:
        home_override = os.environ.get("TABSAVER_HOME")
        if home_override:
            root = Path(home_override).expanduser()
            default_config = root / "config"
            default_cache = root / "cache"
        else:
            home = Path.home()
            default_config = home / ".config" / "tabsaver"
            default_cache = home / ".cache" / "tabsaver"

        self._config_dir = config_dir or default_config
        self._cache_dir = cache_dir or default_cache

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    @property
    def config_file(self) -> Path:
        """Main config file."""
        return self._config_dir / "config.yaml"

    @property
    def collection_cache_file(self) -> Path:
        """Collection discovery cache."""
        return self._cache_dir / "collections.json"
