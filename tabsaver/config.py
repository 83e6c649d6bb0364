import logging
import os
import sys
from enum import StrEnum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from tabsaver.cli.util.paths import TabSaverPaths


# =============================================================================
# Remote Store Configuration
# =============================================================================


class NotionConfig(BaseModel):
    """Remote store connection (nested in Config, uses env_nested_delimiter)."""

    api_key: str = ""  # The credential; TABSAVER_NOTION__API_KEY
    base_url: str = "https://api.notion.com/v1"
    version: str = "2022-06-28"  # Sent as Notion-Version
    timeout: float | None = 30.0  # Default per-call deadline in seconds, None = wait forever

    @field_validator("api_key", "base_url", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


# =============================================================================
# User Preferences
# =============================================================================


class AutoOpen(StrEnum):
    """What to open after a successful save."""

    NONE = "none"
    PAGE = "page"
    DATABASE = "database"


class Preferences(BaseModel):
    """Selected collection, field-name hints and favorites.

    The field names are hints: the writer only uses them when the target
    collection declares a field of that name with the expected type.
    """

    selected_collection_id: str = ""
    title_property_name: str = "Name"
    url_property_name: str = "URL"
    auto_open_after_save: AutoOpen = AutoOpen.NONE
    favorite_collection_ids: list[str] = []

    @field_validator("selected_collection_id", mode="before")
    @classmethod
    def _strip_id(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value.strip() if isinstance(value, str) else value

    @field_validator("title_property_name", mode="before")
    @classmethod
    def _title_name(cls, value: Any) -> Any:
        if not isinstance(value, str) or not value.strip():
            return "Name"
        return value.strip()

    @field_validator("url_property_name", mode="before")
    @classmethod
    def _url_name(cls, value: Any) -> Any:
        if not isinstance(value, str) or not value.strip():
            return "URL"
        return value.strip()

    @field_validator("auto_open_after_save", mode="before")
    @classmethod
    def _auto_open(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().lower()
            if value not in {m.value for m in AutoOpen}:
                return AutoOpen.NONE
        return value or AutoOpen.NONE


class CacheConfig(BaseModel):
    """Collection discovery cache (nested in Config, uses env_nested_delimiter)."""

    ttl_hours: float = 6.0
    file: str = ""  # Empty string = derive from TabSaverPaths

    def resolve_file(self, paths: TabSaverPaths) -> Path:
        if self.file:
            return Path(self.file).expanduser()
        return paths.collection_cache_file


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from TABSAVER_LOG_FILE env var."""
        return os.environ.get("TABSAVER_LOG_FILE")


# =============================================================================
# Application Configuration
# =============================================================================


def config_file_path() -> Path:
    """YAML config file: TABSAVER_CONFIG_FILE, else the XDG config file."""
    config_file = os.environ.get("TABSAVER_CONFIG_FILE")
    if config_file:
        return Path(config_file).expanduser()
    return TabSaverPaths().config_file


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from the YAML config file."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        path = config_file_path()
        if path.exists():
            data = yaml.safe_load(path.read_text())
            return data if isinstance(data, dict) else {}
        return {}


class Config(BaseSettings):
    # These are BaseModel, so env_nested_delimiter handles their env vars
    notion: NotionConfig = NotionConfig()
    preferences: Preferences = Preferences()
    cache: CacheConfig = CacheConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = {
        "env_prefix": "TABSAVER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows TABSAVER_NOTION__API_KEY override
        "extra": "ignore",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority (highest to lowest): init, env, .env, YAML, file secrets."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def write_section(name: str, values: dict[str, Any], path: Path | None = None) -> Path:
    """Replace one top-level section of the YAML config, keeping the others."""
    path = path or config_file_path()
    data: dict[str, Any] = {}
    if path.exists():
        loaded = yaml.safe_load(path.read_text())
        if isinstance(loaded, dict):
            data = loaded
    data[name] = values
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, sort_keys=False))
    return path


def write_preferences(preferences: Preferences, path: Path | None = None) -> Path:
    return write_section("preferences", preferences.model_dump(mode="json"), path)


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Should be called once at CLI startup, before any command runs.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
