"""Application settings

Settings are loaded in order of precedence (highest to lowest):
1. Environment variables (SEIDL_*)
2. Config file (~/.seidl/config.toml)
3. Default values
"""

import sys
from pathlib import Path
from typing import Any, Type

from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

# Import tomllib (Python 3.11+) or tomli (Python 3.10)
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from seidl import __version__

DEFAULT_API_URL = "https://susepubliccloudinfo.suse.com"


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".seidl" / "config.toml"


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config file."""

    def get_field_value(
        self, field: Any, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get field value from TOML config."""
        config_data = self._load_config()
        if field_name in config_data:
            return config_data[field_name], field_name, False
        return None, field_name, False

    def _load_config(self) -> dict:
        """Load config from TOML file."""
        if not hasattr(self, '_config_cache'):
            self._config_cache = {}
            config_path = get_config_path()
            if config_path.exists():
                try:
                    with open(config_path, "rb") as f:
                        self._config_cache = tomllib.load(f)
                except (OSError, tomllib.TOMLDecodeError):
                    pass  # A broken config file falls back to defaults
        return self._config_cache

    def __call__(self) -> dict[str, Any]:
        """Return all settings from config file."""
        return self._load_config()


class Settings(BaseSettings):
    """Application settings

    Settings can be configured via:
    - Environment variables: SEIDL_<SETTING_NAME>
    - Config file: ~/.seidl/config.toml

    Example config.toml:
        api_url = "https://susepubliccloudinfo.suse.com"
        http_timeout = 30
        log_level = "DEBUG"
    """

    model_config = ConfigDict(
        env_prefix="SEIDL_",
        case_sensitive=False
    )

    api_url: str = DEFAULT_API_URL
    http_timeout: float | None = None  # None waits as long as the server does
    user_agent: str = f"seidl/{__version__}"

    log_level: str = "WARNING"
    log_file: str | None = None
    debug: bool = False

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"api_url must be an http(s) URL, got '{value}'")
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"invalid log_level '{value}'")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources order.

        Order (highest to lowest priority):
        1. Init settings (passed to constructor)
        2. Environment variables
        3. TOML config file
        """
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )
