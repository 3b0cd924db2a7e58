# SPDX-License-Identifier: MIT
"""Centralised application configuration management.

This module exposes :class:`Settings`, a ``pydantic-settings`` model that
combines values sourced from the YAML configuration file and environment
variables. Environment variables take precedence over file-based values and
the merged configuration is validated before use.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from constants import DEFAULT_ALIAS
from io_utils.loader import DEFAULT_CONFIG_DIR, DEFAULT_CONFIG_FILE, load_app_config
from models import AppConfig


class Settings(BaseSettings):
    """Application settings combining file-based and environment configuration."""

    log_level: str = Field("warn", description="Logging verbosity level.")
    default_alias: str = Field(
        DEFAULT_ALIAS,
        min_length=1,
        description="Alias and file name used when none is supplied.",
    )
    config_header: bool = Field(
        True, description="Emit comment header and echo line in config files."
    )
    logfire_token: str | None = Field(
        None, description="Logfire authentication token, if available.", repr=False
    )

    model_config = SettingsConfigDict(env_prefix="XS_", extra="ignore")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # File values arrive as init kwargs; the environment overrides them.
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load and validate application settings.

    Configuration values are read from the application configuration file and
    then merged with ``XS_`` prefixed environment variables. When a value is
    provided in both sources the environment variable wins. A ``.env`` file in
    the working directory is loaded automatically when present. Without an
    explicit ``config_path`` a missing ``config/app.yaml`` falls back to the
    built-in defaults.

    Args:
        config_path: Optional path to a YAML configuration file.

    Returns:
        Settings: Fully validated application configuration.

    Raises:
        FileNotFoundError: If ``config_path`` does not exist.
        RuntimeError: If configuration values are invalid.
    """
    if config_path:
        cfg_path = Path(config_path)
        config = load_app_config(cfg_path.parent, cfg_path.name)
    elif (DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILE).exists():
        config = load_app_config()
    else:
        config = AppConfig()
    env_file_path = Path(".env")
    env_file = env_file_path if env_file_path.exists() else None
    try:
        return Settings(
            log_level=config.log_level,
            default_alias=config.default_alias,
            config_header=config.config_header,
            _env_file=env_file,
        )
    except ValidationError as exc:
        # Summarise validation issues so the caller receives clear feedback.
        details = "; ".join(
            f"{'.'.join(map(str, error['loc']))}: {error['msg']}"
            for error in exc.errors()
        )
        raise RuntimeError(f"Invalid configuration: {details}") from exc
