"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``ISBNCTL_*`` prefix, ``__`` for nested sections
  3. TOML file: the path chosen by :func:`~isbnctl.config.discovery.locate_config`
  4. Code defaults baked into the section models
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

from isbnctl.config.discovery import locate_config
from isbnctl.config.models import OutputConfig


class IsbnSettings(BaseSettings):
    """Settings for one isbnctl invocation, stored on the AppContext.

    Attributes:
        config_path: The config file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ISBNCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Read the TOML file named by ``config_path``, below env vars."""
        toml_file = None
        if isinstance(init_settings, InitSettingsSource):
            toml_file = init_settings.init_kwargs.get("config_path")
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> IsbnSettings:
        """Build settings for a CLI invocation.

        Raises :class:`click.ClickException` when an explicitly named
        config file is missing or is not valid TOML.
        """
        toml_path = locate_config(config_path, start)
        if toml_path is not None and not toml_path.is_file():
            raise click.ClickException(f"Config file not found: {toml_path}")
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
