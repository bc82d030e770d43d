"""Unified settings — init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — explicit overrides from the embedding application
  2. Env vars     — ``ORDERTAKING_*`` prefix (``__`` for nested sections)
  3. TOML file    — ``ordertaking.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the walk-up discovery from :mod:`ordertaking.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from ordertaking.config.discovery import find_config
from ordertaking.config.models import CatalogConfig


class ConfigError(Exception):
    """The configuration file exists but cannot be read."""


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings read from ``ordertaking.toml``.

    Only top-level tables and keys naming a settings field are allowed;
    ``config_path`` is derived from discovery and cannot be set in the file.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = _read_toml(toml_path) if toml_path else {}
        allowed = set(settings_cls.model_fields) - {"config_path"}
        unknown = sorted(set(self._data) - allowed)
        if unknown:
            msg = f"Unknown setting {unknown[0]!r} in {toml_path}"
            raise ConfigError(msg)

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, isinstance(self._data.get(field_name), dict)

    def __call__(self) -> dict[str, Any]:
        found: dict[str, Any] = {}
        for name, field in self.settings_cls.model_fields.items():
            value, key, _ = self.get_field_value(field, name)
            if value is not None:
                found[key] = value
        return found


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        msg = f"Cannot read {path}: {exc}"
        raise ConfigError(msg) from exc
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class OrderTakingSettings(BaseSettings):
    """Settings for an embedding application running the workflow.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        verbose: DEBUG logging plus per-run telemetry spans.
        log_json: JSON log lines instead of the console renderer.
        catalog: Static product catalog used by :class:`StaticCatalog`.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ORDERTAKING_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    verbose: bool = False
    log_json: bool = False

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> OrderTakingSettings:
        """Discover ``ordertaking.toml`` and build settings.

        An explicit *config_path* wins over walk-up discovery from *start*.
        *overrides* take priority over every other source.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
