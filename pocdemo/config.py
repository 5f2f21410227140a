"""Configuration management for the POC demo service."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Mapping, Optional

import yaml

from .database import resolve_database_path

_KNOWN_KEYS = {"database_path", "host", "port", "log_level", "app_title"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the web application and CLI."""

    database_path: Path
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"
    app_title: str = "POC Template Project"

    @staticmethod
    def from_dict(data: Mapping[str, object], base_path: Path | None = None) -> "Settings":
        """Create :class:`Settings` from raw dictionary data."""

        unknown = set(data.keys()) - _KNOWN_KEYS
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        raw_db_path = data.get("database_path")
        if raw_db_path:
            db_path = Path(str(raw_db_path)).expanduser()
            if not db_path.is_absolute() and base_path is not None:
                db_path = base_path / db_path
            database_path = db_path.resolve(strict=False)
        else:
            database_path = resolve_database_path(None)

        defaults = Settings(database_path=database_path)
        return replace(
            defaults,
            host=str(data.get("host", defaults.host)),
            port=_parse_port(data.get("port", defaults.port)),
            log_level=str(data.get("log_level", defaults.log_level)).upper(),
            app_title=str(data.get("app_title", defaults.app_title)),
        )


def _parse_port(value: object) -> int:
    try:
        port = int(str(value))
    except ValueError as exc:
        raise ValueError(f"Invalid port: {value!r}") from exc
    if not 0 < port < 65536:
        raise ValueError(f"Port out of range: {port}")
    return port


def _read_config_file(config_path: Path) -> Dict[str, object]:
    if not config_path.exists():
        return {}
    with config_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"Configuration file {config_path} must contain a mapping")
    return raw


def load_settings(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Load settings from an optional YAML file, then apply environment overrides."""

    env = os.environ if environ is None else environ

    if config_path is None and env.get("POC_CONFIG"):
        config_path = Path(env["POC_CONFIG"]).expanduser()

    data: Dict[str, object] = {}
    base_path: Path | None = None
    if config_path is not None:
        data = _read_config_file(config_path)
        base_path = config_path.resolve(strict=False).parent

    settings = Settings.from_dict(data, base_path=base_path)

    if env.get("POC_DB_PATH"):
        settings = replace(settings, database_path=resolve_database_path(env["POC_DB_PATH"]))
    if env.get("POC_HOST"):
        settings = replace(settings, host=env["POC_HOST"].strip())
    if env.get("POC_PORT"):
        settings = replace(settings, port=_parse_port(env["POC_PORT"]))
    if env.get("POC_LOG_LEVEL"):
        settings = replace(settings, log_level=env["POC_LOG_LEVEL"].strip().upper())

    return settings


__all__ = ["Settings", "load_settings"]
