from __future__ import annotations

from pathlib import Path

import pytest

from pocdemo.config import Settings, load_settings


def test_defaults_without_file_or_environment() -> None:
    settings = load_settings(environ={})
    assert settings.host == "127.0.0.1"
    assert settings.port == 8080
    assert settings.log_level == "INFO"
    assert settings.database_path.name == "poc.sqlite3"


def test_yaml_file_values_are_applied(tmp_path: Path) -> None:
    config = tmp_path / "poc.yaml"
    config.write_text(
        "database_path: data/demo.sqlite3\nport: 9000\nlog_level: debug\n",
        encoding="utf-8",
    )

    settings = load_settings(config, environ={})

    assert settings.database_path == (tmp_path / "data" / "demo.sqlite3").resolve()
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"


def test_environment_overrides_file(tmp_path: Path) -> None:
    config = tmp_path / "poc.yaml"
    config.write_text("port: 9000\nhost: 0.0.0.0\n", encoding="utf-8")
    db_path = tmp_path / "env.sqlite3"

    settings = load_settings(
        environ={
            "POC_CONFIG": str(config),
            "POC_PORT": "9100",
            "POC_DB_PATH": str(db_path),
        }
    )

    assert settings.host == "0.0.0.0"
    assert settings.port == 9100
    assert settings.database_path == db_path.resolve()


def test_missing_file_is_ignored(tmp_path: Path) -> None:
    settings = load_settings(tmp_path / "absent.yaml", environ={})
    assert settings.port == 8080


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    config = tmp_path / "poc.yaml"
    config.write_text("colour: blue\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(config, environ={})


def test_non_mapping_document_is_rejected(tmp_path: Path) -> None:
    config = tmp_path / "poc.yaml"
    config.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(config, environ={})


@pytest.mark.parametrize("port", ["http", "0", "70000"])
def test_invalid_port_is_rejected(port: str) -> None:
    with pytest.raises(ValueError):
        load_settings(environ={"POC_PORT": port})


def test_from_dict_uses_default_database_path() -> None:
    settings = Settings.from_dict({"app_title": "Demo"})
    assert settings.app_title == "Demo"
    assert settings.database_path.name == "poc.sqlite3"
