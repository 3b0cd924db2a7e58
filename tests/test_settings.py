# SPDX-License-Identifier: MIT
"""Tests for configuration loading."""

import pytest

from runtime.settings import load_settings


@pytest.fixture()
def _isolated(monkeypatch, tmp_path):
    """Run from an empty directory with no ``XS_`` overrides."""

    monkeypatch.chdir(tmp_path)
    for name in ("XS_LOG_LEVEL", "XS_DEFAULT_ALIAS", "XS_CONFIG_HEADER"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


def test_load_settings_defaults_without_config(_isolated) -> None:
    settings = load_settings()
    assert settings.log_level == "warn"
    assert settings.default_alias == "crosshair"
    assert settings.config_header is True


def test_load_settings_reads_default_config_file(_isolated) -> None:
    (_isolated / "config").mkdir()
    (_isolated / "config" / "app.yaml").write_text(
        "default_alias: bluedot\n", encoding="utf-8"
    )
    assert load_settings().default_alias == "bluedot"


def test_environment_overrides_file(_isolated, monkeypatch) -> None:
    path = _isolated / "custom.yaml"
    path.write_text("default_alias: bluedot\nlog_level: info\n", encoding="utf-8")
    monkeypatch.setenv("XS_DEFAULT_ALIAS", "reddot")
    monkeypatch.setenv("XS_CONFIG_HEADER", "false")
    settings = load_settings(path)
    assert settings.default_alias == "reddot"
    assert settings.log_level == "info"
    assert settings.config_header is False


def test_load_settings_reads_dotenv(_isolated) -> None:
    (_isolated / ".env").write_text("XS_DEFAULT_ALIAS=fromenv\n", encoding="utf-8")
    assert load_settings().default_alias == "fromenv"


def test_load_settings_rejects_invalid_env(_isolated, monkeypatch) -> None:
    monkeypatch.setenv("XS_DEFAULT_ALIAS", "")
    with pytest.raises(RuntimeError):
        load_settings()


def test_load_settings_missing_explicit_file(_isolated) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(_isolated / "missing.yaml")


def test_logfire_token_is_hidden_from_repr(_isolated, monkeypatch) -> None:
    monkeypatch.setenv("XS_LOGFIRE_TOKEN", "secret-token")
    settings = load_settings()
    assert settings.logfire_token == "secret-token"
    assert "secret-token" not in repr(settings)
