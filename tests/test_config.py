"""
Settings loading from the environment and .env files.
"""

import os

import pytest
from pydantic import ValidationError

from hearingclinic.core.config import Settings, get_settings, reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("APP_ENV", "PORT", "LOG_LEVEL", "LOG_FORMAT", "AUX_APPOINTMENTS_DELAY_MS"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.app_env == "development"
    assert settings.is_development
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "json"
    assert settings.auxiliary.appointments_delay_ms == 50


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("APP_ENV", "Testing")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("AUX_DEVICES_DELAY_MS", "5")
    monkeypatch.setenv("PORT", "9100")

    settings = get_settings()

    assert settings.is_testing
    assert settings.logging.level == "DEBUG"
    assert settings.auxiliary.devices_delay_ms == 5
    assert settings.port == 9100


def test_env_file_is_discovered_without_overriding_environment(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("AUX_APPOINTMENTS_DELAY_MS=7\nAPP_ENV=staging\n")
    nested = tmp_path / "nested"
    nested.mkdir()
    monkeypatch.chdir(nested)
    monkeypatch.delenv("AUX_APPOINTMENTS_DELAY_MS", raising=False)
    monkeypatch.setenv("APP_ENV", "production")

    try:
        settings = get_settings()
    finally:
        # load_dotenv writes straight into os.environ
        os.environ.pop("AUX_APPOINTMENTS_DELAY_MS", None)

    assert settings.auxiliary.appointments_delay_ms == 7
    assert settings.app_env == "production"


def test_settings_are_cached(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert get_settings() is get_settings()


@pytest.mark.parametrize(
    "name, value",
    [("APP_ENV", "moon"), ("PORT", "70000"), ("LOG_LEVEL", "LOUD"), ("LOG_FORMAT", "xml")],
)
def test_invalid_values_are_rejected(monkeypatch, tmp_path, name, value):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        Settings()
