"""
Configuration Test - environment parsing for Settings
"""

import pytest
from pydantic import ValidationError

from config import Settings, load_settings

ENV_VARS = [
    "STRIPCHAT_USERID", "STRIPCHAT_BEARER", "DATA_SOURCES", "ASSETS_DIR",
    "CACHE_TTL_SECONDS", "CACHE_MAX_ENTRIES", "HTTP_TIMEOUT", "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()

    assert settings.STRIPCHAT_USERID is None
    assert settings.STRIPCHAT_BEARER is None
    assert settings.DATA_SOURCES == ["stripchat"]
    assert settings.ASSETS_DIR is None
    assert settings.CACHE_TTL_SECONDS == 60
    assert settings.HTTP_TIMEOUT == 30.0
    assert settings.LOG_LEVEL == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("STRIPCHAT_USERID", "u1")
    monkeypatch.setenv("STRIPCHAT_BEARER", "tok")
    monkeypatch.setenv("DATA_SOURCES", " stripchat , other ,")
    monkeypatch.setenv("ASSETS_DIR", "/srv/public")
    monkeypatch.setenv("CACHE_TTL_SECONDS", "30")
    monkeypatch.setenv("HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.STRIPCHAT_USERID == "u1"
    assert settings.STRIPCHAT_BEARER == "tok"
    assert settings.DATA_SOURCES == ["stripchat", "other"]
    assert settings.ASSETS_DIR == "/srv/public"
    assert settings.CACHE_TTL_SECONDS == 30
    assert settings.HTTP_TIMEOUT == 2.5
    assert settings.LOG_LEVEL == "DEBUG"


def test_empty_secret_counts_as_missing(monkeypatch):
    monkeypatch.setenv("STRIPCHAT_USERID", "")
    assert load_settings().STRIPCHAT_USERID is None


def test_empty_data_sources(monkeypatch):
    monkeypatch.setenv("DATA_SOURCES", "")
    assert load_settings().DATA_SOURCES == []


def test_settings_are_read_only():
    settings = Settings(STRIPCHAT_USERID="u1")
    with pytest.raises(ValidationError):
        settings.STRIPCHAT_USERID = "other"


def test_extra_values_are_kept():
    settings = Settings(SOME_OTHER_SECRET="x")
    assert settings.SOME_OTHER_SECRET == "x"


@pytest.mark.parametrize("raw, expected", [
    ("verbose", "INFO"),
    ("", "INFO"),
    ("warning", "WARNING"),
    (" error ", "ERROR"),
])
def test_log_level_falls_back_to_info(monkeypatch, raw, expected):
    monkeypatch.setenv("LOG_LEVEL", raw)
    assert load_settings().LOG_LEVEL == expected
