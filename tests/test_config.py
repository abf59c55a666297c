from __future__ import annotations

import importlib

from config import get_settings_module


def test_settings_module_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module() == "config.production"

    monkeypatch.setenv("APP_ENV", "test")
    assert get_settings_module() == "config.testing"

    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"


def test_db_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_NAME", "rh")
    monkeypatch.setenv("PORT", "8080")

    import config.production as production

    production = importlib.reload(production)

    assert production.DB_CONFIG["host"] == "db.internal"
    assert production.DB_CONFIG["database"] == "rh"
    assert production.DB_CONFIG["user"] == "root"
    assert production.PORT == 8080


def test_explicit_env_wins_and_unknown_falls_back(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")

    assert get_settings_module(" Testing ") == "config.testing"
    assert get_settings_module("staging") == "config.development"
