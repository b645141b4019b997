"""Unit tests for meps.config."""

from pathlib import Path

from meps.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("MEPS_DATA_DIR", raising=False)
    monkeypatch.delenv("MEPS_LOG_LEVEL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.data_dir == Path(".meps")
    assert settings.log_level == "INFO"
    assert settings.debug is False


def test_reads_prefixed_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("MEPS_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("MEPS_LOG_LEVEL", "DEBUG")
    settings = Settings(_env_file=None)
    assert settings.data_dir == tmp_path
    assert settings.log_level == "DEBUG"


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
