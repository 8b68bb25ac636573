"""Tests for settings loading."""

import os

import pytest

from feedcheck.config import load_settings
from feedcheck.settings import DEFAULT_FEEDS_URL, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop FEEDCHECK_* variables from the environment."""
    for key in list(os.environ):
        if key.startswith("FEEDCHECK_"):
            monkeypatch.delenv(key)


def test_defaults_when_file_missing(tmp_path):
    settings = load_settings(tmp_path / "missing.yml")

    assert settings.feeds_url == DEFAULT_FEEDS_URL
    assert settings.quotes == ["USD", "USDT"]
    assert settings.timeout == 10.0
    assert settings.exchanges == {}


def test_load_yaml(tmp_path):
    path = tmp_path / "feedcheck.yml"
    path.write_text(
        "quotes: [usdt, USDC, usdt]\n"
        "timeout: 5\n"
        "exchanges:\n"
        "  okx:\n"
        "    enabled: false\n"
        "  gateio:\n"
        "    separator: '-'\n",
        encoding="utf-8",
    )

    settings = load_settings(path)

    assert settings.quotes == ["USDT", "USDC"]
    assert settings.timeout == 5
    assert settings.exchanges["okx"].enabled is False
    assert settings.exchanges["gateio"].separator == "-"


def test_empty_file(tmp_path):
    path = tmp_path / "feedcheck.yml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == Settings()


def test_config_path_from_env(tmp_path, monkeypatch):
    path = tmp_path / "custom.yml"
    path.write_text("timeout: 2\n", encoding="utf-8")
    monkeypatch.setenv("FEEDCHECK_CONFIG", str(path))

    assert load_settings().timeout == 2


def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("FEEDCHECK_TIMEOUT", "7.5")
    monkeypatch.setenv("FEEDCHECK_EXCHANGES__KRAKEN__ENABLED", "false")
    monkeypatch.setenv("FEEDCHECK_LOG_LEVEL", "DEBUG")

    settings = load_settings(tmp_path / "missing.yml")

    assert settings.timeout == 7.5
    assert settings.exchanges["kraken"].enabled is False


def test_root_must_be_mapping(tmp_path):
    path = tmp_path / "feedcheck.yml"
    path.write_text("- okx\n- gateio\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Config root must be a mapping"):
        load_settings(path)


def test_invalid_values(tmp_path):
    path = tmp_path / "feedcheck.yml"
    path.write_text("timeout: 0\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid configuration"):
        load_settings(path)


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "feedcheck.yml"
    path.write_text("exchanges:\n  okx:\n    api_key: secret\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid configuration"):
        load_settings(path)


def test_empty_quotes_rejected():
    with pytest.raises(ValueError):
        Settings(quotes=[])


def test_env_override_merges_into_file(tmp_path, monkeypatch):
    path = tmp_path / "feedcheck.yml"
    path.write_text("exchanges:\n  okx:\n    enabled: false\n", encoding="utf-8")
    monkeypatch.setenv("FEEDCHECK_EXCHANGES__OKX__URL", "https://okx.test/instruments")
    monkeypatch.setenv("FEEDCHECK_QUOTES", "[usdc]")

    settings = load_settings(path)

    assert settings.exchanges["okx"].enabled is False
    assert settings.exchanges["okx"].url == "https://okx.test/instruments"
    assert settings.quotes == ["USDC"]
