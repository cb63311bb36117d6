"""Tests for application settings."""

from pathlib import Path

import pytest

from core.config import DEFAULT_REGISTRAR_URL, AppSettings, write_user_env_vars


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "GODADDY_API_KEY",
        "GODADDY_API_SECRET",
        "GODADDY_URL",
        "NAMES_LOOKUP_API_KEY",
        "NAMES_LOOKUP_API_SECRET",
        "NAMES_LOOKUP_API_URL",
        "NAMES_LOOKUP_BATCH_SIZE",
        "NAMES_LOOKUP_DELAY_MS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = AppSettings(_env_file=None)
    assert settings.api_url == DEFAULT_REGISTRAR_URL
    assert settings.batch_size == 50
    assert settings.delay_ms == 2000
    assert settings.http_timeout_seconds is None
    assert settings.missing_credentials() == ["GODADDY_API_KEY", "GODADDY_API_SECRET"]


def test_reads_godaddy_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GODADDY_API_KEY", "k")
    monkeypatch.setenv("GODADDY_API_SECRET", "s")
    monkeypatch.setenv("GODADDY_URL", "https://api.godaddy.com")

    settings = AppSettings(_env_file=None)

    assert settings.api_key == "k"
    assert settings.api_secret == "s"
    assert settings.api_url == "https://api.godaddy.com"
    assert settings.missing_credentials() == []


def test_blank_url_falls_back_to_sandbox(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GODADDY_URL", "  ")
    assert AppSettings(_env_file=None).api_url == DEFAULT_REGISTRAR_URL


def test_prefixed_tunables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NAMES_LOOKUP_BATCH_SIZE", "10")
    monkeypatch.setenv("NAMES_LOOKUP_DELAY_MS", "0")

    settings = AppSettings(_env_file=None)

    assert settings.batch_size == 10
    assert settings.delay_ms == 0


def test_reads_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("GODADDY_API_KEY=fromfile\nGODADDY_API_SECRET='quoted'\n", encoding="utf-8")

    settings = AppSettings(_env_file=env_file)

    assert settings.api_key == "fromfile"
    assert settings.api_secret == "quoted"


def test_write_user_env_vars_merges(tmp_path: Path) -> None:
    env_path = tmp_path / "cfg" / ".env"
    write_user_env_vars({"GODADDY_URL": "https://a", "GODADDY_API_KEY": "k"}, env_path)
    write_user_env_vars({"GODADDY_API_KEY": "k2"}, env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert lines[1:] == ["GODADDY_API_KEY=k2", "GODADDY_URL=https://a"]
