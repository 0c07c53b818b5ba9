"""Tests for settings."""

from stock_manager.config import Settings, normalize_base_url


def test_defaults_point_at_local_backend(monkeypatch) -> None:
    monkeypatch.delenv("API_URL", raising=False)
    monkeypatch.delenv("NEXT_PUBLIC_API_URL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.resolved_api_url() == "http://localhost:3000"
    assert settings.min_password_length == 8


def test_api_url_from_environment(monkeypatch) -> None:
    monkeypatch.delenv("API_URL", raising=False)
    monkeypatch.setenv("NEXT_PUBLIC_API_URL", "https://inventory.example.com/")

    settings = Settings(_env_file=None)

    assert settings.resolved_api_url() == "https://inventory.example.com"


def test_credentials_path_expands_home(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    settings = Settings(_env_file=None, credentials_path="~/creds.json")

    assert settings.resolved_credentials_path() == tmp_path / "creds.json"


def test_normalize_base_url() -> None:
    assert normalize_base_url(" http://host:3000// ") == "http://host:3000"
    assert normalize_base_url("") == "http://localhost:3000"
