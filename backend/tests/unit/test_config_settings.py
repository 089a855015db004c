"""Unit tests for application settings configuration."""

from pathlib import Path

from records_api.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_defaults_point_at_local_instance(monkeypatch):
    monkeypatch.delenv("DB_URL", raising=False)
    monkeypatch.delenv("ADDR", raising=False)
    settings = Settings(_env_file=None)

    assert settings.db_url.startswith("postgresql://")
    assert "localhost" in settings.db_url
    assert settings.addr == ":8080"
    assert settings.listen_host == "0.0.0.0"
    assert settings.listen_port == 8080


def test_db_url_and_addr_read_from_environment(monkeypatch):
    monkeypatch.setenv("DB_URL", "postgresql://u:p@db:5432/other")
    monkeypatch.setenv("ADDR", "127.0.0.1:9000")
    settings = Settings(_env_file=None)

    assert settings.db_url == "postgresql://u:p@db:5432/other"
    assert settings.listen_host == "127.0.0.1"
    assert settings.listen_port == 9000
