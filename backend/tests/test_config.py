from monthdays.config import Settings


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.app_name == "Month Days API"
    assert settings.log_level == "INFO"
    assert settings.cors_origins() == ["*"]


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://localhost:3000, https://example.org ,")
    settings = Settings(_env_file=None)
    assert settings.log_level == "debug"
    assert settings.cors_origins() == ["http://localhost:3000", "https://example.org"]
