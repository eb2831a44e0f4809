from infrastructure.config.settings import Settings


def test_dev_defaults(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "dev")
    monkeypatch.setenv("GEMINI_API_KEY", "from-env")
    monkeypatch.delenv("GEMINI_MODEL", raising=False)

    settings = Settings.from_environment()

    assert settings.environment == "dev"
    assert settings.gemini_api_key == "from-env"
    assert settings.gemini_model == "gemini-2.0-flash"
    assert settings.lambda_timeout_seconds == 30


def test_prod_overrides(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-1.5-pro")

    settings = Settings.from_environment()

    assert settings.environment == "prod"
    assert settings.gemini_model == "gemini-1.5-pro"
    assert settings.lambda_memory_mb == 512
    assert settings.log_level == "WARNING"
