import pytest

from housing.config import DEFAULT_FRED_BASE_URL, Settings

ENV_VARS = (
    "FRED_API_KEY",
    "FRED_BASE_URL",
    "FRED_TIMEOUT_SECONDS",
    "FRED_MAX_ATTEMPTS",
    "CACHE_MAX_AGE_SECONDS",
    "CACHE_STALE_SECONDS",
    "API_CORS_ORIGINS",
    "LOG_LEVEL",
)


@pytest.fixture()
def clean_env(monkeypatch, tmp_path):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    # keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)


def test_defaults(clean_env):
    settings = Settings.from_env()

    assert settings.fred_api_key is None
    assert settings.fred_base_url == DEFAULT_FRED_BASE_URL
    assert settings.request_timeout == 30.0
    assert settings.max_attempts == 1
    assert settings.cors_origins == ("*",)
    assert settings.log_level == "INFO"
    assert settings.cache_control == "public, s-maxage=3600, stale-while-revalidate=7200"


def test_reads_environment(clean_env, monkeypatch):
    monkeypatch.setenv("FRED_API_KEY", "  secret  ")
    monkeypatch.setenv("FRED_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("FRED_MAX_ATTEMPTS", "3")
    monkeypatch.setenv("CACHE_MAX_AGE_SECONDS", "60")
    monkeypatch.setenv("API_CORS_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.fred_api_key == "secret"
    assert settings.request_timeout == 5.0
    assert settings.max_attempts == 3
    assert settings.cors_origins == ("https://a.example", "https://b.example")
    assert settings.log_level == "DEBUG"
    assert settings.cache_control.startswith("public, s-maxage=60,")


def test_blank_api_key_counts_as_missing(clean_env, monkeypatch):
    monkeypatch.setenv("FRED_API_KEY", "   ")

    assert Settings.from_env().fred_api_key is None


def test_invalid_number_names_variable(clean_env, monkeypatch):
    monkeypatch.setenv("FRED_TIMEOUT_SECONDS", "soon")

    with pytest.raises(ValueError, match="FRED_TIMEOUT_SECONDS"):
        Settings.from_env()
