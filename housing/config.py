"""Runtime settings resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_FRED_BASE_URL = "https://api.stlouisfed.org/fred/series/observations"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_ATTEMPTS = 1
DEFAULT_CACHE_MAX_AGE = 3600
DEFAULT_CACHE_STALE = 7200


def _env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _env_float(name: str, default: float) -> float:
    raw = _env(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}.") from exc


def _env_int(name: str, default: int) -> int:
    raw = _env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc


@dataclass(frozen=True)
class Settings:
    """Configuration shared by the fetcher, the API and the job runner."""

    fred_api_key: str | None = None
    fred_base_url: str = DEFAULT_FRED_BASE_URL
    request_timeout: float = DEFAULT_TIMEOUT_SECONDS
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    cache_max_age: int = DEFAULT_CACHE_MAX_AGE
    cache_stale_while_revalidate: int = DEFAULT_CACHE_STALE
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv(find_dotenv(usecwd=True))
        raw_origins = _env("API_CORS_ORIGINS") or "*"
        origins = tuple(origin.strip() for origin in raw_origins.split(",") if origin.strip())
        return cls(
            fred_api_key=_env("FRED_API_KEY"),
            fred_base_url=_env("FRED_BASE_URL") or DEFAULT_FRED_BASE_URL,
            request_timeout=_env_float("FRED_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
            max_attempts=max(1, _env_int("FRED_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS)),
            cache_max_age=_env_int("CACHE_MAX_AGE_SECONDS", DEFAULT_CACHE_MAX_AGE),
            cache_stale_while_revalidate=_env_int("CACHE_STALE_SECONDS", DEFAULT_CACHE_STALE),
            cors_origins=origins or ("*",),
            log_level=(_env("LOG_LEVEL") or "INFO").upper(),
        )

    @property
    def cache_control(self) -> str:
        return (
            f"public, s-maxage={self.cache_max_age}, "
            f"stale-while-revalidate={self.cache_stale_while_revalidate}"
        )


__all__ = ["Settings", "DEFAULT_FRED_BASE_URL", "DEFAULT_TIMEOUT_SECONDS"]
