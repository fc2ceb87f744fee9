from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}
DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
)


class _Env:
    """Typed reads over an environment mapping; blank values count as unset."""

    def __init__(self, environ: Mapping[str, str]):
        self._environ = environ

    def text(self, name: str, default: str | None = None) -> str | None:
        value = (self._environ.get(name) or "").strip()
        return value or default

    def flag(self, name: str, default: bool) -> bool:
        value = self.text(name)
        return default if value is None else value.lower() in _TRUE_VALUES

    def integer(self, name: str, default: int) -> int:
        value = self.text(name)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def csv(self, name: str, default: tuple[str, ...]) -> tuple[str, ...]:
        value = self.text(name)
        items = tuple(part.strip() for part in (value or "").split(",") if part.strip())
        return items or default


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    sentry_dsn: str | None = None
    rate_limit: str = "30/minute"
    rate_limit_enabled: bool = True
    upload_rate_limit: str = "10/minute"
    level_model_path: str = "models/resume-level-model.joblib"
    scoring_config_path: str | None = None
    default_language: str = "en"
    max_upload_bytes: int = 10 * 1024 * 1024
    cors_allowed_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = _Env(os.environ if environ is None else environ)
        defaults = cls()
        loaded = cls(
            log_level=(env.text("LOG_LEVEL", defaults.log_level) or defaults.log_level).upper(),
            sentry_dsn=env.text("SENTRY_DSN"),
            rate_limit=env.text("RATE_LIMIT", defaults.rate_limit) or defaults.rate_limit,
            rate_limit_enabled=env.flag("RATE_LIMIT_ENABLED", defaults.rate_limit_enabled),
            upload_rate_limit=env.text("UPLOAD_RATE_LIMIT", defaults.upload_rate_limit) or defaults.upload_rate_limit,
            level_model_path=env.text("LEVEL_MODEL_PATH", defaults.level_model_path) or defaults.level_model_path,
            scoring_config_path=env.text("SCORING_CONFIG_PATH"),
            default_language=(env.text("DEFAULT_LANGUAGE", "en") or "en").lower(),
            max_upload_bytes=env.integer("MAX_UPLOAD_BYTES", defaults.max_upload_bytes),
            cors_allowed_origins=env.csv("CORS_ALLOWED_ORIGINS", DEFAULT_CORS_ORIGINS),
        )
        if loaded.max_upload_bytes <= 0:
            raise RuntimeError("MAX_UPLOAD_BYTES must be greater than 0.")
        return loaded


settings = Settings.from_env()

__all__ = ["Settings", "settings"]
