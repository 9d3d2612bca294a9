import os
from datetime import timedelta


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


class BaseConfig:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-change-in-prod")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # ── Locales ────────────────────────────────────────────────────────────
    # Display label -> identifier, rendered by the language switcher
    AVAILABLE_LOCALES = {
        "English": "en",
        "Türkçe": "tr",
    }
    DEFAULT_LOCALE = os.environ.get("DEFAULT_LOCALE", "en")
    BABEL_DEFAULT_LOCALE = DEFAULT_LOCALE

    # Opt-in: reject identifiers that are not in AVAILABLE_LOCALES
    LOCALE_VALIDATE = _env_flag("LOCALE_VALIDATE", False)
    LOCALE_RATE_LIMIT = "30 per minute"

    # ── Session / rate limiting ────────────────────────────────────────────
    PERMANENT_SESSION_LIFETIME = timedelta(days=30)
    SESSION_COOKIE_SAMESITE = "Lax"
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "memory://")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(BaseConfig):
    TESTING = True
    RATELIMIT_ENABLED = False


class ProductionConfig(BaseConfig):
    DEBUG = False
    SESSION_COOKIE_SECURE = True

    # Enforce strong secret key in production
    @classmethod
    def init_app(cls, app):
        secret = os.environ.get("SECRET_KEY", "")
        if not secret or secret == "dev-secret-change-in-prod":
            raise ValueError(
                "SECRET_KEY must be set to a strong random value in production."
            )


config_map = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}
