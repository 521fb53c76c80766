import logging
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

# Look for .env in the project root (parent of backend/)
ENV_FILE = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    # Environment
    env: str = "development"  # development, staging, or production
    log_level: str = "INFO"

    # Rate limiting
    rate_limit_key: str = "public"  # public or client
    rate_limit_default: str = "60/minute"
    rate_limit_storage_uri: str = "memory://"

    # CORS (development only)
    cors_origins: list[str] = ["http://localhost:5173"]

    @field_validator("env")
    @classmethod
    def validate_env(cls, v: str) -> str:
        if v not in ("development", "staging", "production"):
            raise ValueError("ENV must be one of: development, staging, production")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL {v!r} is not a logging level")
        return level

    @field_validator("rate_limit_key")
    @classmethod
    def validate_rate_limit_key(cls, v: str, info) -> str:
        """Warn about spoofable rate limit keys in production."""
        import sys

        if v not in ("public", "client"):
            raise ValueError("RATE_LIMIT_KEY must be 'public' or 'client'")

        env = info.data.get("env", "development")
        if v == "client" and env in ["production", "staging"]:
            print(
                "WARNING: RATE_LIMIT_KEY=client - X-Forwarded-For can be spoofed "
                "to evade rate limits.",
                file=sys.stderr,
            )
        return v

    model_config = {
        "env_file": str(ENV_FILE) if ENV_FILE.exists() else None,
        "extra": "ignore",  # Ignore extra env vars not defined in model
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()


# Lazy proxy so that `from clientip.config import settings` still works,
# but construction is deferred until first attribute access.
class _SettingsProxy:
    def __getattr__(self, name: str):
        return getattr(get_settings(), name)


settings = _SettingsProxy()
