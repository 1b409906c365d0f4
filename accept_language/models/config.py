import json
import os
import sys
from typing import Annotated, List

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


def _should_load_env_file() -> str | None:
    """Determine if .env should be loaded.

    Do NOT auto-load `.env` when running under pytest or in CI, so tests see
    only the environment they set up themselves.
    """
    if any("pytest" in str(x) for x in sys.argv if x):
        return None
    if os.environ.get("CI") in ("1", "true", "True"):
        return None
    return ".env"


class Settings(BaseSettings):
    # Environment configuration
    ENVIRONMENT: str = Field(
        default="development",
        description="Environment: 'development', 'staging', or 'production'",
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Minimum level for log output",
    )
    LOG_FILE: str | None = Field(
        default=None,
        description="Optional path of a rotating log file",
    )

    # Locale negotiation
    SUPPORTED_LOCALES: Annotated[List[str], NoDecode] = Field(
        default=["en"],
        description="Supported locale tags, highest priority first (comma-separated in env var)",
    )
    DEFAULT_LOCALE: str = Field(
        default="en",
        description="Locale used when nothing in Accept-Language matches",
    )
    LOOSE_LOCALE_MATCHING: bool = Field(
        default=False,
        description="Compare primary language codes only, ignoring script and region",
    )
    SET_CONTENT_LANGUAGE: bool = Field(
        default=True,
        description="Write the negotiated locale to the Content-Language response header",
    )

    @field_validator("SUPPORTED_LOCALES", mode="before")
    @classmethod
    def parse_supported_locales(cls, v: str | List[str]) -> List[str]:
        """Parse supported locales from a JSON list or comma-separated string."""
        if isinstance(v, str) and v.strip().startswith("["):
            return json.loads(v)
        if isinstance(v, str):
            return [locale.strip() for locale in v.split(",") if locale.strip()]
        return v

    @model_validator(mode="after")
    def check_default_locale(self) -> "Settings":
        """The fallback locale must be one of the supported ones."""
        if not self.SUPPORTED_LOCALES:
            raise ValueError("SUPPORTED_LOCALES must not be empty")
        supported = {locale.lower() for locale in self.SUPPORTED_LOCALES}
        if self.DEFAULT_LOCALE.lower() not in supported:
            raise ValueError(
                f"DEFAULT_LOCALE {self.DEFAULT_LOCALE!r} is not in SUPPORTED_LOCALES"
            )
        return self

    model_config = SettingsConfigDict(
        env_file=_should_load_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


def get_settings() -> Settings:
    """Get the settings instance (for dependency injection)."""
    return settings
