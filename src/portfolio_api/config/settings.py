"""Configuration management using Pydantic Settings v2."""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from portfolio_api.config.constants import (
    DEFAULT_API_HOST,
    DEFAULT_API_PORT,
    DEFAULT_CORS_ORIGINS,
    DEFAULT_PAGE_SIZE,
    DEFAULT_PROFILE_DB_PATH,
    DEFAULT_TOP_SKILLS_LIMIT,
    MAX_PAGE_SIZE,
    MAX_QUERY_LENGTH,
)
from portfolio_api.core.exceptions import ConfigurationError

# Load .env into os.environ; the nested sections only search os.environ.
load_dotenv()


class DatabaseSettings(BaseSettings):
    """Profile store configuration."""

    profile_db_path: str = DEFAULT_PROFILE_DB_PATH

    model_config = SettingsConfigDict(env_prefix="DB_")


class SearchSettings(BaseSettings):
    """Search and listing defaults."""

    default_page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1)
    max_page_size: int = Field(MAX_PAGE_SIZE, ge=1)
    top_skills_limit: int = Field(DEFAULT_TOP_SKILLS_LIMIT, ge=1)
    max_query_length: int = Field(MAX_QUERY_LENGTH, ge=1)

    model_config = SettingsConfigDict(env_prefix="SEARCH_")

    @model_validator(mode="after")
    def _page_size_within_max(self) -> "SearchSettings":
        if self.default_page_size > self.max_page_size:
            raise ValueError(
                f"SEARCH_DEFAULT_PAGE_SIZE ({self.default_page_size}) exceeds "
                f"SEARCH_MAX_PAGE_SIZE ({self.max_page_size})"
            )
        return self


class ApiSettings(BaseSettings):
    """HTTP server configuration."""

    host: str = DEFAULT_API_HOST
    port: int = DEFAULT_API_PORT
    cors_origins: list[str] = list(DEFAULT_CORS_ORIGINS)

    model_config = SettingsConfigDict(env_prefix="API_")


class Settings(BaseSettings):
    """Root settings class combining all sections."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Prefixed env vars are handled by the nested classes
    )


_settings_instance: Optional[Settings] = None


def _load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError("Invalid settings", details=_describe(e)) from e


def _describe(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item["loc"])
        parts.append(f"{field}: {item['msg']}" if field else item["msg"])
    return "; ".join(parts)


def get_settings() -> Settings:
    """Return the global Settings instance (singleton pattern).

    Raises:
        ConfigurationError: If an environment variable holds an invalid value.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = _load_settings()
    return _settings_instance


def reload_settings() -> Settings:
    """Reload settings from environment (mainly for testing)."""
    global _settings_instance
    _settings_instance = _load_settings()
    return _settings_instance
