"""Configuration module: settings and constants."""

from portfolio_api.config.constants import (
    DEFAULT_API_HOST,
    DEFAULT_API_PORT,
    DEFAULT_CORS_ORIGINS,
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_PROFILE_DB_PATH,
    DEFAULT_TOP_SKILLS_LIMIT,
    MAX_PAGE_SIZE,
    MAX_QUERY_LENGTH,
    MAX_SKILL_FILTER_LENGTH,
    SKILL_CATEGORIES,
    SKILL_LEVEL_WEIGHTS,
    parse_category,
)
from portfolio_api.config.settings import (
    ApiSettings,
    DatabaseSettings,
    SearchSettings,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = [
    # Constants
    "SKILL_LEVEL_WEIGHTS",
    "SKILL_CATEGORIES",
    "parse_category",
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "DEFAULT_TOP_SKILLS_LIMIT",
    "MAX_QUERY_LENGTH",
    "MAX_SKILL_FILTER_LENGTH",
    "DEFAULT_PROFILE_DB_PATH",
    "DEFAULT_API_HOST",
    "DEFAULT_API_PORT",
    "DEFAULT_CORS_ORIGINS",
    # Settings
    "ApiSettings",
    "DatabaseSettings",
    "SearchSettings",
    "Settings",
    "get_settings",
    "reload_settings",
]
