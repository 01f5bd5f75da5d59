"""portfolio-api: search and serve a single portfolio profile.

This package provides the profile document model, a search engine over
it, a SQLite profile store, a read-only FastAPI service and a CLI.

Usage:
    from portfolio_api import __version__
    from portfolio_api.config import get_settings
    from portfolio_api.search import SearchEngine
    from portfolio_api.database import ProfileStore
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("portfolio-api")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Re-export lightweight core types for convenience.
# FastAPI and the store are NOT imported here so that importing the
# package for its types does not pull in the web stack.
from portfolio_api.core import (
    PortfolioError,
    Profile,
    Project,
    SearchResult,
    Skill,
    SkillCategory,
    SkillLevel,
)

__all__ = [
    "__version__",
    # Core types
    "Profile",
    "Skill",
    "SkillLevel",
    "SkillCategory",
    "Project",
    "SearchResult",
    # Base exception
    "PortfolioError",
]
