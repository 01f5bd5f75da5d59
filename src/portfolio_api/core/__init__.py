"""Core module: types, exceptions, and logging.

This module provides the foundational components used throughout the package:
    - Data types (Profile and its entities, SearchResult, PagedProjects)
    - Exception hierarchy (PortfolioError and subclasses)
    - Logging utilities (get_logger, configure_logging)

Usage:
    from portfolio_api.core import (
        Profile,
        Skill,
        SearchResult,
        InvalidQueryError,
        get_logger,
    )
"""

from portfolio_api.core.exceptions import (
    ConfigurationError,
    DatabaseError,
    DuplicateProfileError,
    InvalidCategoryError,
    InvalidLimitError,
    InvalidPageError,
    InvalidQueryError,
    PortfolioError,
    ProfileNotFoundError,
    ProfileValidationError,
    SearchError,
)
from portfolio_api.core.logging import (
    configure_logging,
    get_logger,
    suppress_third_party_loggers,
)
from portfolio_api.core.types import (
    EducationEntry,
    PagedProjects,
    Pagination,
    Profile,
    ProfileLinks,
    ProfileSummary,
    Project,
    ProjectStatus,
    SearchResult,
    Skill,
    SkillCategory,
    SkillLevel,
    WorkEntry,
)

__all__ = [
    # Types
    "SkillLevel",
    "SkillCategory",
    "ProjectStatus",
    "Skill",
    "Project",
    "WorkEntry",
    "EducationEntry",
    "ProfileLinks",
    "Profile",
    "ProfileSummary",
    "SearchResult",
    "Pagination",
    "PagedProjects",
    # Exceptions
    "PortfolioError",
    "ConfigurationError",
    "ProfileValidationError",
    "DatabaseError",
    "ProfileNotFoundError",
    "DuplicateProfileError",
    "SearchError",
    "InvalidQueryError",
    "InvalidPageError",
    "InvalidLimitError",
    "InvalidCategoryError",
    # Logging
    "get_logger",
    "configure_logging",
    "suppress_third_party_loggers",
]
