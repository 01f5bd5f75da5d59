"""
Custom exception hierarchy for portfolio-api.

All exceptions inherit from PortfolioError, allowing callers to catch
all project-specific errors with a single except clause when desired.

Exception hierarchy:
    PortfolioError (base)
    ├── ConfigurationError: Invalid or missing configuration
    ├── ProfileValidationError: Malformed profile document
    ├── DatabaseError: SQLite profile store failures
    │   ├── ProfileNotFoundError: No active (or no matching) profile
    │   └── DuplicateProfileError: Email already used by another profile
    └── SearchError: Invalid search or listing parameters
        ├── InvalidQueryError: Empty free-text query
        ├── InvalidPageError: Page number below 1
        ├── InvalidLimitError: Page size / result limit out of range
        └── InvalidCategoryError: Unknown skill category
"""

from typing import Optional


class PortfolioError(Exception):
    """
    Base exception for all portfolio-api errors.

    Args:
        message: Human-readable error description.
        details: Optional additional context for debugging.
    """

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            return f"{self.message} — {self.details}"
        return self.message


class ConfigurationError(PortfolioError):
    """
    Raised when configuration is invalid or missing.

    Examples:
        - Unreadable .env file
        - Page size limits that contradict each other
    """

    pass


class ProfileValidationError(PortfolioError):
    """
    Raised when a profile document does not satisfy the schema.

    Examples:
        - Missing required field (name, email, project title)
        - Skill level or category outside its enum
        - GPA outside [0, 10]
        - Date that is not ISO-8601
    """

    pass


class DatabaseError(PortfolioError):
    """
    Raised when profile store operations fail.

    Examples:
        - SQLite file not writable
        - Corrupt JSON document in the profiles table
    """

    pass


class ProfileNotFoundError(DatabaseError):
    """Raised when no active profile (or no profile with a given id) exists."""

    def __init__(
        self,
        message: str = "Profile not found",
        details: Optional[str] = None,
    ) -> None:
        super().__init__(message, details)


class DuplicateProfileError(DatabaseError):
    """
    Raised when a profile's email is already used by another record.

    Email is the unique identifier of a profile, so the store rejects a
    second record carrying the same address even if the first one has
    been soft-deleted.
    """

    def __init__(self, email: str, details: Optional[str] = None) -> None:
        self.email = email
        super().__init__("Profile with this email already exists", details or email)


class SearchError(PortfolioError):
    """
    Raised when search or listing parameters are invalid.

    Every subclass is a deterministic function of its input; none of
    them is worth retrying.
    """

    pass


class InvalidQueryError(SearchError):
    """Raised when the free-text query is empty or whitespace-only."""

    def __init__(
        self,
        message: str = "Search query is required",
        details: Optional[str] = None,
    ) -> None:
        super().__init__(message, details)


class InvalidPageError(SearchError):
    """Raised when a page number is below 1."""

    def __init__(self, page: int, details: Optional[str] = None) -> None:
        self.page = page
        super().__init__(f"Page must be a positive integer (got {page})", details)


class InvalidLimitError(SearchError):
    """Raised when a page size or result limit falls outside its range."""

    def __init__(
        self,
        limit: int,
        minimum: int = 1,
        maximum: Optional[int] = None,
        details: Optional[str] = None,
    ) -> None:
        self.limit = limit
        self.minimum = minimum
        self.maximum = maximum
        if maximum is None:
            message = f"Limit must be at least {minimum} (got {limit})"
        else:
            message = f"Limit must be between {minimum} and {maximum} (got {limit})"
        super().__init__(message, details)


class InvalidCategoryError(SearchError):
    """Raised when a skill category string is not a known category."""

    def __init__(self, category: str, details: Optional[str] = None) -> None:
        self.category = category
        super().__init__(f"Invalid category: {category}", details)
