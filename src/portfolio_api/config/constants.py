"""Application-wide constants."""

# Proficiency ranking used for "top skills" ordering
SKILL_LEVEL_WEIGHTS = {
    "expert": 4,
    "advanced": 3,
    "intermediate": 2,
    "beginner": 1,
}

SKILL_CATEGORIES = ("frontend", "backend", "database", "devops", "mobile", "other")


def parse_category(category_input: str) -> str:
    """Normalise and validate a skill category name.

    Args:
        category_input: Category name in any case, surrounding spaces allowed.

    Returns:
        The lowercased category name.

    Raises:
        ValueError: If the category is not in ``SKILL_CATEGORIES``.
    """
    category = category_input.strip().lower()
    if not category:
        raise ValueError(f"Empty category. Supported: {', '.join(SKILL_CATEGORIES)}")
    if category not in SKILL_CATEGORIES:
        raise ValueError(
            f"Unsupported category: {category}. "
            f"Supported: {', '.join(SKILL_CATEGORIES)}"
        )
    return category


# Pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# Top skills
DEFAULT_TOP_SKILLS_LIMIT = 10

# Query-string limits enforced at the HTTP boundary
MAX_QUERY_LENGTH = 200
MAX_SKILL_FILTER_LENGTH = 50

# Database
DEFAULT_PROFILE_DB_PATH = "./data/profiles.sqlite"

# API
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000
DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "http://127.0.0.1:3000")
