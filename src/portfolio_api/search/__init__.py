"""Search module: filtering, search and ranking over the profile document.

This module provides the high-level search interface:
    - SearchEngine: free-text search, skill-filtered project pages,
      top skills, and skills by category

Usage:
    from portfolio_api.search import SearchEngine

    engine = SearchEngine()
    result = engine.search(profile, "django")
"""

from portfolio_api.search.engine import SearchEngine

__all__ = [
    "SearchEngine",
]
