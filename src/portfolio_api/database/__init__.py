"""Database module: SQLite storage for profile documents.

This module provides the storage layer for the portfolio profile:
    - ProfileStore: SQLite repository enforcing the single-active-profile rule
    - ProfileRecord: Dataclass describing a stored profile row
    - SAMPLE_PROFILE / sample_profile: built-in seed document

Usage:
    from portfolio_api.database import ProfileStore, sample_profile

    store = ProfileStore()
    store.create_profile(sample_profile())
    profile = store.get_active()
"""

from portfolio_api.database.profiles import ProfileRecord, ProfileStore
from portfolio_api.database.seed import SAMPLE_PROFILE, sample_profile

__all__ = [
    # Main classes
    "ProfileStore",
    # Supporting types
    "ProfileRecord",
    # Seed data
    "SAMPLE_PROFILE",
    "sample_profile",
]
