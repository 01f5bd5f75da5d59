"""
FastAPI dependency providers for the portfolio API.

Shared services (ProfileStore, SearchEngine) are created once during the
lifespan startup in ``app.py`` and read from ``request.app.state`` here,
so route handlers never construct their own.

Usage in route modules::

    from fastapi import Depends
    from portfolio_api.api.dependencies import get_active_profile

    @router.get("/")
    async def get_profile(profile: Profile = Depends(get_active_profile)):
        ...
"""

from fastapi import Depends, Request

from portfolio_api.core import Profile, ProfileNotFoundError
from portfolio_api.database import ProfileStore
from portfolio_api.search import SearchEngine


def get_profile_store(request: Request) -> ProfileStore:
    """Provide the ProfileStore singleton."""
    store: ProfileStore = request.app.state.store
    return store


def get_search_engine(request: Request) -> SearchEngine:
    """Provide the SearchEngine singleton."""
    engine: SearchEngine = request.app.state.search_engine
    return engine


def load_active_profile(store: ProfileStore) -> Profile:
    """
    Read the active profile from the store.

    Raises:
        ProfileNotFoundError: If no profile is active.
    """
    profile = store.get_active()
    if profile is None:
        raise ProfileNotFoundError()
    return profile


def get_active_profile(store: ProfileStore = Depends(get_profile_store)) -> Profile:
    """Provide a fresh snapshot of the active profile for this request."""
    return load_active_profile(store)
