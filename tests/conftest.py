"""
Shared pytest fixtures for portfolio-api tests.

This module provides reusable test data and temporary resources used
across unit, integration and API tests:

    - sample_profile: The built-in seed profile (10 skills, 5 projects)
    - engine: A SearchEngine with explicit page-size limits
    - tmp_db_path: Isolated temporary SQLite path
    - store / seeded_store: ProfileStore instances on that path
    - isolated_settings: Points DB_PROFILE_DB_PATH at tmp_db_path and
      reloads the settings singleton (for code that builds its own store)
"""

import pytest

import portfolio_api.config.settings as settings_module
from portfolio_api.config.settings import reload_settings
from portfolio_api.core.types import Profile
from portfolio_api.database.profiles import ProfileStore
from portfolio_api.database.seed import sample_profile as build_sample_profile
from portfolio_api.search.engine import SearchEngine


# ---------------------------------------------------------------------------
# Domain objects
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_profile() -> Profile:
    """
    The seed profile used by ``portfolio manage seed``.

    Skills in document order:
        python (expert), javascript (expert), react, fastapi, postgresql
        (advanced), sqlite, docker, github actions (intermediate),
        kotlin, figma (beginner).
    """
    return build_sample_profile()


@pytest.fixture
def engine() -> SearchEngine:
    """
    A SearchEngine with explicit limits, independent of the environment.

    Mirrors the shipped defaults: 10 per page, at most 100, top 10 skills.
    """
    return SearchEngine(default_page_size=10, max_page_size=100, default_top_skills=10)


# ---------------------------------------------------------------------------
# Temporary storage
# ---------------------------------------------------------------------------


@pytest.fixture
def tmp_db_path(tmp_path) -> str:
    """Path for a temporary SQLite database (profile store)."""
    return str(tmp_path / "test_profiles.sqlite")


@pytest.fixture
def store(tmp_db_path) -> ProfileStore:
    """An empty ProfileStore backed by a temporary file."""
    return ProfileStore(db_path=tmp_db_path)


@pytest.fixture
def seeded_store(store, sample_profile) -> ProfileStore:
    """A ProfileStore whose only row is the active seed profile."""
    store.create_profile(sample_profile)
    return store


@pytest.fixture
def isolated_settings(tmp_db_path, monkeypatch):
    """
    Route the settings singleton at the temporary database.

    The CLI constructs ``ProfileStore()`` without arguments, so it reads
    the path from settings. The original singleton is restored when the
    monkeypatch is undone.
    """
    monkeypatch.setattr(settings_module, "_settings_instance", None)
    monkeypatch.setenv("DB_PROFILE_DB_PATH", tmp_db_path)
    yield reload_settings()
