"""
Shared test helper utilities for portfolio-api tests.

Plain functions (not pytest fixtures) that can be imported directly
by test modules. Kept separate from conftest.py because conftest.py
is for fixtures only; plain helpers must live in a regular module to
be importable via standard Python imports.
"""

import sqlite3
from contextlib import closing

from portfolio_api.core.types import Profile, Project, Skill, WorkEntry
from portfolio_api.database.profiles import ProfileRecord


def make_skill(
    name: str = "python",
    level: str = "intermediate",
    category: str = "other",
) -> Skill:
    """Factory for Skill instances; enum values may be given as strings."""
    return Skill(name=name, level=level, category=category)


def make_project(
    *,
    title: str = "Sample Project",
    description: str = "A project used in tests.",
    skills: list[str] | None = None,
    links: list[str] | None = None,
    status: str = "completed",
) -> Project:
    """Factory for Project instances with sensible defaults."""
    return Project(
        title=title,
        description=description,
        links=links or [],
        skills=skills or [],
        status=status,
    )


def make_work(
    *,
    company: str = "Acme",
    position: str = "Engineer",
    description: str | None = None,
    skills: list[str] | None = None,
) -> WorkEntry:
    return WorkEntry(
        company=company,
        position=position,
        start_date="2022-01-01",
        description=description,
        skills=skills or [],
    )


def make_profile(
    *,
    name: str = "Sam Rivera",
    email: str = "sam@example.com",
    title: str | None = "Developer",
    bio: str | None = None,
    skills: list[Skill] | None = None,
    projects: list[Project] | None = None,
    work: list[WorkEntry] | None = None,
) -> Profile:
    """
    Factory for Profile instances with sensible defaults.

    Not a fixture; accepts parameters so tests can build profiles with
    exactly the entities a scenario needs.
    """
    return Profile(
        name=name,
        email=email,
        title=title,
        bio=bio,
        skills=skills or [],
        projects=projects or [],
        work=work or [],
    )


def make_record(
    *,
    id: int = 1,
    email: str = "sam@example.com",
    name: str = "Sam Rivera",
    is_active: bool = True,
    created_at: str = "2025-01-15T10:00:00+00:00",
    updated_at: str = "2025-01-15T10:00:00+00:00",
) -> ProfileRecord:
    """Factory for ProfileRecord instances with sensible defaults."""
    return ProfileRecord(
        id=id,
        email=email,
        name=name,
        is_active=is_active,
        created_at=created_at,
        updated_at=updated_at,
    )


def overwrite_document(db_path: str, profile_id: int, raw: str) -> None:
    """Replace a stored document with raw text, bypassing validation."""
    with closing(sqlite3.connect(db_path)) as conn, conn:
        conn.execute("UPDATE profiles SET document = ? WHERE id = ?", (raw, profile_id))
