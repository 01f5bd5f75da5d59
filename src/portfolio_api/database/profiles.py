"""
SQLite store for portfolio profile documents.

Each row holds one complete profile as a JSON document plus the columns
needed to enforce the storage rules:

    - ``email`` is unique across all rows, active or not.
    - At most one row has ``is_active = 1``; reads go to that row.
    - Deleting a profile only clears ``is_active`` so earlier profiles
      remain listable and can be re-activated.

Usage:
    from portfolio_api.database import ProfileStore

    store = ProfileStore()
    store.create_profile(profile)
    active = store.get_active()
"""

import json
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional

from portfolio_api.config import get_settings
from portfolio_api.core import (
    DatabaseError,
    DuplicateProfileError,
    Profile,
    ProfileNotFoundError,
    ProfileValidationError,
    get_logger,
)

logger = get_logger(__name__)


@dataclass
class ProfileRecord:
    """
    A single row from the profiles table, without the document body.

    Attributes:
        id: Auto-increment primary key.
        email: Profile email (unique, lowercased).
        name: Display name copied from the document.
        is_active: Whether this is the live profile.
        created_at: ISO timestamp of creation (UTC).
        updated_at: ISO timestamp of the last write (UTC).
    """

    id: int
    email: str
    name: str
    is_active: bool
    created_at: str
    updated_at: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class ProfileStore:
    """
    SQLite-backed repository for profile documents.

    The database file and table are created on first use, so repeated
    initialisation is safe. Each operation opens its own connection;
    operations that touch several rows run inside that connection's
    transaction.

    Example:
        >>> store = ProfileStore(db_path="/tmp/profiles.sqlite")
        >>> profile_id = store.create_profile(profile)
        >>> store.get_active().email
        'alex.morgan@example.com'
    """

    def __init__(self, db_path: Optional[str] = None) -> None:
        """
        Initialise the profile store.

        Args:
            db_path: Path to SQLite database file. If None, uses
                     ``settings.database.profile_db_path``.
        """
        settings = get_settings()
        self._db_path = db_path or settings.database.profile_db_path

        Path(self._db_path).parent.mkdir(parents=True, exist_ok=True)
        self._create_table()

        logger.debug("ProfileStore initialised: %s", self._db_path)

    @property
    def db_path(self) -> str:
        return self._db_path

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """
        Open a connection with row factory enabled.

        Commits when the block succeeds, rolls back when it raises, and
        closes the connection either way.
        """
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _create_table(self) -> None:
        """Create the profiles table if it does not exist."""
        sql = """
            CREATE TABLE IF NOT EXISTS profiles (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                email TEXT NOT NULL UNIQUE,
                name TEXT NOT NULL,
                document TEXT NOT NULL,
                is_active INTEGER NOT NULL DEFAULT 1,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
        """
        try:
            with self._connect() as conn:
                conn.execute(sql)
        except sqlite3.Error as e:
            raise DatabaseError(
                "Failed to create profiles table",
                details=str(e),
            ) from e

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create_profile(self, profile: Profile, activate: bool = True) -> int:
        """
        Store a new profile.

        Args:
            profile: The profile document.
            activate: Make the new profile the active one, deactivating
                      any other.

        Returns:
            The new row id.

        Raises:
            DuplicateProfileError: If the email is already stored.
            DatabaseError: If the insert fails.
        """
        now = _now()
        try:
            with self._connect() as conn:
                if activate:
                    conn.execute("UPDATE profiles SET is_active = 0 WHERE is_active = 1")
                cursor = conn.execute(
                    """
                    INSERT INTO profiles (email, name, document, is_active,
                                          created_at, updated_at)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (
                        profile.email,
                        profile.name,
                        json.dumps(profile.to_dict()),
                        1 if activate else 0,
                        now,
                        now,
                    ),
                )
                profile_id = cursor.lastrowid
        except sqlite3.IntegrityError as e:
            raise DuplicateProfileError(profile.email, details=str(e)) from e
        except sqlite3.Error as e:
            raise DatabaseError("Failed to create profile", details=str(e)) from e

        logger.info(
            "Created profile #%d for %s (%s)",
            profile_id,
            profile.email,
            "active" if activate else "inactive",
        )
        return profile_id

    def update_active(self, changes: dict) -> Profile:
        """
        Merge top-level fields into the active profile.

        Keys in ``changes`` replace the corresponding document keys
        wholesale (a new ``skills`` list replaces the old one). The merged
        document is re-validated before it is written.

        Args:
            changes: Partial JSON document.

        Returns:
            The updated profile.

        Raises:
            ProfileNotFoundError: If there is no active profile.
            ProfileValidationError: If the merged document is invalid.
            DuplicateProfileError: If the new email belongs to another row.
            DatabaseError: If the update fails.
        """
        try:
            with self._connect() as conn:
                row = conn.execute(
                    "SELECT * FROM profiles WHERE is_active = 1 LIMIT 1"
                ).fetchone()
                if row is None:
                    raise ProfileNotFoundError()

                document = self._load_document(row)
                document.update(changes)
                profile = Profile.from_dict(document)

                conn.execute(
                    """
                    UPDATE profiles
                    SET email = ?, name = ?, document = ?, updated_at = ?
                    WHERE id = ?
                    """,
                    (
                        profile.email,
                        profile.name,
                        json.dumps(profile.to_dict()),
                        _now(),
                        row["id"],
                    ),
                )
        except sqlite3.IntegrityError as e:
            raise DuplicateProfileError(str(changes.get("email", "")), details=str(e)) from e
        except sqlite3.Error as e:
            raise DatabaseError("Failed to update profile", details=str(e)) from e

        logger.info("Updated profile #%d (%s)", row["id"], ", ".join(sorted(changes)))
        return profile

    def deactivate(self) -> ProfileRecord:
        """
        Soft-delete the active profile.

        Returns:
            The record as it is after deactivation.

        Raises:
            ProfileNotFoundError: If there is no active profile.
            DatabaseError: If the update fails.
        """
        try:
            with self._connect() as conn:
                row = conn.execute(
                    "SELECT id FROM profiles WHERE is_active = 1 LIMIT 1"
                ).fetchone()
                if row is None:
                    raise ProfileNotFoundError()
                conn.execute(
                    "UPDATE profiles SET is_active = 0, updated_at = ? WHERE id = ?",
                    (_now(), row["id"]),
                )
                updated = conn.execute(
                    "SELECT * FROM profiles WHERE id = ?", (row["id"],)
                ).fetchone()
        except sqlite3.Error as e:
            raise DatabaseError("Failed to deactivate profile", details=str(e)) from e

        logger.info("Deactivated profile #%d", updated["id"])
        return self._row_to_record(updated)

    def set_active(self, profile_id: int) -> ProfileRecord:
        """
        Make ``profile_id`` the active profile and deactivate all others.

        Raises:
            ProfileNotFoundError: If no row has that id.
            DatabaseError: If the update fails.
        """
        try:
            with self._connect() as conn:
                row = conn.execute(
                    "SELECT id FROM profiles WHERE id = ?", (profile_id,)
                ).fetchone()
                if row is None:
                    raise ProfileNotFoundError(details=f"No profile with id {profile_id}")
                now = _now()
                conn.execute(
                    "UPDATE profiles SET is_active = 0, updated_at = ? "
                    "WHERE is_active = 1 AND id != ?",
                    (now, profile_id),
                )
                conn.execute(
                    "UPDATE profiles SET is_active = 1, updated_at = ? WHERE id = ?",
                    (now, profile_id),
                )
                updated = conn.execute(
                    "SELECT * FROM profiles WHERE id = ?", (profile_id,)
                ).fetchone()
        except sqlite3.Error as e:
            raise DatabaseError("Failed to activate profile", details=str(e)) from e

        logger.info("Activated profile #%d (%s)", profile_id, updated["email"])
        return self._row_to_record(updated)

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def get_active(self) -> Optional[Profile]:
        """
        Load the active profile document.

        Returns:
            The active Profile, or None if every profile is inactive.

        Raises:
            DatabaseError: If the query fails or the stored document is
                           no longer valid.
        """
        try:
            with self._connect() as conn:
                row = conn.execute(
                    "SELECT * FROM profiles WHERE is_active = 1 LIMIT 1"
                ).fetchone()
        except sqlite3.Error as e:
            raise DatabaseError("Failed to load active profile", details=str(e)) from e

        if row is None:
            return None
        try:
            return Profile.from_dict(self._load_document(row))
        except ProfileValidationError as e:
            raise DatabaseError(
                f"Stored profile #{row['id']} is invalid",
                details=str(e),
            ) from e

    def get_active_record(self) -> Optional[ProfileRecord]:
        """Return the active row's metadata, or None."""
        try:
            with self._connect() as conn:
                row = conn.execute(
                    "SELECT * FROM profiles WHERE is_active = 1 LIMIT 1"
                ).fetchone()
        except sqlite3.Error as e:
            raise DatabaseError("Failed to load active profile", details=str(e)) from e
        return self._row_to_record(row) if row is not None else None

    def get_profile(self, profile_id: int) -> Optional[Profile]:
        """Load any stored profile document by id, active or not."""
        try:
            with self._connect() as conn:
                row = conn.execute(
                    "SELECT * FROM profiles WHERE id = ?", (profile_id,)
                ).fetchone()
        except sqlite3.Error as e:
            raise DatabaseError("Failed to load profile", details=str(e)) from e
        if row is None:
            return None
        return Profile.from_dict(self._load_document(row))

    def list_profiles(self) -> list[ProfileRecord]:
        """
        List every stored profile, including deactivated ones.

        Returns:
            Records ordered by id (creation order).
        """
        try:
            with self._connect() as conn:
                rows = conn.execute("SELECT * FROM profiles ORDER BY id").fetchall()
            return [self._row_to_record(row) for row in rows]
        except sqlite3.Error as e:
            raise DatabaseError("Failed to list profiles", details=str(e)) from e

    def count(self) -> int:
        """Count stored profiles, active or not."""
        try:
            with self._connect() as conn:
                row = conn.execute("SELECT COUNT(*) FROM profiles").fetchone()
            return row[0]
        except sqlite3.Error as e:
            raise DatabaseError("Failed to count profiles", details=str(e)) from e

    def ping(self) -> bool:
        """Return True if the database answers a trivial query."""
        try:
            with self._connect() as conn:
                conn.execute("SELECT 1").fetchone()
            return True
        except sqlite3.Error as e:
            logger.warning("Profile store unreachable: %s", e)
            return False

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _load_document(row: sqlite3.Row) -> dict:
        try:
            return json.loads(row["document"])
        except json.JSONDecodeError as e:
            raise DatabaseError(
                f"Stored profile #{row['id']} is not valid JSON",
                details=str(e),
            ) from e

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> ProfileRecord:
        """Convert a SQLite Row to a ProfileRecord dataclass."""
        return ProfileRecord(
            id=row["id"],
            email=row["email"],
            name=row["name"],
            is_active=bool(row["is_active"]),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
