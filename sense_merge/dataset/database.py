"""SQLite database holding the feature vectors of sense pairs."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from .features_table import FeaturesTable


class Database:
    """Store feature vectors for sense pairs in a database."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        """Initialize the database."""
        self._conn = connection
        self.features_table = FeaturesTable(self._conn)

    @classmethod
    def from_db(cls, db_path: str | Path) -> "Database":
        """Load an existing database, creating it if needed."""
        path = Path(db_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        connection = sqlite3.connect(path)
        return cls(connection)

    def reset(self) -> None:
        """Reset the database."""
        self.features_table.reset()

    def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            self._conn.commit()
            self._conn.close()

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, exc_type, exc, traceback) -> None:
        self.close()


__all__ = ["Database"]
