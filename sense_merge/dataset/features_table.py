"""SQLite-backed collection of feature vectors for sense pairs."""

from __future__ import annotations

import logging
import sqlite3
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from sense_merge.types.features import FeatureRecord

logger = logging.getLogger(__name__)


def _ensure_schema(connection: sqlite3.Connection, table_name: str) -> None:
    connection.execute(
        f"""
            CREATE TABLE IF NOT EXISTS {table_name} (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                sense1 TEXT NOT NULL,
                sense2 TEXT NOT NULL,
                pos TEXT NOT NULL,
                label INTEGER NOT NULL,
                vector BLOB NOT NULL
            )
            """
    )
    connection.execute(
        f"""
            CREATE UNIQUE INDEX IF NOT EXISTS idx_{table_name}_unique
            ON {table_name} (sense1, sense2)
            """
    )
    connection.execute(
        f"""
            CREATE TABLE IF NOT EXISTS {table_name}_schema (
                position INTEGER PRIMARY KEY,
                name TEXT NOT NULL
            )
            """
    )
    connection.commit()


class FeaturesTable:
    """SQLite-backed collection of ``FeatureRecord`` rows, one per sense pair."""

    TABLE_NAME = "features"

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._conn = connection
        self._conn.row_factory = sqlite3.Row
        _ensure_schema(self._conn, self.TABLE_NAME)

    def insert_record(self, record: FeatureRecord) -> None:
        """Insert a ``FeatureRecord``, replacing any earlier vector for the pair."""

        # Convert numpy array to bytes for storage
        vector_bytes = np.asarray(record.vector, dtype=np.float64).tobytes()

        self._conn.execute(
            f"""
            INSERT OR REPLACE INTO {self.TABLE_NAME}
            (sense1, sense2, pos, label, vector)
            VALUES (?, ?, ?, ?, ?)
            """,
            (
                record.sense1,
                record.sense2,
                record.pos,
                record.label,
                vector_bytes,
            ),
        )

    def add_records(self, records: Sequence[FeatureRecord]) -> None:
        """Add feature records to the table."""

        for record in records:
            self.insert_record(record)

        # Commit the changes to the database.
        self._conn.commit()
        logger.info("Stored %d feature vectors", len(records))

    def set_attributes(self, attributes: Sequence[str]) -> None:
        """Record the attribute list the stored vectors follow."""
        self._conn.execute(f"DELETE FROM {self.TABLE_NAME}_schema")
        self._conn.executemany(
            f"INSERT INTO {self.TABLE_NAME}_schema (position, name) VALUES (?, ?)",
            list(enumerate(attributes)),
        )
        self._conn.commit()

    def get_attributes(self) -> List[str]:
        """Return the recorded attribute list, empty if none was recorded."""
        cursor = self._conn.execute(
            f"SELECT name FROM {self.TABLE_NAME}_schema ORDER BY position"
        )
        return [row["name"] for row in cursor]

    def reset(self) -> None:
        """Reset the features table."""
        self._conn.execute(f"DELETE FROM {self.TABLE_NAME}")
        self._conn.execute(f"DELETE FROM {self.TABLE_NAME}_schema")
        self._conn.commit()
        _ensure_schema(self._conn, self.TABLE_NAME)

    def iter_records(self, label: Optional[int] = None) -> Iterator[FeatureRecord]:
        """Yield ``FeatureRecord`` instances stored in the table."""

        query = f"SELECT sense1, sense2, pos, vector FROM {self.TABLE_NAME}"

        params: Tuple[int, ...] = ()

        # Filter by class label if provided
        if label is not None:
            query += " WHERE label = ?"
            params = (label,)

        query += " ORDER BY id"

        cursor = self._conn.execute(query, params)
        for row in cursor:
            yield FeatureRecord(
                sense1=row["sense1"],
                sense2=row["sense2"],
                pos=row["pos"],
                vector=np.frombuffer(row["vector"], dtype=np.float64),
            )

    def to_df(self, attributes: Optional[Sequence[str]] = None) -> "pd.DataFrame":
        """
        Convert the table to a pandas DataFrame with one column per attribute.

        - `attributes`: the attribute list of the feature maker that built the
          vectors. Defaults to the recorded attribute list.

        Raises:
            ValueError: if no attribute list is known or a stored vector does
                not match it.
        """
        if attributes is None:
            attributes = self.get_attributes()
        if not attributes:
            raise ValueError("No attribute list recorded for the features table")

        rows = []
        for record in self.iter_records():
            if len(record.vector) != len(attributes):
                raise ValueError(
                    f"Vector for ({record.sense1}, {record.sense2}) has "
                    f"{len(record.vector)} values, expected {len(attributes)}"
                )
            row = {"sense1": record.sense1, "sense2": record.sense2, "pos": record.pos}
            row.update(zip(attributes, record.vector.tolist()))
            rows.append(row)

        return pd.DataFrame(rows, columns=["sense1", "sense2", "pos", *attributes])

    def __len__(self) -> int:
        # Count the number of records in the table
        query = f"SELECT COUNT(*) FROM {self.TABLE_NAME}"
        cursor = self._conn.execute(query)

        row = cursor.fetchone()

        return int(row[0]) if row else 0

    def __iter__(self) -> Iterator[FeatureRecord]:
        return self.iter_records()


__all__ = ["FeaturesTable"]
