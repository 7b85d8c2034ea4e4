"""
Service layer for dog records.

``DogService`` is the only code that talks to the ``dogs`` table.
Every method opens its own connection, runs a single parameterized
statement (plus a read‑back where needed) and closes the connection
before returning.  Any ``sqlite3.Error`` is logged and re‑raised as
``StoreError`` so the API layer has one failure type to map.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from dog_tracker_api.app.core.db import StoreError, get_connection
from dog_tracker_api.app.schemas.dog import MAX_AGE, DogCreate, DogRead

logger = logging.getLogger(__name__)

_SELECT_COLUMNS = "id, name, breed, age, created_date"


class DogService:
    """Service class for creating, finding and ageing dogs."""

    @classmethod
    async def create_dog(cls, data: DogCreate) -> DogRead:
        """Insert a new dog and return the stored record."""
        try:
            conn = get_connection()
            try:
                cursor = conn.cursor()
                cursor.execute(
                    "INSERT INTO dogs (name, breed, age) VALUES (?, ?, ?)",
                    (data.name, data.breed, data.age),
                )
                dog_id = cursor.lastrowid
                conn.commit()
                row = cursor.execute(
                    f"SELECT {_SELECT_COLUMNS} FROM dogs WHERE id = ?",
                    (dog_id,),
                ).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            logger.exception("Failed to create dog '%s'", data.name)
            raise StoreError(str(exc)) from exc
        logger.info("Created dog %s ('%s')", dog_id, data.name)
        return cls._row_to_dog_read(row)

    @classmethod
    async def find_by_name(cls, name: str) -> Optional[DogRead]:
        """Return the first dog stored under ``name``, or ``None``."""
        row = cls._fetch_one(
            f"SELECT {_SELECT_COLUMNS} FROM dogs WHERE name = ? ORDER BY id ASC LIMIT 1",
            (name,),
        )
        return cls._row_to_dog_read(row) if row else None

    @classmethod
    async def get_dog(cls, dog_id: int) -> Optional[DogRead]:
        """Retrieve a single dog by its ID."""
        row = cls._fetch_one(
            f"SELECT {_SELECT_COLUMNS} FROM dogs WHERE id = ?",
            (dog_id,),
        )
        return cls._row_to_dog_read(row) if row else None

    @classmethod
    async def list_dogs(cls) -> List[DogRead]:
        """Return every stored dog in insertion order."""
        try:
            conn = get_connection()
            try:
                rows = conn.execute(
                    f"SELECT {_SELECT_COLUMNS} FROM dogs ORDER BY id ASC"
                ).fetchall()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            logger.exception("Failed to list dogs")
            raise StoreError(str(exc)) from exc
        return [cls._row_to_dog_read(row) for row in rows]

    @classmethod
    async def increment_age(cls, dog_id: int) -> Optional[DogRead]:
        """Add one year to a dog's age and return the updated record.

        The increment happens inside a single ``UPDATE`` so concurrent
        calls for the same dog each count.  Returns ``None`` if the dog
        no longer exists; raises ``StoreError`` if its age is already at
        ``MAX_AGE``.
        """
        try:
            conn = get_connection()
            try:
                cursor = conn.cursor()
                cursor.execute(
                    "UPDATE dogs SET age = age + 1 WHERE id = ? AND age < ?",
                    (dog_id, MAX_AGE),
                )
                affected = cursor.rowcount
                conn.commit()
                row = cursor.execute(
                    f"SELECT {_SELECT_COLUMNS} FROM dogs WHERE id = ?",
                    (dog_id,),
                ).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            logger.exception("Failed to update age of dog %s", dog_id)
            raise StoreError(str(exc)) from exc
        if row is None:
            return None
        if not affected:
            logger.warning("Dog %s is already at the maximum age", dog_id)
            raise StoreError(f"age of dog {dog_id} cannot exceed {MAX_AGE}")
        logger.info("Dog %s is now %s", dog_id, row["age"])
        return cls._row_to_dog_read(row)

    @staticmethod
    def _fetch_one(query: str, params: tuple) -> Optional[sqlite3.Row]:
        try:
            conn = get_connection()
            try:
                return conn.execute(query, params).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            logger.exception("Dog lookup failed")
            raise StoreError(str(exc)) from exc

    @staticmethod
    def _row_to_dog_read(row: sqlite3.Row) -> DogRead:
        """Convert a database row to a DogRead schema instance."""
        return DogRead(
            id=row["id"],
            name=row["name"],
            breed=row["breed"],
            age=row["age"],
            created_date=row["created_date"],
        )
