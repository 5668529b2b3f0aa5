"""Data access for the `objects` table.

Each operation is a single parameterized statement (`sqlalchemy.text`) run on
its own pooled connection. Writes commit when the statement succeeds; there
are no multi-statement transactions, batching or retries.

Any SQLAlchemy failure is logged and re-raised as `StoreError` so the HTTP
layer never has to know about driver exceptions.
"""

import logging
from contextlib import contextmanager

from sqlalchemy import DateTime, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .errors import ObjectNotFound, StoreError
from .schemas import Object

logger = logging.getLogger(__name__)

# created_at is typed so drivers that return timestamps as text (SQLite) still
# produce datetimes
_SELECT_ALL = text(
    "SELECT id, name, description, created_at FROM objects"
).columns(created_at=DateTime)

_SELECT_ONE = text(
    "SELECT id, name, description, created_at FROM objects WHERE id = :id"
).columns(created_at=DateTime)

_INSERT = text(
    "INSERT INTO objects (name, description) VALUES (:name, :description) RETURNING id"
)

_UPDATE = text("UPDATE objects SET name = :name, description = :description WHERE id = :id")

_DELETE = text("DELETE FROM objects WHERE id = :id")


@contextmanager
def _store_errors(action: str):
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("Error %s: %s", action, e)
        raise StoreError(f"Error {action}") from e


class ObjectRepository:
    """CRUD statements against the shared engine."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def create(self, name: str, description: str) -> int:
        """Insert a row and return the identifier the store assigned.

        `created_at` is filled in by the column default.
        """
        with _store_errors("inserting object"):
            with self.engine.begin() as conn:
                return conn.execute(
                    _INSERT, {"name": name, "description": description}
                ).scalar_one()

    def list_all(self) -> list[Object]:
        """Return every row, in whatever order the store yields them."""
        with _store_errors("fetching objects"):
            with self.engine.connect() as conn:
                rows = conn.execute(_SELECT_ALL).mappings().all()
        return [Object(**row) for row in rows]

    def get(self, object_id: int) -> Object:
        """Fetch one row by identifier.

        Raises:
            ObjectNotFound: If no row has this identifier.
            StoreError: If the statement itself fails.
        """
        with _store_errors("fetching object by ID"):
            with self.engine.connect() as conn:
                row = conn.execute(_SELECT_ONE, {"id": object_id}).mappings().first()

        if row is None:
            raise ObjectNotFound(object_id)
        return Object(**row)

    def update(self, object_id: int, name: str, description: str) -> None:
        # zero affected rows is not an error
        with _store_errors("updating object"):
            with self.engine.begin() as conn:
                conn.execute(_UPDATE, {"id": object_id, "name": name, "description": description})

    def delete(self, object_id: int) -> None:
        with _store_errors("deleting object"):
            with self.engine.begin() as conn:
                conn.execute(_DELETE, {"id": object_id})
