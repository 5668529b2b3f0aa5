"""Database engine construction and the store dependency for route handlers.

The engine is the single process-wide store handle. It is opened once by the
entry point (`connect`), passed into `create_app`, and reaches handlers through
the `get_repository` FastAPI dependency. Nothing here is a module-level global,
so tests hand `create_app` an engine of their own.

SQLAlchemy's connection pool makes the engine safe to share across the request
threads; the application adds no locking of its own.
"""

import logging

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .errors import StoreUnavailable
from .repository import ObjectRepository
from .settings import Settings

logger = logging.getLogger(__name__)


def connect(settings: Settings) -> Engine:
    """Open the store handle and verify the database is reachable.

    Args:
        settings: Parsed service settings; `settings.db_url` is used.

    Returns:
        sqlalchemy.engine.Engine: An engine that answered `SELECT 1`.

    Raises:
        StoreUnavailable: If the engine cannot be created (bad URL, missing
            driver) or the liveness check fails.
    """
    try:
        url = settings.db_url
        logger.info("Connecting to %s", url.render_as_string(hide_password=True))
        engine = create_engine(url)
    except (SQLAlchemyError, ImportError) as e:
        raise StoreUnavailable(f"Failed to open database handle: {e}") from e

    try:
        ping(engine)
    except SQLAlchemyError as e:
        engine.dispose()
        raise StoreUnavailable(f"Database connection failed: {e}") from e

    logger.info("Successfully connected to %s database", url.get_backend_name())
    return engine


def ping(engine: Engine) -> None:
    """Run the liveness check; raises whatever the driver raises."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def get_repository(request: Request) -> ObjectRepository:
    """FastAPI dependency returning the app's `ObjectRepository`.

    Route handlers declare `repo: ObjectRepository = Depends(get_repository)`.
    The repository is attached to `app.state` by `main.create_app`.
    """
    return request.app.state.repository
