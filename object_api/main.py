"""FastAPI application factory / entrypoint.

This service exposes CRUD endpoints over the `objects` table:
- `/objects`, `/object?id=N` for reads
- `/create`, `/update`, `/delete?id=N` for writes
- `/` and `/health` for liveness checks

Startup order (`main`):
1) configure logging from settings
2) open the store and ping it; the process exits if that fails
3) build the app around the store and serve it with uvicorn

Run with `object-api` (console script) or `python -m object_api.main`.
"""

import logging

import uvicorn
from fastapi import FastAPI
from sqlalchemy.engine import Engine

from .db import connect
from .errors import StoreUnavailable, register_error_handlers
from .logging_config import setup_logging
from .repository import ObjectRepository
from .routes import router
from .settings import get_settings

logger = logging.getLogger(__name__)


def create_app(engine: Engine) -> FastAPI:
    """Build the FastAPI app around an already-connected engine.

    Args:
        engine: The shared store handle. It is wrapped in an `ObjectRepository`
            and attached to `app.state` for the `get_repository` dependency.

    Returns:
        FastAPI: The configured application.
    """
    app = FastAPI(title="Object API", version="0.1.0")
    app.state.repository = ObjectRepository(engine)

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/")
    def index():
        return {"message": "Object API is running"}

    @app.get("/health")
    def health():
        """Health check endpoint.

        Returns:
            dict: `{"status": "ok", "service": "object-api"}`.
        """
        return {"status": "ok", "service": "object-api"}

    return app


def main() -> int:
    """Connect to the store and serve HTTP until interrupted.

    Returns:
        The process exit code (1 when the store is unreachable).
    """
    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        engine = connect(settings)
    except StoreUnavailable as e:
        logger.critical(e.message)
        return 1

    app = create_app(engine)
    logger.info("Server starting on http://%s:%s", settings.app_host, settings.app_port)
    try:
        uvicorn.run(app, host=settings.app_host, port=settings.app_port, log_level=settings.log_level.lower())
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
