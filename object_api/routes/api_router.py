"""Central API router composition.

This module mounts the individual route modules on one router so the app has a
single import point for `FastAPI.include_router(...)`. Paths are served at the
root; there is no version prefix.
"""

from fastapi import APIRouter

from .objects import router as objects_router

router = APIRouter()

router.include_router(objects_router)
