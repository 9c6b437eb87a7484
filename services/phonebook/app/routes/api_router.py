"""Central API router composition.

Mounts the individual route modules under `/api` and provides a single import
point for `FastAPI.include_router(...)`.
"""

from fastapi import APIRouter

from .info import router as info_router
from .persons import router as persons_router

router = APIRouter(prefix="/api")

router.include_router(persons_router)
router.include_router(info_router)
