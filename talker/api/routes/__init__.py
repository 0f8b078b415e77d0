# talker/api/routes/__init__.py
from fastapi import APIRouter

from .status import router as status_router
from .talker import router as talker_router

router = APIRouter(prefix="/api/v1")

router.include_router(status_router)
router.include_router(talker_router)
