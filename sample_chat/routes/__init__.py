"""FastAPI API endpoints under /api.

Endpoint groups: health + settings, sample chat (segment, split).
"""

from fastapi import APIRouter

from .sample_chat import router as sample_chat_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(sample_chat_router)
