from __future__ import annotations

from fastapi import APIRouter

from app.api.system import router as system_router
from app.api.search import router as search_router

api_router = APIRouter()
api_router.include_router(system_router)
api_router.include_router(search_router)
