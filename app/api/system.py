from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_search_service
from app.config import VERSION
from app.schemas.catalog import HealthResponse
from app.services.search_service import ProductSearchService

router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="헬스 체크",
    description="서버 구동 상태와 로드된 상품 수를 반환합니다.",
)
async def health(svc: ProductSearchService = Depends(get_search_service)):
    return HealthResponse(status="ok", products=svc.count, version=VERSION)
