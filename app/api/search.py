from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_search_service
from app.services.search_service import ProductSearchService

router = APIRouter(tags=["search"])


@router.get(
    "/search",
    response_model=list[str],
    summary="상품 검색",
    description="검색어(key)로 상품명을 검색합니다. 초성 검색(예: 'ㄱㅂ' → '가방')과 "
                "단어 포함 검색 결과를 합쳐 초성 결과 우선 순서로 중복 없이 반환합니다. "
                "검색어가 없으면 400, 결과가 없으면 404를 반환합니다.",
    responses={
        400: {"description": "검색어를 입력해주세요."},
        404: {"description": "검색 결과가 없습니다."},
    },
)
async def search_products(
    key: str | None = Query(default=None, description="검색어 (초성 또는 단어)"),
    svc: ProductSearchService = Depends(get_search_service),
):
    return svc.search(key)
