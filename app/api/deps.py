from __future__ import annotations

from fastapi import Request

from app.services.search_service import ProductSearchService


def get_search_service(request: Request) -> ProductSearchService:
    """lifespan에서 생성된 검색 서비스를 반환한다."""
    return request.app.state.search_service
