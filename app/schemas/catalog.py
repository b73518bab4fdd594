from __future__ import annotations

from pydantic import BaseModel, Field


class ProductCatalog(BaseModel):
    """db.json 구조. products 외 필드(다른 리소스)는 무시한다."""

    products: list[str] = Field(..., description="검색 대상 상품명 목록 (순서 유지)")

    model_config = {"extra": "ignore"}


class HealthResponse(BaseModel):
    status: str = Field("ok", description="서버 상태")
    products: int = Field(..., description="로드된 상품 수")
    version: str = Field(..., description="서비스 버전")
