"""상품 데이터(db.json) 로더.

서버 시작 시 한 번만 읽으며, 이후에는 읽기 전용으로 사용한다.
"""

from __future__ import annotations

import json
import logging
import pathlib

from pydantic import ValidationError

from app.exceptions import CatalogError
from app.schemas.catalog import ProductCatalog

logger = logging.getLogger(__name__)


def load_products(path: str | pathlib.Path) -> list[str]:
    """JSON 파일의 products 목록을 순서대로 반환한다.

    Raises:
        CatalogError: 파일이 없거나 JSON/스키마가 올바르지 않은 경우
    """
    path = pathlib.Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise CatalogError(path, "파일이 존재하지 않습니다") from e

    try:
        catalog = ProductCatalog.model_validate(json.loads(raw))
    except json.JSONDecodeError as e:
        raise CatalogError(path, f"JSON 파싱 실패: {e.msg} (line {e.lineno})") from e
    except ValidationError as e:
        raise CatalogError(path, f"products 형식 오류: {e.error_count()}건") from e

    logger.info("상품 %d건 로드 (%s)", len(catalog.products), path)
    return catalog.products
