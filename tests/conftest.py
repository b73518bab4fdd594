"""테스트 공통 설정: 임시 db.json 및 인프로세스 HTTP 클라이언트 픽스처."""

from __future__ import annotations

import json

import httpx
import pytest

from app.config import Settings
from app.main import create_app

PRODUCTS = [
    "가방",
    "나무 도마",
    "가구 세트",
    "노트북 거치대",
    "USB 허브",
]


@pytest.fixture
def products() -> list[str]:
    return list(PRODUCTS)


@pytest.fixture
def db_path(tmp_path, products):
    """products 외 다른 리소스가 섞인 db.json 생성."""
    path = tmp_path / "db.json"
    path.write_text(
        json.dumps({"products": products, "posts": [{"id": 1}]}, ensure_ascii=False),
        encoding="utf-8",
    )
    return path


@pytest.fixture
async def client(db_path):
    """lifespan까지 실행된 앱에 붙는 AsyncClient."""
    app = create_app(Settings(db_path=db_path))
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
