"""HTTP 엔드포인트 테스트: /search 상태 코드/본문, /health, CORS."""

from __future__ import annotations

import pytest


@pytest.mark.asyncio
async def test_search_returns_json_array(client):
    resp = await client.get("/search", params={"key": "ㄱ"})
    assert resp.status_code == 200
    assert resp.json() == ["가방", "가구 세트", "노트북 거치대"]


@pytest.mark.asyncio
async def test_search_match_in_both_passes_returned_once(client):
    resp = await client.get("/search", params={"key": "허브"})
    assert resp.status_code == 200
    assert resp.json() == ["USB 허브"]


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{}, {"key": ""}])
async def test_search_without_key_is_400(client, params):
    resp = await client.get("/search", params=params)
    assert resp.status_code == 400
    assert resp.text == "검색어를 입력해주세요."
    assert resp.headers["content-type"].startswith("text/plain")


@pytest.mark.asyncio
async def test_search_without_results_is_404(client):
    resp = await client.get("/search", params={"key": "zzz"})
    assert resp.status_code == 404
    assert resp.text == "검색 결과가 없습니다."


@pytest.mark.asyncio
async def test_health_reports_product_count(client, products):
    resp = await client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["products"] == len(products)


@pytest.mark.asyncio
async def test_cors_allows_any_origin(client):
    resp = await client.get(
        "/search", params={"key": "가방"}, headers={"Origin": "http://example.com"}
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"
