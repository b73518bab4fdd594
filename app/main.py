from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.config import VERSION, Settings, settings as default_settings
from app.exceptions import SearchError
from app.services.catalog_service import load_products
from app.services.search_service import ProductSearchService

logger = logging.getLogger(__name__)


async def _search_error_handler(request: Request, exc: SearchError) -> PlainTextResponse:
    """검색 오류를 상태 코드 + 안내 문구(plain text)로 응답한다."""
    logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        logger.info("Starting chosung-search (db=%s)", settings.db_path)

        # 상품 목록은 시작 시 한 번만 로드 (이후 읽기 전용)
        products = load_products(settings.db_path)
        app.state.search_service = ProductSearchService(products)

        yield

        # Shutdown
        logger.info("Shutdown complete")

    app = FastAPI(
        title="Chosung Search",
        version=VERSION,
        lifespan=lifespan,
    )

    # 모든 도메인/메서드에서의 요청 허용
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(SearchError, _search_error_handler)

    from app.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()
