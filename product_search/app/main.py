from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from product_search.app.api.routers import health, products
from product_search.app.adapters.opensearch_client import create_client
from product_search.app.adapters.indexers.opensearch_indexer import OpenSearchIndexer
from product_search.app.platform.config import settings
from product_search.app.platform.logging import setup_logging
from product_search.app.platform.errors import (
    http_exception_handler,
    validation_exception_handler,
    unhandled_exception_handler,
    domain_exception_handler
)
from product_search.app.platform import exceptions as domainex
from product_search.app.middlewares.request_context import RequestContextMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(
        log_to_file=settings.LOG_TO_FILE,
        log_dir=settings.LOG_DIR,
        as_json=settings.LOG_AS_JSON,
        level=settings.LOG_LEVEL,
    )

    # OpenSearch 클라이언트를 한 번만 생성해서 공유
    app.state.opensearch = create_client(settings)
    try:
        # 인덱스가 없으면 이후 모든 연산이 실패하므로 요청을 받기 전에 보장한다
        OpenSearchIndexer(app.state.opensearch, settings.OPENSEARCH_INDEX).create_index()
        logger.info("%s ready: index=%s", settings.APP_NAME, settings.OPENSEARCH_INDEX)
        yield
    finally:
        try:
            app.state.opensearch.close()
        except Exception:
            logger.warning("failed to close OpenSearch client", exc_info=True)

# Swagger UI / openapi.json 은 DEBUG 환경에서만 노출
app = FastAPI(
    title="Product Search API",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url=None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)
app.include_router(health.router)
app.include_router(products.router)

# Global Exception Filter
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(domainex.DomainError, domain_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# 요청 컨텍스트/액세스 로그 미들웨어
app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
