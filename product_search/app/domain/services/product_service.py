# app/domain/services/product_service.py
"""
ProductService
==============

상품 색인/검색 유스케이스 서비스.

- 도메인은 **Port(인터페이스)** 에만 의존합니다. (DIP)
- 구현체는 adapters 레이어에서 주입(의존성 주입; DI)합니다.

예시:
    svc = ProductService(indexer, searcher, max_page_size=100)
    doc_id = svc.create(product)
    items = svc.list(filter_text="acme", page=2, size=5)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence
from uuid import UUID

from product_search.app.domain.ports import IndexPort, SearchPort
from product_search.app.domain.models import Product, BulkResult
from product_search.app.platform.exceptions import (
    InvalidPagingParameter,
    PartialBulkFailure,
)

logger = logging.getLogger(__name__)


class ProductService:

    def __init__(
        self,
        indexer: IndexPort,
        searcher: SearchPort,
        max_page_size: int = 100) -> None:
        """
        Args:
            indexer: IndexPort   : 문서 생성/수정/삭제/bulk 색인
            searcher: SearchPort : 목록 검색
            max_page_size: int   : 목록 조회 시 허용하는 최대 size
        """
        self._indexer = indexer
        self._searcher = searcher
        self._max_page_size = max_page_size

    # ================= public API =================
    def create(self, product: Product) -> str:
        logger.info("service.create: id=%s product_id=%s", product.id, product.product_id)
        return self._indexer.create(product)

    def update(self, product: Product) -> None:
        logger.info("service.update: id=%s product_id=%s", product.id, product.product_id)
        self._indexer.update(product)

    def delete(self, doc_id: UUID) -> None:
        logger.info("service.delete: id=%s", doc_id)
        self._indexer.delete(doc_id)

    def list(
        self,
        filter_text: str | None,
        page: int,
        size: int) -> List[Dict[str, Any]]:
        """
        필터/페이지 조건으로 상품 목록을 조회하는 메서드.
        Args:
            filter_text: str | None : 자유 텍스트 필터(없으면 전체)
            page: int               : 1부터 시작하는 페이지 번호
            size: int               : 페이지 크기(0 ~ max_page_size)
        Returns:
            List[Dict[str, Any]]: 검색 결과 문서 목록
        Raises:
            InvalidPagingParameter: page < 1, size < 0, size > max_page_size
        """
        self._validate_paging(page, size)
        logger.info("service.list: filter=%r page=%s size=%s", filter_text, page, size)
        return self._searcher.search(filter_text, page, size)

    def bulk_add(self, products: Sequence[Product]) -> BulkResult:
        """
        상품들을 bulk 로 색인하는 메서드.
        Returns:
            BulkResult: 색인 결과
        Raises:
            PartialBulkFailure: 하나 이상의 항목이 실패한 경우
        """
        if not products:
            logger.info("service.bulk_add: nothing to index")
            return BulkResult(indexed=0)

        logger.info("service.bulk_add: count=%s", len(products))
        result = self._indexer.bulk_index(products)
        if result.errors:
            raise PartialBulkFailure(
                self._indexer.index_name,
                indexed=result.indexed,
                errors=[e.model_dump() for e in result.errors],
            )
        return result

    #================= internal helpers =================
    def _validate_paging(self, page: int, size: int) -> None:
        if page < 1:
            raise InvalidPagingParameter("page", page, "must be >= 1")
        if size < 0:
            raise InvalidPagingParameter("size", size, "must be >= 0")
        if size > self._max_page_size:
            raise InvalidPagingParameter("size", size, f"must be <= {self._max_page_size}")
