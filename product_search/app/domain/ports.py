"""
도메인 포트(추상 인터페이스).

ProductService(유스케이스)는 아래 포트들(추상)에만 의존합니다.
구체 구현은 adapters 레이어에서 제공하고, FastAPI DI로 주입합니다.
"""

from __future__ import annotations

from typing import Any, Dict, List, Protocol, Sequence
from uuid import UUID
from .models import Product, BulkResult


class IndexPort(Protocol):
    """
    상품 문서를 타겟 인덱스에 적재/수정/삭제.
    기본은 OpenSearch 단건 API + bulk index를 상정.
    """

    index_name: str

    def create_index(self) -> str:
        """
        인덱스가 없으면 스키마로 생성한다.
        Returns:
            str: 인덱스 이름
        """
        ...

    def create(self, product: Product) -> str:
        """
        Returns:
            str: 생성된 문서 id
        """
        ...

    def update(self, product: Product) -> None:
        ...

    def delete(self, doc_id: UUID) -> None:
        ...

    def bulk_index(self, products: Sequence[Product]) -> BulkResult:
        """
        Returns:
            BulkResult: 성공 건수 및 실패 상세
        """
        ...


class SearchPort(Protocol):
    """
    필터/페이지 조건으로 상품을 검색합니다.
    """
    def search(self, filter_text: str | None, page: int, size: int) -> List[Dict[str, Any]]:
        """
        Returns:
            List[Dict[str, Any]]: 매칭된 문서(_source) 목록
        """
        ...
