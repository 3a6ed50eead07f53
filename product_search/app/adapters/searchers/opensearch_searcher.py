"""
필터/페이지 조건으로 상품을 검색하는 SearchPort 구현체.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List
from opensearchpy import OpenSearch
from opensearchpy.exceptions import NotFoundError, RequestError, TransportError
from product_search.app.domain.ports import SearchPort
from product_search.app.domain.query import build_search_body
from product_search.app.platform.exceptions import (
    InvalidInput,
    ResourceNotFound,
    StoreUnavailable,
)

logger = logging.getLogger(__name__)

class OpenSearchSearcher(SearchPort):

    def __init__(self, client: OpenSearch, index_name: str) -> None:
        self.client = client
        self.index_name = index_name

    def search(self, filter_text: str | None, page: int, size: int) -> List[Dict[str, Any]]:
        """
        OpenSearch에 검색을 수행하여 매칭된 문서 목록을 반환한다.

        Args:
            filter_text (str | None): 자유 텍스트 필터
            page (int): 1부터 시작하는 페이지 번호
            size (int): 페이지 크기
        Returns:
            List[Dict[str, Any]]: hit 의 _source 목록(정렬 순서 유지)
        """
        body = build_search_body(filter_text, page, size)
        try:
            res = self.client.search(index=self.index_name, body=body)
        except RequestError as e:
            # 이스케이프되지 않은 wildcard 패턴 등 store 가 거부한 쿼리
            logger.warning("search rejected: filter=%r error=%r", filter_text, e)
            raise InvalidInput(f"search rejected by store for filter {filter_text!r}") from e
        except NotFoundError as e:
            logger.error("search failed: index %s not found error=%r", self.index_name, e)
            raise ResourceNotFound("index", f"index {self.index_name} not found") from e
        except TransportError as e:
            # 연결 실패, 429, 5xx 등
            logger.error("search failed: filter=%r error=%r", filter_text, e)
            raise StoreUnavailable(self.index_name, "search") from e

        hits = res.get("hits", {}).get("hits", [])
        if not hits:
            logger.info("search: filter=%r page=%s returned 0 hits", filter_text, page)
        return [hit["_source"] for hit in hits]
