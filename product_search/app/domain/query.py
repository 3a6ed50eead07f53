"""
상품 목록 검색 쿼리 빌더.

(filter, page, size) → OpenSearch search body 로 변환하는 순수 함수.
상태가 없으므로 여러 요청 스레드에서 동시에 호출해도 안전하다.

- filter 가 None/"" 이면 match_all
- 그 외에는 bool.should(최소 1개 매칭):
    1) 여러 필드 대상 fuzzy multi_match (fuzziness=2, operator=or)
    2) manufacturer.name/title/description/brand.name 부분일치 wildcard(*filter*)
- 정렬은 항상 title.keyword 오름차순

wildcard 값은 이스케이프 없이 그대로 넣는다. 특수문자(*, ?, \\)가 포함되면
패턴 의미가 바뀌거나 OpenSearch 에서 400 이 날 수 있다.
"""

from __future__ import annotations

from typing import Any, Dict, List

from product_search.app.domain.models import PageRequest

SEARCH_FIELDS: List[str] = [
    "erpCode",
    "title",
    "description",
    "imageUrl",
    "slug",
    "category.name",
    "category.description",
    "category.slug",
    "brand.name",
    "brand.description",
    "brand.slug",
    "manufacturer.name",
    "manufacturer.contactInfo",
    "manufacturer.address",
    "manufacturer.slug",
]

WILDCARD_FIELDS: List[str] = [
    "manufacturer.name",
    "title",
    "description",
    "brand.name",
]

SORT_FIELD = "title.keyword"
FUZZINESS = 2


def build_query(filter_text: str | None) -> Dict[str, Any]:
    """
    검색 쿼리(query 절)를 구성한다.

    Args:
        filter_text (str | None): 자유 텍스트 필터
    Returns:
        Dict[str, Any]: match_all 또는 bool(should) 쿼리
    """
    if not filter_text:
        return {"match_all": {}}

    should: List[Dict[str, Any]] = [
        {
            "multi_match": {
                "query": filter_text,
                "fields": list(SEARCH_FIELDS),
                "type": "best_fields",
                "operator": "or",
                "fuzziness": FUZZINESS,
            }
        }
    ]
    for field in WILDCARD_FIELDS:
        should.append({"wildcard": {field: {"value": f"*{filter_text}*"}}})

    return {
        "bool": {
            "should": should,
            "minimum_should_match": 1,
        }
    }


def build_search_body(filter_text: str | None, page: int, size: int) -> Dict[str, Any]:
    """
    검색 요청 바디를 구성한다. page/size 는 그대로 사용한다.

    Args:
        filter_text (str | None): 자유 텍스트 필터
        page (int): 1부터 시작하는 페이지 번호
        size (int): 페이지 크기
    Returns:
        Dict[str, Any]: from/size/sort/query 가 채워진 search body
    """
    page_request = PageRequest(page=page, size=size)
    return {
        "from": page_request.offset,
        "size": page_request.limit,
        "sort": [{SORT_FIELD: {"order": "asc"}}],
        "query": build_query(filter_text),
    }
