from __future__ import annotations

from fastapi import Depends, Request
from opensearchpy import OpenSearch

from product_search.app.domain.ports import IndexPort, SearchPort
from product_search.app.domain.services.product_service import ProductService
from product_search.app.adapters.opensearch_client import create_client
from product_search.app.adapters.indexers.opensearch_indexer import OpenSearchIndexer
from product_search.app.adapters.searchers.opensearch_searcher import OpenSearchSearcher
from product_search.app.platform.config import settings


# ---- 클라이언트 ----
def get_opensearch(request: Request) -> OpenSearch:
    """
    앱 시작 시 main.py의 lifespan에서 만들어 넣어둔 OpenSearch 클라이언트를 꺼낸다.
    없으면(lifespan 없이 띄운 테스트 등) 즉석 생성.
    """
    if hasattr(request.app.state, "opensearch"):
        return request.app.state.opensearch
    return create_client(settings)


def get_product_service(os: OpenSearch = Depends(get_opensearch)) -> ProductService:
    """
    FastAPI DI에서 OpenSearch 클라이언트를 받아 ProductService를 생성해 주입한다.
    """
    indexer: IndexPort = OpenSearchIndexer(os, settings.OPENSEARCH_INDEX)
    searcher: SearchPort = OpenSearchSearcher(os, settings.OPENSEARCH_INDEX)
    return ProductService(indexer, searcher, max_page_size=settings.MAX_PAGE_SIZE)
