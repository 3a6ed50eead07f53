from fastapi import APIRouter, Depends
from opensearchpy import OpenSearch

from product_search.app.api.deps import get_opensearch
from product_search.app.platform.config import settings
from product_search.app.platform.exceptions import StoreUnavailable

router = APIRouter(prefix="/health", tags=["health"])

@router.get("")
def health():
    return {"ok": True}

@router.get("/ready")
def ready(os: OpenSearch = Depends(get_opensearch)):
    # ping 은 연결 실패 시 예외 대신 False 를 반환한다
    if not os.ping():
        raise StoreUnavailable(settings.OPENSEARCH_INDEX, "ping")
    return {"ok": True, "index": settings.OPENSEARCH_INDEX}
