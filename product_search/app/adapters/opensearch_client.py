from urllib.parse import urlparse
from opensearchpy import OpenSearch
from product_search.app.platform.config import Settings


def create_client(settings: Settings) -> OpenSearch:
    """
    설정의 OPENSEARCH_HOST(scheme://[user:pass@]host:port)로 클라이언트를 만든다.
    URL 에 계정이 포함되어 있으면 http_auth 로 분리해서 전달.
    """
    u = urlparse(settings.OPENSEARCH_HOST)
    options = {
        "hosts": [{"host": u.hostname, "port": u.port or 9200, "scheme": u.scheme or "http"}],
        "verify_certs": settings.OPENSEARCH_VERIFY_CERTS,
        "timeout": settings.OPENSEARCH_TIMEOUT,
    }
    if u.username and u.password:
        options["http_auth"] = (u.username, u.password)
    return OpenSearch(**options)
