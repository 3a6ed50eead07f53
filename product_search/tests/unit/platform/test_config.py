import textwrap
import pytest

from product_search.app.platform.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # 작업 디렉터리의 .env 가 기본값 검증을 오염시키지 않도록 격리
    monkeypatch.chdir(tmp_path)
    for key in ("APP_NAME", "DEBUG", "OPENSEARCH_HOST", "OPENSEARCH_INDEX",
                "CORS_ORIGINS", "MAX_PAGE_SIZE", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_default_settings():
    """기본값이 올바르게 설정되는지 검증"""
    s = Settings()
    assert s.APP_NAME == "product-search-api"
    assert s.DEBUG is False
    assert s.OPENSEARCH_HOST.startswith("http://")
    assert s.OPENSEARCH_INDEX == "products"
    assert s.CORS_ORIGINS == ["http://localhost:5183"]
    assert s.MAX_PAGE_SIZE == 100


def test_override_with_env(monkeypatch):
    """환경변수로 설정값이 덮어써지는지 검증"""
    monkeypatch.setenv("APP_NAME", "custom-app")
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("OPENSEARCH_HOST", "http://test:9999")
    monkeypatch.setenv("MAX_PAGE_SIZE", "25")
    monkeypatch.setenv("CORS_ORIGINS", '["http://a.test", "http://b.test"]')

    s = Settings()
    assert s.APP_NAME == "custom-app"
    assert s.DEBUG is True
    assert s.OPENSEARCH_HOST == "http://test:9999"
    assert s.MAX_PAGE_SIZE == 25
    assert s.CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_env_file_loading(tmp_path):
    """env 파일에서 로딩되는지 검증"""
    env_file = tmp_path / "custom.env"
    env_file.write_text(textwrap.dedent("""
        APP_NAME=env-app
        DEBUG=true
        OPENSEARCH_HOST=http://env:1234
        OPENSEARCH_INDEX=catalog
    """))

    s = Settings(_env_file=env_file)
    assert s.APP_NAME == "env-app"
    assert s.DEBUG is True
    assert s.OPENSEARCH_HOST == "http://env:1234"
    assert s.OPENSEARCH_INDEX == "catalog"
