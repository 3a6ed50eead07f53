from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "product-search-api"
    # True 이면 Swagger UI(/docs)와 openapi.json 노출
    DEBUG: bool = False

    OPENSEARCH_HOST: str = "http://localhost:9200"
    OPENSEARCH_INDEX: str = "products"
    OPENSEARCH_VERIFY_CERTS: bool = False
    OPENSEARCH_TIMEOUT: int = 30

    CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["http://localhost:5183"])

    # 목록 조회 시 허용하는 최대 size
    MAX_PAGE_SIZE: int = 100

    LOG_LEVEL: str = "INFO"
    LOG_AS_JSON: bool = True
    LOG_TO_FILE: bool = False
    LOG_DIR: str = "/var/log/app"

settings = Settings()
