"""
도메인 모델 정의.

- Category / Brand / Manufacturer: 상품 문서에 값으로 내장되는 참조 엔티티
- Product: 검색 인덱스에 적재되는 상품 문서(1건 = OpenSearch 문서 1건)
- PageRequest: (page, size) → (offset, limit) 변환
- BulkErrorItem / BulkResult: bulk 색인 결과 요약

문서의 JSON 필드명은 camelCase(erpCode, imageUrl, ...)를 사용하며,
검색 쿼리의 필드 경로(category.name 등)도 이 이름을 기준으로 한다.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


JSONDict = dict[str, Any]

class CamelModel(BaseModel):
    """
    camelCase 별칭으로 입출력하되 파이썬 필드명으로도 생성 가능한 베이스 모델.
    `str` 로 선언된 필드에 null 이 들어오면 "" 로 채운다.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None and cls.model_fields[info.field_name].annotation is str:
            return ""
        return v


class Category(CamelModel):
    id: int = 0
    name: str = ""
    description: str = ""
    slug: str = ""
    is_deleted: bool = False
    created_date: datetime | None = None
    created_by: int = 0


class Brand(CamelModel):
    id: int = 0
    name: str = ""
    description: str = ""
    slug: str = ""
    is_deleted: bool = False
    created_date: datetime | None = None
    created_by: int = 0


class Manufacturer(CamelModel):
    id: int = 0
    name: str = ""
    contact_info: str = ""
    address: str = ""
    slug: str = ""
    is_deleted: bool = False
    created_date: datetime | None = None
    created_by: int = 0


class Product(CamelModel):
    """
    검색 인덱스에 적재되는 상품 문서.
    OpenSearch 매핑(resources/schema/product_index.json):
      - id: keyword (문서 _id 와 동일)
      - productId: integer (내부 상품 번호)
      - erpCode/title/description/imageUrl/slug: text (+ keyword 서브필드)
      - price: double, stock: integer
      - category/brand/manufacturer: object
    """

    # ---- 식별 ----
    id: UUID = Field(..., description="문서 식별자(외부에서 생성된 UUID)")
    product_id: int = Field(0, description="내부 상품 번호")

    # ---- 검색/표시 필드 ----
    erp_code: str = Field("", description="ERP 상품 코드")
    title: str = ""
    description: str = ""
    image_url: str = ""
    slug: str = ""
    price: float = 0.0
    stock: int = 0

    # ---- 삭제/감사 ----
    is_deleted: bool = False
    created_date: datetime | None = None
    created_by: int = 0

    # ---- 내장 참조 엔티티 ----
    category: Category | None = None
    brand: Brand | None = None
    manufacturer: Manufacturer | None = None

    def to_document(self) -> JSONDict:
        """OpenSearch _source 로 보낼 JSON 직렬화 결과."""
        return self.model_dump(mode="json", by_alias=True)


class PageRequest(BaseModel):
    """
    페이지 요청. 검증은 하지 않는다(page < 1 이면 offset 이 음수가 됨).
    경계 검증은 ProductService 에서 수행.
    """
    page: int
    size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @property
    def limit(self) -> int:
        return self.size


class BulkErrorItem(BaseModel):
    """bulk 색인 실패 항목 요약."""
    doc_id: str
    status: int | None = None
    reason: str


class BulkResult(BaseModel):
    """bulk 색인 실행 결과."""
    indexed: int = Field(..., ge=0)
    errors: list[BulkErrorItem] = Field(default_factory=list)
