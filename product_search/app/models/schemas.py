from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID
from pydantic import BaseModel, Field

from product_search.app.domain.models import (
    CamelModel, Category, Brand, Manufacturer, Product
)


class ProductDto(CamelModel):
    """
    상품 등록/수정/bulk 요청 바디(전송용 DTO).
    - id: 내부 상품 번호, elasticId: 검색 문서 식별자
    - 문자열 필드는 null 을 허용하며 문서로 변환할 때 "" 로 채운다.
    """
    id: int = Field(0, description="내부 상품 번호")
    elastic_id: UUID = Field(..., description="검색 문서 식별자(UUID)")
    erp_code: str | None = ""
    title: str | None = ""
    description: str | None = ""
    stock: int = 0
    price: float = 0.0
    image_url: str | None = ""
    slug: str | None = ""
    is_deleted: bool = False
    created_date: datetime | None = None
    created_by: int = 0
    category: Category | None = None
    brand: Brand | None = None
    manufacturer: Manufacturer | None = None

    def to_product(self) -> Product:
        """DTO → 색인 문서 변환."""
        return Product(
            id=self.elastic_id,
            product_id=self.id,
            erp_code=self.erp_code,
            title=self.title,
            description=self.description,
            stock=self.stock,
            price=self.price,
            image_url=self.image_url,
            slug=self.slug,
            is_deleted=self.is_deleted,
            created_date=self.created_date,
            created_by=self.created_by,
            category=self.category,
            brand=self.brand,
            manufacturer=self.manufacturer,
        )


class ApiResponse(BaseModel):
    """
    공통 성공 응답
    """
    success: bool = Field(..., description="성공 여부")
    message: str = Field(..., description="결과 메시지")
    data: Any = Field(None, description="결과 데이터. 내부 구조는 API 마다 상이")
