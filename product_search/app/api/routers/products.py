from fastapi import APIRouter, Depends, Query
from typing import List
from uuid import UUID
from product_search.app.api.deps import get_product_service, ProductService
from product_search.app.models.schemas import ApiResponse, ProductDto
import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])

_ERROR_RESPONSES = {
    400: {"description": "잘못된 요청 값"},
    503: {"description": "검색 저장소 연결 실패"},
    500: {"description": "서버 내부 오류"},
}


@router.post(
    "/create",
    summary="상품 등록",
    description="상품을 검색 인덱스에 새 문서로 등록합니다. `elasticId`가 문서 id 로 사용됩니다.",
    operation_id="createProduct",
    status_code=200,
    response_model=ApiResponse,
    responses={
        409: {"description": "같은 문서 id 가 이미 존재"},
        **_ERROR_RESPONSES,
    },
)
def create(req: ProductDto, svc: ProductService = Depends(get_product_service)):
    logger.info("CreateRequest: id=%s elasticId=%s", req.id, req.elastic_id)
    doc_id = svc.create(req.to_product())
    return ApiResponse(success=True, message="상품 등록 성공", data={"id": doc_id})


@router.put(
    "/update",
    summary="상품 수정",
    description="`elasticId`에 해당하는 문서를 요청 값으로 갱신합니다.",
    operation_id="updateProduct",
    status_code=200,
    response_model=ApiResponse,
    responses={
        404: {"description": "문서가 존재하지 않음"},
        **_ERROR_RESPONSES,
    },
)
def update(req: ProductDto, svc: ProductService = Depends(get_product_service)):
    logger.info("UpdateRequest: id=%s elasticId=%s", req.id, req.elastic_id)
    svc.update(req.to_product())
    return ApiResponse(success=True, message="상품 수정 성공", data={"id": str(req.elastic_id)})


@router.delete(
    "/deleteById",
    summary="상품 삭제",
    description="문서 id(UUID)로 상품 문서를 삭제합니다.",
    operation_id="deleteProductById",
    status_code=200,
    response_model=ApiResponse,
    responses={
        404: {"description": "문서가 존재하지 않음"},
        **_ERROR_RESPONSES,
    },
)
def delete_by_id(
    id: UUID = Query(..., description="삭제할 문서 id"),
    svc: ProductService = Depends(get_product_service),
):
    logger.info("DeleteRequest: id=%s", id)
    svc.delete(id)
    return ApiResponse(success=True, message="상품 삭제 성공", data={"id": str(id)})


@router.post(
    "/getall",
    summary="상품 목록 검색",
    description=(
        "`filter`가 비어 있으면 전체 상품을, 있으면 코드/제목/설명/카테고리/브랜드/제조사 "
        "필드에 대한 fuzzy 검색과 부분일치 검색 결과를 반환합니다. "
        "결과는 제목 오름차순이며 `page`는 1부터 시작합니다."
    ),
    operation_id="listProducts",
    status_code=200,
    response_model=ApiResponse,
    responses={
        200: {
            "description": "검색 성공",
            "content": {
                "application/json": {
                    "examples": {
                        "basic": {
                            "summary": "filter=acme, page=1, size=2",
                            "value": {
                                "success": True,
                                "message": "검색 성공",
                                "data": [
                                    {
                                        "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                                        "productId": 17,
                                        "erpCode": "AC-001",
                                        "title": "Acme Anvil",
                                        "price": 120.5,
                                        "stock": 4,
                                    },
                                    {
                                        "id": "9b2e7c10-1c0a-4f7e-8f53-0d0f2b7a1e44",
                                        "productId": 18,
                                        "erpCode": "AC-002",
                                        "title": "Acme Rocket",
                                        "price": 980.0,
                                        "stock": 1,
                                    },
                                ],
                            },
                        }
                    }
                }
            },
        },
        **_ERROR_RESPONSES,
    },
)
def get_all(
    size: int = Query(..., description="페이지 크기"),
    page: int = Query(..., description="페이지 번호(1부터)"),
    filter_text: str | None = Query(None, alias="filter", description="검색어"),
    svc: ProductService = Depends(get_product_service),
):
    logger.info("ListRequest: filter=%r page=%s size=%s", filter_text, page, size)
    items = svc.list(filter_text=filter_text, page=page, size=size)
    return ApiResponse(success=True, message="검색 성공", data=items)


@router.post(
    "/bulkAdd",
    summary="상품 일괄 색인",
    description=(
        "상품 목록을 bulk 로 색인합니다. 일부 항목이 실패하면 400 과 함께 "
        "실패 항목 목록을 반환합니다."
    ),
    operation_id="bulkAddProducts",
    status_code=200,
    response_model=ApiResponse,
    responses=_ERROR_RESPONSES,
)
def bulk_add(req: List[ProductDto], svc: ProductService = Depends(get_product_service)):
    logger.info("BulkAddRequest: count=%s", len(req))
    result = svc.bulk_add([dto.to_product() for dto in req])
    message = "상품 일괄 색인 성공" if req else "색인할 상품이 없습니다"
    return ApiResponse(success=True, message=message, data=result.model_dump())
