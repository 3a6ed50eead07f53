from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi import status
from product_search.app.platform.logging import request_id_ctx
from product_search.app.platform import exceptions as domainex
import logging

logger = logging.getLogger(__name__)

def error_envelope(message, code="BAD_REQUEST", details=None, trace_id=None):
    return {
        "success": False,
        "error": {
            "code": code, "message": message, "details": details
        },
        "trace_id": trace_id
    }

async def http_exception_handler(request: Request, exc: HTTPException):
    # 4xx, 5xx 에러
    return JSONResponse(status_code=exc.status_code,
                        content=error_envelope(
                            exc.detail,
                            code=f"HTTP_{exc.status_code}",
                            trace_id=request_id_ctx.get()))

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # 422 Unprocessable Entity
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
                        content=error_envelope(
                            "Unprocessable Entity",
                            code="VALIDATION_ERROR",
                            details=jsonable_encoder(exc.errors()),
                            trace_id=request_id_ctx.get()))

async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception")
    # 500 Internal server error
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                        content=error_envelope(
                            "Internal server error",
                            code="INTERNAL_ERROR",
                            trace_id=request_id_ctx.get()))

def _classify(exc: domainex.DomainError) -> tuple[int, str]:
    """
    도메인 예외를 (HTTP 상태, 에러 코드)로 분류.
    하위 클래스를 먼저 검사해야 한다(InvalidPagingParameter ⊂ InvalidInput).
    """
    if isinstance(exc, domainex.ResourceNotFound):
        return status.HTTP_404_NOT_FOUND, "NOT_FOUND"
    if isinstance(exc, domainex.InvalidPagingParameter):
        return status.HTTP_400_BAD_REQUEST, "INVALID_PAGING_PARAMETER"
    if isinstance(exc, domainex.InvalidInput):
        return status.HTTP_400_BAD_REQUEST, "INVALID_INPUT"
    if isinstance(exc, domainex.DocumentConflict):
        return status.HTTP_409_CONFLICT, "CONFLICT"
    if isinstance(exc, domainex.PartialBulkFailure):
        return status.HTTP_400_BAD_REQUEST, "PARTIAL_BULK_FAILURE"
    if isinstance(exc, domainex.StoreUnavailable):
        return status.HTTP_503_SERVICE_UNAVAILABLE, "STORE_UNAVAILABLE"
    return status.HTTP_400_BAD_REQUEST, "SERVICE_ERROR"

async def domain_exception_handler(request: Request, exc: domainex.DomainError):
    """
    도메인/유즈케이스 예외를 HTTP로 매핑.
    """
    http_status, code = _classify(exc)

    details = None
    if isinstance(exc, domainex.PartialBulkFailure):
        details = {
            "indexed": exc.indexed,
            "errors": jsonable_encoder(exc.errors),
        }

    logger.warning(
        "Domain error: %s (%s) path=%s", exc, code, str(request.url)
    )
    return JSONResponse(
        status_code=http_status,
        content=error_envelope(
            str(exc),
            code=code,
            details=details,
            trace_id=request_id_ctx.get())
    )
