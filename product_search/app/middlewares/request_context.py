import time, uuid, logging
from fastapi import status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from product_search.app.platform.errors import error_envelope
from product_search.app.platform.logging import request_id_ctx

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("uvicorn.access")

class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        rid = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        token = request_id_ctx.set(rid)
        start = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception:
                # ServerErrorMiddleware 까지 가면 request id 가 이미 reset 된 뒤라서 여기서 500 을 만든다
                logger.exception("Unhandled exception")
                response = JSONResponse(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    content=error_envelope(
                        "Internal server error",
                        code="INTERNAL_ERROR",
                        trace_id=rid))
            response.headers["X-Request-ID"] = rid
            ms = (time.perf_counter() - start) * 1000
            access_logger.info(
                "%s %s %s %.2fms", request.method, request.url.path, response.status_code, ms,
                extra={
                    "http_method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": round(ms, 2),
                },
            )
            return response
        finally:
            request_id_ctx.reset(token)
