"""
요청 로깅 미들웨어

요청마다 method, path, status, 처리 시간을 기록하고 X-Request-ID 헤더를 돌려준다.
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("web.request")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLogMiddleware(BaseHTTPMiddleware):
    """요청 로깅"""

    async def dispatch(self, request: Request, call_next) -> Response:
        t0 = time.perf_counter()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

        response: Response = await call_next(request)

        duration_ms = int((time.perf_counter() - t0) * 1000)
        response.headers[REQUEST_ID_HEADER] = request_id

        logger.info(
            f"{request.method} {request.url.path} {response.status_code} ({duration_ms}ms)",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response
