import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestTrackingMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with a correlation id (echoed back in X-Request-ID)
    and logs one line per request with its duration.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        def context(**extra):
            return {
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "query": request.url.query,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                **extra,
            }

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error("Request failed", extra=context(error=str(e)), exc_info=True)
            raise

        extra = context(status_code=response.status_code)
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{extra['duration_ms']}ms"

        log = logger.warning if response.status_code >= 500 else logger.info
        log("Request completed", extra=extra)
        return response
