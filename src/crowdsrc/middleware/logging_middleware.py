"""Request logging middleware for FastAPI.

Logs one line per request with method, path, status code and duration, and
tags the response with an ``X-Request-ID``. Pass ``error_handler`` to render
unhandled exceptions here, so error responses carry the request ID too.
"""

import logging
import time
from typing import Awaitable, Callable, List, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ..utils.uuid import generate_uuid_v7

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

ErrorHandler = Callable[[Request, Exception], Awaitable[Response]]


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """FastAPI middleware for request/response logging."""
    
    def __init__(
        self,
        app,
        exempt_paths: Optional[List[str]] = None,
        error_handler: Optional[ErrorHandler] = None,
    ):
        super().__init__(app)
        self.exempt_paths = exempt_paths or ["/docs", "/redoc", "/openapi.json"]
        self.error_handler = error_handler
    
    async def dispatch(self, request: Request, call_next) -> Response:
        """Process request with logging."""
        # Reuse the caller's request ID when given
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(generate_uuid_v7())
        request.state.request_id = request_id
        
        if any(request.url.path.startswith(path) for path in self.exempt_paths):
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            if self.error_handler is None:
                processing_time_ms = (time.perf_counter() - start_time) * 1000
                logger.error(
                    f"{request.method} {request.url.path} failed after {processing_time_ms:.2f}ms "
                    f"[{request_id}] - {type(e).__name__}: {e}"
                )
                raise
            response = await self.error_handler(request, e)
        
        processing_time_ms = (time.perf_counter() - start_time) * 1000
        
        if response.status_code >= 500:
            log_level = logging.ERROR
        elif response.status_code >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO
        
        logger.log(
            log_level,
            f"{request.method} {request.url.path} - {response.status_code} "
            f"in {processing_time_ms:.2f}ms [{request_id}]",
        )
        
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Processing-Time"] = f"{processing_time_ms:.2f}"
        return response
