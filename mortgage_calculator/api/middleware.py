"""FastAPI middleware for request tracing, access logging and metrics"""

import uuid
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from mortgage_calculator.infrastructure.observability.logging import log_request
from mortgage_calculator.infrastructure.observability.metrics import request_duration_histogram


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add unique request ID to each request for tracing"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log status code and duration of every request"""

    async def dispatch(self, request: Request, call_next):
        start_ns = time.perf_counter_ns()

        response = await call_next(request)

        log_request(
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ns=time.perf_counter_ns() - start_ns,
            request_id=getattr(request.state, "request_id", "unknown"),
        )
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Record HTTP request metrics"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        duration = time.time() - start_time
        request_duration_histogram.labels(
            method=request.method,
            endpoint=request.url.path,
            status=response.status_code,
        ).observe(duration)

        return response
