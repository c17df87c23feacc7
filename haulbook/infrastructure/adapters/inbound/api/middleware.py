"""
Custom middleware for the FastAPI application.

- Request ID generation and propagation into log records
- Request/response logging
"""

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from haulbook.infrastructure.config.logging import request_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Assigns every request an id.

    An incoming ``X-Request-ID`` header is reused, otherwise a UUID4 is
    generated. The id is stored on ``request.state``, published to the
    logging context and echoed in the response header.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every request with its status and duration.

    INFO for 2xx/3xx, WARNING for 4xx, ERROR for 5xx.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            logger.error(
                f"Request failed: {method} {path} duration={duration:.3f}s error={e}",
                exc_info=True,
            )
            raise

        duration = time.perf_counter() - start_time
        status_code = response.status_code
        log_message = f"{method} {path} {status_code} duration={duration:.3f}s"

        if status_code < 400:
            logger.info(log_message)
        elif status_code < 500:
            logger.warning(log_message)
        else:
            logger.error(log_message)

        response.headers["X-Response-Time"] = f"{duration:.3f}s"
        return response
