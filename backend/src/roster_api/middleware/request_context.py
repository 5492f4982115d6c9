"""Request ID and access logging middleware."""

import logging
import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log its outcome.

    The authenticated admin id is read back from ``request.state`` after the
    handler ran, so it is present only on routes behind the bearer check.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Response],
    ) -> Response:
        """Process the request.

        Args:
            request: Incoming request
            call_next: Next middleware/handler

        Returns:
            Response from downstream handler
        """
        request.state.request_id = str(uuid.uuid4())
        started = time.perf_counter()

        response = await call_next(request)

        admin_id = getattr(request.state, "admin_id", None)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s %s %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            extra={
                "request_id": request.state.request_id,
                "admin_id": str(admin_id) if admin_id else None,
            },
        )
        response.headers["X-Request-ID"] = request.state.request_id
        return response
