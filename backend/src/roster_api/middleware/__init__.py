"""Middleware package."""

from roster_api.middleware.request_context import RequestContextMiddleware
from roster_api.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "RequestContextMiddleware",
    "SecurityHeadersMiddleware",
]
