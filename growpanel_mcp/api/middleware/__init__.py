"""
API Middleware Package

- logging: Request/response logging with header redaction and correlation IDs
"""

from growpanel_mcp.api.middleware.logging import (
    RequestLoggingMiddleware,
    redact_sensitive_headers,
)

__all__ = [
    "RequestLoggingMiddleware",
    "redact_sensitive_headers",
]
