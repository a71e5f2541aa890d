"""
Observability Package

Structured JSON logging with correlation IDs.
"""

from growpanel_mcp.observability.logging import (
    clear_correlation_id,
    configure_logging,
    correlation_id_context,
    get_correlation_id,
    get_logger,
    reset_logging,
    set_correlation_id,
)

__all__ = [
    "clear_correlation_id",
    "configure_logging",
    "correlation_id_context",
    "get_correlation_id",
    "get_logger",
    "reset_logging",
    "set_correlation_id",
]
