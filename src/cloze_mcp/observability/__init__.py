"""
Observability Package

Structured JSON logging to stderr with per-call correlation IDs.
"""

from cloze_mcp.observability.logging import (
    configure_logging,
    correlation_id_context,
    get_correlation_id,
    get_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_correlation_id",
    "correlation_id_context",
]
