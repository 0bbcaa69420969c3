"""
Core module for the Cloze MCP server.

This module contains configuration and the exception hierarchy.
"""

from cloze_mcp.core.config import Settings, get_settings
from cloze_mcp.core.exceptions import (
    ClozeAPIError,
    ClozeHTTPError,
    ClozeMCPException,
    ClozeTransportError,
    ErrorCode,
    InvalidArgumentError,
    MissingCredentialError,
    UnknownToolError,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Exceptions
    "ErrorCode",
    "ClozeMCPException",
    "MissingCredentialError",
    "UnknownToolError",
    "InvalidArgumentError",
    "ClozeTransportError",
    "ClozeHTTPError",
    "ClozeAPIError",
]
