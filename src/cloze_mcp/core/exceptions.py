"""
Custom exceptions for the Cloze MCP server.

This module provides the exception hierarchy used across the server.
All exceptions inherit from ClozeMCPException and carry an error code
so the MCP boundary can map them to protocol error codes consistently.

Hierarchy:
- MissingCredentialError: startup only, fatal
- UnknownToolError / InvalidArgumentError: raised by the dispatcher
- ClozeTransportError / ClozeHTTPError / ClozeAPIError: raised by the client
"""

from enum import Enum
from typing import Any


# =============================================================================
# Error Codes Enum
# =============================================================================


class ErrorCode(str, Enum):
    """
    Error codes for Cloze MCP exceptions.

    These codes identify error types in log lines and in the
    MCP error mapping.
    """

    SERVER_ERROR = "SERVER_ERROR"
    MISSING_CREDENTIAL = "MISSING_CREDENTIAL"
    UNKNOWN_TOOL = "UNKNOWN_TOOL"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    HTTP_ERROR = "HTTP_ERROR"
    API_ERROR = "API_ERROR"


# =============================================================================
# Base Exception
# =============================================================================


class ClozeMCPException(Exception):
    """
    Base exception for all Cloze MCP errors.

    Attributes:
        message: Human-readable error message.
        error_code: Machine-readable error code from ErrorCode enum.
    """

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.SERVER_ERROR,
        **kwargs: Any,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            error_code: Machine-readable error code.
            **kwargs: Additional attributes to set on the exception.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code

        for key, value in kwargs.items():
            setattr(self, key, value)


# =============================================================================
# Startup
# =============================================================================


class MissingCredentialError(ClozeMCPException):
    """
    Raised at startup when the Cloze API key is not configured.

    Attributes:
        variable: Name of the environment variable that was expected.
    """

    def __init__(
        self,
        variable: str = "CLOZE_API_KEY",
        error_code: str = ErrorCode.MISSING_CREDENTIAL,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"{variable} environment variable is required", error_code, **kwargs
        )
        self.variable = variable


# =============================================================================
# Dispatch Errors
# =============================================================================


class UnknownToolError(ClozeMCPException):
    """
    Raised when a tool name has no registered handler.

    Attributes:
        tool_name: The name that was requested.
    """

    def __init__(
        self,
        tool_name: str,
        error_code: str = ErrorCode.UNKNOWN_TOOL,
        **kwargs: Any,
    ) -> None:
        super().__init__(f"Unknown tool: {tool_name}", error_code, **kwargs)
        self.tool_name = tool_name


class InvalidArgumentError(ClozeMCPException):
    """
    Raised when tool arguments are missing or malformed.

    Covers absent required arguments ("'subject' is required"), missing
    identifiers on dual-identifier lookups, and declared-type mismatches.

    Attributes:
        tool_name: Name of the tool being invoked (if known).
        field: Name of the offending argument (if a single one).
    """

    def __init__(
        self,
        message: str,
        tool_name: str | None = None,
        field: str | None = None,
        error_code: str = ErrorCode.INVALID_ARGUMENT,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.tool_name = tool_name
        self.field = field


# =============================================================================
# Cloze API Errors
# =============================================================================


class ClozeTransportError(ClozeMCPException):
    """
    Raised when the request never produced an HTTP response.

    Connection refused, DNS failure, TLS errors and timeouts all land here.

    Attributes:
        method: HTTP method of the failed request.
        path: Request path (without the API key).
    """

    def __init__(
        self,
        message: str,
        method: str | None = None,
        path: str | None = None,
        error_code: str = ErrorCode.TRANSPORT_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.method = method
        self.path = path


class ClozeHTTPError(ClozeMCPException):
    """
    Raised when the Cloze API answers with a non-2xx status.

    Attributes:
        status_code: HTTP status code returned by the API.
        reason: HTTP reason phrase.
    """

    def __init__(
        self,
        status_code: int,
        reason: str = "",
        error_code: str = ErrorCode.HTTP_ERROR,
        **kwargs: Any,
    ) -> None:
        message = f"Cloze API error: {status_code} {reason}".rstrip()
        super().__init__(message, error_code, **kwargs)
        self.status_code = status_code
        self.reason = reason


class ClozeAPIError(ClozeMCPException):
    """
    Raised when a successful HTTP response reports an application error.

    Cloze signals failures with an ``errorcode``/``message`` pair inside an
    otherwise-200 JSON body.

    Attributes:
        api_code: The ``errorcode`` value from the response body.
        api_message: The ``message`` value from the response body.
    """

    def __init__(
        self,
        api_code: Any,
        api_message: str | None = None,
        error_code: str = ErrorCode.API_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Cloze API error: {api_code} - {api_message}", error_code, **kwargs
        )
        self.api_code = api_code
        self.api_message = api_message
