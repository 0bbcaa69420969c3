"""
Unit tests for cloze_mcp/core/exceptions.py - Custom Exception Classes.

Reference:
- Specific exceptions carrying an ErrorCode, always captured with 'as e'
"""

import pytest


# =============================================================================
# Base Exception
# =============================================================================


class TestClozeMCPException:
    """Tests for the ClozeMCPException base class."""

    def test_base_exception_inherits_from_exception(self):
        from cloze_mcp.core.exceptions import ClozeMCPException

        assert issubclass(ClozeMCPException, Exception)

    def test_message_and_default_code(self):
        """
        The message is kept on the instance and as str().
        """
        from cloze_mcp.core.exceptions import ClozeMCPException, ErrorCode

        exc = ClozeMCPException("something broke")

        assert exc.message == "something broke"
        assert str(exc) == "something broke"
        assert exc.error_code == ErrorCode.SERVER_ERROR

    def test_extra_kwargs_become_attributes(self):
        from cloze_mcp.core.exceptions import ClozeMCPException

        exc = ClozeMCPException("x", request_id="r-1")

        assert exc.request_id == "r-1"

    def test_error_codes_are_strings(self):
        from cloze_mcp.core.exceptions import ErrorCode

        assert ErrorCode.API_ERROR == "API_ERROR"
        assert ErrorCode.UNKNOWN_TOOL.value == "UNKNOWN_TOOL"


# =============================================================================
# Subclasses
# =============================================================================


@pytest.mark.parametrize(
    "name",
    [
        "MissingCredentialError",
        "UnknownToolError",
        "InvalidArgumentError",
        "ClozeTransportError",
        "ClozeHTTPError",
        "ClozeAPIError",
    ],
)
def test_all_errors_share_the_base(name):
    from cloze_mcp.core import exceptions

    assert issubclass(getattr(exceptions, name), exceptions.ClozeMCPException)


class TestStartupAndDispatchErrors:

    def test_missing_credential(self):
        from cloze_mcp.core.exceptions import ErrorCode, MissingCredentialError

        exc = MissingCredentialError()

        assert exc.message == "CLOZE_API_KEY environment variable is required"
        assert exc.variable == "CLOZE_API_KEY"
        assert exc.error_code == ErrorCode.MISSING_CREDENTIAL

    def test_unknown_tool(self):
        from cloze_mcp.core.exceptions import ErrorCode, UnknownToolError

        exc = UnknownToolError("cloze_nope")

        assert exc.message == "Unknown tool: cloze_nope"
        assert exc.tool_name == "cloze_nope"
        assert exc.error_code == ErrorCode.UNKNOWN_TOOL

    def test_invalid_argument(self):
        from cloze_mcp.core.exceptions import ErrorCode, InvalidArgumentError

        exc = InvalidArgumentError(
            "'subject' is required", tool_name="cloze_create_todo", field="subject"
        )

        assert exc.message == "'subject' is required"
        assert exc.tool_name == "cloze_create_todo"
        assert exc.field == "subject"
        assert exc.error_code == ErrorCode.INVALID_ARGUMENT


class TestClozeAPIErrors:

    def test_transport_error(self):
        from cloze_mcp.core.exceptions import ClozeTransportError, ErrorCode

        exc = ClozeTransportError("connection refused", method="GET", path="/v1/team/roles")

        assert exc.method == "GET"
        assert exc.path == "/v1/team/roles"
        assert exc.error_code == ErrorCode.TRANSPORT_ERROR

    def test_http_error_message(self):
        from cloze_mcp.core.exceptions import ClozeHTTPError

        exc = ClozeHTTPError(503, "Service Unavailable")

        assert exc.message == "Cloze API error: 503 Service Unavailable"
        assert exc.status_code == 503

    def test_http_error_without_reason(self):
        from cloze_mcp.core.exceptions import ClozeHTTPError

        assert ClozeHTTPError(500).message == "Cloze API error: 500"

    def test_api_error_message(self):
        from cloze_mcp.core.exceptions import ClozeAPIError, ErrorCode

        exc = ClozeAPIError(1, "Invalid API key")

        assert exc.message == "Cloze API error: 1 - Invalid API key"
        assert exc.api_code == 1
        assert exc.api_message == "Invalid API key"
        assert exc.error_code == ErrorCode.API_ERROR
