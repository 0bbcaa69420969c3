"""
MCP Server - exposes the Cloze tools over stdio.

Two requests are served:
- list_tools: one mcp.types.Tool per ToolDefinition, in declaration order
- call_tool: dispatches and returns the result as a single text block

Every per-call failure is converted to an McpError here; none of them
stops the server.
"""

import json
from typing import Any, Optional

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from cloze_mcp.clients.cloze import ClozeClient
from cloze_mcp.core.config import Settings
from cloze_mcp.core.exceptions import (
    ClozeMCPException,
    InvalidArgumentError,
    UnknownToolError,
)
from cloze_mcp.models.domain import ToolDefinition
from cloze_mcp.observability.logging import get_logger
from cloze_mcp.tools.dispatcher import ToolDispatcher

logger = get_logger(__name__)


# =============================================================================
# Conversions
# =============================================================================


def to_mcp_tool(definition: ToolDefinition) -> types.Tool:
    return types.Tool(
        name=definition.name,
        description=definition.description,
        inputSchema=definition.parameters,
    )


def render_result(result: Any) -> str:
    """Render a tool result as text: strings verbatim, everything else as JSON."""
    if isinstance(result, str):
        return result
    return json.dumps(result, indent=2, default=str)


def to_mcp_error(exc: Exception) -> McpError:
    """
    Map an exception raised during dispatch to an MCP protocol error.

    UnknownToolError -> METHOD_NOT_FOUND, InvalidArgumentError ->
    INVALID_PARAMS, anything else -> INTERNAL_ERROR.
    """
    if isinstance(exc, UnknownToolError):
        code = types.METHOD_NOT_FOUND
    elif isinstance(exc, InvalidArgumentError):
        code = types.INVALID_PARAMS
    else:
        code = types.INTERNAL_ERROR

    if isinstance(exc, ClozeMCPException):
        message = exc.message
    else:
        message = str(exc) or "Unknown error"
    return McpError(types.ErrorData(code=code, message=message))


# =============================================================================
# Request Handlers
# =============================================================================


async def handle_call_tool(
    dispatcher: ToolDispatcher, name: str, arguments: Optional[dict[str, Any]]
) -> list[types.TextContent]:
    """
    Dispatch one tool call and wrap the result for MCP.

    Raises:
        McpError: For every failure raised by the dispatcher.
    """
    try:
        result = await dispatcher.dispatch(name, arguments or {})
    except Exception as e:
        logger.error("tool_call_error", tool=name, error=str(e), error_type=type(e).__name__)
        raise to_mcp_error(e) from e
    return [types.TextContent(type="text", text=render_result(result))]


def create_server(
    dispatcher: ToolDispatcher,
    name: str = "cloze-mcp",
    version: Optional[str] = None,
) -> Server:
    """Create the MCP server and register the list/call handlers."""
    server = Server(name, version=version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [to_mcp_tool(definition) for definition in dispatcher.list_tools()]

    # Input validation is done by the dispatcher after the malformed-argument repair
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        return await handle_call_tool(dispatcher, name, arguments)

    return server


async def run_server(settings: Settings) -> None:
    """
    Run the MCP server on stdio until the client disconnects.

    Raises:
        MissingCredentialError: If CLOZE_API_KEY is not configured.
    """
    api_key = settings.require_api_key()

    async with ClozeClient(
        api_key=api_key,
        base_url=settings.base_url,
        timeout_seconds=settings.timeout_seconds,
    ) as client:
        dispatcher = ToolDispatcher(client)
        server = create_server(dispatcher, settings.server_name, settings.server_version)

        async with stdio_server() as (read_stream, write_stream):
            logger.info(
                "server_started",
                server=settings.server_name,
                version=settings.server_version,
                tools=len(dispatcher.list_tools()),
            )
            await server.run(
                read_stream, write_stream, server.create_initialization_options()
            )
