"""
Tool Dispatcher

Routes a ``(name, arguments)`` pair to the matching handler:

1. look the tool up in the registry (UnknownToolError, no HTTP call)
2. sanitize the known-malformed argument encoding
3. validate arguments against the tool's JSON Schema
4. await the handler with the ClozeClient

Dispatch holds no state between calls beyond the client and registry it
was constructed with. Errors propagate to the caller; the MCP server
turns them into protocol errors.

Pattern: Command Executor with an injected registry
"""

import time
import uuid
from typing import Any, Mapping, Optional

from cloze_mcp.clients.cloze import ClozeClient
from cloze_mcp.core.exceptions import ClozeMCPException
from cloze_mcp.models.domain import ToolDefinition
from cloze_mcp.observability.logging import correlation_id_context, get_logger
from cloze_mcp.tools.arguments import sanitize_malformed_arguments, validate_arguments
from cloze_mcp.tools.registry import ToolRegistry, build_tool_registry

logger = get_logger(__name__)


class ToolDispatcher:
    """
    Dispatcher for Cloze tool calls.

    Attributes:
        client: The ClozeClient handlers call into.
        registry: The ToolRegistry to look tools up in.

    Example:
        >>> dispatcher = ToolDispatcher(client=ClozeClient(api_key="..."))
        >>> await dispatcher.dispatch("cloze_get_person", {"email": "ada@example.com"})
    """

    def __init__(
        self, client: ClozeClient, registry: Optional[ToolRegistry] = None
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            client: The ClozeClient to pass to handlers.
            registry: Tool registry (default: every Cloze tool).
        """
        self.client = client
        self.registry = registry if registry is not None else build_tool_registry()

    def list_tools(self) -> list[ToolDefinition]:
        """Return every tool definition in declaration order."""
        return self.registry.list()

    async def dispatch(
        self, name: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """
        Execute a tool call and return the decoded API result.

        Args:
            name: Tool name.
            arguments: Argument mapping from the caller (None means empty).

        Returns:
            The JSON value returned by the Cloze API.

        Raises:
            UnknownToolError: If the tool is not registered.
            InvalidArgumentError: If arguments fail validation.
            ClozeTransportError, ClozeHTTPError, ClozeAPIError: From the client.
        """
        with correlation_id_context(uuid.uuid4().hex):
            tool = self.registry.get(name)

            args = sanitize_malformed_arguments(arguments or {})
            validate_arguments(tool.definition, args)

            logger.info("tool_call_started", tool=name, arguments=sorted(args))
            start = time.perf_counter()
            try:
                result = await tool.handler(self.client, args)
            except ClozeMCPException as e:
                logger.warning(
                    "tool_call_failed",
                    tool=name,
                    error_code=getattr(e.error_code, "value", e.error_code),
                    error=e.message,
                )
                raise

            logger.info(
                "tool_call_completed",
                tool=name,
                duration_ms=round((time.perf_counter() - start) * 1000, 1),
            )
            return result
