"""
Tools Package - Tool Registry and Dispatch

This package declares the Cloze tools, the registry mapping names to
handlers, and the dispatcher that routes tool calls to the client.
"""

from cloze_mcp.tools.definitions import TOOL_DEFINITIONS
from cloze_mcp.tools.dispatcher import ToolDispatcher
from cloze_mcp.tools.registry import ToolRegistry, build_tool_registry

__all__ = [
    "TOOL_DEFINITIONS",
    "ToolDispatcher",
    "ToolRegistry",
    "build_tool_registry",
]
