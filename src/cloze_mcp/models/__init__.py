"""Models Package - Pydantic models for tool descriptors and handlers."""

from cloze_mcp.models.domain import RegisteredTool, ToolDefinition, ToolHandler

__all__ = ["ToolDefinition", "RegisteredTool", "ToolHandler"]
