"""
Domain Models - tool descriptors and registered handlers.

Pattern: Value object for tool metadata (frozen Pydantic model)
Pattern: Tool inventory with callable handlers
"""

from typing import Any, Awaitable, Callable

from pydantic import BaseModel, Field


class ToolDefinition(BaseModel):
    """
    Tool definition schema for tool registration.

    This is the metadata describing a tool: its name, what it does,
    and the JSON Schema for its arguments. It does not include the
    handler callable; see RegisteredTool for that.

    Attributes:
        name: Unique tool identifier.
        description: Human-readable description of what the tool does.
        parameters: JSON Schema defining the tool's input arguments.

    Example:
        >>> tool = ToolDefinition(
        ...     name="cloze_get_project",
        ...     description="Get a project by id",
        ...     parameters={
        ...         "type": "object",
        ...         "properties": {"id": {"type": "string"}},
        ...         "required": ["id"],
        ...     },
        ... )
    """

    name: str = Field(..., min_length=1, description="Unique tool identifier")
    description: str = Field(..., description="Human-readable description")
    parameters: dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}},
        description="JSON Schema for input arguments",
    )

    model_config = {"frozen": True}

    @property
    def properties(self) -> dict[str, Any]:
        """Per-argument schemas."""
        return self.parameters.get("properties", {})

    @property
    def required(self) -> list[str]:
        """Names of required arguments, in declaration order."""
        return list(self.parameters.get("required", []))


ToolHandler = Callable[[Any, dict[str, Any]], Awaitable[Any]]
"""Handler signature: ``await handler(client, arguments)``."""


class RegisteredTool(BaseModel):
    """
    A tool with its definition and handler callable.

    The handler receives the ClozeClient and the normalized argument
    mapping, and returns the decoded API result.

    Attributes:
        definition: The tool's metadata (name, description, parameters).
        handler: Async callable that executes the tool.
    """

    definition: ToolDefinition
    handler: Callable[..., Any] = Field(..., description="Tool execution callable")

    model_config = {"arbitrary_types_allowed": True}

    @property
    def name(self) -> str:
        """Get tool name from definition."""
        return self.definition.name
