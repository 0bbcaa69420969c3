"""
Tool Registry

This module implements the registry mapping tool names to their
definitions and handlers, and builds the registry of Cloze tools.

Pattern: Service Registry applied to tool management
Pattern: Plain lookup table for dispatch (name -> handler)

Invariant: every tool name is registered at most once, so each listed
tool has exactly one handler.
"""

from cloze_mcp.core.exceptions import UnknownToolError
from cloze_mcp.models.domain import RegisteredTool, ToolDefinition, ToolHandler
from cloze_mcp.observability.logging import get_logger
from cloze_mcp.tools import definitions as defs
from cloze_mcp.tools import handlers

logger = get_logger(__name__)


class ToolRegistry:
    """
    Registry for the tools exposed over MCP.

    Insertion order is preserved, so list() returns tools in the order
    they were registered.

    Example:
        >>> registry = ToolRegistry()
        >>> registry.register(RegisteredTool(definition=..., handler=...))
        >>> tool = registry.get("cloze_get_profile")
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._tools: dict[str, RegisteredTool] = {}

    def register(self, tool: RegisteredTool) -> None:
        """
        Register a tool under its definition's name.

        Args:
            tool: The RegisteredTool instance to register.

        Raises:
            ValueError: If a tool with the same name is already registered.
        """
        if self.has(tool.name):
            raise ValueError(f"Tool already registered: {tool.name}")
        self._tools[tool.name] = tool
        logger.debug("tool_registered", tool=tool.name)

    def get(self, name: str) -> RegisteredTool:
        """
        Get a registered tool by name.

        Raises:
            UnknownToolError: If the tool is not registered.
        """
        if name not in self._tools:
            raise UnknownToolError(name)
        return self._tools[name]

    def has(self, name: str) -> bool:
        """Check if a tool is registered."""
        return name in self._tools

    def list(self) -> list[ToolDefinition]:
        """List all registered tool definitions in registration order."""
        return [tool.definition for tool in self._tools.values()]

    def __len__(self) -> int:
        return len(self._tools)


# =============================================================================
# Cloze Tool Catalog
# =============================================================================

CLOZE_TOOL_HANDLERS: dict[str, ToolHandler] = {
    defs.FIND_PEOPLE_DEFINITION.name: handlers.find_people,
    defs.GET_PERSON_DEFINITION.name: handlers.get_person,
    defs.FIND_COMPANIES_DEFINITION.name: handlers.find_companies,
    defs.GET_COMPANY_DEFINITION.name: handlers.get_company,
    defs.FIND_PROJECTS_DEFINITION.name: handlers.find_projects,
    defs.GET_PROJECT_DEFINITION.name: handlers.get_project,
    defs.GET_PROFILE_DEFINITION.name: handlers.get_profile,
    defs.GET_CUSTOM_FIELDS_DEFINITION.name: handlers.get_custom_fields,
    defs.GET_PEOPLE_STAGES_DEFINITION.name: handlers.get_people_stages,
    defs.GET_PROJECT_STAGES_DEFINITION.name: handlers.get_project_stages,
    defs.GET_PEOPLE_SEGMENTS_DEFINITION.name: handlers.get_people_segments,
    defs.GET_COMPANY_SEGMENTS_DEFINITION.name: handlers.get_company_segments,
    defs.GET_PROJECT_SEGMENTS_DEFINITION.name: handlers.get_project_segments,
    defs.GET_STEPS_DEFINITION.name: handlers.get_steps,
    defs.GET_VIEWS_DEFINITION.name: handlers.get_views,
    defs.LIST_TEAM_MEMBERS_DEFINITION.name: handlers.list_team_members,
    defs.LIST_TEAM_ROLES_DEFINITION.name: handlers.list_team_roles,
    defs.PEOPLE_FIND_ADVANCED_DEFINITION.name: handlers.people_find_advanced,
    defs.COMPANIES_FIND_ADVANCED_DEFINITION.name: handlers.companies_find_advanced,
    defs.PROJECTS_FIND_ADVANCED_DEFINITION.name: handlers.projects_find_advanced,
    defs.PEOPLE_FEED_DEFINITION.name: handlers.people_feed,
    defs.COMPANIES_FEED_DEFINITION.name: handlers.companies_feed,
    defs.PROJECTS_FEED_DEFINITION.name: handlers.projects_feed,
    defs.UPDATE_PERSON_DEFINITION.name: handlers.update_person,
    defs.CREATE_TODO_DEFINITION.name: handlers.create_todo,
    defs.LOG_COMMUNICATION_DEFINITION.name: handlers.log_communication,
}


def build_tool_registry() -> ToolRegistry:
    """
    Build a registry holding every Cloze tool in declaration order.

    Raises:
        ValueError: If a definition has no handler or a handler has no definition.
    """
    declared = [definition.name for definition in defs.TOOL_DEFINITIONS]
    unmatched = set(declared) ^ set(CLOZE_TOOL_HANDLERS)
    if unmatched:
        raise ValueError(f"Tool definitions and handlers disagree: {sorted(unmatched)}")

    registry = ToolRegistry()
    for definition in defs.TOOL_DEFINITIONS:
        registry.register(
            RegisteredTool(definition=definition, handler=CLOZE_TOOL_HANDLERS[definition.name])
        )
    logger.debug("tool_registry_built", tools=len(registry))
    return registry
