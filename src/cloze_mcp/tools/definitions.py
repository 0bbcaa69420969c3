"""
Tool Definitions - declarative descriptors for every Cloze tool.

Each constant is a ToolDefinition whose ``parameters`` is the JSON Schema
advertised to MCP clients. TOOL_DEFINITIONS fixes the listing order.
"""

from typing import Any

from cloze_mcp.models.domain import ToolDefinition

# Maximum page size for simple search (``limit``)
SIMPLE_SEARCH_MAX_LIMIT = 50
SIMPLE_SEARCH_DEFAULT_LIMIT = 10
# Maximum page size for advanced search (``pageSize``)
ADVANCED_SEARCH_MAX_PAGE_SIZE = 1000

STAGE_KEYS = "Stage key (lead, future, current, past, out)."


def _object(properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


def _simple_search_schema(query_description: str) -> dict[str, Any]:
    return _object(
        {
            "query": {"type": "string", "description": query_description},
            "limit": {
                "type": "number",
                "description": (
                    f"Maximum number of results to return "
                    f"(default: {SIMPLE_SEARCH_DEFAULT_LIMIT}, max: {SIMPLE_SEARCH_MAX_LIMIT})"
                ),
            },
        },
        required=["query"],
    )


def _advanced_search_schema(described: bool = False) -> dict[str, Any]:
    if not described:
        return _object(
            {
                "query": {"type": "string"},
                "stage": {"type": "string"},
                "segment": {"type": "string"},
                "assignee": {"type": "string"},
                "assigned": {"type": "boolean"},
                "pageSize": {"type": "number"},
                "pageNumber": {"type": "number"},
                "sort": {"type": "string"},
            }
        )
    return _object(
        {
            "query": {"type": "string", "description": "Freeform query or keyword."},
            "stage": {"type": "string", "description": STAGE_KEYS},
            "segment": {"type": "string", "description": "Segment id or label."},
            "assignee": {"type": "string", "description": "Filter to who it's assigned to (email)."},
            "assigned": {"type": "boolean", "description": "Whether to only show assigned records."},
            "pageSize": {
                "type": "number",
                "description": f"Results per page (<={ADVANCED_SEARCH_MAX_PAGE_SIZE}).",
            },
            "pageNumber": {"type": "number", "description": "Page number (1-indexed)."},
            "sort": {"type": "string", "description": "Sort key (lastchanged, value, name, etc.)."},
        }
    )


def _feed_schema(described: bool = False) -> dict[str, Any]:
    if not described:
        return _object(
            {
                "cursor": {"type": "string"},
                "stage": {"type": "string"},
                "segment": {"type": "string"},
                "scope": {"type": "string"},
                "pageSize": {"type": "number"},
                "modifiedAfter": {"type": ["string", "number"]},
                "includeAuditedChanges": {"type": "boolean"},
            }
        )
    return _object(
        {
            "cursor": {"type": "string", "description": "Cursor from previous call."},
            "stage": {"type": "string"},
            "segment": {"type": "string"},
            "scope": {"type": "string", "description": "local, team, or hierarchy path"},
            "pageSize": {"type": "number"},
            "modifiedAfter": {
                "type": ["string", "number"],
                "description": "UTC ms timestamp or 'now'.",
            },
            "includeAuditedChanges": {"type": "boolean"},
        }
    )


# =============================================================================
# People / Companies / Projects
# =============================================================================

FIND_PEOPLE_DEFINITION = ToolDefinition(
    name="cloze_find_people",
    description="Search for people (contacts) in Cloze by name, email, or phone number. "
    "Returns a list of matching contacts with basic info.",
    parameters=_simple_search_schema("Search query - can be a name, email address, or phone number"),
)

GET_PERSON_DEFINITION = ToolDefinition(
    name="cloze_get_person",
    description="Get full details for a specific person by their Cloze ID or email address. "
    "Returns all contact info including emails, phones, addresses, jobs, and custom fields.",
    parameters=_object(
        {
            "id": {"type": "string", "description": "The Cloze person ID"},
            "email": {"type": "string", "description": "Email address (alternative to ID)"},
        }
    ),
)

FIND_COMPANIES_DEFINITION = ToolDefinition(
    name="cloze_find_companies",
    description="Search for companies in Cloze by name or domain. "
    "Returns a list of matching companies with basic info.",
    parameters=_simple_search_schema("Search query - can be a company name or domain"),
)

GET_COMPANY_DEFINITION = ToolDefinition(
    name="cloze_get_company",
    description="Get full details for a specific company by their Cloze ID or domain. "
    "Returns all company info including addresses, phones, and custom fields.",
    parameters=_object(
        {
            "id": {"type": "string", "description": "The Cloze company ID"},
            "domain": {"type": "string", "description": "Company domain (alternative to ID)"},
        }
    ),
)

FIND_PROJECTS_DEFINITION = ToolDefinition(
    name="cloze_find_projects",
    description="Search for projects (deals) in Cloze by name. "
    "Returns a list of matching projects with basic info including stage and value.",
    parameters=_simple_search_schema("Search query - project or deal name"),
)

GET_PROJECT_DEFINITION = ToolDefinition(
    name="cloze_get_project",
    description="Get full details for a specific project by its Cloze ID. "
    "Returns all project info including stage, value, related contacts, and custom fields.",
    parameters=_object(
        {"id": {"type": "string", "description": "The Cloze project ID"}},
        required=["id"],
    ),
)

# =============================================================================
# Workspace Metadata
# =============================================================================

GET_PROFILE_DEFINITION = ToolDefinition(
    name="cloze_get_profile",
    description="Get the current Cloze user's profile information. "
    "Useful for verifying API connectivity and getting account details.",
)

GET_CUSTOM_FIELDS_DEFINITION = ToolDefinition(
    name="cloze_get_custom_fields",
    description="List all custom fields available in the Cloze workspace, "
    "optionally filtered by relation type.",
    parameters=_object(
        {
            "relationType": {
                "type": "string",
                "enum": ["person", "company", "project"],
                "description": "Limit results to custom fields for a specific relation type.",
            }
        }
    ),
)

GET_PEOPLE_STAGES_DEFINITION = ToolDefinition(
    name="cloze_get_people_stages",
    description="Retrieve the stage taxonomy for people/companies.",
)

GET_PROJECT_STAGES_DEFINITION = ToolDefinition(
    name="cloze_get_project_stages",
    description="Retrieve the stage taxonomy for projects/deals.",
)

GET_PEOPLE_SEGMENTS_DEFINITION = ToolDefinition(
    name="cloze_get_people_segments",
    description="List contact segments configured in the workspace.",
)

GET_COMPANY_SEGMENTS_DEFINITION = ToolDefinition(
    name="cloze_get_company_segments",
    description="List company segments configured in the workspace.",
)

GET_PROJECT_SEGMENTS_DEFINITION = ToolDefinition(
    name="cloze_get_project_segments",
    description="List project segments configured in the workspace.",
)

GET_STEPS_DEFINITION = ToolDefinition(
    name="cloze_get_steps",
    description="List available pipeline steps, optionally filtered by segment and stage "
    "for more precise guidance.",
    parameters=_object(
        {
            "segment": {"type": "string", "description": "Segment identifier or label to filter steps."},
            "stage": {"type": "string", "description": "Stage key to filter steps within a segment."},
        }
    ),
)

GET_VIEWS_DEFINITION = ToolDefinition(
    name="cloze_get_views",
    description="Retrieve saved views/audiences for people, companies, and projects.",
)

LIST_TEAM_MEMBERS_DEFINITION = ToolDefinition(
    name="cloze_list_team_members",
    description="List team members for the current Cloze workspace (name + email).",
)

LIST_TEAM_ROLES_DEFINITION = ToolDefinition(
    name="cloze_list_team_roles",
    description="List team roles defined in Cloze (label + id).",
)

# =============================================================================
# Advanced Search
# =============================================================================

PEOPLE_FIND_ADVANCED_DEFINITION = ToolDefinition(
    name="cloze_people_find_advanced",
    description="Run advanced people search with stage/segment filters, pagination, "
    "and sorting (wraps GET /v1/people/find).",
    parameters=_advanced_search_schema(described=True),
)

COMPANIES_FIND_ADVANCED_DEFINITION = ToolDefinition(
    name="cloze_companies_find_advanced",
    description="Advanced company search with filters/pagination.",
    parameters=_advanced_search_schema(),
)

PROJECTS_FIND_ADVANCED_DEFINITION = ToolDefinition(
    name="cloze_projects_find_advanced",
    description="Advanced project/deal search with filters/pagination.",
    parameters=_advanced_search_schema(),
)

# =============================================================================
# Feeds
# =============================================================================

PEOPLE_FEED_DEFINITION = ToolDefinition(
    name="cloze_people_feed",
    description="Stream/bulk people feed results using cursors (GET /v1/people/feed). "
    "Supports modifiedAfter + includeAuditedChanges.",
    parameters=_feed_schema(described=True),
)

COMPANIES_FEED_DEFINITION = ToolDefinition(
    name="cloze_companies_feed",
    description="Stream/bulk company feed using cursors.",
    parameters=_feed_schema(),
)

PROJECTS_FEED_DEFINITION = ToolDefinition(
    name="cloze_projects_feed",
    description="Stream/bulk project feed using cursors.",
    parameters=_feed_schema(),
)

# =============================================================================
# Writes
# =============================================================================

UPDATE_PERSON_DEFINITION = ToolDefinition(
    name="cloze_update_person",
    description="Update an existing person in Cloze. Can change visibility (hidden to clean up "
    "duplicates), stage, segment, step, job title, company, or add/update emails, phones, "
    "and addresses. Requires at least a name (first+last) or email as identifier.",
    parameters=_object(
        {
            "id": {"type": "string", "description": "Cloze syncKey/ID of the person."},
            "first": {"type": "string", "description": "First name (used as identifier)."},
            "last": {"type": "string", "description": "Last name (used as identifier)."},
            "emails": {
                "type": "array",
                "items": _object(
                    {"value": {"type": "string"}, "work": {"type": "boolean"}},
                    required=["value"],
                ),
                "description": "Email addresses.",
            },
            "phones": {
                "type": "array",
                "items": _object(
                    {"value": {"type": "string"}, "mobile": {"type": "boolean"}},
                    required=["value"],
                ),
                "description": "Phone numbers.",
            },
            "visibility": {
                "type": "string",
                "enum": ["visible", "hidden"],
                "description": "Set to 'hidden' to soft-delete/hide a duplicate.",
            },
            "stage": {"type": "string", "description": STAGE_KEYS},
            "segment": {"type": "string", "description": "Segment label or id."},
            "step": {"type": "string", "description": "Pipeline step."},
            "jobtitle": {"type": "string", "description": "Job title."},
            "company": {"type": "string", "description": "Company name."},
        }
    ),
)

CREATE_TODO_DEFINITION = ToolDefinition(
    name="cloze_create_todo",
    description="Create a Cloze To-Do/reminder on the timeline.",
    parameters=_object(
        {
            "subject": {"type": "string", "description": "Title of the task."},
            "when": {"type": ["string", "number"], "description": "ISO date or UTC ms timestamp."},
            "participants": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Emails/phones tied to the task.",
            },
            "assignee": {"type": "string", "description": "Assign to team member (email)."},
            "body": {"type": "string", "description": "Optional note/body."},
        },
        required=["subject"],
    ),
)

LOG_COMMUNICATION_DEFINITION = ToolDefinition(
    name="cloze_log_communication",
    description="Log a call/text/email/meeting on the Cloze timeline.",
    parameters=_object(
        {
            "style": {
                "type": "string",
                "enum": ["email", "call", "text", "meeting", "direct", "postal", "postal-bulk"],
                "description": "Type of communication.",
            },
            "subject": {"type": "string", "description": "Summary/title."},
            "date": {"type": ["string", "number"], "description": "When it happened (ISO or UTC ms)."},
            "from": {"type": "string", "description": "Actor initiating (email/phone/app link)."},
            "recipients": {
                "type": "array",
                "items": _object(
                    {
                        "name": {"type": "string"},
                        "value": {"type": "string"},
                        "role": {"type": "string", "enum": ["to", "cc", "bcc", "from"]},
                    },
                    required=["value"],
                ),
            },
            "references": {
                "type": "array",
                "items": _object(
                    {"name": {"type": "string"}, "value": {"type": "string"}},
                    required=["value"],
                ),
            },
            "body": {"type": "string"},
            "bodytype": {"type": "string", "enum": ["text", "html"]},
        },
        required=["style", "subject"],
    ),
)


TOOL_DEFINITIONS: list[ToolDefinition] = [
    FIND_PEOPLE_DEFINITION,
    GET_PERSON_DEFINITION,
    FIND_COMPANIES_DEFINITION,
    GET_COMPANY_DEFINITION,
    FIND_PROJECTS_DEFINITION,
    GET_PROJECT_DEFINITION,
    GET_PROFILE_DEFINITION,
    GET_CUSTOM_FIELDS_DEFINITION,
    GET_PEOPLE_STAGES_DEFINITION,
    GET_PROJECT_STAGES_DEFINITION,
    GET_PEOPLE_SEGMENTS_DEFINITION,
    GET_COMPANY_SEGMENTS_DEFINITION,
    GET_PROJECT_SEGMENTS_DEFINITION,
    GET_STEPS_DEFINITION,
    GET_VIEWS_DEFINITION,
    LIST_TEAM_MEMBERS_DEFINITION,
    LIST_TEAM_ROLES_DEFINITION,
    PEOPLE_FIND_ADVANCED_DEFINITION,
    COMPANIES_FIND_ADVANCED_DEFINITION,
    PROJECTS_FIND_ADVANCED_DEFINITION,
    PEOPLE_FEED_DEFINITION,
    COMPANIES_FEED_DEFINITION,
    PROJECTS_FEED_DEFINITION,
    UPDATE_PERSON_DEFINITION,
    CREATE_TODO_DEFINITION,
    LOG_COMMUNICATION_DEFINITION,
]
