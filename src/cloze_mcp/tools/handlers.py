"""
Tool Handlers - one coroutine per tool.

Every handler has the signature ``handler(client, arguments)`` and issues
exactly one ClozeClient call. Arguments arrive already sanitized and
schema-validated by the dispatcher; handlers apply the per-tool policy
(limit clamping, identifier preference) on top.
"""

from typing import Any

from cloze_mcp.clients.cloze import ClozeClient
from cloze_mcp.core.exceptions import InvalidArgumentError
from cloze_mcp.tools.arguments import clamp_limit, clamp_page_size, is_missing, require
from cloze_mcp.tools.definitions import (
    ADVANCED_SEARCH_MAX_PAGE_SIZE,
    SIMPLE_SEARCH_DEFAULT_LIMIT,
    SIMPLE_SEARCH_MAX_LIMIT,
)

Arguments = dict[str, Any]


def _search_limit(arguments: Arguments) -> int:
    return clamp_limit(
        arguments.get("limit"), SIMPLE_SEARCH_DEFAULT_LIMIT, SIMPLE_SEARCH_MAX_LIMIT
    )


def _advanced_filters(arguments: Arguments) -> Arguments:
    filters = dict(arguments)
    if filters.get("pageSize") is not None:
        filters["pageSize"] = clamp_page_size(filters["pageSize"], ADVANCED_SEARCH_MAX_PAGE_SIZE)
    return filters


# =============================================================================
# People / Companies / Projects
# =============================================================================


async def find_people(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.find_people(arguments["query"], _search_limit(arguments))


async def get_person(client: ClozeClient, arguments: Arguments) -> Any:
    """Look up a person, preferring ``email`` over ``id`` when both are given."""
    email = arguments.get("email")
    person_id = arguments.get("id")
    if not is_missing(email):
        return await client.get_person_by_email(email)
    if not is_missing(person_id):
        return await client.get_person(person_id)
    raise InvalidArgumentError(
        "Either 'id' or 'email' is required", tool_name="cloze_get_person"
    )


async def find_companies(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.find_companies(arguments["query"], _search_limit(arguments))


async def get_company(client: ClozeClient, arguments: Arguments) -> Any:
    """Look up a company, preferring ``domain`` over ``id`` when both are given."""
    domain = arguments.get("domain")
    company_id = arguments.get("id")
    if not is_missing(domain):
        return await client.get_company_by_domain(domain)
    if not is_missing(company_id):
        return await client.get_company(company_id)
    raise InvalidArgumentError(
        "Either 'id' or 'domain' is required", tool_name="cloze_get_company"
    )


async def find_projects(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.find_projects(arguments["query"], _search_limit(arguments))


async def get_project(client: ClozeClient, arguments: Arguments) -> Any:
    require(arguments, "id", tool_name="cloze_get_project")
    return await client.get_project(arguments["id"])


# =============================================================================
# Workspace Metadata
# =============================================================================


async def get_profile(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.get_profile()


async def get_custom_fields(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.get_custom_fields(arguments.get("relationType"))


async def get_people_stages(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.get_people_stages()


async def get_project_stages(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.get_project_stages()


async def get_people_segments(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.get_people_segments()


async def get_company_segments(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.get_company_segments()


async def get_project_segments(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.get_project_segments()


async def get_steps(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.get_steps(
        segment=arguments.get("segment"), stage=arguments.get("stage")
    )


async def get_views(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.get_views()


async def list_team_members(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.list_team_members()


async def list_team_roles(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.list_team_roles()


# =============================================================================
# Advanced Search
# =============================================================================


async def people_find_advanced(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.find_people_advanced(_advanced_filters(arguments))


async def companies_find_advanced(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.find_companies_advanced(_advanced_filters(arguments))


async def projects_find_advanced(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.find_projects_advanced(_advanced_filters(arguments))


# =============================================================================
# Feeds
# =============================================================================


async def people_feed(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.feed_people(arguments)


async def companies_feed(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.feed_companies(arguments)


async def projects_feed(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.feed_projects(arguments)


# =============================================================================
# Writes
# =============================================================================


async def update_person(client: ClozeClient, arguments: Arguments) -> Any:
    return await client.update_person(arguments)


async def create_todo(client: ClozeClient, arguments: Arguments) -> Any:
    require(arguments, "subject", tool_name="cloze_create_todo")
    return await client.create_todo(arguments)


async def log_communication(client: ClozeClient, arguments: Arguments) -> Any:
    require(arguments, "style", "subject", tool_name="cloze_log_communication")
    return await client.log_communication(arguments)
