"""
Cloze Client - HTTP adapter for the Cloze REST API.

Every logical operation maps to exactly one HTTP call against
https://api.cloze.com. Reads, searches and feeds are GET requests with
query-string filters; lookups-by-body, creates and updates are POST
requests with a JSON body. The API key travels as the ``api_key`` query
parameter on every call.

Error detection:
- network failure -> ClozeTransportError
- non-2xx status -> ClozeHTTPError
- ``errorcode`` in a 200 body -> ClozeAPIError

Nothing is retried or cached.
"""

from typing import Any, Literal, Mapping, Optional

import httpx

from cloze_mcp.clients.http import DEFAULT_TIMEOUT_SECONDS, create_http_client
from cloze_mcp.core.config import DEFAULT_BASE_URL
from cloze_mcp.core.exceptions import (
    ClozeAPIError,
    ClozeHTTPError,
    ClozeTransportError,
)
from cloze_mcp.observability.logging import get_logger

logger = get_logger(__name__)


RelationType = Literal["person", "company", "project"]

# Tool argument name -> Cloze query parameter name
ADVANCED_SEARCH_PARAMS: dict[str, str] = {
    "query": "freeformquery",
    "stage": "stage",
    "segment": "segment",
    "assignee": "assignee",
    "assigned": "assigned",
    "pageSize": "pagesize",
    "pageNumber": "pagenumber",
    "sort": "sort",
}

FEED_PARAMS: dict[str, str] = {
    "cursor": "cursor",
    "stage": "stage",
    "segment": "segment",
    "scope": "scope",
    "pageSize": "pagesize",
    "modifiedAfter": "modifiedafter",
    "includeAuditedChanges": "includeauditedchanges",
}

_SUCCESS_CODES = (None, 0, "0", "")


# =============================================================================
# Query String Helper
# =============================================================================


def build_query_string(params: Mapping[str, Any]) -> str:
    """
    Build a URL query string from optional parameters.

    Parameters whose value is None are omitted; everything else is
    URL-encoded (booleans as ``true``/``false``).

    Args:
        params: Mapping of query parameter name to value.

    Returns:
        ``""`` when no parameter survives, otherwise ``"?name=value&..."``.

    Example:
        >>> build_query_string({"stage": "lead", "segment": None})
        '?stage=lead'
    """
    present = {key: value for key, value in params.items() if value is not None}
    if not present:
        return ""
    return f"?{httpx.QueryParams(present)}"


def _translate_filters(
    filters: Mapping[str, Any], mapping: Mapping[str, str]
) -> dict[str, Any]:
    """Rename known filter keys to their API names, dropping unknown keys."""
    return {api_name: filters.get(arg_name) for arg_name, api_name in mapping.items()}


# =============================================================================
# ClozeClient
# =============================================================================


class ClozeClient:
    """
    Client for the Cloze REST API.

    The API key is held by the instance and passed in explicitly; there is
    no module-level credential.

    Usage:
        async with ClozeClient(api_key="...") as client:
            person = await client.get_person_by_email("ada@example.com")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize the Cloze client.

        Args:
            api_key: Cloze API key.
            base_url: Base URL of the API (default: https://api.cloze.com).
            timeout_seconds: Per-call timeout in seconds (default: 30.0).
            http_client: Pre-built httpx client. It is not closed by close().
        """
        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self._api_key = api_key
        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client = http_client is None

    async def __aenter__(self) -> "ClozeClient":
        """Enter async context - create HTTP client."""
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context - close HTTP client."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            self._client = create_http_client(
                base_url=self.base_url,
                timeout_seconds=self.timeout_seconds,
            )
        return self._client

    # =========================================================================
    # Core Request
    # =========================================================================

    async def request(
        self,
        method: Literal["GET", "POST"],
        path: str,
        body: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Perform one authenticated request and return the decoded JSON.

        Args:
            method: "GET" or "POST".
            path: API path without a query string.
            body: JSON body, sent only with POST.
            params: Query parameters; None values are omitted. The API key
                is added to them.

        Returns:
            The decoded JSON response.

        Raises:
            ClozeTransportError: If no HTTP response was received.
            ClozeHTTPError: If the status is not 2xx.
            ClozeAPIError: If the body is not JSON or carries an errorcode.
        """
        client = self._ensure_client()

        query = {key: value for key, value in (params or {}).items() if value is not None}
        query["api_key"] = self._api_key

        kwargs: dict[str, Any] = {"params": query}
        if body is not None and method == "POST":
            kwargs["json"] = dict(body)

        logger.debug(
            "cloze_request", method=method, path=f"{path}{build_query_string(params or {})}"
        )

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("cloze_transport_error", method=method, path=path, error=str(e))
            raise ClozeTransportError(
                f"Cloze API request failed: {e}", method=method, path=path
            ) from e

        if not response.is_success:
            logger.warning(
                "cloze_http_error",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise ClozeHTTPError(response.status_code, response.reason_phrase)

        try:
            data = response.json()
        except ValueError as e:
            raise ClozeAPIError(
                "invalid_response", "response body is not valid JSON"
            ) from e

        if isinstance(data, dict) and data.get("errorcode") not in _SUCCESS_CODES:
            raise ClozeAPIError(data.get("errorcode"), data.get("message"))

        return data

    # =========================================================================
    # People
    # =========================================================================

    async def find_people(self, query: str, limit: int = 10) -> Any:
        return await self.request("POST", "/v1/people/find", {"query": query, "limit": limit})

    async def get_person(self, id: str) -> Any:
        return await self.request("POST", "/v1/people/get", {"id": id})

    async def get_person_by_email(self, email: str) -> Any:
        return await self.request("POST", "/v1/people/get", {"email": email})

    async def update_person(self, person: Mapping[str, Any]) -> Any:
        """Update an existing person; ``person`` is sent as the JSON body."""
        return await self.request("POST", "/v1/people/update", person)

    # =========================================================================
    # Companies
    # =========================================================================

    async def find_companies(self, query: str, limit: int = 10) -> Any:
        return await self.request("POST", "/v1/companies/find", {"query": query, "limit": limit})

    async def get_company(self, id: str) -> Any:
        return await self.request("POST", "/v1/companies/get", {"id": id})

    async def get_company_by_domain(self, domain: str) -> Any:
        return await self.request("POST", "/v1/companies/get", {"domain": domain})

    # =========================================================================
    # Projects
    # =========================================================================

    async def find_projects(self, query: str, limit: int = 10) -> Any:
        return await self.request("POST", "/v1/projects/find", {"query": query, "limit": limit})

    async def get_project(self, id: str) -> Any:
        return await self.request("POST", "/v1/projects/get", {"id": id})

    # =========================================================================
    # Advanced Search
    # Filters use tool argument names (pageSize, pageNumber, ...)
    # =========================================================================

    async def find_people_advanced(self, filters: Mapping[str, Any]) -> Any:
        return await self._get_with_filters("/v1/people/find", filters, ADVANCED_SEARCH_PARAMS)

    async def find_companies_advanced(self, filters: Mapping[str, Any]) -> Any:
        return await self._get_with_filters("/v1/companies/find", filters, ADVANCED_SEARCH_PARAMS)

    async def find_projects_advanced(self, filters: Mapping[str, Any]) -> Any:
        return await self._get_with_filters("/v1/projects/find", filters, ADVANCED_SEARCH_PARAMS)

    # =========================================================================
    # Feeds
    # The cursor is forwarded verbatim; the next cursor comes back in the body.
    # =========================================================================

    async def feed_people(self, filters: Mapping[str, Any]) -> Any:
        return await self._get_with_filters("/v1/people/feed", filters, FEED_PARAMS)

    async def feed_companies(self, filters: Mapping[str, Any]) -> Any:
        return await self._get_with_filters("/v1/companies/feed", filters, FEED_PARAMS)

    async def feed_projects(self, filters: Mapping[str, Any]) -> Any:
        return await self._get_with_filters("/v1/projects/feed", filters, FEED_PARAMS)

    async def _get_with_filters(
        self, path: str, filters: Mapping[str, Any], mapping: Mapping[str, str]
    ) -> Any:
        return await self.request("GET", path, params=_translate_filters(filters, mapping))

    # =========================================================================
    # Timeline
    # =========================================================================

    async def create_todo(self, todo: Mapping[str, Any]) -> Any:
        return await self.request("POST", "/v1/timeline/todo/create", todo)

    async def log_communication(self, communication: Mapping[str, Any]) -> Any:
        return await self.request("POST", "/v1/timeline/communication/create", communication)

    # =========================================================================
    # User / Workspace Metadata
    # =========================================================================

    async def get_profile(self) -> Any:
        return await self.request("GET", "/v1/user/profile")

    async def get_custom_fields(self, relation_type: Optional[RelationType] = None) -> Any:
        return await self.request(
            "GET", "/v1/user/fields", params={"relationtype": relation_type}
        )

    async def get_people_stages(self) -> Any:
        return await self.request("GET", "/v1/user/stages/people")

    async def get_project_stages(self) -> Any:
        return await self.request("GET", "/v1/user/stages/projects")

    async def get_people_segments(self) -> Any:
        return await self.request("GET", "/v1/user/segments/people")

    async def get_company_segments(self) -> Any:
        return await self.request("GET", "/v1/user/segments/companies")

    async def get_project_segments(self) -> Any:
        return await self.request("GET", "/v1/user/segments/projects")

    async def get_steps(
        self, segment: Optional[str] = None, stage: Optional[str] = None
    ) -> Any:
        return await self.request(
            "GET", "/v1/user/steps", params={"segment": segment, "stage": stage}
        )

    async def get_views(self) -> Any:
        return await self.request("GET", "/v1/user/views")

    # =========================================================================
    # Team
    # =========================================================================

    async def list_team_members(self) -> Any:
        return await self.request("GET", "/v1/team/members")

    async def list_team_roles(self) -> Any:
        return await self.request("GET", "/v1/team/roles")
