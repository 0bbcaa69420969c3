"""
Clients Package - HTTP access to the Cloze API.

- http: create_http_client() factory
- cloze: ClozeClient adapter and build_query_string helper
"""

from cloze_mcp.clients.cloze import (
    ADVANCED_SEARCH_PARAMS,
    FEED_PARAMS,
    ClozeClient,
    build_query_string,
)
from cloze_mcp.clients.http import (
    DEFAULT_MAX_CONNECTIONS,
    DEFAULT_MAX_KEEPALIVE,
    DEFAULT_TIMEOUT_SECONDS,
    create_http_client,
)

__all__ = [
    # HTTP Client Factory
    "create_http_client",
    "DEFAULT_MAX_CONNECTIONS",
    "DEFAULT_MAX_KEEPALIVE",
    "DEFAULT_TIMEOUT_SECONDS",
    # Cloze Client
    "ClozeClient",
    "build_query_string",
    "ADVANCED_SEARCH_PARAMS",
    "FEED_PARAMS",
]
