"""
HTTP Client Module - Client Factory

This module provides the factory for the httpx client used to talk to the
Cloze API, with connection pooling, a per-call timeout and default headers.

Pattern: Factory pattern for creating configured HTTP clients
"""

from typing import Optional

import httpx


# =============================================================================
# Default Configuration Constants
# =============================================================================


DEFAULT_TIMEOUT_SECONDS: float = 30.0
"""Default timeout for HTTP requests in seconds."""

DEFAULT_MAX_CONNECTIONS: int = 10
"""Maximum number of connections in the pool."""

DEFAULT_MAX_KEEPALIVE: int = 5
"""Maximum number of keepalive connections."""

USER_AGENT: str = "cloze-mcp/0.1.0"


# =============================================================================
# HTTP Client Factory
# =============================================================================


def create_http_client(
    base_url: Optional[str] = None,
    timeout_seconds: Optional[float] = None,
    max_connections: Optional[int] = None,
    max_keepalive: Optional[int] = None,
    headers: Optional[dict[str, str]] = None,
) -> httpx.AsyncClient:
    """
    Create a configured HTTP client with connection pooling and timeouts.

    Failed requests are never retried: the transport is built with
    ``retries=0`` and every failure is surfaced to the caller.

    Args:
        base_url: Base URL for all requests (e.g., "https://api.cloze.com")
        timeout_seconds: Request timeout in seconds (default: 30.0)
        max_connections: Maximum connections in pool (default: 10)
        max_keepalive: Maximum keepalive connections (default: 5)
        headers: Additional headers to include in all requests

    Returns:
        httpx.AsyncClient: Configured async HTTP client

    Example:
        >>> client = create_http_client(
        ...     base_url="https://api.cloze.com",
        ...     timeout_seconds=10.0,
        ... )
        >>> async with client:
        ...     response = await client.get("/v1/user/profile")
    """
    timeout = timeout_seconds if timeout_seconds is not None else DEFAULT_TIMEOUT_SECONDS
    max_conn = max_connections if max_connections is not None else DEFAULT_MAX_CONNECTIONS
    max_keep = max_keepalive if max_keepalive is not None else DEFAULT_MAX_KEEPALIVE

    limits = httpx.Limits(
        max_connections=max_conn,
        max_keepalive_connections=max_keep,
    )

    timeout_config = httpx.Timeout(
        connect=timeout,
        read=timeout,
        write=timeout,
        pool=timeout,
    )

    default_headers = {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    if headers:
        default_headers.update(headers)

    transport = httpx.AsyncHTTPTransport(retries=0, limits=limits)

    return httpx.AsyncClient(
        base_url=base_url or "",
        timeout=timeout_config,
        headers=default_headers,
        transport=transport,
    )
