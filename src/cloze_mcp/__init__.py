"""Cloze MCP - Model Context Protocol server for the Cloze CRM API.

Run with ``cloze-mcp`` or ``python -m cloze_mcp`` (requires CLOZE_API_KEY).
"""

__version__ = "0.1.0"

__all__ = ["clients", "core", "models", "observability", "tools", "server", "main"]
