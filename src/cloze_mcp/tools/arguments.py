"""
Argument normalization for tool calls.

Three concerns live here:
- sanitize_malformed_arguments(): recovery from one known-broken argument
  encoding produced by some MCP callers
- validate_arguments(): required/type checks against a tool's JSON Schema
- clamp_limit() / clamp_page_size(): numeric defaulting and ceilings
"""

import json
from typing import Any, Mapping, Optional

from cloze_mcp.core.exceptions import InvalidArgumentError
from cloze_mcp.models.domain import ToolDefinition
from cloze_mcp.observability.logging import get_logger

logger = get_logger(__name__)


_TYPE_MAP: dict[str, type | tuple[type, ...]] = {
    "string": str,
    "integer": int,
    "number": (int, float),
    "boolean": bool,
    "array": list,
    "object": dict,
}


# =============================================================================
# Malformed Encoding Sanitizer
# =============================================================================


def sanitize_malformed_arguments(raw: Mapping[str, Any]) -> dict[str, Any]:
    """
    Repair argument mappings that arrive split on ':' boundaries.

    Some callers serialize ``{"query": "acme", "limit": 5}`` as
    ``{'{"query"': '"acme"', '"limit"': '5}'}``. When the first key starts
    with ``{`` the pairs are rejoined as ``key:value`` with commas and
    re-parsed as JSON. Anything that does not parse to a JSON object is
    passed through unchanged.

    This is a workaround for a caller-side defect, not a JSON repair
    algorithm; delete it once callers send well-formed arguments.

    Args:
        raw: The argument mapping as received.

    Returns:
        The repaired mapping, or a copy of ``raw`` if no repair applies.
    """
    keys = list(raw.keys())
    if not keys or not str(keys[0]).startswith("{"):
        return dict(raw)

    rebuilt = ",".join(
        f"{key}:{value if isinstance(value, str) else json.dumps(value)}"
        for key, value in raw.items()
    )
    try:
        repaired = json.loads(rebuilt)
    except ValueError:
        logger.warning("malformed_arguments_unrecoverable", keys=keys)
        return dict(raw)

    if not isinstance(repaired, dict):
        logger.warning("malformed_arguments_unrecoverable", keys=keys)
        return dict(raw)

    logger.info("malformed_arguments_repaired", keys=sorted(repaired))
    return repaired


# =============================================================================
# Schema Validation
# =============================================================================


def is_missing(value: Any) -> bool:
    """True for absent, None, or empty-string argument values."""
    return value is None or value == ""


def _format_required(names: list[str]) -> str:
    quoted = [f"'{name}'" for name in names]
    if len(quoted) == 1:
        return f"{quoted[0]} is required"
    return f"{', '.join(quoted[:-1])} and {quoted[-1]} are required"


def require(
    arguments: Mapping[str, Any], *names: str, tool_name: Optional[str] = None
) -> None:
    """
    Fail unless every named argument is present and non-empty.

    Raises:
        InvalidArgumentError: e.g. "'style' and 'subject' are required".
    """
    missing = [name for name in names if is_missing(arguments.get(name))]
    if missing:
        raise InvalidArgumentError(
            _format_required(missing),
            tool_name=tool_name,
            field=missing[0] if len(missing) == 1 else None,
        )


def _check_type(value: Any, expected: str | list[str]) -> bool:
    """Check a value against a JSON Schema ``type`` (string or list)."""
    candidates = expected if isinstance(expected, list) else [expected]
    for candidate in candidates:
        python_type = _TYPE_MAP.get(candidate)
        if python_type is None:
            return True
        # bool is a subclass of int but not a JSON number
        if candidate in ("number", "integer") and isinstance(value, bool):
            continue
        if isinstance(value, python_type):
            return True
    return False


def validate_arguments(definition: ToolDefinition, arguments: Mapping[str, Any]) -> None:
    """
    Validate arguments against the tool's JSON Schema.

    Checks that required arguments are present and non-empty, and that
    declared properties carry values of their declared type. Null values
    are treated as absent; undeclared extra arguments are allowed.

    Args:
        definition: The tool being invoked.
        arguments: Arguments after sanitizing.

    Raises:
        InvalidArgumentError: If validation fails.
    """
    require(arguments, *definition.required, tool_name=definition.name)

    properties = definition.properties
    for name, value in arguments.items():
        if value is None or name not in properties:
            continue
        expected = properties[name].get("type")
        if expected and not _check_type(value, expected):
            raise InvalidArgumentError(
                f"Invalid type for '{name}': expected {expected}, "
                f"got {type(value).__name__}",
                tool_name=definition.name,
                field=name,
            )
        allowed = properties[name].get("enum")
        if allowed and value not in allowed:
            raise InvalidArgumentError(
                f"Invalid value for '{name}': expected one of {allowed}",
                tool_name=definition.name,
                field=name,
            )


# =============================================================================
# Numeric Normalization
# =============================================================================


def clamp_limit(value: Any, default: int, maximum: int) -> int:
    """
    Default a falsy limit and cap it at ``maximum``.

    Example:
        >>> clamp_limit(None, 10, 50), clamp_limit(200, 10, 50)
        (10, 50)
    """
    limit = int(value) if value else default
    return max(1, min(limit, maximum))


def clamp_page_size(value: Any, maximum: int) -> Optional[int]:
    """Cap a page size at ``maximum``, leaving an absent value absent."""
    if value is None:
        return None
    return max(1, min(int(value), maximum))
