"""
Shared utility functions for Strava MCP server.

JSON rendering and argument validation used across tool modules.
"""

import json
from typing import Any, Iterable, Optional

from strava_mcp.sdk.types import MAX_PER_PAGE


def to_json(data: Any) -> str:
    """Render an API result the way every tool returns it."""
    return json.dumps(data, indent=2)


def validate_choice(value: Optional[str], choices: Iterable[str], name: str) -> Optional[str]:
    """Check an optional enum-like argument.

    Args:
        value: Argument value (None passes through)
        choices: Allowed values
        name: Argument name for the error message

    Returns:
        The value unchanged

    Raises:
        ValueError: If value is set and not one of choices
    """
    choices = tuple(choices)
    if value is not None and value not in choices:
        raise ValueError(
            f"Invalid {name} '{value}'. Must be one of: {', '.join(choices)}"
        )
    return value


def cap_per_page(per_page: Optional[int]) -> Optional[int]:
    """Clamp per_page to Strava's maximum page size."""
    if per_page is None:
        return None
    return min(per_page, MAX_PER_PAGE)


def drop_nones(d: dict) -> dict:
    """Remove keys whose value is None (unset optional tool arguments)."""
    return {k: v for k, v in d.items() if v is not None}
