"""Human/JSON output helpers.

The CLI renders ServiceResult for humans (key/value text) or machines
(--json). The formatter layer adapts ServiceResult to the requested
output mode.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

if TYPE_CHECKING:
    from linkstore.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags taken from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _format_items_human(items: list[dict[str, Any]]) -> list[str]:
    return [f"  {item['user_id']}\t{item['link']}" for item in items]


def _format_data_human(data: dict[str, Any]) -> str:
    """Format result data as indented key-value pairs."""
    lines: list[str] = []
    for key, value in data.items():
        if key == "items" and isinstance(value, list):
            continue
        if isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_json.dumps(value, separators=(',', ':'))}")
        else:
            lines.append(f"  {key}: {value}")
    items = data.get("items")
    if isinstance(items, list):
        lines.extend(_format_items_human(items))
    return "\n".join(lines)


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult for display.

    JSON mode dumps the whole result. Quiet mode prints only the link
    column for listings and nothing else on success. Human mode prints
    ``OK: <op>`` followed by the payload.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        if settings.quiet:
            items = result.data.get("items")
            if isinstance(items, list):
                return "\n".join(str(item["link"]) for item in items)
            return ""
        parts = [f"OK: {result.op}"]
        if result.data:
            parts.append(_format_data_human(result.data))
        return "\n".join(parts)
    error = result.error
    if error is None:
        return f"ERROR: {result.op} - Unknown error"
    text = f"ERROR: {result.op} - {error.message}"
    if settings.verbose and error.detail:
        text += "\n" + _format_data_human(error.detail)
    return text
