"""
Response rendering for tool output.

Turns a JSON payload into either canonical JSON text or a Markdown document:

- Arrays of objects become aligned tables (column set = union of keys)
- Other arrays become bulleted lists
- Objects become ``**key:** value`` lines, nesting by indentation
- Empty containers render as explicit markers so they never look omitted

Rendering never raises: malformed input degrades to a wrapped or raw
representation.
"""

import json
from typing import Any

import structlog

from ollama_tools.models.enums import ResponseFormat

logger = structlog.get_logger(__name__)

INDENT = "  "
NULL_MARKER = "_null_"
EMPTY_ARRAY_MARKER = "_empty array_"
EMPTY_OBJECT_MARKER = "_empty object_"
INVALID_JSON_ERROR = "Invalid JSON content"

# Narrowest column markdown renderers accept for a delimiter row
_MIN_COLUMN_WIDTH = 3


def render(value: Any, fmt: ResponseFormat) -> str:
    """
    Render a payload as JSON or Markdown.

    A ``str`` value is treated as raw payload text and parsed as JSON first;
    any other value is taken as already-decoded JSON data.

    Args:
        value: Payload text or decoded JSON value
        fmt: Target format

    Returns:
        Rendered text (never raises)
    """
    if isinstance(value, str):
        try:
            data = json.loads(value, parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            if fmt == ResponseFormat.JSON:
                return _invalid_json(value)
            return value
    else:
        data = value

    if fmt == ResponseFormat.JSON:
        try:
            return json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError, RecursionError) as e:
            logger.warning("Payload is not JSON serializable", error=type(e).__name__)
            return _invalid_json(_raw_text(value))

    try:
        return json_to_markdown(data)
    except RecursionError:
        logger.warning("Payload nested too deeply for markdown rendering")
        return _raw_text(value)


def format_response(content: str, fmt: ResponseFormat) -> str:
    """
    Format raw response text for the requested output format.

    JSON output re-serializes valid JSON and wraps anything else in an error
    object; Markdown output converts valid JSON and passes other text through.
    """
    return render(content, fmt)


def json_to_markdown(data: Any, indent: str = "") -> str:
    """
    Convert decoded JSON data to Markdown.

    Arrays whose elements are all objects render as a table. An array made
    only of empty objects has no columns and renders as a bulleted list of
    empty-object markers instead.

    Args:
        data: Decoded JSON value
        indent: Prefix applied to every emitted line
    """
    if data is None:
        return f"{indent}{NULL_MARKER}"

    if isinstance(data, (list, tuple)):
        if not data:
            return f"{indent}{EMPTY_ARRAY_MARKER}"
        if all(isinstance(item, dict) for item in data) and any(data):
            return array_to_markdown_table(data, indent)
        return "\n".join(_list_item(item, indent) for item in data)

    if isinstance(data, dict):
        if not data:
            return f"{indent}{EMPTY_OBJECT_MARKER}"
        return "\n".join(_object_entry(key, value, indent) for key, value in data.items())

    return f"{indent}{_scalar(data)}"


def array_to_markdown_table(rows: list[dict], indent: str = "") -> str:
    """
    Render a list of objects as an aligned Markdown table.

    Columns are the union of keys across all rows in first-seen order.
    Missing keys and nulls render as empty cells; nested values are inlined
    as compact JSON.
    """
    columns = list(dict.fromkeys(key for row in rows for key in row))
    header = [_label(column) for column in columns]
    body = [[_cell(row.get(column)) for column in columns] for row in rows]

    widths = [
        max(_MIN_COLUMN_WIDTH, len(header[i]), *(len(cells[i]) for cells in body))
        for i in range(len(columns))
    ]

    lines = [
        _table_line(header, widths),
        _table_line(["-" * width for width in widths], widths),
    ]
    lines.extend(_table_line(cells, widths) for cells in body)

    return "\n".join(f"{indent}{line}" for line in lines)


def _table_line(cells: list[str], widths: list[int]) -> str:
    padded = [cell.ljust(width) for cell, width in zip(cells, widths)]
    return "| " + " | ".join(padded) + " |"


def _list_item(item: Any, indent: str) -> str:
    if _is_nested(item):
        return f"{indent}-\n{json_to_markdown(item, indent + INDENT)}"
    return f"{indent}- {json_to_markdown(item)}"


def _object_entry(key: Any, value: Any, indent: str) -> str:
    label = _label(key)
    if _is_nested(value):
        return f"{indent}**{label}:**\n{json_to_markdown(value, indent + INDENT)}"
    return f"{indent}**{label}:** {json_to_markdown(value)}"


def _is_nested(value: Any) -> bool:
    """Non-empty containers get their own indented block."""
    return isinstance(value, (dict, list, tuple)) and len(value) > 0


def _label(key: Any) -> str:
    return str(key).replace("_", " ")


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _cell(value: Any) -> str:
    if value is None:
        text = ""
    elif isinstance(value, (dict, list, tuple)):
        text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    else:
        text = _scalar(value)
    return text.replace("|", "\\|").replace("\r\n", " ").replace("\n", " ")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def _raw_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    try:
        return repr(value)
    except RecursionError:
        return f"<{type(value).__name__} nested too deeply to display>"


def _invalid_json(raw: str) -> str:
    return json.dumps({"error": INVALID_JSON_ERROR, "raw_content": raw}, ensure_ascii=False)
