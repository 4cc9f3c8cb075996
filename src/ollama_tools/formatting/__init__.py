"""
Response rendering (JSON / Markdown) for tool output.
"""

from ollama_tools.formatting.response_formatter import (
    array_to_markdown_table,
    format_response,
    json_to_markdown,
    render,
)

__all__ = [
    "render",
    "format_response",
    "json_to_markdown",
    "array_to_markdown_table",
]
