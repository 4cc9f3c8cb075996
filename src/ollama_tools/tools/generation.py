"""
Generation tools (generate, chat, embed).

When JSON output is requested the model itself is asked for JSON
(``format: "json"``), so the rendered text is the model's own JSON rather
than an error wrapper around prose.
"""

from typing import Optional

import structlog

from ollama_tools.client.ollama_client import OllamaClient
from ollama_tools.formatting.response_formatter import format_response, render
from ollama_tools.models.enums import ResponseFormat
from ollama_tools.models.ollama_models import ChatMessage, GenerationOptions, ToolDefinition

logger = structlog.get_logger(__name__)


def _ollama_format(fmt: ResponseFormat) -> Optional[str]:
    return "json" if fmt == ResponseFormat.JSON else None


async def generate_with_model(
    client: OllamaClient,
    model: str,
    prompt: str,
    fmt: ResponseFormat,
    options: Optional[GenerationOptions] = None,
) -> str:
    """Generate a completion and render the model's text."""
    response = await client.generate(model, prompt, options=options, format=_ollama_format(fmt))
    return format_response(response.get("response") or "", fmt)


async def chat_with_model(
    client: OllamaClient,
    model: str,
    messages: list[ChatMessage],
    fmt: ResponseFormat,
    options: Optional[GenerationOptions] = None,
    tools: Optional[list[ToolDefinition]] = None,
) -> str:
    """
    Chat with a model and render its reply.

    If the model requested tool calls, both the content and the tool calls
    are rendered; otherwise only the message content.
    """
    response = await client.chat(
        model, messages, options=options, format=_ollama_format(fmt), tools=tools
    )

    message = response.get("message") or {}
    content = message.get("content") or ""
    tool_calls = message.get("tool_calls") or []

    if tool_calls:
        logger.debug("Chat response includes tool calls", model=model, tool_calls_count=len(tool_calls))
        return render({"content": content, "tool_calls": tool_calls}, fmt)

    return format_response(content, fmt)


async def embed_with_model(
    client: OllamaClient, model: str, input: str | list[str], fmt: ResponseFormat
) -> str:
    """Compute embeddings for one or many inputs."""
    return render(await client.embed(model, input), fmt)
