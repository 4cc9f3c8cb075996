"""
Pydantic data models for ollama-tools.

Includes:
- Enums (ResponseFormat, MessageRole)
- Ollama payload models (GenerationOptions, ChatMessage, ToolDefinition, ToolCall)
"""

from ollama_tools.models.enums import MessageRole, ResponseFormat
from ollama_tools.models.ollama_models import (
    ChatMessage,
    GenerationOptions,
    ToolCall,
    ToolCallFunction,
    ToolDefinition,
    ToolFunction,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "MessageRole",
    # Ollama payloads
    "GenerationOptions",
    "ChatMessage",
    "ToolCall",
    "ToolCallFunction",
    "ToolDefinition",
    "ToolFunction",
]
