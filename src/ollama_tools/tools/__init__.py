"""
Tool functions: call Ollama, render the payload.

Every tool takes an OllamaClient plus its arguments and a ResponseFormat,
and returns the rendered string. Errors propagate unchanged.
"""

from ollama_tools.tools.generation import chat_with_model, embed_with_model, generate_with_model
from ollama_tools.tools.models import (
    copy_model,
    create_model,
    delete_model,
    list_models,
    list_running_models,
    pull_model,
    push_model,
    show_model,
)
from ollama_tools.tools.web import web_fetch, web_search

__all__ = [
    "list_models",
    "show_model",
    "list_running_models",
    "pull_model",
    "push_model",
    "create_model",
    "copy_model",
    "delete_model",
    "generate_with_model",
    "chat_with_model",
    "embed_with_model",
    "web_search",
    "web_fetch",
]
