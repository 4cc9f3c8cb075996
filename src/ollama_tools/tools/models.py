"""
Model management tools.

Each tool calls the Ollama client once and renders the payload in the
requested format. No retries: the local API is either up or it is not.
"""

from typing import Optional

from ollama_tools.client.ollama_client import OllamaClient
from ollama_tools.formatting.response_formatter import render
from ollama_tools.models.enums import ResponseFormat


async def list_models(client: OllamaClient, fmt: ResponseFormat) -> str:
    """List all locally available models."""
    return render(await client.list_models(), fmt)


async def show_model(client: OllamaClient, model: str, fmt: ResponseFormat) -> str:
    """Show details of a single model."""
    return render(await client.show(model), fmt)


async def list_running_models(client: OllamaClient, fmt: ResponseFormat) -> str:
    """List models currently loaded in memory."""
    return render(await client.ps(), fmt)


async def pull_model(
    client: OllamaClient, model: str, insecure: bool, fmt: ResponseFormat
) -> str:
    """Pull a model from the registry."""
    return render(await client.pull(model, insecure=insecure), fmt)


async def push_model(
    client: OllamaClient, model: str, insecure: bool, fmt: ResponseFormat
) -> str:
    """Push a model to the registry."""
    return render(await client.push(model, insecure=insecure), fmt)


async def create_model(
    client: OllamaClient,
    model: str,
    from_model: str,
    fmt: ResponseFormat,
    system: Optional[str] = None,
    template: Optional[str] = None,
    license: Optional[str] = None,
) -> str:
    """Create a model derived from an existing one."""
    response = await client.create(
        model, from_model, system=system, template=template, license=license
    )
    return render(response, fmt)


async def copy_model(
    client: OllamaClient, source: str, destination: str, fmt: ResponseFormat
) -> str:
    return render(await client.copy(source, destination), fmt)


async def delete_model(client: OllamaClient, model: str, fmt: ResponseFormat) -> str:
    return render(await client.delete(model), fmt)
