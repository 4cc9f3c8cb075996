"""
Payload models for the Ollama API.

These models describe what the client sends to (and receives from) Ollama.
They only constrain value ranges; request routing and protocol framing
live outside this package.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field

from ollama_tools.models.enums import MessageRole


class GenerationOptions(BaseModel):
    """
    Sampling options forwarded to Ollama as the ``options`` object.

    Unset fields are omitted from the payload so the model's own defaults
    apply.
    """
    model_config = ConfigDict(frozen=True)

    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0, description="Sampling temperature")
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0, description="Nucleus sampling parameter")
    top_k: Optional[int] = Field(default=None, ge=0, description="Top-k sampling parameter")
    num_predict: Optional[int] = Field(default=None, gt=0, description="Maximum tokens to generate")
    repeat_penalty: Optional[float] = Field(default=None, ge=0.0, description="Repetition penalty")
    seed: Optional[int] = Field(default=None, description="Random seed for reproducibility")
    stop: Optional[list[str]] = Field(default=None, description="Stop sequences")

    def to_payload(self) -> Dict[str, Any]:
        """Options dict with unset fields dropped."""
        return self.model_dump(exclude_none=True)


class ToolCallFunction(BaseModel):
    """Function invocation requested by the model."""

    name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


class ToolCall(BaseModel):
    """Tool call made by the model in a chat response."""

    function: ToolCallFunction


class ToolFunction(BaseModel):
    """Function signature advertised to the model."""

    name: Optional[str] = None
    description: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = Field(
        default=None,
        description="JSON Schema object describing the function arguments"
    )


class ToolDefinition(BaseModel):
    """Tool definition for function calling."""

    type: str = "function"
    function: ToolFunction


class ChatMessage(BaseModel):
    """Single message in a chat conversation."""

    role: MessageRole
    content: str
    images: Optional[list[str]] = Field(default=None, description="Base64-encoded images")
    tool_calls: Optional[list[ToolCall]] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)

