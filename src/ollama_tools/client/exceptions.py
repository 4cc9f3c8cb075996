"""
Client-layer exceptions.

Network failures are raised as AttemptError subclasses (see
ollama_tools.retry.exceptions) so the retry engine can classify them; the
errors here add the Ollama-specific cases on top.
"""

from ollama_tools.exceptions import OllamaToolsError
from ollama_tools.retry.exceptions import HttpStatusError


class ModelNotFoundError(HttpStatusError):
    """
    Raised when Ollama answers 404 for a model-scoped request.

    Fatal for the retry engine (404 is not a transient status).
    """

    def __init__(self, model: str, details: dict | None = None):
        super().__init__(
            f"Model not found: {model}. Use list_models to see available models.",
            status=404,
            details=details,
        )
        self.model = model


class MissingAPIKeyError(OllamaToolsError):
    """
    Raised when a web API call is made without OLLAMA_API_KEY.

    Raised before any request is sent.
    """
    pass
