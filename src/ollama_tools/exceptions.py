"""
Root exception for the ollama-tools package.

Every error raised by this package derives from OllamaToolsError so callers
can catch anything coming out of the retry layer or the client with a single
except clause.
"""


class OllamaToolsError(Exception):
    """
    Base exception for all ollama-tools errors.

    Attributes:
        message: Human-readable error message
        details: Structured context for logging (never rendered to users)
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
