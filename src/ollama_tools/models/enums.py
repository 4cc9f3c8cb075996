"""
Enumerations for ollama-tools data models.

All enums are closed taxonomies - no values outside these sets are permitted.
"""

from enum import Enum


class ResponseFormat(str, Enum):
    """
    Output format for rendered tool responses.

    JSON is meant for machine consumption, MARKDOWN for humans.
    """

    MARKDOWN = "markdown"
    JSON = "json"


class MessageRole(str, Enum):
    """Author of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
