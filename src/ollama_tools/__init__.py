"""
ollama-tools: resilient Ollama API calls with JSON / Markdown rendering.

- retry: timeout, error classification, jittered backoff, retry engine
- formatting: JSON and Markdown rendering of API payloads
- client: async httpx client for the local and cloud Ollama APIs
- tools: one function per Ollama operation, returning rendered text
"""

__version__ = "0.1.0"
