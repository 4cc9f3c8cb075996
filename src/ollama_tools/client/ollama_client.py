"""
Ollama client for the local API and the Ollama Cloud web API.

Communicates with Ollama using httpx AsyncClient. Supports:
- Model management (list, show, ps, pull, push, create, copy, delete)
- Generation (generate, chat, embed), always non-streaming
- Web search / web fetch through the Ollama Cloud API (Bearer auth)

Every failure is raised as an AttemptError subclass so callers can hand
these coroutines straight to RetryEngine:
- non-2xx status -> HttpStatusError (with the raw Retry-After header)
- httpx timeout -> AttemptTimeoutError
- connection / DNS / undecodable body -> TransportError

The client itself never retries.
"""

import json
import time
from typing import Any, Dict, Optional
import httpx
import structlog

from ollama_tools.client.exceptions import MissingAPIKeyError, ModelNotFoundError
from ollama_tools.models.ollama_models import ChatMessage, GenerationOptions, ToolDefinition
from ollama_tools.monitoring.metrics import http_request_latency_seconds, http_requests_total
from ollama_tools.retry.exceptions import AttemptTimeoutError, HttpStatusError, TransportError


logger = structlog.get_logger(__name__)


class OllamaClient:
    """
    Async HTTP client for Ollama.

    API Endpoints (local):
    - GET /api/tags, GET /api/ps
    - POST /api/show, /api/generate, /api/chat, /api/embed
    - POST /api/pull, /api/push, /api/create, /api/copy
    - DELETE /api/delete

    API Endpoints (cloud, require api_key):
    - POST /api/web_search, /api/web_fetch
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:11434",
        timeout: float = 60.0,
        api_key: Optional[str] = None,
        web_api_url: str = "https://ollama.com",
        connection_limits: Optional[httpx.Limits] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Ollama client.

        Args:
            base_url: Local Ollama server URL
            timeout: httpx transport timeout in seconds
            api_key: Ollama Cloud API key (web search / web fetch only)
            web_api_url: Ollama Cloud base URL
            connection_limits: httpx connection pool limits
            transport: Custom httpx transport (tests, proxies)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.api_key = api_key
        self.web_api_url = web_api_url.rstrip("/")

        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0
            )

        self._client: Optional[httpx.AsyncClient] = None
        self._connection_limits = connection_limits
        self._transport = transport

        logger.info(
            "Ollama client initialized",
            base_url=self.base_url,
            web_api_url=self.web_api_url,
            timeout=timeout,
            has_api_key=bool(api_key),
        )

    @classmethod
    def from_settings(cls, settings) -> "OllamaClient":
        """Build a client from application Settings."""
        return cls(
            base_url=settings.OLLAMA_HOST,
            timeout=settings.OLLAMA_TIMEOUT,
            api_key=settings.OLLAMA_API_KEY,
            web_api_url=settings.OLLAMA_WEB_API_URL,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                limits=self._connection_limits,
                transport=self._transport,
                follow_redirects=True
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        *,
        payload: Optional[Dict[str, Any]] = None,
        operation: str,
        model: Optional[str] = None,
        web: bool = False,
    ) -> Any:
        """
        Send one request and decode the JSON body.

        Args:
            method: HTTP method
            path: API path (e.g., /api/tags)
            payload: JSON body
            operation: Human-readable name used in error messages
            model: Model name for 404 -> ModelNotFoundError mapping
            web: Send to the cloud web API with Bearer auth

        Returns:
            Decoded JSON body ({} for an empty body)
        """
        headers = {}
        url = path
        if web:
            if not self.api_key:
                raise MissingAPIKeyError(
                    f"OLLAMA_API_KEY environment variable is required for {operation}"
                )
            headers["Authorization"] = f"Bearer {self.api_key}"
            url = f"{self.web_api_url}{path}"

        client = await self._get_client()
        start_time = time.monotonic()

        try:
            response = await client.request(method, url, json=payload, headers=headers)
        except httpx.TimeoutException as e:
            http_requests_total.labels(endpoint=path, outcome="timeout").inc()
            logger.warning("Ollama request timeout", endpoint=path, timeout=self.timeout, error=str(e))
            raise AttemptTimeoutError(
                f"{operation} timed out after {self.timeout}s",
                timeout=self.timeout,
                details={"endpoint": path},
            ) from e
        except httpx.HTTPError as e:
            http_requests_total.labels(endpoint=path, outcome="transport_error").inc()
            logger.warning(
                "Ollama network error",
                endpoint=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise TransportError(
                f"{operation} failed: {e}",
                details={"endpoint": path, "error_type": type(e).__name__},
            ) from e
        finally:
            http_request_latency_seconds.labels(endpoint=path).observe(
                time.monotonic() - start_time
            )

        if response.is_error:
            http_requests_total.labels(endpoint=path, outcome="http_error").inc()
            status_code = response.status_code
            logger.warning(
                "Ollama HTTP error",
                endpoint=path,
                status_code=status_code,
                retry_after=response.headers.get("Retry-After"),
            )
            if status_code == 404 and model is not None:
                raise ModelNotFoundError(model, details={"endpoint": path})
            raise HttpStatusError(
                f"{operation} failed: {status_code} {response.reason_phrase}",
                status=status_code,
                retry_after=response.headers.get("Retry-After"),
                details={"endpoint": path, "error": response.text[:500]},
            )

        http_requests_total.labels(endpoint=path, outcome="success").inc()

        if not response.content:
            return {}
        try:
            return response.json()
        except json.JSONDecodeError as e:
            logger.error("Failed to parse Ollama response JSON", endpoint=path, error=str(e))
            raise TransportError(
                f"{operation} returned invalid JSON",
                details={"endpoint": path, "parse_error": str(e)},
            ) from e

    # === Model management ===

    async def list_models(self) -> Dict[str, Any]:
        """List local models via GET /api/tags."""
        return await self._request("GET", "/api/tags", operation="List models")

    async def show(self, model: str) -> Dict[str, Any]:
        """Model details (modelfile, parameters, template) via POST /api/show."""
        return await self._request(
            "POST", "/api/show", payload={"model": model}, operation="Show model", model=model
        )

    async def ps(self) -> Dict[str, Any]:
        """Models currently loaded in memory via GET /api/ps."""
        return await self._request("GET", "/api/ps", operation="List running models")

    async def pull(self, model: str, insecure: bool = False) -> Dict[str, Any]:
        return await self._request(
            "POST",
            "/api/pull",
            payload={"model": model, "insecure": insecure, "stream": False},
            operation="Pull model",
            model=model,
        )

    async def push(self, model: str, insecure: bool = False) -> Dict[str, Any]:
        return await self._request(
            "POST",
            "/api/push",
            payload={"model": model, "insecure": insecure, "stream": False},
            operation="Push model",
            model=model,
        )

    async def create(
        self,
        model: str,
        from_model: str,
        system: Optional[str] = None,
        template: Optional[str] = None,
        license: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create a model derived from ``from_model`` via POST /api/create."""
        payload: Dict[str, Any] = {"model": model, "from": from_model, "stream": False}
        if system is not None:
            payload["system"] = system
        if template is not None:
            payload["template"] = template
        if license is not None:
            payload["license"] = license
        return await self._request(
            "POST", "/api/create", payload=payload, operation="Create model", model=from_model
        )

    async def copy(self, source: str, destination: str) -> Dict[str, Any]:
        """Copy a model; Ollama answers with an empty body on success."""
        await self._request(
            "POST",
            "/api/copy",
            payload={"source": source, "destination": destination},
            operation="Copy model",
            model=source,
        )
        return {"status": "success"}

    async def delete(self, model: str) -> Dict[str, Any]:
        """Delete a model; Ollama answers with an empty body on success."""
        await self._request(
            "DELETE", "/api/delete", payload={"model": model}, operation="Delete model", model=model
        )
        return {"status": "success"}

    # === Generation ===

    async def generate(
        self,
        model: str,
        prompt: str,
        options: Optional[GenerationOptions] = None,
        format: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Generate a completion via POST /api/generate.

        Payload:
        {
            "model": "llama3.2",
            "prompt": "...",
            "stream": false,
            "format": "json",          # optional
            "options": {"temperature": 0.1, ...}
        }
        """
        payload: Dict[str, Any] = {"model": model, "prompt": prompt, "stream": False}
        if options is not None:
            payload["options"] = options.to_payload()
        if format is not None:
            payload["format"] = format

        logger.info(
            "Sending generation request to Ollama",
            model=model,
            prompt_length=len(prompt),
            format=format,
        )
        return await self._request(
            "POST", "/api/generate", payload=payload, operation="Generate", model=model
        )

    async def chat(
        self,
        model: str,
        messages: list[ChatMessage],
        options: Optional[GenerationOptions] = None,
        format: Optional[str] = None,
        tools: Optional[list[ToolDefinition]] = None,
    ) -> Dict[str, Any]:
        """Chat completion via POST /api/chat."""
        payload: Dict[str, Any] = {
            "model": model,
            "messages": [message.to_payload() for message in messages],
            "stream": False,
        }
        if options is not None:
            payload["options"] = options.to_payload()
        if format is not None:
            payload["format"] = format
        if tools:
            payload["tools"] = [tool.model_dump(exclude_none=True) for tool in tools]

        logger.info(
            "Sending chat request to Ollama",
            model=model,
            messages_count=len(messages),
            tools_count=len(tools or []),
            format=format,
        )
        return await self._request(
            "POST", "/api/chat", payload=payload, operation="Chat", model=model
        )

    async def embed(self, model: str, input: str | list[str]) -> Dict[str, Any]:
        """Embeddings for one or many inputs via POST /api/embed."""
        return await self._request(
            "POST",
            "/api/embed",
            payload={"model": model, "input": input},
            operation="Embed",
            model=model,
        )

    # === Web API ===

    async def web_search(self, query: str, max_results: int = 5) -> Dict[str, Any]:
        """Search the web via Ollama Cloud (POST /api/web_search)."""
        return await self._request(
            "POST",
            "/api/web_search",
            payload={"query": query, "max_results": max_results},
            operation="Web search",
            web=True,
        )

    async def web_fetch(self, url: str) -> Dict[str, Any]:
        """Fetch a page via Ollama Cloud (POST /api/web_fetch)."""
        return await self._request(
            "POST",
            "/api/web_fetch",
            payload={"url": url},
            operation="Web fetch",
            web=True,
        )

    # === Lifecycle ===

    async def health_check(self) -> bool:
        """
        Check Ollama server health via GET /api/tags.

        Returns True if server responds, False otherwise.
        """
        try:
            client = await self._get_client()
            response = await client.get("/api/tags", timeout=5.0)
            response.raise_for_status()
            logger.debug("Ollama health check passed")
            return True
        except httpx.HTTPError as e:
            logger.warning("Ollama health check failed", error=str(e))
            return False

    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed Ollama client connection")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"base_url={self.base_url}, "
            f"timeout={self.timeout}s)"
        )
