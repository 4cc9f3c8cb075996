"""Custom Prometheus metrics for ollama-tools.

These metrics live in the default prometheus_client registry; the host
process decides whether and where to expose them.
Alert rules should be configured for:
- retries_total (high retry rate indicates an unstable upstream)
- http_requests_total{outcome="http_error"} (high error rate)
"""

from prometheus_client import Counter, Histogram

# === Retry Metrics ===

retries_total = Counter(
    "ollama_tools_retries_total",
    "Total retries scheduled by the retry engine, by triggering HTTP status",
    ["status"],
)
"""
Retries counter by the HTTP status that triggered the retry.

Labels:
- status: 429, 500, 502, 503, 504

Alert thresholds:
- WARN: retry rate > 10% of total requests
- CRITICAL: any sustained 429 rate (upstream quota exhausted)
"""

retry_delay_seconds = Histogram(
    "ollama_tools_retry_delay_seconds",
    "Backoff delay chosen before each retry",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
)
"""
Backoff delay histogram.

Delays pinned at max_delay indicate the server is sending long Retry-After
hints.
"""

# === HTTP Metrics ===

http_requests_total = Counter(
    "ollama_tools_http_requests_total",
    "Total HTTP requests sent to Ollama by endpoint and outcome",
    ["endpoint", "outcome"],
)
"""
HTTP requests counter.

Labels:
- endpoint: API path (e.g., /api/tags, /api/web_search)
- outcome: success, http_error, timeout, transport_error
"""

http_request_latency_seconds = Histogram(
    "ollama_tools_http_request_latency_seconds",
    "HTTP request latency in seconds",
    ["endpoint"],
    buckets=[0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0, 120.0],
)
"""
HTTP request latency histogram.

Buckets cover fast metadata calls (tags, ps) up to long generations.

Alert thresholds:
- WARN: p95 > 30s on /api/web_search or /api/web_fetch
"""
