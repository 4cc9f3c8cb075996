"""Monitoring and metrics instrumentation for ollama-tools.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from ollama_tools.monitoring.metrics import (
    http_request_latency_seconds,
    http_requests_total,
    retries_total,
    retry_delay_seconds,
)

__all__ = [
    "retries_total",
    "retry_delay_seconds",
    "http_requests_total",
    "http_request_latency_seconds",
]
