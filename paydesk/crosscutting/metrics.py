"""
Name: Prometheus Metrics

Responsibilities:
  - Define HTTP, auth and payroll metrics on a dedicated registry
  - Provide small, stable helpers to record events and durations
  - Keep cardinality low (no user ids, no emails, no raw paths)
  - Build the /metrics response

Collaborators:
  - crosscutting/middleware.py: HTTP latency and counts
  - application/usecases/auth: login outcomes
  - application/usecases/payroll: run outcomes and records written
"""

from __future__ import annotations

import re

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

_registry = CollectorRegistry()

_requests_total = Counter(
    "paydesk_requests_total",
    "Total HTTP requests",
    ["endpoint", "method", "status"],
    registry=_registry,
)

_request_latency = Histogram(
    "paydesk_request_latency_seconds",
    "HTTP request latency (seconds)",
    ["endpoint", "method"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
    registry=_registry,
)

_login_total = Counter(
    "paydesk_login_total",
    "Login attempts by outcome",
    ["outcome"],
    registry=_registry,
)

_payroll_runs_total = Counter(
    "paydesk_payroll_runs_total",
    "Payroll runs by outcome",
    ["outcome"],
    registry=_registry,
)

_payroll_records_written_total = Counter(
    "paydesk_payroll_records_written_total",
    "Payroll records persisted",
    registry=_registry,
)


def _normalize_endpoint(path: str) -> str:
    """Replace numeric ids with `{id}` to bound cardinality."""
    return re.sub(r"/\d+", "/{id}", path)


def _status_bucket(code: int) -> str:
    if 200 <= code < 300:
        return "2xx"
    if 400 <= code < 500:
        return "4xx"
    if 500 <= code < 600:
        return "5xx"
    return "other"


def record_request_metrics(
    endpoint: str,
    method: str,
    status_code: int,
    latency_seconds: float,
) -> None:
    """Record HTTP metrics (endpoint normalized, status bucketed)."""
    normalized = _normalize_endpoint(endpoint)
    _requests_total.labels(
        endpoint=normalized,
        method=method,
        status=_status_bucket(status_code),
    ).inc()
    _request_latency.labels(endpoint=normalized, method=method).observe(
        latency_seconds
    )


def record_login(outcome: str) -> None:
    _login_total.labels(outcome=outcome).inc()


def record_payroll_run(outcome: str, records_written: int = 0) -> None:
    _payroll_runs_total.labels(outcome=outcome).inc()
    if records_written:
        _payroll_records_written_total.inc(records_written)


def get_metrics_response() -> tuple[bytes, str]:
    """Body and content-type for /metrics."""
    return generate_latest(_registry), CONTENT_TYPE_LATEST
