"""
Prometheus metrics collection.
"""

from prometheus_client import Counter, Gauge, Histogram

# ============================================================
# HTTP Metrics
# ============================================================

http_requests_total = Counter(
    "greffier_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "greffier_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0),
)

http_errors_total = Counter(
    "greffier_http_errors_total",
    "Total HTTP errors",
    ["method", "endpoint", "error_type"],
)

# ============================================================
# RPC Failover Metrics
# ============================================================

rpc_attempts_total = Counter(
    "greffier_rpc_attempts_total",
    "Chain client attempts by outcome (success, info, transient)",
    ["network", "operation", "outcome"],
)

rpc_sweeps_total = Counter(
    "greffier_rpc_sweeps_total",
    "Retry sweeps by outcome (success, info, exhausted)",
    ["network", "operation", "outcome"],
)

rpc_sticky_index = Gauge(
    "greffier_rpc_sticky_index",
    "Endpoint index the next sweep starts from",
    ["network"],
)

# ============================================================
# Bridge Proxy Metrics
# ============================================================

bridge_requests_total = Counter(
    "greffier_bridge_requests_total",
    "zkEVM bridge API calls by outcome",
    ["network", "endpoint", "outcome"],
)
