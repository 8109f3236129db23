"""
Prometheus metrics collection.
"""

from prometheus_client import Counter, Gauge, Histogram

# ============================================================
# HTTP Metrics
# ============================================================

http_requests_total = Counter(
    "etherstake_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "etherstake_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

http_requests_in_progress = Gauge(
    "etherstake_http_requests_in_progress",
    "HTTP requests currently being served",
    ["method"],
)

http_errors_total = Counter(
    "etherstake_http_errors_total",
    "Total HTTP errors",
    ["method", "endpoint", "error_type"],
)

# ============================================================
# Rate Limiting Metrics
# ============================================================

rate_limit_rejections_total = Counter(
    "etherstake_rate_limit_rejections_total",
    "Requests rejected by the rate limiter",
    ["identifier_type"],
)

# ============================================================
# Business Metrics
# ============================================================

stake_transitions_total = Counter(
    "etherstake_stake_transitions_total",
    "Stake lifecycle transitions",
    ["transition"],
)

auth_attempts_total = Counter(
    "etherstake_auth_attempts_total",
    "Authentication attempts",
    ["outcome"],
)
