"""Prometheus metrics for Lobby.

Tracks gateway configuration discovery and page rendering.
"""

from prometheus_client import Counter, Gauge, Histogram

# Gateway discovery metrics
GATEWAY_DOCUMENTS_READ = Counter(
    "lobby_gateway_documents_read_total",
    "Gateway configuration documents read and parsed",
)

GATEWAY_DOCUMENT_ERRORS = Counter(
    "lobby_gateway_document_errors_total",
    "Gateway configuration documents or directories that could not be used",
    labelnames=["error_type"],
)

ROUTES_DISCOVERED = Gauge(
    "lobby_routes_discovered",
    "Number of path-prefix routes found by the last discovery",
)

ROUTE_DISCOVERY_LATENCY = Histogram(
    "lobby_route_discovery_latency_seconds",
    "Time spent resolving the gateway configuration tree",
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

# Page metrics
PAGE_RENDERS = Counter(
    "lobby_page_renders_total",
    "Home pages rendered",
    labelnames=["mode"],
)
