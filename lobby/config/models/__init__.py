"""Configuration model exports.

    from lobby.config.models import APIConfig, GatewayConfig
"""

from lobby.config.models.api import APIConfig
from lobby.config.models.dashboard import DashboardConfig
from lobby.config.models.gateway import FailurePolicy, GatewayConfig
from lobby.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)

__all__ = [
    "APIConfig",
    "DashboardConfig",
    "FailurePolicy",
    "GatewayConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
]
