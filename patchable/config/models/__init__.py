"""Configuration model exports.

    from patchable.config.models import EngineConfig, APIConfig
"""

from patchable.config.models.api import APIConfig
from patchable.config.models.engine import EngineConfig
from patchable.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)

__all__ = [
    "APIConfig",
    "EngineConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
]
