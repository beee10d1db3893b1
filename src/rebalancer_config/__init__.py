"""Application configuration management for the portfolio rebalancer."""

from .models import (
    AppConfig,
    EngineConfig,
    StorageConfig,
    PresentationConfig,
    LoggingConfig,
)
from .loader import load_config, get_config, reset_config

__all__ = [
    "AppConfig",
    "EngineConfig",
    "StorageConfig",
    "PresentationConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    "reset_config",
]
