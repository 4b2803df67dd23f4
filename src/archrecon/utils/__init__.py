"""Utility modules: config loading and structured logging."""

from archrecon.utils.config import BuilderConfig, ConfigError, ConfigLoader, ModelConfig
from archrecon.utils.logging import StructuredLogger, get_logger

__all__ = [
    "BuilderConfig",
    "ConfigLoader",
    "ConfigError",
    "ModelConfig",
    "StructuredLogger",
    "get_logger",
]
