"""Configuration management for vectorpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Cursor origin, arc subdivision and flattening settings
- ProcessingConfig: Document processing settings
- LoggingConfig: Logging settings
- VectorPathSettings: Main application settings
"""

from vectorpath.config.settings import (
    GeometryConfig,
    LoggingConfig,
    ProcessingConfig,
    VectorPathSettings,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "VectorPathSettings",
    "get_default_settings",
]
