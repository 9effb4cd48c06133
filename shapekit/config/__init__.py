"""Configuration loading.

- YAML-first shape catalogs (see configs/shapes.yaml)
- Strict ${ENV_VAR} expansion (missing/empty env vars are errors)
"""

from __future__ import annotations

from shapekit.config.loader import (
    AppConfig,
    LoggingConfig,
    apply_logging_config,
    load_config,
    load_shapes,
)
from shapekit.core.errors import ConfigError

__all__ = [
    "AppConfig",
    "ConfigError",
    "LoggingConfig",
    "apply_logging_config",
    "load_config",
    "load_shapes",
]
