"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - ServiceConfig: Root configuration object
    - DirectoryConfig: User pool id, region, batch size, retry settings
    - LoggingConfig: Log level and format

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles merged over the base file
    - Environment variable overrides (COGNITO_USER_POOL_ID, AWS_REGION,
      DIRECTORY_PAGER_LOG_LEVEL)
"""

from directory_pager.config.loader import ConfigLoader, load_config
from directory_pager.config.logging_setup import (
    configure_logging,
    configure_logging_from,
)
from directory_pager.config.models import (
    DirectoryConfig,
    LoggingConfig,
    RetrySettings,
    ServiceConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "configure_logging",
    "configure_logging_from",
    "DirectoryConfig",
    "LoggingConfig",
    "RetrySettings",
    "ServiceConfig",
]
