"""
Unit Tests for logging setup.

Test Aspects Covered:
    ✅ Business Logic: Logging section of the config applied to the package logger
    ✅ Integration: create_pipeline applies it, env override included
"""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

from directory_pager.config.loader import ConfigLoader
from directory_pager.config.logging_setup import (
    configure_logging,
    configure_logging_from,
)
from directory_pager.config.models import ServiceConfig
from directory_pager.pipeline.factory import create_pipeline


def package_level() -> int:
    return logging.getLogger("directory_pager").level


class TestConfigureLogging:
    """Test cases for configure_logging."""

    def test_accepts_level_name(self) -> None:
        # Act
        configure_logging("debug")

        # Assert
        assert package_level() == logging.DEBUG

    def test_applies_config_section(self) -> None:
        """
        SCENARIO: Config with logging level WARNING
        EXPECTED: Package logger set to WARNING
        """
        # Arrange
        config = ServiceConfig.model_validate({"logging": {"level": "WARNING"}})

        # Act
        configure_logging_from(config)

        # Assert
        assert package_level() == logging.WARNING


class TestCreatePipelineLogging:
    """The factory applies the logging section."""

    def test_env_log_level_reaches_package_logger(self) -> None:
        """
        SCENARIO: DIRECTORY_PAGER_LOG_LEVEL=DEBUG, pipeline built from config
        EXPECTED: directory_pager logs at DEBUG
        """
        # Arrange
        loader = ConfigLoader(
            environ={
                "DIRECTORY_PAGER_LOG_LEVEL": "DEBUG",
                "COGNITO_USER_POOL_ID": "eu-west-1_Pool",
            }
        )
        config = loader.load_from_dict({})
        logging.getLogger("directory_pager").setLevel(logging.WARNING)

        # Act
        create_pipeline(config, session=MagicMock())

        # Assert
        assert config.logging.level == "DEBUG"
        assert logging.getLogger("directory_pager").getEffectiveLevel() == logging.DEBUG
