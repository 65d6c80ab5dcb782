"""
Tests for structured logging helpers.
"""

import logging
from unittest.mock import Mock, patch

import pytest
import structlog
from structlog.testing import capture_logs

from services.spanish_id.log_config import (
    configure_logging,
    get_logger,
    log_validation_batch,
)


class TestLogValidationBatch:
    """Test batch summary logging."""

    def test_successful_batch(self):
        with capture_logs() as logs:
            log_validation_batch(structlog.get_logger(), "batch_1", items_valid=3)

        assert logs[0]["log_level"] == "info"
        assert logs[0]["items_processed"] == 3
        assert logs[0]["success_rate"] == 100.0

    def test_batch_with_invalid_identifiers(self):
        with capture_logs() as logs:
            log_validation_batch(
                structlog.get_logger(),
                "batch_2",
                items_valid=1,
                items_invalid=3,
                duration_ms=12.3456,
                strict=True,
            )

        entry = logs[0]
        assert entry["log_level"] == "warning"
        assert entry["items_invalid"] == 3
        assert entry["success_rate"] == 25.0
        assert entry["duration_ms"] == 12.35
        assert entry["strict"] is True

    def test_empty_batch(self):
        with capture_logs() as logs:
            log_validation_batch(structlog.get_logger(), "batch_3", items_valid=0)

        assert logs[0]["success_rate"] == 0


def test_get_logger_returns_bindable_logger():
    logger = get_logger("spanish_id.tests")
    assert logger.bind(batch_id="x") is not None


class TestConfigureLogging:
    """Test structlog and stdlib configuration."""

    def test_level_override_applies_to_root_logger(self):
        configure_logging(log_level="WARNING", log_format="json")
        assert logging.getLogger().level == logging.WARNING

        configure_logging(log_level="DEBUG", log_format="json")
        assert logging.getLogger().level == logging.DEBUG

    @pytest.mark.parametrize(
        "production,colors",
        [(True, False), (False, True)],
        ids=["production_plain", "development_colored"],
    )
    def test_console_colors_follow_environment(self, production, colors):
        config = Mock(
            log_level="INFO",
            log_format="text",
            service_name="spanish-id",
            environment="production" if production else "development",
        )
        config.is_production.return_value = production

        with patch("services.spanish_id.log_config.settings", return_value=config), \
                patch("structlog.dev.ConsoleRenderer") as renderer:
            configure_logging()

        renderer.assert_called_once_with(colors=colors)
