"""Tests for logging configuration"""
import logging
import os
import sys
from unittest.mock import patch

from config import Config
from logging_config import (
    setup_structured_logging,
    get_logger,
    log_scrape_completed,
    log_server_startup,
    log_error
)


class TestLoggingConfig:
    """Test logging configuration and structured logging"""

    def test_setup_structured_logging(self, tmp_path):
        """Test structured logging setup"""
        log_file = tmp_path / "logs" / "test.log"
        config = Config(log_file=log_file, log_level="DEBUG")

        setup_structured_logging(config)

        assert log_file.parent.exists()
        assert logging.getLogger("test").isEnabledFor(logging.DEBUG)

    def test_logs_go_to_stderr(self):
        """Test the console handler never writes to stdout"""
        setup_structured_logging(Config())

        streams = [
            handler.stream for handler in logging.getLogger().handlers
            if type(handler) is logging.StreamHandler
        ]
        assert streams == [sys.stderr]

    def test_log_level_applied(self):
        """Test the configured level filters lower records"""
        setup_structured_logging(Config(log_level="warning"))

        assert not logging.getLogger("test").isEnabledFor(logging.INFO)
        assert logging.getLogger("test").isEnabledFor(logging.WARNING)

    def test_file_output(self, tmp_path):
        """Test records reach the log file as JSON"""
        log_file = tmp_path / "exporter.log"
        with patch.dict(os.environ, {"ENVIRONMENT": "production"}):
            setup_structured_logging(Config(log_file=log_file))
            get_logger("test_file").info("File log entry", event_type="test")

        assert '"File log entry"' in log_file.read_text()

    def test_get_logger(self):
        """Test getting structured logger"""
        logger = get_logger("test_logger")

        assert logger is not None
        assert hasattr(logger, 'info')
        assert hasattr(logger, 'error')
        assert hasattr(logger, 'debug')
        assert hasattr(logger, 'warning')

    def test_log_scrape_completed(self):
        """Test structured scrape logging"""
        logger = get_logger("test")

        # This should not raise an exception
        log_scrape_completed(logger, samples_count=120, scrape_time=0.004)

    def test_log_server_startup(self):
        """Test structured server startup logging"""
        logger = get_logger("test")

        # This should not raise an exception
        log_server_startup(logger, Config(metrics_port=9100))

    def test_log_error(self):
        """Test structured error logging"""
        logger = get_logger("test")
        error = ValueError("Test error")

        # This should not raise an exception
        log_error(logger, error, {"component": "collector", "collector": "cpu"})
        log_error(logger, error)

    def test_development_vs_production_logging(self, tmp_path):
        """Test different logging configurations for development vs production"""
        config = Config(log_file=tmp_path / "test.log")

        with patch.dict(os.environ, {"ENVIRONMENT": "development"}):
            setup_structured_logging(config)
            get_logger("test").info("Test development log")

        with patch.dict(os.environ, {"ENVIRONMENT": "production"}):
            setup_structured_logging(config)
            get_logger("test").info("Test production log")

    def test_logger_context_binding(self):
        """Test logger context binding"""
        logger = get_logger("test")

        bound_logger = logger.bind(collector="cpu")
        bound_logger.info("Test message with context")
        bound_logger.bind(proc_root="/proc").info("Test message with more context")
