"""Tests for logging configuration"""
import tempfile
import os
import logging
import subprocess
import sys
from pathlib import Path
from unittest.mock import Mock, patch

import structlog

from config import Config
from logging_config import (
    setup_structured_logging,
    get_logger,
    log_probe_result,
    log_error
)

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class TestLoggingConfig:
    """Test logging configuration and structured logging"""

    def test_setup_structured_logging(self):
        """Test structured logging setup"""
        with tempfile.TemporaryDirectory() as tmp_dir:
            log_file = Path(tmp_dir) / "logs" / "test.log"

            config = Config(log_file=log_file, log_level="DEBUG")
            setup_structured_logging(config)

            assert log_file.parent.exists()
            logger = logging.getLogger("test")
            assert logger.isEnabledFor(logging.DEBUG)

            logging.getLogger().handlers.clear()

    def test_setup_without_log_file(self):
        """Test console-only logging when no file is configured"""
        setup_structured_logging(Config(log_level="WARNING"))

        root = logging.getLogger()
        assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
        assert root.level == logging.WARNING

    def test_get_logger(self):
        """Test getting structured logger"""
        logger = get_logger("test_logger")

        assert logger is not None
        assert hasattr(logger, 'info')
        assert hasattr(logger, 'error')
        assert hasattr(logger, 'debug')
        assert hasattr(logger, 'warning')

    def test_log_probe_result(self):
        """Test structured probe result logging"""
        logger = Mock()

        log_probe_result(logger, {"remove", "add"}, 16)

        logger.info.assert_called_once()
        kwargs = logger.info.call_args.kwargs
        assert kwargs["mutating_operations"] == ["add", "remove"]
        assert kwargs["attempts"] == 16
        assert kwargs["immutable"] is False
        assert kwargs["event_type"] == "probe_result"

    def test_log_probe_result_immutable(self):
        """Test an empty result is logged as immutable"""
        logger = Mock()

        log_probe_result(logger, frozenset(), 3)

        assert logger.info.call_args.kwargs["immutable"] is True

    def test_log_error(self):
        """Test structured error logging"""
        logger = Mock()
        error = ValueError("Test error")

        log_error(logger, error, {"operation": "add"})
        log_error(logger, error)

        first, second = logger.error.call_args_list
        assert first.kwargs["error_type"] == "ValueError"
        assert first.kwargs["context"] == {"operation": "add"}
        assert second.kwargs["context"] == {}

    def test_development_vs_production_logging(self):
        """Test different logging configurations for development vs production"""
        config = Config(log_level="WARNING")

        with patch.dict(os.environ, {"ENVIRONMENT": "development"}):
            setup_structured_logging(config)
            get_logger("test").warning("Test development log")

        with patch.dict(os.environ, {"ENVIRONMENT": "production"}):
            setup_structured_logging(config)
            get_logger("test").warning("Test production log")

    def test_logger_context_binding(self):
        """Test logger context binding"""
        logger = get_logger("test")

        bound_logger = logger.bind(capability="list", target_type="list")
        bound_logger.info("Test message with context")

        more_bound = bound_logger.bind(operation="add")
        more_bound.info("Test message with more context")

    def test_unconfigured_logger_uses_stdlib(self):
        """Test loggers route through stdlib logging before setup runs"""
        structlog.reset_defaults()
        try:
            get_logger("probe.finder")

            config = structlog.get_config()
            assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)
            assert structlog.stdlib.filter_by_level in config["processors"]
        finally:
            structlog.reset_defaults()

    def test_detect_silent_without_logging_setup(self):
        """Test detection writes nothing when the host never configures logging"""
        result = subprocess.run(
            [sys.executable, "-c", "from probe import detect; detect(['a', 'b'])"],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            check=True,
        )

        assert result.stdout == ""
        assert result.stderr == ""
