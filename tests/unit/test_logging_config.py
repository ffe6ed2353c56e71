"""
Unit tests for structured logging configuration.
"""

import json
import logging
from pathlib import Path

from ocelot.logging_config import (
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    log_options_validated,
    set_correlation_id,
    setup_logging,
)


class TestLoggingConfiguration:
    """Test structured logging configuration functionality."""

    def test_setup_logging_default(self):
        setup_logging()

        logger = get_logger("test")
        assert hasattr(logger, 'info') and hasattr(logger, 'warning') and hasattr(logger, 'error')

    def test_setup_logging_with_level(self):
        setup_logging(level="DEBUG")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG

    def test_setup_logging_json_format(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        logger = get_logger("test_json")
        logger.info("test_message", key="value")

        log_lines = [line for line in log_file.read_text().strip().split("\n") if line]
        log_entry = json.loads(log_lines[0])
        assert log_entry["event"] == "test_message"
        assert log_entry["key"] == "value"
        assert log_entry["logger"] == "ocelot.test_json"
        assert "timestamp" in log_entry
        assert "level" in log_entry

    def test_setup_logging_human_format(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=False)

        logger = get_logger("test_human")
        logger.info("test_message", key="value")

        log_content = log_file.read_text()
        assert "test_message" in log_content
        assert "key" in log_content

    def test_module_names_are_not_prefixed_twice(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        get_logger("ocelot.config.loader").info("options_loaded")

        log_entry = json.loads(log_file.read_text().strip().split("\n")[0])
        assert log_entry["logger"] == "ocelot.config.loader"

    def test_correlation_id_management(self):
        assert get_correlation_id() is None

        correlation_id = set_correlation_id("test-correlation-id")
        assert correlation_id == "test-correlation-id"
        assert get_correlation_id() == "test-correlation-id"

        clear_correlation_id()
        assert get_correlation_id() is None

    def test_correlation_id_auto_generation(self):
        correlation_id = set_correlation_id()
        assert correlation_id
        assert get_correlation_id() == correlation_id

        clear_correlation_id()

    def test_correlation_id_in_logs(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        set_correlation_id("corr-123")
        try:
            get_logger("test_corr").info("with_correlation")
        finally:
            clear_correlation_id()

        log_entry = json.loads(log_file.read_text().strip().split("\n")[0])
        assert log_entry["correlation_id"] == "corr-123"

    def test_log_options_validated(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="DEBUG", log_file=log_file, json_format=True)

        log_options_validated(
            get_logger("test_validated"),
            option_count=27,
            error_count=2,
            warning_count=1,
            duration_ms=0.4,
        )

        log_entry = json.loads(log_file.read_text().strip().split("\n")[0])
        assert log_entry["event"] == "options_validated"
        assert log_entry["event_type"] == "options_validated"
        assert log_entry["error_count"] == 2
        assert log_entry["warning_count"] == 1
