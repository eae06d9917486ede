"""Unit tests for logging configuration."""

import unittest
import logging
import tempfile
import shutil
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint_security import logging_config
from catpoint_security.logging_config import (
    LoggingManager, StructuredFormatter, get_logger, log_with_context, setup_logging
)


class TestLoggingConfig(unittest.TestCase):
    """Test cases for the logging helpers."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.previous_manager = logging_config.logging_manager

    def tearDown(self):
        """Clean up test fixtures."""
        LoggingManager(log_dir=None, console=False)
        logging_config.logging_manager = self.previous_manager
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_component_logger_name(self):
        logger = get_logger("unit_test")

        self.assertEqual(logger.name, "catpoint.unit_test")
        self.assertIs(get_logger("unit_test"), logger)

    def test_first_use_attaches_no_handlers(self):
        setup_logging("INFO", None)
        logging_config.logging_manager = None

        get_logger("lazy_test")

        self.assertEqual(logging.getLogger("catpoint").handlers, [])
        self.assertFalse(logging_config.logging_manager.console)

    def test_setup_logging_adds_console_handler(self):
        setup_logging("WARNING", None)

        handlers = logging.getLogger("catpoint").handlers
        self.assertEqual(len(handlers), 1)
        self.assertIsInstance(handlers[0], logging.StreamHandler)
        self.assertEqual(handlers[0].level, logging.WARNING)

    def test_setup_logging_writes_files(self):
        manager = setup_logging("DEBUG", os.path.join(self.test_dir, "logs"))
        logger = manager.get_component_logger("file_test")

        logger.error("something failed")
        for handler in logging.getLogger("catpoint").handlers:
            handler.flush()

        with open(manager.main_log_file) as f:
            self.assertIn("something failed", f.read())
        with open(manager.error_log_file) as f:
            self.assertIn("ERROR", f.read())

    def test_context_is_appended(self):
        manager = setup_logging("DEBUG", os.path.join(self.test_dir, "logs"))
        logger = manager.get_component_logger("context_test")

        log_with_context(logger, logging.INFO, "sensor changed", {"sensor": "Door"})
        for handler in logging.getLogger("catpoint").handlers:
            handler.flush()

        with open(manager.main_log_file) as f:
            self.assertIn("Context: sensor=Door", f.read())

    def test_formatter_without_context(self):
        record = logging.LogRecord("catpoint.x", logging.INFO, "", 0, "hello", (), None)
        record.context = {"a": 1}

        formatted = StructuredFormatter(include_context=False).format(record)

        self.assertIn("hello", formatted)
        self.assertNotIn("Context", formatted)

    def test_unknown_level_defaults_to_info(self):
        manager = setup_logging("CHATTY", None)

        self.assertEqual(manager.log_level, logging.INFO)
        self.assertIsNone(manager.main_log_file)


if __name__ == '__main__':
    unittest.main()
