"""Unit tests for configuration manager."""

import unittest
import os
import json
import tempfile
import shutil
from unittest.mock import Mock
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint_security.config_manager import ConfigManager
from catpoint_security.config.defaults import DEFAULT_CONFIG
from catpoint_security.models.config import SystemConfig


class TestConfigManager(unittest.TestCase):
    """Test cases for ConfigManager."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.test_dir, "test_config.json")
        self.config_manager = ConfigManager(self.config_path)

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_initialization_creates_default_file(self):
        self.assertEqual(self.config_manager.config_path, self.config_path)
        self.assertTrue(os.path.exists(self.config_path))

        with open(self.config_path) as f:
            saved = json.load(f)
        self.assertEqual(saved, DEFAULT_CONFIG)
        self.assertTrue(self.config_manager.validate_config())

    def test_load_save_config(self):
        self.config_manager.update_config(confidence_threshold=80.0, max_sensors=6)

        new_manager = ConfigManager(self.config_path)
        self.assertEqual(new_manager.get_config().confidence_threshold, 80.0)
        self.assertEqual(new_manager.get_config().max_sensors, 6)

    def test_update_config_ignores_unknown_keys(self):
        self.config_manager.update_config(invalid_key="value")

        self.assertFalse(hasattr(self.config_manager.get_config(), "invalid_key"))

    def test_malformed_file_falls_back_to_defaults(self):
        with open(self.config_path, 'w') as f:
            f.write("{not json")

        manager = ConfigManager(self.config_path)

        self.assertEqual(manager.get_config(), SystemConfig())

    def test_unknown_key_in_file_falls_back_to_defaults(self):
        with open(self.config_path, 'w') as f:
            json.dump({"confidence_threshold": 60.0, "bogus": 1}, f)

        manager = ConfigManager(self.config_path)

        self.assertEqual(manager.get_config().confidence_threshold, 50.0)

    def test_validate_config(self):
        invalid_values = [
            {"confidence_threshold": -1.0},
            {"confidence_threshold": 100.5},
            {"confidence_threshold": "high"},
            {"max_sensors": 0},
            {"image_service": "aws"},
            {"log_level": "LOUD"},
            {"database_path": ""}
        ]

        for values in invalid_values:
            with self.subTest(values=values):
                self.config_manager.reset_to_defaults()
                self.config_manager.update_config(**values)
                self.assertFalse(self.config_manager.validate_config())

    def test_change_callbacks(self):
        callback = Mock()
        self.config_manager.register_change_callback(callback)
        self.config_manager.register_change_callback(callback)

        self.config_manager.update_config(max_sensors=2)
        callback.assert_called_once_with(self.config_manager.get_config())

        self.config_manager.unregister_change_callback(callback)
        self.config_manager.update_config(max_sensors=3)
        callback.assert_called_once()

    def test_failing_callback_does_not_break_update(self):
        failing = Mock(side_effect=RuntimeError("boom"))
        working = Mock()
        self.config_manager.register_change_callback(failing)
        self.config_manager.register_change_callback(working)

        self.config_manager.update_config(log_level="DEBUG")

        working.assert_called_once()
        self.assertEqual(self.config_manager.get_config().log_level, "DEBUG")

    def test_import_config(self):
        exported = self.config_manager.export_config()
        exported["image_service"] = "opencv"

        self.assertTrue(self.config_manager.import_config(exported))
        self.assertEqual(ConfigManager(self.config_path).get_config().image_service, "opencv")

    def test_import_invalid_config_keeps_previous(self):
        self.assertFalse(self.config_manager.import_config({"max_sensors": -5}))
        self.assertFalse(self.config_manager.import_config({"unknown": True}))

        self.assertEqual(self.config_manager.get_config().max_sensors, 4)

    def test_reset_to_defaults(self):
        self.config_manager.update_config(max_sensors=10)

        self.config_manager.reset_to_defaults()

        self.assertEqual(self.config_manager.get_config(), SystemConfig())


if __name__ == '__main__':
    unittest.main()
