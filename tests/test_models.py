"""Unit tests for security data models."""

import unittest
import uuid
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint_security.models.security import AlarmStatus, ArmingStatus, Sensor, SensorType
from catpoint_security.models.config import SystemConfig


class TestSensor(unittest.TestCase):
    """Test cases for Sensor."""

    def test_defaults(self):
        sensor = Sensor("Door", SensorType.DOOR)

        self.assertFalse(sensor.active)
        self.assertIsInstance(sensor.sensor_id, uuid.UUID)
        self.assertNotEqual(sensor.sensor_id, Sensor("Door", SensorType.DOOR).sensor_id)

    def test_equality_uses_name_and_type(self):
        s1 = Sensor("Door", SensorType.DOOR)
        s2 = Sensor("Door", SensorType.DOOR, active=True)
        s3 = Sensor("Door", SensorType.WINDOW)
        s4 = Sensor("Window", SensorType.WINDOW)

        self.assertEqual(s1, s2)
        self.assertEqual(hash(s1), hash(s2))
        self.assertNotEqual(s1, s3)
        self.assertNotEqual(s3, s4)
        self.assertNotEqual(s1, "Door")

    def test_hash_is_stable_when_active_changes(self):
        sensor = Sensor("Door", SensorType.DOOR)
        sensors = {sensor}

        sensor.active = True

        self.assertIn(sensor, sensors)

    def test_sorts_by_name(self):
        a = Sensor("A", SensorType.WINDOW)
        b = Sensor("B", SensorType.DOOR)
        c = Sensor("C", SensorType.MOTION)

        self.assertLess(a, b)
        self.assertGreater(b, a)
        self.assertEqual(sorted([c, a, b]), [a, b, c])


class TestStatusEnums(unittest.TestCase):
    """Test cases for status enums."""

    def test_alarm_descriptions(self):
        self.assertEqual(AlarmStatus.NO_ALARM.description, "Cool and Good")
        self.assertEqual(AlarmStatus.PENDING_ALARM.description, "I'm in Danger...")
        self.assertEqual(AlarmStatus.ALARM.description, "Awooga!")

    def test_arming_descriptions(self):
        self.assertEqual(ArmingStatus.DISARMED.description, "Disarmed")
        self.assertEqual(ArmingStatus.ARMED_HOME.description, "Armed - At Home")
        self.assertEqual(ArmingStatus.ARMED_AWAY.description, "Armed - Away")

    def test_system_config_defaults(self):
        config = SystemConfig()

        self.assertEqual(config.confidence_threshold, 50.0)
        self.assertEqual(config.max_sensors, 4)
        self.assertEqual(config.image_service, "fake")


if __name__ == '__main__':
    unittest.main()
