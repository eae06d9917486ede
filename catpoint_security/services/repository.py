"""Security repository implementations."""

import os
import sqlite3
import uuid
from typing import Set

from ..models.security import AlarmStatus, ArmingStatus, Sensor, SensorType
from ..utils import ensure_directory_exists
from .interfaces import SecurityRepositoryInterface
from ..logging_config import get_logger

logger = get_logger("repository")


class InMemorySecurityRepository(SecurityRepositoryInterface):
    """Volatile repository, useful for demos and tests."""

    def __init__(self,
                 alarm_status: AlarmStatus = AlarmStatus.NO_ALARM,
                 arming_status: ArmingStatus = ArmingStatus.DISARMED):
        self.sensors: Set[Sensor] = set()
        self.alarm_status = alarm_status
        self.arming_status = arming_status

    def get_sensors(self) -> Set[Sensor]:
        return self.sensors

    def add_sensor(self, sensor: Sensor) -> None:
        self.sensors.add(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        self.sensors.discard(sensor)

    def update_sensor(self, sensor: Sensor) -> None:
        # Replace an equal instance so the stored sensor is the caller's
        self.sensors.discard(sensor)
        self.sensors.add(sensor)

    def get_alarm_status(self) -> AlarmStatus:
        return self.alarm_status

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        self.alarm_status = alarm_status

    def get_arming_status(self) -> ArmingStatus:
        return self.arming_status

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        self.arming_status = arming_status


class SqliteSecurityRepository(InMemorySecurityRepository):
    """Repository that keeps state in memory and writes every change to SQLite.

    Sensors are loaded once on construction; afterwards the in-memory
    instances are the ones handed out, so activation changes made by the
    security service are seen without a re-fetch.
    """

    ALARM_STATUS_KEY = "alarm_status"
    ARMING_STATUS_KEY = "arming_status"

    def __init__(self, database_path: str = "data/catpoint.db"):
        """
        Initialize the repository.

        Args:
            database_path: Path to SQLite database file
        """
        super().__init__()
        self.database_path = database_path

        self._initialize_database()
        self._load_state()

    def add_sensor(self, sensor: Sensor) -> None:
        # An equal sensor is already stored; keep its row in step with the set
        if sensor in self.sensors:
            return
        super().add_sensor(sensor)
        self._save_sensor(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        super().remove_sensor(sensor)
        with sqlite3.connect(self.database_path) as conn:
            conn.execute(
                "DELETE FROM sensors WHERE name = ? AND sensor_type = ?",
                (sensor.name, sensor.sensor_type.name)
            )
        logger.debug(f"Deleted sensor {sensor.name}")

    def update_sensor(self, sensor: Sensor) -> None:
        super().update_sensor(sensor)
        self._save_sensor(sensor)

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        super().set_alarm_status(alarm_status)
        self._save_setting(self.ALARM_STATUS_KEY, alarm_status.name)

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        super().set_arming_status(arming_status)
        self._save_setting(self.ARMING_STATUS_KEY, arming_status.name)

    def _initialize_database(self) -> None:
        """Create the sensors and settings tables."""
        directory = os.path.dirname(self.database_path)
        if directory:
            ensure_directory_exists(directory)

        with sqlite3.connect(self.database_path) as conn:
            cursor = conn.cursor()

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS sensors (
                    sensor_id TEXT NOT NULL UNIQUE,
                    name TEXT NOT NULL,
                    sensor_type TEXT NOT NULL,
                    active INTEGER NOT NULL DEFAULT 0,
                    PRIMARY KEY (name, sensor_type)
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS settings (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)

            conn.commit()
        logger.debug(f"Database initialized: {self.database_path}")

    def _load_state(self) -> None:
        """Load sensors and statuses written by a previous run."""
        with sqlite3.connect(self.database_path) as conn:
            cursor = conn.cursor()

            cursor.execute("SELECT sensor_id, name, sensor_type, active FROM sensors")
            for sensor_id, name, sensor_type, active in cursor.fetchall():
                self.sensors.add(Sensor(
                    name=name,
                    sensor_type=SensorType[sensor_type],
                    active=bool(active),
                    sensor_id=uuid.UUID(sensor_id)
                ))

            cursor.execute("SELECT key, value FROM settings")
            settings = dict(cursor.fetchall())

        if self.ALARM_STATUS_KEY in settings:
            self.alarm_status = AlarmStatus[settings[self.ALARM_STATUS_KEY]]
        if self.ARMING_STATUS_KEY in settings:
            self.arming_status = ArmingStatus[settings[self.ARMING_STATUS_KEY]]

        logger.info(f"Loaded {len(self.sensors)} sensors, "
                    f"arming={self.arming_status.name}, alarm={self.alarm_status.name}")

    def _save_sensor(self, sensor: Sensor) -> None:
        with sqlite3.connect(self.database_path) as conn:
            conn.execute("""
                INSERT OR REPLACE INTO sensors (sensor_id, name, sensor_type, active)
                VALUES (?, ?, ?, ?)
            """, (str(sensor.sensor_id), sensor.name, sensor.sensor_type.name,
                  int(sensor.active)))

    def _save_setting(self, key: str, value: str) -> None:
        with sqlite3.connect(self.database_path) as conn:
            conn.execute(
                "INSERT OR REPLACE INTO settings (key, value) VALUES (?, ?)",
                (key, value)
            )
