"""Control panel: sensor management and arming on top of the security service."""

from typing import List

from .models.security import AlarmStatus, ArmingStatus, Sensor, SensorType
from .config.defaults import DEFAULT_CONFIG, SYSTEM_CONSTANTS
from .exceptions import (
    DuplicateSensorError, ImageLoadError, SensorLimitError, SensorNotFoundError
)
from .services.security_service import SecurityService
from .services.image_service import load_image
from .utils import parse_enum
from .logging_config import get_logger

logger = get_logger("control_panel")


class ControlPanel:
    """User-facing operations for managing sensors, arming and the camera."""

    def __init__(self, security_service: SecurityService,
                 max_sensors: int = DEFAULT_CONFIG["max_sensors"]):
        self.security_service = security_service
        self.max_sensors = max_sensors

    # Sensors

    def add_sensor(self, name: str, sensor_type: str) -> Sensor:
        """Create and register a new sensor, respecting the sensor limit.

        Names are unique across sensor types, since the panel looks sensors
        up by name alone.
        """
        if any(sensor.name == name for sensor in self.security_service.get_sensors()):
            logger.warning(f"Sensor {name} already exists")
            raise DuplicateSensorError(name)

        if len(self.security_service.get_sensors()) >= self.max_sensors:
            message = SYSTEM_CONSTANTS["SENSOR_LIMIT_MESSAGE"].format(limit=self.max_sensors)
            logger.warning(message)
            raise SensorLimitError(message, self.max_sensors)

        sensor = Sensor(name, parse_enum(sensor_type, SensorType))
        self.security_service.add_sensor(sensor)
        return sensor

    def find_sensor(self, name: str) -> Sensor:
        for sensor in self.sorted_sensors():
            if sensor.name == name:
                return sensor
        raise SensorNotFoundError(name)

    def remove_sensor(self, name: str) -> Sensor:
        sensor = self.find_sensor(name)
        self.security_service.remove_sensor(sensor)
        return sensor

    def toggle_sensor(self, name: str) -> Sensor:
        """Flip a sensor between active and inactive."""
        sensor = self.find_sensor(name)
        self.security_service.change_sensor_activation_status(sensor, not sensor.active)
        return sensor

    def sorted_sensors(self) -> List[Sensor]:
        return sorted(self.security_service.get_sensors())

    @staticmethod
    def describe_sensor(sensor: Sensor) -> str:
        state = "Active" if sensor.active else "Inactive"
        return f"{sensor.name}({sensor.sensor_type.name}): {state}"

    # Arming and status

    def arm(self, arming_status: str) -> ArmingStatus:
        status = parse_enum(arming_status, ArmingStatus)
        self.security_service.set_arming_status(status)
        return status

    def status_message(self) -> str:
        alarm_status = self.security_service.get_alarm_status()
        arming_status = self.security_service.get_arming_status()
        return f"System Status: {alarm_status.description} [{arming_status.description}]"

    # Camera

    def process_image_file(self, image_path: str) -> bool:
        """Run the camera pipeline on an image file and return the cat result."""
        try:
            image = load_image(image_path)
        except OSError as e:
            raise ImageLoadError(image_path, e.strerror or str(e)) from e

        self.security_service.process_image(image)
        return self.security_service.cat_currently_detected

    def is_alarm(self) -> bool:
        return self.security_service.get_alarm_status() == AlarmStatus.ALARM
