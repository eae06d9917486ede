"""Security service: the alarm status state machine."""

import logging
from typing import Optional, Set

from ..models.security import AlarmStatus, ArmingStatus, Sensor
from ..config.defaults import DEFAULT_CONFIG
from .interfaces import (
    SecurityRepositoryInterface, ImageServiceInterface, StatusListener, NDArray
)
from ..logging_config import get_logger, log_with_context

logger = get_logger("security_service")


class SecurityService:
    """Decides the alarm status from sensors, arming state and cat detection.

    Every change is written through the repository before the call returns,
    and listeners are notified synchronously. Alarm status is never cached
    here; the repository is the single source of truth.
    """

    def __init__(self,
                 security_repository: SecurityRepositoryInterface,
                 image_service: ImageServiceInterface,
                 confidence_threshold: float = DEFAULT_CONFIG["confidence_threshold"]):
        """
        Initialize security service.

        Args:
            security_repository: Storage for sensors and statuses
            image_service: Classifier used by process_image
            confidence_threshold: Cat confidence threshold in percent
        """
        self.security_repository = security_repository
        self.image_service = image_service
        self.confidence_threshold = confidence_threshold

        self.status_listeners: Set[StatusListener] = set()
        self.cat_currently_detected = False

    # Arming

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Arm or disarm the system."""
        if arming_status == ArmingStatus.DISARMED:
            self.set_alarm_status(AlarmStatus.NO_ALARM)
        else:
            # Arming starts from a clean slate
            for sensor in list(self.get_sensors()):
                self.change_sensor_activation_status(sensor, False)

        self.security_repository.set_arming_status(arming_status)
        logger.info(f"Arming status set to {arming_status.name}")

        # The cat flag survives arming changes
        if arming_status == ArmingStatus.ARMED_HOME and self.cat_currently_detected:
            logger.info("Armed home while a cat is detected")
            self.set_alarm_status(AlarmStatus.ALARM)

    # Sensors

    def change_sensor_activation_status(self, sensor: Sensor, active: bool) -> None:
        """Change a sensor's activation and apply the alarm transition rules."""
        current_alarm_status = self.security_repository.get_alarm_status()

        if current_alarm_status == AlarmStatus.ALARM:
            sensor.active = active
            self.security_repository.update_sensor(sensor)
            logger.debug(f"Sensor {sensor.name} set active={active} during alarm")
            return

        if not sensor.active and active:
            self._handle_sensor_activated()
        elif sensor.active and not active:
            self._handle_sensor_deactivated(sensor)
        elif not sensor.active and not active:
            # Reconciles a pending alarm left without any active sensor
            if (current_alarm_status == AlarmStatus.PENDING_ALARM
                    and not self._any_sensor_active()):
                self.set_alarm_status(AlarmStatus.NO_ALARM)

        sensor.active = active
        self.security_repository.update_sensor(sensor)
        log_with_context(logger, logging.DEBUG, "Sensor activation changed",
                         {"sensor": sensor.name, "type": sensor.sensor_type.name,
                          "active": active})

        for listener in list(self.status_listeners):
            listener.sensor_status_changed()

    def _handle_sensor_activated(self) -> None:
        if self.security_repository.get_arming_status() == ArmingStatus.DISARMED:
            return

        alarm_status = self.security_repository.get_alarm_status()
        if alarm_status == AlarmStatus.NO_ALARM:
            self.set_alarm_status(AlarmStatus.PENDING_ALARM)
        elif alarm_status == AlarmStatus.PENDING_ALARM:
            self.set_alarm_status(AlarmStatus.ALARM)

    def _handle_sensor_deactivated(self, sensor: Sensor) -> None:
        alarm_status = self.security_repository.get_alarm_status()
        if (alarm_status == AlarmStatus.PENDING_ALARM
                and not self._any_sensor_active(exclude=sensor)):
            self.set_alarm_status(AlarmStatus.NO_ALARM)

    def _any_sensor_active(self, exclude: Optional[Sensor] = None) -> bool:
        return any(sensor.active for sensor in self.get_sensors() if sensor != exclude)

    def add_sensor(self, sensor: Sensor) -> None:
        self.security_repository.add_sensor(sensor)
        logger.info(f"Sensor added: {sensor.name} ({sensor.sensor_type.name})")

    def remove_sensor(self, sensor: Sensor) -> None:
        self.security_repository.remove_sensor(sensor)
        logger.info(f"Sensor removed: {sensor.name} ({sensor.sensor_type.name})")

    def get_sensors(self) -> Set[Sensor]:
        return self.security_repository.get_sensors()

    # Camera

    def process_image(self, image: NDArray) -> None:
        """Classify a camera frame and update the alarm for cat detection."""
        cat = self.image_service.image_contains_cat(image, self.confidence_threshold)
        self._cat_detected(cat)

    def _cat_detected(self, cat: bool) -> None:
        self.cat_currently_detected = cat
        logger.debug(f"Cat detected: {cat}")

        if cat and self.get_arming_status() == ArmingStatus.ARMED_HOME:
            self.set_alarm_status(AlarmStatus.ALARM)
        elif not cat and not self._any_sensor_active():
            self.set_alarm_status(AlarmStatus.NO_ALARM)

        for listener in list(self.status_listeners):
            listener.cat_detected(cat)

    # Status

    def add_status_listener(self, status_listener: StatusListener) -> None:
        self.status_listeners.add(status_listener)

    def remove_status_listener(self, status_listener: StatusListener) -> None:
        self.status_listeners.discard(status_listener)

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        """Persist the alarm status and notify every listener."""
        self.security_repository.set_alarm_status(alarm_status)
        logger.info(f"Alarm status set to {alarm_status.name}")

        for listener in list(self.status_listeners):
            listener.notify(alarm_status)

    def get_alarm_status(self) -> AlarmStatus:
        return self.security_repository.get_alarm_status()

    def get_arming_status(self) -> ArmingStatus:
        return self.security_repository.get_arming_status()
