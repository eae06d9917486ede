"""Service interfaces and abstract base classes."""

from abc import ABC, abstractmethod
from typing import Set

import numpy as np

from ..models.security import AlarmStatus, ArmingStatus, Sensor

NDArray = np.ndarray


class SecurityRepositoryInterface(ABC):
    """Interface for persisting sensors and system status."""

    @abstractmethod
    def get_sensors(self) -> Set[Sensor]:
        """Get all registered sensors."""
        pass

    @abstractmethod
    def add_sensor(self, sensor: Sensor) -> None:
        """Register a sensor."""
        pass

    @abstractmethod
    def remove_sensor(self, sensor: Sensor) -> None:
        """Unregister a sensor."""
        pass

    @abstractmethod
    def update_sensor(self, sensor: Sensor) -> None:
        """Persist the current state of a sensor."""
        pass

    @abstractmethod
    def get_alarm_status(self) -> AlarmStatus:
        """Get the stored alarm status."""
        pass

    @abstractmethod
    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        """Store the alarm status."""
        pass

    @abstractmethod
    def get_arming_status(self) -> ArmingStatus:
        """Get the stored arming status."""
        pass

    @abstractmethod
    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Store the arming status."""
        pass


class ImageServiceInterface(ABC):
    """Interface for image classification."""

    @abstractmethod
    def image_contains_cat(self, image: NDArray, confidence_threshold: float) -> bool:
        """Return True if a cat is found with at least the given confidence (percent)."""
        pass


class StatusListener(ABC):
    """Interface for components that react to security status changes."""

    @abstractmethod
    def notify(self, status: AlarmStatus) -> None:
        """Called after the alarm status is written."""
        pass

    @abstractmethod
    def cat_detected(self, cat_detected: bool) -> None:
        """Called after every processed image."""
        pass

    @abstractmethod
    def sensor_status_changed(self) -> None:
        """Called after a sensor's activation changes outside of full alarm."""
        pass
