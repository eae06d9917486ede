"""Security data models: sensors and status enums."""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering


class AlarmStatus(Enum):
    """Current threat level of the system."""
    NO_ALARM = "Cool and Good"
    PENDING_ALARM = "I'm in Danger..."
    ALARM = "Awooga!"

    @property
    def description(self) -> str:
        return self.value


class ArmingStatus(Enum):
    """Whether the system is disarmed or armed for a home/away profile."""
    DISARMED = "Disarmed"
    ARMED_HOME = "Armed - At Home"
    ARMED_AWAY = "Armed - Away"

    @property
    def description(self) -> str:
        return self.value


class SensorType(Enum):
    """Kinds of sensor that can be registered."""
    DOOR = "DOOR"
    WINDOW = "WINDOW"
    MOTION = "MOTION"


@total_ordering
@dataclass(eq=False)
class Sensor:
    """A named, typed contact/presence detector.

    Sensors are compared and hashed by ``(name, sensor_type)`` and sorted by
    name. The ``active`` flag is mutated in place, so the same instance must be
    shared between the security service and the repository.
    """
    name: str
    sensor_type: SensorType
    active: bool = False
    sensor_id: uuid.UUID = field(default_factory=uuid.uuid4)

    def _key(self) -> tuple:
        return (self.name, self.sensor_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: "Sensor") -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.name < other.name
