"""Status listener that reports security events through logging."""

from typing import Optional

from ..models.security import AlarmStatus
from .interfaces import StatusListener
from ..logging_config import get_logger

logger = get_logger("status_listener")


class LoggingStatusListener(StatusListener):
    """Logs every notification and remembers the latest values for display."""

    def __init__(self):
        self.last_alarm_status: Optional[AlarmStatus] = None
        self.last_cat_detected: Optional[bool] = None
        self.sensor_changes = 0

    def notify(self, status: AlarmStatus) -> None:
        self.last_alarm_status = status
        if status == AlarmStatus.ALARM:
            logger.warning(f"ALARM: {status.description}")
        else:
            logger.info(f"Alarm status: {status.description}")

    def cat_detected(self, cat_detected: bool) -> None:
        self.last_cat_detected = cat_detected
        if cat_detected:
            logger.warning("DANGER - CAT DETECTED")
        else:
            logger.info("Camera clear: no cats detected")

    def sensor_status_changed(self) -> None:
        self.sensor_changes += 1
        logger.debug("Sensor status changed")
