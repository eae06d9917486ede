"""
Catpoint Security System

A home-security alarm that tracks door, window and motion sensors, handles
arming and disarming, and raises an alarm when a cat shows up on camera
while the system is armed at home.
"""

__version__ = "1.0.0"
__author__ = "Catpoint Security System"

# Import core components
from .config_manager import ConfigManager
from .control_panel import ControlPanel
from .models import (
    AlarmStatus,
    ArmingStatus,
    SensorType,
    Sensor,
    SystemConfig
)
from .services import (
    SecurityRepositoryInterface,
    ImageServiceInterface,
    StatusListener,
    SecurityService
)
from .exceptions import (
    CatpointError,
    ConfigurationError,
    DuplicateSensorError,
    ImageLoadError,
    InvalidStatusError,
    SensorLimitError,
    SensorNotFoundError
)

__all__ = [
    # Core management
    'ConfigManager',
    'ControlPanel',
    'SecurityService',

    # Data models
    'AlarmStatus',
    'ArmingStatus',
    'SensorType',
    'Sensor',
    'SystemConfig',

    # Service interfaces
    'SecurityRepositoryInterface',
    'ImageServiceInterface',
    'StatusListener',

    # Errors
    'CatpointError',
    'ConfigurationError',
    'DuplicateSensorError',
    'ImageLoadError',
    'InvalidStatusError',
    'SensorLimitError',
    'SensorNotFoundError'
]
