"""Default configuration values and constants."""

from typing import Dict, Any

# Default system configuration
DEFAULT_CONFIG: Dict[str, Any] = {
    # Detection settings
    "confidence_threshold": 50.0,
    "image_service": "fake",
    "cascade_path": "",

    # Sensor settings
    "max_sensors": 4,

    # Storage settings
    "database_path": "data/catpoint.db",

    # Logging settings
    "log_level": "INFO",
    "log_dir": "logs"
}

# System constants
SYSTEM_CONSTANTS = {
    "IMAGE_SERVICES": ("fake", "opencv"),
    "LOG_LEVELS": ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
    "LOG_ROTATION_SIZE_MB": 10,
    "LOG_BACKUP_COUNT": 5,
    "SENSOR_LIMIT_MESSAGE": "To add more than {limit} sensors, please subscribe to our Premium Membership!"
}

# File paths and directories
DEFAULT_PATHS = {
    "config_file": "config.json",
    "storage_dir": "data",
    "logs_dir": "logs",
    "database_file": "data/catpoint.db"
}

# Haar cascade settings for the OpenCV image service
MODEL_SETTINGS = {
    "cascade_files": (
        "haarcascade_frontalcatface.xml",
        "haarcascade_frontalcatface_extended.xml"
    ),
    "scale_factor": 1.1,
    "min_neighbors": 3,
    "min_size": (30, 30),
    "max_size": (300, 300)
}
