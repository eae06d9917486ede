"""Configuration data models."""

from dataclasses import dataclass


@dataclass
class SystemConfig:
    """System configuration settings."""
    # Detection settings
    confidence_threshold: float = 50.0  # Percent, passed to the image service
    image_service: str = "fake"  # fake, opencv
    cascade_path: str = ""  # Empty uses the cascade bundled with OpenCV

    # Sensor settings
    max_sensors: int = 4

    # Storage settings
    database_path: str = "data/catpoint.db"

    # Logging settings
    log_level: str = "INFO"
    log_dir: str = "logs"
