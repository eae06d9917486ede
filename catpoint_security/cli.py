"""Command line entry point for the catpoint security system."""

import argparse
import sys
from typing import List, Optional

from .config_manager import ConfigManager
from .control_panel import ControlPanel
from .exceptions import CatpointError, ConfigurationError
from .models.config import SystemConfig
from .models.security import ArmingStatus, SensorType
from .services.image_service import FakeImageService, OpenCVImageService
from .services.interfaces import ImageServiceInterface
from .services.repository import SqliteSecurityRepository
from .services.security_service import SecurityService
from .services.status_listener import LoggingStatusListener
from .logging_config import setup_logging, get_logger

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="catpoint", description="Catpoint home security")
    parser.add_argument("--config", default=None, help="Configuration file path")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("status", help="Show alarm and arming status")
    commands.add_parser("list", help="List sensors")

    add = commands.add_parser("add", help="Add a sensor")
    add.add_argument("name")
    add.add_argument("type", choices=[t.name for t in SensorType], type=str.upper)

    remove = commands.add_parser("remove", help="Remove a sensor")
    remove.add_argument("name")

    toggle = commands.add_parser("toggle", help="Activate or deactivate a sensor")
    toggle.add_argument("name")

    arm = commands.add_parser("arm", help="Set the arming status")
    arm.add_argument("status", help=", ".join(s.name for s in ArmingStatus))

    image = commands.add_parser("image", help="Scan a camera image for cats")
    image.add_argument("path")

    return parser


def create_image_service(config: SystemConfig) -> ImageServiceInterface:
    if config.image_service == "opencv":
        return OpenCVImageService(config.cascade_path)
    if config.image_service == "fake":
        return FakeImageService()
    raise ConfigurationError(f"Unknown image service: {config.image_service!r}")


def create_control_panel(config: SystemConfig) -> ControlPanel:
    """Wire the repository, image service and listener into a control panel."""
    repository = SqliteSecurityRepository(config.database_path)
    security_service = SecurityService(
        repository,
        create_image_service(config),
        confidence_threshold=config.confidence_threshold
    )
    security_service.add_status_listener(LoggingStatusListener())
    return ControlPanel(security_service, max_sensors=config.max_sensors)


def run_command(panel: ControlPanel, args: argparse.Namespace) -> None:
    if args.command == "add":
        sensor = panel.add_sensor(args.name, args.type)
        print(f"Added {panel.describe_sensor(sensor)}")
    elif args.command == "remove":
        sensor = panel.remove_sensor(args.name)
        print(f"Removed {sensor.name}")
    elif args.command == "toggle":
        sensor = panel.toggle_sensor(args.name)
        print(panel.describe_sensor(sensor))
    elif args.command == "arm":
        panel.arm(args.status)
    elif args.command == "image":
        cat = panel.process_image_file(args.path)
        print("DANGER - CAT DETECTED" if cat else "Camera clear")
    elif args.command == "list":
        sensors = panel.sorted_sensors()
        if not sensors:
            print("No sensors")
        for sensor in sensors:
            print(panel.describe_sensor(sensor))

    print(panel.status_message())


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config_manager = ConfigManager(args.config)
        config = config_manager.get_config()
        if not config_manager.validate_config():
            raise ConfigurationError(f"Invalid configuration in {config_manager.config_path}")

        setup_logging("DEBUG" if args.debug else config.log_level, config.log_dir)
        logger.debug(f"Running command: {args.command}")

        run_command(create_control_panel(config), args)
        return 0

    except CatpointError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
