"""Exception hierarchy for the catpoint security system."""


class CatpointError(Exception):
    """Base exception for all catpoint errors."""


class ConfigurationError(CatpointError):
    """Invalid or unreadable configuration."""


class InvalidStatusError(CatpointError):
    """A status name that does not match any known status."""

    def __init__(self, value: str, choices=()):
        self.value = value
        self.choices = tuple(choices)
        message = f"Unknown status: {value!r}"
        if self.choices:
            message += f" (expected one of: {', '.join(self.choices)})"
        super().__init__(message)


class SensorLimitError(CatpointError):
    """Adding a sensor would exceed the configured limit."""

    def __init__(self, message: str, limit: int):
        self.limit = limit
        super().__init__(message)


class SensorNotFoundError(CatpointError):
    """No sensor is registered under the given name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No sensor named {name!r}")


class DuplicateSensorError(CatpointError):
    """A sensor with the same name is already registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A sensor named {name!r} already exists")


class ImageLoadError(CatpointError):
    """An image file could not be opened or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load image {path!r}: {reason}")
