"""Utility functions for the catpoint security system."""

import os
from enum import Enum
from typing import Type, TypeVar

from .exceptions import InvalidStatusError

E = TypeVar("E", bound=Enum)


def ensure_directory_exists(path: str) -> None:
    """Ensure a directory exists, create if it doesn't."""
    if not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


def parse_enum(value: str, enum_cls: Type[E]) -> E:
    """Parse a member name such as ``armed-home`` or ``ARMED_HOME``."""
    key = value.strip().upper().replace("-", "_").replace(" ", "_")
    try:
        return enum_cls[key]
    except KeyError:
        raise InvalidStatusError(value, [member.name for member in enum_cls]) from None
