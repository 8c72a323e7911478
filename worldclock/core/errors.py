"""
Errors - Exception hierarchy for the world clock
Every error is terminal: main() logs it once and exits non-zero.
"""
from pathlib import Path
from typing import Optional


class WorldClockError(Exception):
    """Base exception for all world clock failures."""


class ConfigDirUnresolvableError(WorldClockError):
    """The default config path cannot be computed (no home/config directory)."""


class ConfigNotFoundError(WorldClockError):
    """The config file does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Configuration file not found: {path}")


class ConfigUnreadableError(WorldClockError):
    """The config file exists but cannot be opened or decoded."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read configuration file {path}: {reason}")


class ConfigMalformedError(WorldClockError):
    """The config text is not valid TOML/YAML or has the wrong shape."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path is not None:
            message = f"Malformed configuration file {path}: {message}"
        super().__init__(message)


class InvalidTimeZoneError(WorldClockError):
    """A tz value does not name a known IANA time zone."""

    def __init__(self, value, context: str = ''):
        self.value = value
        self.context = context
        message = f"Unknown time zone {value!r}"
        if context:
            message = f"{message} in {context}"
        super().__init__(message)
