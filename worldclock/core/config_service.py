"""
Configuration Service - Loads the list of clocks to display
Reads worldclock.toml (or a YAML equivalent) with environment overrides
"""
import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple
from zoneinfo import ZoneInfo

import yaml

from worldclock.core.errors import (
    ConfigDirUnresolvableError,
    ConfigMalformedError,
    ConfigNotFoundError,
    ConfigUnreadableError,
    InvalidTimeZoneError,
)
from worldclock.core.timezone_service import resolve_timezone

logger = logging.getLogger(__name__)

CONFIG_FILENAME = 'worldclock.toml'
CONFIG_ENV_VAR = 'WORLDCLOCK_CONFIG'
YAML_SUFFIXES = ('.yaml', '.yml')

CLOCK_KEYS = ('name', 'tz')


@dataclass(frozen=True)
class ClockEntry:
    """One configured clock. None means the field was absent."""
    name: Optional[str] = None
    timezone: Optional[ZoneInfo] = None


@dataclass(frozen=True)
class Config:
    clocks: Tuple[ClockEntry, ...]
    source: Optional[Path] = None


def default_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Compute the per-user config file location.

    Windows: %APPDATA%\\worldclock.toml
    Elsewhere: $XDG_CONFIG_HOME/worldclock.toml, or ~/.config/worldclock.toml

    Raises:
        ConfigDirUnresolvableError: If no home/config directory can be found
    """
    if environ is None:
        environ = os.environ

    if os.name == 'nt':
        appdata = environ.get('APPDATA')
        if appdata:
            return Path(appdata) / CONFIG_FILENAME
        return _home_dir() / 'AppData' / 'Roaming' / CONFIG_FILENAME

    xdg_config = environ.get('XDG_CONFIG_HOME')
    # Relative XDG_CONFIG_HOME values are ignored
    if xdg_config and Path(xdg_config).is_absolute():
        return Path(xdg_config) / CONFIG_FILENAME

    return _home_dir() / '.config' / CONFIG_FILENAME


def _home_dir() -> Path:
    try:
        return Path.home()
    except RuntimeError as e:
        raise ConfigDirUnresolvableError("Could not determine home directory") from e


def _expand_user(path: Path) -> Path:
    try:
        return path.expanduser()
    except RuntimeError as e:
        raise ConfigDirUnresolvableError(f"Could not expand home directory in {path}") from e


def config_from_dict(data: Any, source: Optional[Path] = None) -> Config:
    """
    Build a Config from a parsed document.

    Expected shape: {'clocks': [{'name': str, 'tz': str}, ...]}, every key
    optional. An empty clock list is replaced by a single local clock.

    Args:
        data: Parsed TOML/YAML document
        source: File the document came from, used in error messages

    Returns:
        Config with at least one clock

    Raises:
        ConfigMalformedError: If the document has the wrong shape
        InvalidTimeZoneError: If a tz value is not a known zone
    """
    if not isinstance(data, dict):
        raise ConfigMalformedError("top level must be a table", source)

    for key in data:
        if key != 'clocks':
            logger.debug(f"Ignoring unknown config key: {key}")

    raw_clocks = data.get('clocks', [])
    if not isinstance(raw_clocks, list):
        raise ConfigMalformedError("'clocks' must be a list of tables", source)

    clocks = [_parse_clock(index, raw, source) for index, raw in enumerate(raw_clocks)]

    # If no clocks are specified, show the local one
    if not clocks:
        logger.debug("No clocks configured, adding local clock")
        clocks.append(ClockEntry())

    return Config(clocks=tuple(clocks), source=source)


def _parse_clock(index: int, raw: Any, source: Optional[Path]) -> ClockEntry:
    where = f"clocks[{index}]"

    if not isinstance(raw, dict):
        raise ConfigMalformedError(f"{where} must be a table", source)

    for key in raw:
        if key not in CLOCK_KEYS:
            logger.debug(f"Ignoring unknown key {key!r} in {where}")

    name = raw.get('name')
    if name is not None and not isinstance(name, str):
        raise ConfigMalformedError(f"{where}.name must be a string", source)

    tz_value = raw.get('tz')
    if tz_value is None:
        return ClockEntry(name=name)

    if not isinstance(tz_value, str):
        raise ConfigMalformedError(f"{where}.tz must be a string", source)

    if name is not None:
        where = f"{where} ({name!r})"

    try:
        zone = resolve_timezone(tz_value)
    except InvalidTimeZoneError as e:
        raise InvalidTimeZoneError(tz_value, where) from e

    return ClockEntry(name=name, timezone=zone)


class ConfigService:
    """
    Locates, reads and parses the clock configuration.

    Path priority order:
    1. Explicit path (command line)
    2. WORLDCLOCK_CONFIG environment variable
    3. Per-user default path
    """

    def __init__(self, path: Optional[Path] = None,
                 environ: Optional[Mapping[str, str]] = None):
        """
        Initialize config service.

        Args:
            path: Explicit config path, overrides everything else
            environ: Environment mapping (default: os.environ)
        """
        self._explicit_path = Path(path) if path is not None else None
        self._environ = os.environ if environ is None else environ

    def resolve_path(self) -> Path:
        """Work out which config file to read"""
        if self._explicit_path is not None:
            return self._explicit_path

        if env_path := self._environ.get(CONFIG_ENV_VAR):
            logger.debug(f"Using {CONFIG_ENV_VAR} from environment: {env_path}")
            return _expand_user(Path(env_path))

        return default_config_path(self._environ)

    def load(self) -> Config:
        """
        Read and parse the config file.

        Returns:
            Parsed Config

        Raises:
            WorldClockError: On any lookup, read, parse or zone failure
        """
        path = self.resolve_path()
        logger.debug(f"Loading configuration from {path}")

        text = self._read_text(path)
        data = self._parse_text(text, path)
        config = config_from_dict(data, source=path)

        logger.debug(f"Configuration loaded: {len(config.clocks)} clock(s)")
        return config

    def _read_text(self, path: Path) -> str:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()
        except FileNotFoundError as e:
            raise ConfigNotFoundError(path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigUnreadableError(path, str(e)) from e

    def _parse_text(self, text: str, path: Path) -> Any:
        if path.suffix.lower() in YAML_SUFFIXES:
            try:
                data = yaml.safe_load(text)
            except yaml.YAMLError as e:
                raise ConfigMalformedError(str(e), path) from e
            # An empty YAML document loads as None
            return {} if data is None else data

        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigMalformedError(str(e), path) from e
