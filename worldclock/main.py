"""
Main entry point for worldclock
Shows the current time in multiple time zones.
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from worldclock.core.clock_service import ClockService
from worldclock.core.config_service import ConfigService
from worldclock.core.errors import WorldClockError
from worldclock.core.logging_service import get_logger
from worldclock.ui.table_presenter import TablePresenter

APP_VERSION = '1.0.0'

CONFIG_HELP = """\
Path to config file that specifies the time zones you want to have displayed.

If not specified, $WORLDCLOCK_CONFIG is used, then
~/.config/worldclock.toml ($XDG_CONFIG_HOME/worldclock.toml when set),
or %%APPDATA%%\\worldclock.toml on Windows.
"""

CONFIG_EXAMPLE = """\
The file consists of a series of [[clocks]] definitions. Each may specify a
time zone with the `tz` key; a clock without `tz` shows local time. To list
available time zones you can use `timedatectl list-timezones` (systemd).

Optionally you can specify a custom name for the clock. If omitted, the name
of the time zone is used.

Example:

    # Local clock
    [[clocks]]

    [[clocks]]
    tz = "Europe/Berlin"

    [[clocks]]
    name = "Costa Rica"
    tz = "America/Costa_Rica"

    [[clocks]]
    name = "New York"
    tz = "America/New_York"

Files ending in .yaml or .yml are read as YAML with the same structure.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='worldclock',
        description='Shows the current time in multiple time zones.',
        epilog=CONFIG_EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('-c', '--config', type=Path, metavar='PATH', help=CONFIG_HELP)
    return parser


class Application:
    """
    Runs the pipeline once: config -> instant -> rows -> table.
    """

    def __init__(self, config_service: ConfigService,
                 clock_service: Optional[ClockService] = None,
                 presenter: Optional[TablePresenter] = None):
        self._config_service = config_service
        self._clock_service = clock_service or ClockService()
        self._presenter = presenter or TablePresenter()

    def run(self) -> None:
        """
        Load config and print the clock table.

        Raises:
            WorldClockError: If the configuration cannot be used
        """
        config = self._config_service.load()

        instant = self._clock_service.capture_instant()
        rows = self._clock_service.render(config.clocks, instant)

        self._presenter.present(rows)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point, returns the process exit code"""
    args = build_parser().parse_args(argv)
    logger = get_logger()

    try:
        config_service = ConfigService(args.config)
        logger.log_startup(APP_VERSION, str(config_service.resolve_path()))
        Application(config_service).run()
    except WorldClockError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        logger.critical(f"Fatal error: {e}", exc_info=True)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
