"""
Clock Service - Time conversion for every configured clock
Converts one shared instant into wall-clock rows for display
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Callable, List, Optional, Sequence

from worldclock.core.config_service import ClockEntry
from worldclock.core.timezone_service import timezone_label

logger = logging.getLogger(__name__)

TIME_FORMAT = '%H:%M:%S'
LOCAL_LABEL = 'Local'


@dataclass(frozen=True)
class ResolvedRow:
    label: str
    time_text: str


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ClockService:
    """
    Renders clock entries against a single instant.
    """

    def __init__(self, local_zone: Optional[tzinfo] = None,
                 time_source: Optional[Callable[[], datetime]] = None):
        """
        Initialize clock service.

        Args:
            local_zone: Zone used for clocks without tz (default: host zone)
            time_source: Callable returning an aware datetime (default: UTC now)
        """
        self._local_zone = local_zone
        self._time_source = time_source or _utc_now

    def capture_instant(self) -> datetime:
        """
        Capture the instant shared by all rows of one run.

        Returns:
            Timezone-aware datetime in UTC
        """
        instant = self._time_source().astimezone(timezone.utc)
        logger.debug(f"Captured instant: {instant.isoformat()}")
        return instant

    def to_local(self, instant: datetime) -> datetime:
        """Convert an instant to the local (host or configured) zone"""
        if self._local_zone is None:
            return instant.astimezone()
        return instant.astimezone(self._local_zone)

    def render_clock(self, clock: ClockEntry, instant: datetime) -> ResolvedRow:
        """
        Resolve label and time text for one clock.

        An explicitly empty name is kept; only a missing name falls back
        to the zone label.
        """
        if clock.timezone is not None:
            local_time = instant.astimezone(clock.timezone)
            tz_name = timezone_label(clock.timezone)
        else:
            local_time = self.to_local(instant)
            tz_name = LOCAL_LABEL

        label = clock.name if clock.name is not None else tz_name
        return ResolvedRow(label=label, time_text=local_time.strftime(TIME_FORMAT))

    def render(self, clocks: Sequence[ClockEntry], instant: datetime) -> List[ResolvedRow]:
        """
        Render every clock at the same instant, keeping config order.

        Args:
            clocks: Clock entries in display order
            instant: Timezone-aware instant

        Returns:
            One row per clock, same order

        Raises:
            ValueError: If instant is naive
        """
        if instant.tzinfo is None or instant.utcoffset() is None:
            raise ValueError("instant must be timezone-aware")

        return [self.render_clock(clock, instant) for clock in clocks]
