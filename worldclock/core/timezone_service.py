"""
Timezone Service - IANA time zone lookup
Turns identifiers like 'Europe/Berlin' into ZoneInfo objects
"""
from functools import lru_cache
from typing import FrozenSet
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from worldclock.core.errors import InvalidTimeZoneError

# Host aliases that are TZif files but not IANA zone names
HOST_ALIASES = frozenset({'localtime'})


@lru_cache(maxsize=1)
def known_timezones() -> FrozenSet[str]:
    """
    IANA keys available on this host.
    
    Excludes posixrules and the posix/ and right/ trees.
    """
    return frozenset(available_timezones() - HOST_ALIASES)


def resolve_timezone(identifier: str) -> ZoneInfo:
    """
    Resolve an IANA time zone identifier.
    
    Args:
        identifier: Zone key, e.g. 'America/Costa_Rica'
    
    Returns:
        ZoneInfo for the identifier
    
    Raises:
        InvalidTimeZoneError: If the identifier is not a known zone
    """
    if not isinstance(identifier, str) or identifier not in known_timezones():
        raise InvalidTimeZoneError(identifier)
    
    try:
        return ZoneInfo(identifier)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidTimeZoneError(identifier) from e


def timezone_label(zone: ZoneInfo) -> str:
    """Canonical display name of a zone (its IANA key)"""
    return str(zone.key)
