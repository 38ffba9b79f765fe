from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Protocol

from babel import Locale
from babel.core import get_global

from .locales import LocaleLike, parse_locale
from .offset_formatter import is_daylight

# Prefixes whose ids do not name a place
_NO_EXEMPLAR_PREFIXES = ("Etc/", "SystemV/")


class NameSource(Protocol):
    """Localized names for time zones, bound to one locale."""

    def long_name(
        self, zone_id: str, daylight: bool, instant: datetime
    ) -> Optional[str]:
        ...

    def exemplar_location(self, zone_id: str) -> Optional[str]:
        ...


def default_exemplar_location(zone_id: str) -> Optional[str]:
    """Derive a location from the id itself, e.g. "America/Los_Angeles" -> "Los Angeles"."""
    if zone_id.startswith(_NO_EXEMPLAR_PREFIXES) or "/" not in zone_id:
        return None
    return zone_id.rsplit("/", 1)[1].replace("_", " ")


@dataclass
class BabelNameSource:
    """Resolve localized time zone names from Babel's CLDR data.

    Unlike `babel.dates.get_timezone_name`, lookups are strict: when CLDR has
    no long name for a zone the result is None rather than a synthesised
    "<City> Time" label, so callers can apply their own fallbacks.
    """

    locale: LocaleLike
    _locale: Locale = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._locale = parse_locale(self.locale)

    def _canonical(self, zone_id: str) -> str:
        return get_global("zone_aliases").get(zone_id, zone_id)

    def long_name(
        self, zone_id: str, daylight: bool, instant: datetime
    ) -> Optional[str]:
        """Return the long standard or daylight name for a zone.

        Args:
            zone_id: The time zone ID (e.g. 'Europe/London').
            daylight: Whether the daylight variant is wanted.
            instant: The instant the name is for. Babel only ships the
                current metazone mapping, so it does not change the result.

        Returns:
            Localized long name, or None if CLDR has none.
        """
        zone = self._canonical(zone_id)
        variant = "daylight" if daylight else "standard"

        zone_info = self._locale.time_zones.get(zone, {})
        name = zone_info.get("long", {}).get(variant)
        if name:
            return name

        metazone = get_global("meta_zones").get(zone)
        if not metazone:
            return None
        metazone_info = self._locale.meta_zones.get(metazone, {})
        return metazone_info.get("long", {}).get(variant) or None

    def exemplar_location(self, zone_id: str) -> Optional[str]:
        zone = self._canonical(zone_id)
        city = self._locale.time_zones.get(zone, {}).get("city")
        if city:
            return city
        return default_exemplar_location(zone)


def long_name_at(names: NameSource, zone_id: str, instant: datetime) -> Optional[str]:
    """The long name in effect at `instant`, daylight or standard."""
    return names.long_name(zone_id, is_daylight(zone_id, instant), instant)
