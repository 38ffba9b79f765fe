"""GMT offset strings for time zones.

Offsets are taken from pytz at the given instant, so daylight saving time is
accounted for, and rendered in the locale's CLDR GMT pattern.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytz

from .bidi import unicode_wrap
from .digits import localize_digits
from .locales import LocaleLike, parse_locale


def get_zone(zone_id: str):
    """Return the pytz zone for `zone_id`.

    Unknown ids raise `pytz.UnknownTimeZoneError`.
    """
    return pytz.timezone(zone_id)


def as_utc(instant: datetime) -> datetime:
    """Return `instant` as an aware UTC datetime; naive values are taken as UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def local_time(zone_id: str, instant: datetime) -> datetime:
    """The wall-clock time in `zone_id` at `instant`."""
    return as_utc(instant).astimezone(get_zone(zone_id))


def utc_offset(zone_id: str, instant: datetime) -> timedelta:
    """Total offset from UTC in `zone_id` at `instant`, DST included."""
    return local_time(zone_id, instant).utcoffset() or timedelta(0)


def offset_millis(zone_id: str, instant: datetime) -> int:
    offset = utc_offset(zone_id, instant)
    return (offset.days * 86400 + offset.seconds) * 1000 + offset.microseconds // 1000


def standard_offset(zone_id: str, instant: datetime) -> timedelta:
    """The zone's winter offset: the smaller of its mid-January and mid-July offsets."""
    year = as_utc(instant).year
    return min(
        utc_offset(zone_id, datetime(year, month, 15, tzinfo=timezone.utc))
        for month in (1, 7)
    )


def is_daylight(zone_id: str, instant: datetime) -> bool:
    """True if `instant` falls inside a daylight saving period for `zone_id`.

    Decided by comparing offsets, not by the sign of `dst()`: zones such as
    Europe/Dublin are stored with a negative winter adjustment and a zero
    summer one.
    """
    return utc_offset(zone_id, instant) > standard_offset(zone_id, instant)


def format_hours_minutes(offset: timedelta) -> str:
    """Render an offset as "+HH:MM" / "-HH:MM"."""
    total_minutes = int(offset.total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def format_offset(
    locale: LocaleLike,
    zone_id: str,
    instant: datetime,
    native_digits: Optional[bool] = None,
) -> str:
    """Return the direction-safe GMT offset string for a zone at an instant.

    Args:
        locale: Locale whose GMT pattern and text direction are used.
        zone_id: The time zone ID (e.g. 'Asia/Kolkata').
        instant: The instant to evaluate the offset at.
        native_digits: None writes the locale's default digits (Arabic-Indic
            for ar_EG), True its native digits, False Latin digits.

    Returns:
        e.g. "GMT+05:30" for en_GB, "UTC+05:30" for fr_FR.
    """
    babel_locale = parse_locale(locale)
    # babel.dates.get_timezone_gmt floors negative half hours (-03:30 -> -04:30)
    hours_minutes = format_hours_minutes(utc_offset(zone_id, instant))
    pattern = babel_locale.zone_formats.get("gmt", "GMT%s")
    text = localize_digits(pattern % hours_minutes, babel_locale, native_digits)

    # Keep "GMT+" attached to the digits in right-to-left text
    return unicode_wrap(text, babel_locale.text_direction)
