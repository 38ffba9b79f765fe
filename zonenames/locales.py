"""
Locale handling for zonenames.

Normalises the many spellings of a locale code, answers which time zones
are "local" to a locale, and detects the system defaults used when the
command line does not name a locale or zone.
"""

import locale as _locale
import logging
import os
from typing import FrozenSet, Optional, Union

import pytz
import tzlocal
from babel import Locale, UnknownLocaleError

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_GB"

LocaleLike = Union[str, Locale]


def normalize_locale(value: Optional[LocaleLike]) -> str:
    """
    Normalize a locale string to the `ll_Ssss_TT` form Babel expects.

    Args:
        value: Raw locale, e.g. "en-gb", "en_GB.UTF-8", "sr_Latn_RS@euro"

    Returns:
        str: Normalized locale code, `DEFAULT_LOCALE` when empty
    """
    if isinstance(value, Locale):
        return str(value)
    if not value:
        return DEFAULT_LOCALE

    # Remove encoding and modifier suffixes
    code = value.split(".")[0].split("@")[0].replace("-", "_")
    parts = [p for p in code.split("_") if p]
    if not parts:
        return DEFAULT_LOCALE

    normalized = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 4 and part.isalpha():
            normalized.append(part.title())
        else:
            normalized.append(part.upper())
    return "_".join(normalized)


def parse_locale(value: Optional[LocaleLike]) -> Locale:
    """Return the Babel `Locale` for `value`.

    Raises `babel.UnknownLocaleError` or `ValueError` for codes Babel has no
    data for; an unknown locale is a caller error, not something to guess at.
    """
    if isinstance(value, Locale):
        return value
    return Locale.parse(normalize_locale(value))


def text_direction(value: LocaleLike) -> str:
    """Return "ltr" or "rtl" for the locale's script."""
    return parse_locale(value).text_direction


def local_zone_ids(value: LocaleLike) -> FrozenSet[str]:
    """Zone ids associated with the locale's territory.

    A locale without a territory (e.g. plain "en") has no local zones.
    """
    territory = parse_locale(value).territory
    if not territory:
        return frozenset()
    return frozenset(pytz.country_timezones.get(territory.upper(), ()))


def is_supported(value: LocaleLike) -> bool:
    """Check whether Babel has data for a locale."""
    try:
        parse_locale(value)
    except (UnknownLocaleError, ValueError):
        return False
    return True


def detect_system_locale() -> str:
    """
    Detect the system's current locale.

    Returns:
        str: Detected locale code or `DEFAULT_LOCALE` as fallback
    """
    candidates = []

    # Method 1: Environment variables
    for env_var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        env_locale = os.environ.get(env_var)
        if env_locale:
            candidates.append(env_locale.split(":")[0])

    # Method 2: Python locale module
    try:
        system_locale = _locale.getlocale()[0]
        if system_locale:
            candidates.append(system_locale)
    except ValueError as exc:
        logger.debug("locale.getlocale() failed: %s", exc)

    for candidate in candidates:
        # "C" and "POSIX" carry no language information
        if candidate.split(".")[0] in ("C", "POSIX"):
            continue
        normalized = normalize_locale(candidate)
        if is_supported(normalized):
            return normalized

    logger.debug("Falling back to default locale %s", DEFAULT_LOCALE)
    return DEFAULT_LOCALE


def system_zone_id() -> str:
    """Return the system's zone id via tzlocal, or "UTC" if it cannot be read."""
    try:
        return tzlocal.get_localzone_name() or "UTC"
    except Exception as exc:
        logger.warning("Could not determine system timezone: %s", exc)
        return "UTC"
