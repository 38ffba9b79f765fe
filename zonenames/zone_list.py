"""Zone lists and single-zone labels.

Naming policy: for zones local to the user's locale the long name is
preferred ("Europe/London" -> "British Summer Time" for someone in the UK),
because people know their own zones by those names and exemplar cities do
not always match where they live (most of China uses "Asia/Shanghai").
Other zones are shown by exemplar location ("London"). When the long names
of the local zones would collide, e.g. several Australian zones that share a
name in winter but not in summer, every local zone switches to its exemplar
location for that pass so the user can still tell them apart.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import AbstractSet, Iterable, List, Optional

from .ambiguity import should_prefer_exemplar_for_local
from .catalog import default_catalog
from .locales import LocaleLike, local_zone_ids as locale_zone_ids, normalize_locale
from .models import DisplayEntry, ZoneCatalogEntry, ZoneSnapshot
from .name_source import BabelNameSource, NameSource
from .offset_formatter import format_offset, offset_millis
from .resolver import resolve_display_name

logger = logging.getLogger(__name__)


def build_snapshot(
    catalog: Iterable[str],
    local_zone_ids: AbstractSet[str],
    locale: LocaleLike,
    instant: datetime,
    native_digits: Optional[bool] = None,
) -> ZoneSnapshot:
    """Compute offsets and locality for every catalog zone at `instant`."""
    local_ids = frozenset(local_zone_ids)
    entries = tuple(
        ZoneCatalogEntry(
            identifier=zone_id,
            offset_string=format_offset(locale, zone_id, instant, native_digits),
            is_local=zone_id in local_ids,
        )
        for zone_id in catalog
    )
    return ZoneSnapshot(
        locale=normalize_locale(locale),
        instant=instant,
        entries=entries,
        local_zone_ids=local_ids,
    )


def build_zone_list(
    catalog: Iterable[str],
    local_zone_ids: AbstractSet[str],
    locale: LocaleLike,
    instant: datetime,
    names: Optional[NameSource] = None,
    native_digits: Optional[bool] = None,
) -> List[DisplayEntry]:
    """Return one `DisplayEntry` per catalog zone, in catalog order.

    Args:
        catalog: Zone ids to list, in display order.
        local_zone_ids: Zones considered local to `locale`.
        locale: Locale for names and offsets.
        instant: The instant names and offsets are computed for.
        names: Name source; defaults to Babel's CLDR data for `locale`.
        native_digits: None for the locale's default digits, True for its
            native digits, False for Latin digits.

    Returns:
        List of display entries; names fall back to the GMT offset string.
    """
    snapshot = build_snapshot(catalog, local_zone_ids, locale, instant, native_digits)
    if names is None:
        names = BabelNameSource(snapshot.locale)

    # Decided once for the whole pass so every entry follows the same policy
    prefer_exemplar = should_prefer_exemplar_for_local(
        snapshot.local_zone_ids, snapshot.entries, names, instant
    )
    logger.debug(
        "Building %d zone entries for %s (prefer exemplar for local zones: %s)",
        len(snapshot.entries),
        snapshot.locale,
        prefer_exemplar,
    )

    zones = []
    for entry in snapshot.entries:
        display_name = resolve_display_name(
            entry.identifier, entry.is_local, prefer_exemplar, names, instant
        )
        if not display_name:
            display_name = entry.offset_string

        zones.append(
            DisplayEntry(
                id=entry.identifier,
                display_name=display_name,
                gmt_offset_string=entry.offset_string,
                offset_millis=offset_millis(entry.identifier, instant),
            )
        )
    return zones


def summarize(
    zone_id: str,
    locale: LocaleLike,
    instant: datetime,
    catalog: Optional[Iterable[str]] = None,
    local_zone_ids: Optional[AbstractSet[str]] = None,
    names: Optional[NameSource] = None,
    native_digits: Optional[bool] = None,
) -> str:
    """Return "<offset> <name>" for one zone, or just the offset if it has no name.

    The naming policy is the one `build_zone_list` would apply to `catalog`
    (the bundled catalog by default), so the label matches the zone's entry
    in the list.
    """
    gmt_string = format_offset(locale, zone_id, instant, native_digits)
    if catalog is None:
        catalog = default_catalog()
    if local_zone_ids is None:
        local_zone_ids = locale_zone_ids(locale)

    snapshot = build_snapshot(catalog, local_zone_ids, locale, instant, native_digits)
    if names is None:
        names = BabelNameSource(snapshot.locale)
    prefer_exemplar = should_prefer_exemplar_for_local(
        snapshot.local_zone_ids, snapshot.entries, names, instant
    )

    zone_name = resolve_display_name(
        zone_id, zone_id in snapshot.local_zone_ids, prefer_exemplar, names, instant
    )
    if not zone_name:
        return gmt_string

    # No punctuation, so nothing here needs localizing
    return f"{gmt_string} {zone_name}"
