from __future__ import annotations

from datetime import datetime
from typing import AbstractSet, Iterable, Set

from .models import ZoneCatalogEntry
from .name_source import NameSource, long_name_at


def should_prefer_exemplar_for_local(
    local_zone_ids: AbstractSet[str],
    entries: Iterable[ZoneCatalogEntry],
    names: NameSource,
    instant: datetime,
) -> bool:
    """Return True if long names would make two local zones indistinguishable.

    Local zones are scanned in catalog order; the first repeated label
    settles it. A zone with no long name contributes its offset string, so
    unnamed zones only collide when their offsets match. The answer holds for
    this instant only: names diverge across daylight saving transitions.
    """
    seen: Set[str] = set()
    for entry in entries:
        if entry.identifier not in local_zone_ids:
            continue
        label = long_name_at(names, entry.identifier, instant) or entry.offset_string
        if label in seen:
            return True
        seen.add(label)
    return False
