from __future__ import annotations

from datetime import datetime

from .name_source import NameSource, long_name_at


def resolve_display_name(
    zone_id: str,
    is_local: bool,
    prefer_exemplar_for_local: bool,
    names: NameSource,
    instant: datetime,
) -> str:
    """Pick the label for one zone.

    Local zones get their long name ("British Summer Time") unless the pass
    found long names ambiguous; every other zone gets its exemplar location
    ("London"), falling back to the long name when there is none.

    Returns an empty string when no name is available; the caller decides
    what to show instead.
    """
    if is_local and not prefer_exemplar_for_local:
        return long_name_at(names, zone_id, instant) or ""

    exemplar = names.exemplar_location(zone_id)
    if exemplar:
        return exemplar
    return long_name_at(names, zone_id, instant) or ""
