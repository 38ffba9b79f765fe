"""Value types shared by the zone list pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, FrozenSet, Tuple

KEY_ID = "id"
KEY_DISPLAYNAME = "name"
KEY_GMT = "gmt"
KEY_OFFSET = "offset"


@dataclass(frozen=True)
class ZoneCatalogEntry:
    identifier: str
    offset_string: str
    is_local: bool


@dataclass(frozen=True)
class ZoneSnapshot:
    """Everything one resolution pass reads, computed once up front."""

    locale: str
    instant: datetime
    entries: Tuple[ZoneCatalogEntry, ...]
    local_zone_ids: FrozenSet[str]


@dataclass(frozen=True)
class DisplayEntry:
    id: str
    display_name: str
    gmt_offset_string: str
    offset_millis: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            KEY_ID: self.id,
            KEY_DISPLAYNAME: self.display_name,
            KEY_GMT: self.gmt_offset_string,
            KEY_OFFSET: self.offset_millis,
        }
