"""Localized, unambiguous display names for time zones.

The public entry points are `build_zone_list`, which labels every zone in a
catalog, and `summarize`, which labels a single zone.
"""

from .catalog import default_catalog, load_catalog, load_catalog_file, open_catalog
from .locales import local_zone_ids
from .models import DisplayEntry, ZoneCatalogEntry, ZoneSnapshot
from .name_source import BabelNameSource, NameSource
from .offset_formatter import format_offset
from .zone_list import build_zone_list, summarize

__version__ = "1.0.0"

__all__ = [
    "BabelNameSource",
    "DisplayEntry",
    "NameSource",
    "ZoneCatalogEntry",
    "ZoneSnapshot",
    "build_zone_list",
    "default_catalog",
    "format_offset",
    "load_catalog",
    "load_catalog_file",
    "local_zone_ids",
    "open_catalog",
    "summarize",
]
