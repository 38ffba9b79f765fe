"""
Zone catalog loading.

A catalog is the ordered list of zone ids to present. It comes from
configuration (a bundled JSON table, a JSON or XML file, or an HTTP
endpoint), so every loader degrades instead of raising: bad entries are
skipped, a broken source yields whatever was read before the break, and a
missing source yields an empty list. Offsets still work for whatever loads.
"""

from __future__ import annotations

import json
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import pytz
import requests

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "timezones.json"

XMLTAG_TIMEZONE = "timezone"


def load_catalog(source: Optional[Iterable[Any]]) -> List[str]:
    """
    Validate raw catalog entries, keeping their order.

    Args:
        source: Iterable of raw entries, normally zone id strings.

    Returns:
        List[str]: The valid zone ids, in source order.
    """
    zone_ids: List[str] = []
    if source is None:
        logger.warning("No zone catalog supplied")
        return zone_ids

    seen = set()
    try:
        for index, raw in enumerate(source):
            if not isinstance(raw, str) or not raw.strip():
                logger.warning("Skipping malformed catalog entry #%d: %r", index, raw)
                continue
            zone_id = raw.strip()
            if zone_id not in pytz.all_timezones_set:
                logger.warning("Skipping unknown zone id in catalog: %s", zone_id)
                continue
            if zone_id in seen:
                logger.warning("Skipping duplicate zone id in catalog: %s", zone_id)
                continue
            seen.add(zone_id)
            zone_ids.append(zone_id)
    except Exception as exc:
        logger.warning(
            "Zone catalog ended early after %d entries: %s", len(zone_ids), exc
        )

    return zone_ids


def _iter_xml_ids(path: Path):
    """Yield the first attribute of every <timezone> element, in order."""
    for _event, elem in ET.iterparse(str(path), events=("end",)):
        if elem.tag == XMLTAG_TIMEZONE:
            attrs = list(elem.attrib.values())
            yield attrs[0] if attrs else None
            elem.clear()


def _json_entries(data: Any) -> Optional[list]:
    if isinstance(data, dict):
        data = data.get("timezones")
    if isinstance(data, list):
        return data
    return None


def load_catalog_file(path: Union[str, Path]) -> List[str]:
    """Load a catalog from a `.json` or `.xml` file."""
    path = Path(path)
    if not path.is_file():
        logger.warning("Zone catalog file not found: %s", path)
        return []

    if path.suffix.lower() == ".xml":
        # iterparse yields entries until the first parse error
        return load_catalog(_iter_xml_ids(path))

    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Failed to read zone catalog %s: %s", path, exc)
        return []

    entries = _json_entries(data)
    if entries is None:
        logger.warning("Zone catalog %s is not a list of zone ids", path)
        return []
    return load_catalog(entries)


def _get_json(http: requests.Session, url: str, timeout: float) -> Any:
    resp = http.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.json()


def fetch_catalog(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: float = 10,
) -> List[str]:
    """Fetch a JSON catalog over HTTP. Any failure yields an empty catalog.

    A session created here is closed before returning; a caller's session
    is left open.
    """
    try:
        if session is None:
            with requests.Session() as http:
                data = _get_json(http, url, timeout)
        else:
            data = _get_json(session, url, timeout)
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Failed to fetch zone catalog from %s: %s", url, exc)
        return []

    entries = _json_entries(data)
    if entries is None:
        logger.warning("Zone catalog at %s is not a list of zone ids", url)
        return []
    return load_catalog(entries)


def default_catalog() -> List[str]:
    """The bundled catalog."""
    return load_catalog_file(DEFAULT_CATALOG_PATH)


def open_catalog(location: Optional[Union[str, Path]] = None) -> List[str]:
    """Load a catalog from a URL, a file path, or the bundled default."""
    if not location:
        return default_catalog()
    location = str(location)
    if location.startswith(("http://", "https://")):
        return fetch_catalog(location)
    return load_catalog_file(location)
