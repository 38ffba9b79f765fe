"""Command-line entrypoint.

Kept small so `main.py` and `python -m zonenames` can remain thin wrappers.
"""

from __future__ import annotations

import argparse
import json
import logging
from datetime import datetime
from typing import List, Optional, Sequence

import pytz
from babel import UnknownLocaleError

from .catalog import open_catalog
from .clock import current_instant
from .config import load_config, save_config
from .locales import detect_system_locale, local_zone_ids, system_zone_id
from .zone_list import build_zone_list, summarize

LOG = logging.getLogger("zonenames")


def parse_instant(value: str) -> datetime:
    """Parse an ISO 8601 instant; "Z" is accepted for UTC."""
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO 8601 instant: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--locale",
        default=None,
        help="Locale for names and offsets (default: saved setting or system locale)",
    )
    common.add_argument(
        "--at",
        type=parse_instant,
        default=None,
        help="ISO 8601 instant to resolve names at (default: now)",
    )
    common.add_argument(
        "--ntp",
        dest="use_ntp",
        action="store_const",
        const=True,
        default=None,
        help="Take 'now' from NTP instead of the system clock.",
    )
    common.add_argument(
        "--catalog",
        default=None,
        help="Zone catalog: JSON/XML file or http(s) URL (default: bundled list)",
    )
    common.add_argument(
        "--native-digits",
        action="store_const",
        const=True,
        default=None,
        help="Render offsets with the locale's native digits.",
    )
    common.add_argument(
        "--latin-digits",
        dest="native_digits",
        action="store_const",
        const=False,
        help="Render offsets with Latin digits (default: the locale's usual digits).",
    )
    common.add_argument(
        "--save",
        action="store_true",
        help="Remember --locale, --catalog, --ntp and the digit choice as defaults.",
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging (DEBUG).",
    )

    parser = argparse.ArgumentParser(
        prog="zonenames",
        description="Show localized, unambiguous time zone names.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser(
        "list", parents=[common], help="List every zone in the catalog."
    ).add_argument(
        "--json", action="store_true", help="Print entries as a JSON array."
    )

    commands.add_parser(
        "summary", parents=[common], help="Print the offset and name of one zone."
    ).add_argument(
        "zone", nargs="?", default=None, help="Zone id (default: system zone)"
    )
    return parser


def _run_list(
    args,
    locale: str,
    instant: datetime,
    catalog: List[str],
    native_digits: Optional[bool],
) -> None:
    entries = build_zone_list(
        catalog, local_zone_ids(locale), locale, instant, native_digits=native_digits
    )
    if args.json:
        print(json.dumps([e.as_dict() for e in entries], ensure_ascii=False, indent=2))
        return
    for entry in entries:
        print(f"{entry.gmt_offset_string}\t{entry.id}\t{entry.display_name}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = load_config(
        locale=args.locale,
        catalog=args.catalog,
        native_digits=args.native_digits,
        use_ntp=args.use_ntp,
    )
    if args.save:
        save_config(config)
        LOG.info("Saved defaults: %s", config)

    locale = config.locale or detect_system_locale()
    instant = args.at or current_instant(use_ntp=config.use_ntp)
    LOG.debug("Resolving for locale %s at %s", locale, instant.isoformat())

    catalog = open_catalog(config.catalog)
    try:
        if args.command == "list":
            _run_list(args, locale, instant, catalog, config.native_digits)
        else:
            zone_id = args.zone or system_zone_id()
            print(
                summarize(
                    zone_id,
                    locale,
                    instant,
                    catalog=catalog,
                    native_digits=config.native_digits,
                )
            )
    except pytz.UnknownTimeZoneError as exc:
        LOG.error("Unknown time zone: %s", exc)
        return 2
    except (UnknownLocaleError, ValueError) as exc:
        LOG.error("Unsupported locale %s: %s", locale, exc)
        return 2

    return 0
