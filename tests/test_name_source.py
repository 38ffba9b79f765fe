from __future__ import annotations

from conftest import JANUARY, JULY, FakeNameSource
from zonenames.name_source import (
    BabelNameSource,
    default_exemplar_location,
    long_name_at,
)


def test_long_names_from_cldr():
    names = BabelNameSource("en_GB")
    assert names.long_name("Europe/London", True, JULY) == "British Summer Time"
    assert names.long_name("Europe/London", False, JANUARY) == "Greenwich Mean Time"
    assert names.long_name("Europe/Paris", True, JULY) == "Central European Summer Time"


def test_long_name_missing_is_none():
    assert BabelNameSource("en_GB").long_name("Etc/GMT+5", False, JULY) is None


def test_exemplar_location():
    names = BabelNameSource("en_GB")
    assert names.exemplar_location("Europe/Paris") == "Paris"
    assert names.exemplar_location("America/Los_Angeles") == "Los Angeles"
    assert names.exemplar_location("Etc/GMT+5") is None


def test_exemplar_location_is_localized():
    assert BabelNameSource("de_DE").exemplar_location("Europe/Vienna") == "Wien"


def test_default_exemplar_location():
    assert default_exemplar_location("America/Argentina/Buenos_Aires") == "Buenos Aires"
    assert default_exemplar_location("Etc/UTC") is None
    assert default_exemplar_location("UTC") is None


def test_long_name_at_picks_variant_by_instant():
    names = FakeNameSource(
        long_names={"Europe/London": {"standard": "GMT", "daylight": "BST"}}
    )
    assert long_name_at(names, "Europe/London", JULY) == "BST"
    assert long_name_at(names, "Europe/London", JANUARY) == "GMT"
    assert names.calls == [
        ("long", "Europe/London", True),
        ("long", "Europe/London", False),
    ]


def test_long_name_at_negative_winter_adjustment():
    names = BabelNameSource("en_IE")
    assert long_name_at(names, "Europe/Dublin", JULY) == "Irish Standard Time"
    assert long_name_at(names, "Europe/Dublin", JANUARY) == "Greenwich Mean Time"
