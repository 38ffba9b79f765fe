from __future__ import annotations

import pytest
from babel import Locale, UnknownLocaleError

from zonenames import locales
from zonenames.locales import (
    DEFAULT_LOCALE,
    detect_system_locale,
    is_supported,
    local_zone_ids,
    normalize_locale,
    parse_locale,
    system_zone_id,
    text_direction,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("en_GB", "en_GB"),
        ("en-gb", "en_GB"),
        ("en_GB.UTF-8", "en_GB"),
        ("de_DE@euro", "de_DE"),
        ("zh-hant-tw", "zh_Hant_TW"),
        ("FR", "fr"),
        ("", DEFAULT_LOCALE),
        (None, DEFAULT_LOCALE),
    ],
)
def test_normalize_locale(raw, expected):
    assert normalize_locale(raw) == expected


def test_normalize_babel_locale():
    assert normalize_locale(Locale("pt", "BR")) == "pt_BR"


def test_parse_unknown_locale():
    with pytest.raises(UnknownLocaleError):
        parse_locale("xx_YY")


def test_is_supported():
    assert is_supported("en-US")
    assert not is_supported("xx_YY")


def test_text_direction():
    assert text_direction("en_GB") == "ltr"
    assert text_direction("he_IL") == "rtl"


def test_local_zone_ids_for_territory():
    assert local_zone_ids("en_GB") == frozenset({"Europe/London"})
    australian = local_zone_ids("en_AU")
    assert {"Australia/Sydney", "Australia/Perth", "Australia/Adelaide"} <= australian


def test_local_zone_ids_without_territory():
    assert local_zone_ids("en") == frozenset()


def _clear_locale_env(monkeypatch):
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        monkeypatch.delenv(var, raising=False)


def test_detect_system_locale_from_env(monkeypatch):
    _clear_locale_env(monkeypatch)
    monkeypatch.setenv("LANG", "fr_FR.UTF-8")
    assert detect_system_locale() == "fr_FR"


def test_detect_system_locale_skips_c_locale(monkeypatch):
    _clear_locale_env(monkeypatch)
    monkeypatch.setenv("LC_ALL", "C.UTF-8")
    monkeypatch.setattr(locales._locale, "getlocale", lambda: (None, None))
    assert detect_system_locale() == DEFAULT_LOCALE


def test_detect_system_locale_from_locale_module(monkeypatch):
    _clear_locale_env(monkeypatch)
    monkeypatch.setattr(locales._locale, "getlocale", lambda: ("de_DE", "UTF-8"))
    assert detect_system_locale() == "de_DE"


def test_system_zone_id(monkeypatch):
    monkeypatch.setattr(locales.tzlocal, "get_localzone_name", lambda: "Asia/Tokyo")
    assert system_zone_id() == "Asia/Tokyo"


def test_system_zone_id_falls_back_to_utc(monkeypatch):
    def broken():
        raise LookupError("no zone configured")

    monkeypatch.setattr(locales.tzlocal, "get_localzone_name", broken)
    assert system_zone_id() == "UTC"
