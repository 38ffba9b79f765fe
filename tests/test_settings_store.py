from __future__ import annotations

import json
import logging

import pytest

from zonenames import settings_store


def test_set_setting_writes_json_atomic(isolated_settings):
    settings_store.set_setting("locale", "en_GB")

    data = json.loads(isolated_settings.read_text(encoding="utf-8"))
    assert data["locale"] == "en_GB"
    assert not isolated_settings.with_suffix(".tmp").exists()


def test_set_setting_none_removes_key(isolated_settings):
    isolated_settings.write_text(json.dumps({"locale": "en_GB", "use_ntp": True}), encoding="utf-8")

    settings_store.set_setting("locale", None)
    data = json.loads(isolated_settings.read_text(encoding="utf-8"))
    assert data == {"use_ntp": True}


def test_load_settings_missing_file():
    assert settings_store.load_settings() == {}


def test_load_settings_ignores_broken_json(isolated_settings):
    isolated_settings.write_text("{not json", encoding="utf-8")
    assert settings_store.load_settings() == {}


def test_load_settings_ignores_non_object(isolated_settings):
    isolated_settings.write_text(json.dumps(["en_GB"]), encoding="utf-8")
    assert settings_store.get_setting("locale", "fallback") == "fallback"


def test_update_settings(isolated_settings):
    isolated_settings.write_text(json.dumps({"locale": "fr_FR", "use_ntp": True}), encoding="utf-8")

    settings_store.update_settings({"locale": "de_DE", "use_ntp": None, "native_digits": True})
    data = json.loads(isolated_settings.read_text(encoding="utf-8"))
    assert data == {"locale": "de_DE", "native_digits": True}


def test_load_settings_drops_unknown_keys_and_bad_types(isolated_settings, caplog):
    isolated_settings.write_text(
        json.dumps({"locale": "fr_FR", "theme": "dark", "use_ntp": "yes"}),
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING, logger="zonenames.settings_store"):
        assert settings_store.load_settings() == {"locale": "fr_FR"}
    assert "theme" in caplog.text
    assert "use_ntp" in caplog.text


def test_save_settings_rejects_keys_outside_schema(isolated_settings):
    with pytest.raises(KeyError):
        settings_store.save_settings({"theme": "dark"})
    with pytest.raises(TypeError):
        settings_store.save_settings({"native_digits": "yes"})
    assert not isolated_settings.exists()


def test_config_dir_from_environment(tmp_path, monkeypatch):
    target = tmp_path / "custom" / "zonenames"
    monkeypatch.setenv(settings_store.CONFIG_DIR_ENV, str(target))

    assert settings_store.app_config_dir() == target
    assert target.is_dir()
