"""Saved zonenames defaults.

Settings live in `settings.json` in the per-user config directory (or in
`$ZONENAMES_CONFIG_DIR`). Only the keys in `SETTINGS_SCHEMA` are read or
written; anything else in the file, or a value of the wrong type, is
ignored with a warning so a hand-edited file can never stop the CLI.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping

from PySide6.QtCore import QStandardPaths

APP_NAME = "ZoneNames"
SETTINGS_FILE_NAME = "settings.json"
CONFIG_DIR_ENV = "ZONENAMES_CONFIG_DIR"

# key -> accepted type
SETTINGS_SCHEMA: Dict[str, type] = {
    "locale": str,
    "catalog": str,
    "native_digits": bool,
    "use_ntp": bool,
}

logger = logging.getLogger(__name__)


def app_config_dir() -> Path:
    """Return the directory holding settings.json, creating it if needed."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        cfg = Path(override)
    else:
        base = Path(QStandardPaths.writableLocation(QStandardPaths.AppConfigLocation))
        cfg = base / APP_NAME
    cfg.mkdir(parents=True, exist_ok=True)
    return cfg


def settings_path() -> Path:
    return app_config_dir() / SETTINGS_FILE_NAME


def _check(key: str, value: Any) -> bool:
    expected = SETTINGS_SCHEMA.get(key)
    if expected is None:
        logger.warning("Ignoring unknown setting %r", key)
        return False
    if not isinstance(value, expected):
        logger.warning(
            "Ignoring setting %s=%r: expected %s", key, value, expected.__name__
        )
        return False
    return True


def load_settings() -> Dict[str, Any]:
    """Return the valid saved settings; {} if the file is missing or unreadable."""
    path = settings_path()
    if not path.exists():
        return {}

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", path)
        return {}
    return {key: value for key, value in data.items() if _check(key, value)}


def save_settings(data: Mapping[str, Any]) -> None:
    """Write settings via a temp file so a crash never leaves half a file.

    Raises KeyError/TypeError for keys or values outside `SETTINGS_SCHEMA`.
    """
    for key, value in data.items():
        if key not in SETTINGS_SCHEMA:
            raise KeyError(f"Unknown setting: {key}")
        if not isinstance(value, SETTINGS_SCHEMA[key]):
            raise TypeError(
                f"Setting {key} must be {SETTINGS_SCHEMA[key].__name__}, got {value!r}"
            )

    path = settings_path()
    tmp = path.with_suffix(".tmp")
    with tmp.open("w", encoding="utf-8") as f:
        json.dump(dict(data), f, indent=2, sort_keys=True)
    tmp.replace(path)


def get_setting(key: str, default: Any = None) -> Any:
    return load_settings().get(key, default)


def update_settings(values: Mapping[str, Any]) -> None:
    """Merge `values` into the saved settings; a value of None removes the key."""
    data = load_settings()
    for key, value in values.items():
        if value is None:
            data.pop(key, None)
        else:
            data[key] = value
    save_settings(data)


def set_setting(key: str, value: Any | None) -> None:
    update_settings({key: value})
