from __future__ import annotations

from datetime import datetime, timezone

import pytest

from zonenames import settings_store

# London is on BST, Paris/Berlin on CEST, Adelaide on ACST
JULY = datetime(2024, 7, 1, 12, 0, tzinfo=timezone.utc)
# London is on GMT, Adelaide on ACDT
JANUARY = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


class FakeNameSource:
    """Name source backed by dicts; records every lookup."""

    def __init__(self, long_names=None, exemplars=None):
        # zone -> name, or zone -> {"standard": ..., "daylight": ...}
        self.long_names = long_names or {}
        self.exemplars = exemplars or {}
        self.calls = []

    def long_name(self, zone_id, daylight, instant):
        self.calls.append(("long", zone_id, daylight))
        value = self.long_names.get(zone_id)
        if isinstance(value, dict):
            return value.get("daylight" if daylight else "standard")
        return value

    def exemplar_location(self, zone_id):
        self.calls.append(("exemplar", zone_id))
        return self.exemplars.get(zone_id)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    settings_file = tmp_path / "settings.json"
    monkeypatch.setattr(settings_store, "settings_path", lambda: settings_file)
    return settings_file
