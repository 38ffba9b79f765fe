"""Effective configuration: built-in defaults, saved settings, then overrides."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Optional

from . import settings_store


@dataclass
class ResolverConfig:
    locale: Optional[str] = None  # None: detect from the system
    catalog: Optional[str] = None  # None: bundled catalog
    native_digits: Optional[bool] = None  # None: the locale's default digits
    use_ntp: bool = False


def load_config(**overrides: Any) -> ResolverConfig:
    """
    Build the configuration for one run.

    Args:
        **overrides: Values from the command line; None means "not given".

    Returns:
        ResolverConfig: defaults, updated by saved settings, updated by overrides.
    """
    values = asdict(ResolverConfig())
    values.update(settings_store.load_settings())

    known = {f.name for f in fields(ResolverConfig)}
    for key, value in overrides.items():
        if key not in known:
            raise TypeError(f"Unknown configuration option: {key}")
        if value is not None:
            values[key] = value

    return ResolverConfig(**values)


def save_config(config: ResolverConfig) -> None:
    """Persist a configuration as the new defaults."""
    settings_store.update_settings(asdict(config))
