"""Process-wide protokit settings.

The settings object is created lazily on first use and picks up an optional
override module named by ``PROTOKIT_CONFIG_MODULE``; only its ``PROTOKIT_*``
attributes are read.
"""

from __future__ import annotations

from .defaults import DEFAULTS
from .models import ProtokitConfig
from .settings import Settings

_settings: Settings | None = None
_config: tuple[int, ProtokitConfig] | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.update_from_envvar()
    return _settings


def get_config() -> ProtokitConfig:
    """Return the validated config, re-validating only when settings change."""
    global _config
    settings = get_settings()
    if _config is None or _config[0] != settings.version:
        _config = (settings.version, settings.validated())
    return _config[1]


__all__ = ["DEFAULTS", "ProtokitConfig", "Settings", "get_config", "get_settings"]
