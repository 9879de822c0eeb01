from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any

from dotenv import find_dotenv, load_dotenv


def _load_env() -> None:
    env_path = find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(env_path, override=False)


_load_env()


def _get_env(key: str, default: str | None = None) -> str | None:
    value = os.getenv(key)
    if value is None or value == "":
        return default
    return value


def _get_bool(key: str, default: bool = False) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    log_level: str = field(default_factory=lambda: (_get_env("SEOMATIC_LOG_LEVEL", "WARNING") or "WARNING").upper())
    log_dir: str | None = field(default_factory=lambda: _get_env("SEOMATIC_LOG_DIR"))
    pretty: bool = field(default_factory=lambda: _get_bool("SEOMATIC_PRETTY", False))
    json_ld_ensure_ascii: bool = field(default_factory=lambda: _get_bool("SEOMATIC_JSON_LD_ENSURE_ASCII", False))
    head_component: str = field(default_factory=lambda: _get_env("SEOMATIC_HEAD_COMPONENT", "Head") or "Head")


_settings: Settings | None = None
_runtime_overrides: dict[str, Any] = {}


def _apply_runtime_overrides(settings: Settings) -> None:
    if not _runtime_overrides:
        return
    for key, value in _runtime_overrides.items():
        if value is None:
            continue
        if hasattr(settings, key):
            setattr(settings, key, value)


def update_runtime_overrides(overrides: dict[str, Any]) -> None:
    if not overrides:
        return
    for key, value in overrides.items():
        if value is None:
            continue
        _runtime_overrides[key] = value
    if _settings is not None:
        _apply_runtime_overrides(_settings)


def get_runtime_overrides() -> dict[str, Any]:
    return dict(_runtime_overrides)


def clear_runtime_overrides() -> None:
    _runtime_overrides.clear()


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    _apply_runtime_overrides(_settings)
    return _settings


def refresh_settings() -> Settings:
    """Rebuild settings from environment variables."""
    global _settings
    _settings = Settings()
    _apply_runtime_overrides(_settings)
    return _settings


__all__ = [
    "Settings",
    "get_settings",
    "refresh_settings",
    "update_runtime_overrides",
    "get_runtime_overrides",
    "clear_runtime_overrides",
]
