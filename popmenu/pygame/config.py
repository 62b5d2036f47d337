"""Persistent configuration helpers for the pygame client."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

_SETTINGS_PATH = Path(__file__).resolve().parent / "user_settings.json"
_KEYBINDINGS_KEY = "context_menu_keybindings"


def load_user_settings() -> Dict[str, Any]:
    """Load persisted user settings from disk."""
    try:
        with _SETTINGS_PATH.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
            if isinstance(data, dict):
                return data
    except (OSError, json.JSONDecodeError):
        return {}
    return {}


def save_user_settings(settings: Dict[str, Any]) -> None:
    """Persist user settings to disk, ignoring filesystem errors."""
    try:
        _SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
        with _SETTINGS_PATH.open("w", encoding="utf-8") as handle:
            json.dump(settings, handle, indent=2, sort_keys=True)
    except OSError:
        # A menu without saved keybindings still works with the defaults.
        pass


def load_keybinding_config() -> Dict[str, Any]:
    """Return the stored keybinding overrides, keyed by command id."""
    data = load_user_settings().get(_KEYBINDINGS_KEY)
    return data if isinstance(data, dict) else {}


def save_keybinding_config(bindings: Dict[str, Any]) -> None:
    settings = load_user_settings()
    settings[_KEYBINDINGS_KEY] = bindings
    save_user_settings(settings)


__all__ = [
    "load_keybinding_config",
    "load_user_settings",
    "save_keybinding_config",
    "save_user_settings",
]
