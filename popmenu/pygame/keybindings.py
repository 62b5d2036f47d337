"""Keybinding management for the context menu pygame client."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import pygame

from popmenu.core.context_keys import (
    COMMANDS,
    DEFAULT_KEYBINDINGS,
    KeyBindingDefinition,
    command_for_id,
)
from popmenu.core.dispatch import Command

_KEY_NAMES: Dict[str, int] = {
    "down": pygame.K_DOWN,
    "up": pygame.K_UP,
    "left": pygame.K_LEFT,
    "right": pygame.K_RIGHT,
    "enter": pygame.K_RETURN,
    "kp_enter": pygame.K_KP_ENTER,
    "tab": pygame.K_TAB,
    "space": pygame.K_SPACE,
    "escape": pygame.K_ESCAPE,
    "home": pygame.K_HOME,
    "end": pygame.K_END,
    "pageup": pygame.K_PAGEUP,
    "pagedown": pygame.K_PAGEDOWN,
}

_MODIFIER_NAMES: Dict[str, int] = {
    "ctrl": pygame.KMOD_CTRL,
    "shift": pygame.KMOD_SHIFT,
    "alt": pygame.KMOD_ALT,
}

_MODIFIER_KEYS = {
    pygame.K_LCTRL,
    pygame.K_RCTRL,
    pygame.K_LSHIFT,
    pygame.K_RSHIFT,
    pygame.K_LALT,
    pygame.K_RALT,
}


@dataclass(frozen=True)
class KeyChord:
    key: int
    mods: int = 0

    def matches(self, key: int, mod: int) -> bool:
        return key == self.key and _canonical_mods(mod) == self.mods


@dataclass(frozen=True)
class KeyBinding:
    chord: KeyChord
    command_id: str
    when: Optional[str] = None


def _canonical_mods(mod: int) -> int:
    # Collapse left/right variants so "ctrl" matches either control key.
    result = 0
    for flag in _MODIFIER_NAMES.values():
        if mod & flag:
            result |= flag
    return result


def parse_chord(text: str) -> KeyChord:
    """Turn a chord such as ``"ctrl+n"`` into pygame key and modifier codes."""
    parts = [part.strip().lower() for part in text.split("+") if part.strip()]
    if not parts:
        raise ValueError(f"Empty key chord: {text!r}")
    *modifiers, key_name = parts
    mods = 0
    for name in modifiers:
        if name not in _MODIFIER_NAMES:
            raise ValueError(f"Unknown modifier '{name}' in {text!r}")
        mods |= _MODIFIER_NAMES[name]
    if key_name in _KEY_NAMES:
        key = _KEY_NAMES[key_name]
    elif len(key_name) == 1 and key_name.isprintable():
        key = ord(key_name)
    else:
        raise ValueError(f"Unknown key '{key_name}' in {text!r}")
    return KeyChord(key=key, mods=mods)


def format_chord(chord: KeyChord) -> str:
    names = [name for name, flag in _MODIFIER_NAMES.items() if chord.mods & flag]
    for name, code in _KEY_NAMES.items():
        if code == chord.key:
            names.append(name)
            break
    else:
        names.append(chr(chord.key))
    return "+".join(names)


def chord_text_for(key: int, mod: int) -> Optional[str]:
    """Describe a key press as chord text, or None when it has no name."""
    chord = KeyChord(key=key, mods=_canonical_mods(mod))
    if key not in _KEY_NAMES.values() and not 0 < key < 0x110000:
        return None
    text = format_chord(chord)
    try:
        parse_chord(text)
    except ValueError:
        return None
    return text


def _bindings_from_definitions(
    definitions: Iterable[KeyBindingDefinition],
) -> List[KeyBinding]:
    return [
        KeyBinding(parse_chord(definition.key), definition.command_id, definition.when)
        for definition in definitions
    ]


class MenuKeybindingManager:
    """Match key presses to menu commands and let users rebind them."""

    def __init__(self, definitions: Iterable[KeyBindingDefinition] = DEFAULT_KEYBINDINGS) -> None:
        self.default_bindings: List[KeyBinding] = _bindings_from_definitions(definitions)
        self.bindings: List[KeyBinding] = list(self.default_bindings)
        self.rebinding_target: Optional[Tuple[str, int]] = None

    # ------------------------------------------------------------------
    def resolve(self, key: int, mod: int, context: Mapping[str, bool]) -> Optional[Command]:
        """Return the command bound to this key press, if its condition holds."""
        for binding in self.bindings:
            if binding.when is not None and not context.get(binding.when, False):
                continue
            if binding.chord.matches(key, mod):
                return command_for_id(binding.command_id)
        return None

    def chords_for(self, command_id: str) -> List[KeyChord]:
        return [binding.chord for binding in self.bindings if binding.command_id == command_id]

    # ------------------------------------------------------------------
    def rebind(self, command_id: str, slot: int, chord_text: str) -> str:
        """Replace the ``slot``-th chord of ``command_id``."""
        command_for_id(command_id)
        chord = parse_chord(chord_text)
        positions = [
            idx for idx, binding in enumerate(self.bindings) if binding.command_id == command_id
        ]
        if not 0 <= slot < len(positions):
            return f"{self._title(command_id)} has no key slot {slot + 1}."
        target = positions[slot]
        if self.bindings[target].chord == chord:
            return f"{self._title(command_id)} remains bound to {format_chord(chord)}"
        for idx, binding in enumerate(self.bindings):
            if idx != target and binding.chord == chord:
                return (
                    f"{format_chord(chord)} already bound to "
                    f"{self._title(binding.command_id)}. Choose another key."
                )
        self.bindings[target] = replace(self.bindings[target], chord=chord)
        return f"{self._title(command_id)} bound to {format_chord(chord)}"

    def reset_to_defaults(self) -> str:
        self.bindings = list(self.default_bindings)
        self.rebinding_target = None
        return "Key bindings reset to defaults."

    # ------------------------------------------------------------------
    def rebind_targets(self) -> List[Tuple[str, int]]:
        """Every ``(command_id, slot)`` pair in binding order."""
        targets: List[Tuple[str, int]] = []
        slots: Dict[str, int] = {}
        for binding in self.bindings:
            slot = slots.get(binding.command_id, 0)
            slots[binding.command_id] = slot + 1
            targets.append((binding.command_id, slot))
        return targets

    def start_rebinding(self, command_id: str, slot: int) -> str:
        command_for_id(command_id)
        self.rebinding_target = (command_id, slot)
        return self.menu_message()

    def finish_rebinding(self, key: int, mod: int) -> str:
        """Bind the pressed key to the pending target."""
        if self.rebinding_target is None:
            return "Select a command to rebind."
        if key in _MODIFIER_KEYS:
            return self.menu_message()
        chord_text = chord_text_for(key, mod)
        if chord_text is None:
            return "That key cannot be bound. Choose another key or press Esc to cancel."
        command_id, slot = self.rebinding_target
        message = self.rebind(command_id, slot, chord_text)
        chords = self.chords_for(command_id)
        if slot >= len(chords) or chords[slot] == parse_chord(chord_text):
            self.rebinding_target = None
        return message

    def cancel_rebinding(self) -> str:
        self.rebinding_target = None
        return "Rebinding cancelled."

    def menu_message(self) -> str:
        if self.rebinding_target is None:
            return "Select a command to rebind."
        command_id, slot = self.rebinding_target
        return f"Press a key for {self._title(command_id)} key {slot + 1} (Esc to cancel)"

    # ------------------------------------------------------------------
    def to_config(self) -> Dict[str, List[str]]:
        """Return a serialisable snapshot of the current bindings."""
        result: Dict[str, List[str]] = {}
        for binding in self.bindings:
            result.setdefault(binding.command_id, []).append(format_chord(binding.chord))
        return result

    def load_from_config(self, data: Mapping) -> None:
        """Restore bindings from a persisted configuration."""
        if not isinstance(data, Mapping):
            return
        restored: List[KeyBinding] = []
        slots: Dict[str, int] = {}
        for binding in self.default_bindings:
            slot = slots.get(binding.command_id, 0)
            slots[binding.command_id] = slot + 1
            entry = data.get(binding.command_id)
            chord = binding.chord
            if isinstance(entry, list) and slot < len(entry):
                try:
                    chord = parse_chord(str(entry[slot]))
                except ValueError:
                    chord = binding.chord
            restored.append(replace(binding, chord=chord))
        self.bindings = restored

    # ------------------------------------------------------------------
    def _title(self, command_id: str) -> str:
        for definition in COMMANDS:
            if definition.id == command_id:
                return definition.title
        return command_id


__all__ = [
    "KeyBinding",
    "KeyChord",
    "MenuKeybindingManager",
    "chord_text_for",
    "format_chord",
    "parse_chord",
]
