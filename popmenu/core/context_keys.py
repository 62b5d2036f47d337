"""Visibility condition and the static command/keybinding tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from popmenu.core.dispatch import Command
from popmenu.core.selection import MenuState

CONTEXT_MENU_VISIBLE = "contextMenuVisible"


@dataclass(frozen=True)
class CommandDefinition:
    """Named command exposed to a command registry."""

    id: str
    command: Command
    title: str


@dataclass(frozen=True)
class KeyBindingDefinition:
    """Key chord bound to a command id while ``when`` holds."""

    key: str
    command_id: str
    when: str = CONTEXT_MENU_VISIBLE


COMMANDS: List[CommandDefinition] = [
    CommandDefinition("contextMenu.acceptSelected", Command.ACCEPT_SELECTED, "Accept Selected"),
    CommandDefinition("contextMenu.selectPrevious", Command.SELECT_PREVIOUS, "Select Previous"),
    CommandDefinition("contextMenu.selectNext", Command.SELECT_NEXT, "Select Next"),
]

DEFAULT_KEYBINDINGS: List[KeyBindingDefinition] = [
    KeyBindingDefinition("down", "contextMenu.selectNext"),
    KeyBindingDefinition("ctrl+n", "contextMenu.selectNext"),
    KeyBindingDefinition("up", "contextMenu.selectPrevious"),
    KeyBindingDefinition("ctrl+p", "contextMenu.selectPrevious"),
    KeyBindingDefinition("enter", "contextMenu.acceptSelected"),
    KeyBindingDefinition("tab", "contextMenu.acceptSelected"),
]


def is_visible(state: MenuState[Any]) -> bool:
    return state.popup.visible


def context_keys(state: MenuState[Any]) -> Dict[str, bool]:
    """Conditions published for the key binding matcher."""
    return {CONTEXT_MENU_VISIBLE: is_visible(state)}


def command_for_id(command_id: str) -> Command:
    for definition in COMMANDS:
        if definition.id == command_id:
            return definition.command
    raise KeyError(f"Unknown context menu command '{command_id}'")


__all__ = [
    "COMMANDS",
    "CONTEXT_MENU_VISIBLE",
    "CommandDefinition",
    "DEFAULT_KEYBINDINGS",
    "KeyBindingDefinition",
    "command_for_id",
    "context_keys",
    "is_visible",
]
