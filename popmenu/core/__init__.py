"""Core context menu logic, independent of rendering."""

from popmenu.core.context_keys import (
    COMMANDS,
    CONTEXT_MENU_VISIBLE,
    DEFAULT_KEYBINDINGS,
    command_for_id,
    context_keys,
    is_visible,
)
from popmenu.core.dispatch import (
    CANCELLED,
    NOTHING,
    Cancelled,
    Command,
    FocusChanged,
    Nothing,
    PopupMsg,
    Selected,
    update,
)
from popmenu.core.popup import AnchorMoved, Hide, PopupState, Show
from popmenu.core.selection import (
    MenuState,
    RenderContext,
    create,
    current_selection,
    normalize,
    select_next,
    select_previous,
    set_items,
)

__all__ = [
    "AnchorMoved",
    "CANCELLED",
    "COMMANDS",
    "CONTEXT_MENU_VISIBLE",
    "Cancelled",
    "Command",
    "DEFAULT_KEYBINDINGS",
    "FocusChanged",
    "Hide",
    "MenuState",
    "NOTHING",
    "Nothing",
    "PopupMsg",
    "PopupState",
    "RenderContext",
    "Selected",
    "Show",
    "command_for_id",
    "context_keys",
    "create",
    "current_selection",
    "is_visible",
    "normalize",
    "select_next",
    "select_previous",
    "set_items",
    "update",
]
