"""Top-level package for the popmenu context menu widget."""

__version__ = "1.0.0"

from popmenu.core import (
    Cancelled,
    Command,
    FocusChanged,
    MenuState,
    Nothing,
    PopupMsg,
    RenderContext,
    Selected,
    create,
    current_selection,
    set_items,
    update,
)

__all__ = [
    "Cancelled",
    "Command",
    "FocusChanged",
    "MenuState",
    "Nothing",
    "PopupMsg",
    "RenderContext",
    "Selected",
    "create",
    "current_selection",
    "set_items",
    "update",
]

__all__.append("__version__")

try:
    from popmenu.pygame import PygameContextMenu, run_pygame  # type: ignore[misc]
except (ImportError, RuntimeError):
    PygameContextMenu = None

    def run_pygame(*_args, **_kwargs):  # type: ignore[override]
        raise RuntimeError(
            "The pygame demo requires the optional pygame dependency. "
            "Install pygame to open the context menu window."
        )

__all__.extend(["PygameContextMenu", "run_pygame"])
