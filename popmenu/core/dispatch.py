"""Translate menu commands into new state plus an outcome for the caller."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any, Generic, Tuple, TypeVar, Union

from popmenu.core.popup import PopupEvent, update_popup
from popmenu.core.selection import (
    MenuState,
    current_selection,
    normalize,
    select_next,
    select_previous,
)

T = TypeVar("T")


class Command(enum.Enum):
    SELECT_NEXT = "selectNext"
    SELECT_PREVIOUS = "selectPrevious"
    ACCEPT_SELECTED = "acceptSelected"


@dataclass(frozen=True)
class PopupMsg:
    """Popup event forwarded verbatim to the embedded popup."""

    event: PopupEvent


Msg = Union[Command, PopupMsg]


@dataclass(frozen=True)
class Nothing:
    pass


@dataclass(frozen=True)
class Cancelled:
    pass


@dataclass(frozen=True)
class FocusChanged(Generic[T]):
    """The highlighted item moved; callers may preview it."""

    item: T


@dataclass(frozen=True)
class Selected(Generic[T]):
    """The user committed to an item."""

    item: T


Outcome = Union[Nothing, Cancelled, FocusChanged, Selected]

NOTHING = Nothing()
CANCELLED = Cancelled()


def _focus_outcome(state: MenuState[Any]) -> Outcome:
    if normalize(state).selected_index is None:
        return NOTHING
    return FocusChanged(current_selection(state))


def update(msg: Msg, state: MenuState[T]) -> Tuple[MenuState[T], Outcome]:
    """Apply ``msg`` to ``state``.

    Returns the new state and what the embedding feature should do about it.
    Accepting with nothing selected is how the menu reports a cancel.
    """
    if msg is Command.SELECT_NEXT:
        state = select_next(state)
        return state, _focus_outcome(state)
    if msg is Command.SELECT_PREVIOUS:
        state = select_previous(state)
        return state, _focus_outcome(state)
    if msg is Command.ACCEPT_SELECTED:
        if normalize(state).selected_index is None:
            return state, CANCELLED
        return state, Selected(current_selection(state))
    if isinstance(msg, PopupMsg):
        return replace(state, popup=update_popup(msg.event, state.popup)), NOTHING
    raise TypeError(f"Unsupported context menu message: {msg!r}")


__all__ = [
    "CANCELLED",
    "Cancelled",
    "Command",
    "FocusChanged",
    "Msg",
    "NOTHING",
    "Nothing",
    "Outcome",
    "PopupMsg",
    "Selected",
    "update",
]
