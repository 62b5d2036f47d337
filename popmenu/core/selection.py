"""Selection state for the context menu, independent of rendering."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Generic, Iterable, Optional, Tuple, TypeVar

from popmenu.core.popup import MAX_HEIGHT, MAX_WIDTH, PopupState

T = TypeVar("T")


@dataclass(frozen=True)
class RenderContext:
    """Theme and font handed to an item renderer for every row."""

    theme: Any
    font: Any


ItemRenderer = Callable[[RenderContext, T], Any]


@dataclass(frozen=True)
class MenuState(Generic[T]):
    """Items on offer, the selected index and the embedded popup."""

    items: Tuple[T, ...]
    renderer: ItemRenderer
    selected_index: Optional[int] = None
    popup: PopupState = field(default_factory=PopupState)

    @property
    def selected_item(self) -> Optional[T]:
        return current_selection(self)


def create(renderer: ItemRenderer, items: Iterable[T]) -> MenuState[T]:
    """Build a menu with nothing selected and a hidden, unplaced popup."""
    return MenuState(
        items=tuple(items),
        renderer=renderer,
        selected_index=None,
        popup=PopupState(max_width=MAX_WIDTH, max_height=MAX_HEIGHT),
    )


def set_items(items: Iterable[T], state: MenuState[T]) -> MenuState[T]:
    # The stale index is renormalized against the new items on the next read.
    return replace(state, items=tuple(items))


def normalize(state: MenuState[T]) -> MenuState[T]:
    count = len(state.items)
    index = state.selected_index
    if count == 0:
        index = None
    elif index is not None:
        if index >= count:
            index = 0
        elif index < 0:
            index = count - 1
    if index == state.selected_index:
        return state
    return replace(state, selected_index=index)


def select_next(state: MenuState[T]) -> MenuState[T]:
    if state.selected_index is None:
        return normalize(replace(state, selected_index=0))
    return normalize(replace(state, selected_index=state.selected_index + 1))


def select_previous(state: MenuState[T]) -> MenuState[T]:
    """Move the selection back one row, wrapping to the last item.

    With nothing selected the last item is chosen.
    """
    if state.selected_index is None:
        return normalize(replace(state, selected_index=-1))
    return normalize(replace(state, selected_index=state.selected_index - 1))


def current_selection(state: MenuState[T]) -> Optional[T]:
    state = normalize(state)
    if state.selected_index is None:
        return None
    return state.items[state.selected_index]


__all__ = [
    "ItemRenderer",
    "MenuState",
    "RenderContext",
    "create",
    "current_selection",
    "normalize",
    "select_next",
    "select_previous",
    "set_items",
]
