"""Popup placement state embedded by the context menu."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional, Tuple, Union

MAX_WIDTH = 500
MAX_HEIGHT = 500


@dataclass(frozen=True)
class Show:
    """Reveal the popup anchored at a pixel position."""

    x: int
    y: int


@dataclass(frozen=True)
class Hide:
    pass


@dataclass(frozen=True)
class AnchorMoved:
    """The anchor the popup hangs from has moved."""

    x: int
    y: int


PopupEvent = Union[Show, Hide, AnchorMoved]


@dataclass(frozen=True)
class PopupState:
    """Size limits, anchor and visibility of a popup."""

    max_width: int = MAX_WIDTH
    max_height: int = MAX_HEIGHT
    anchor: Optional[Tuple[int, int]] = None
    visible: bool = False


def update_popup(event: PopupEvent, popup: PopupState) -> PopupState:
    if isinstance(event, Show):
        return replace(popup, anchor=(event.x, event.y), visible=True)
    if isinstance(event, Hide):
        return replace(popup, visible=False)
    if isinstance(event, AnchorMoved):
        return replace(popup, anchor=(event.x, event.y))
    raise TypeError(f"Unsupported popup event: {event!r}")


def popup_rect(
    popup: PopupState,
    content_size: Tuple[int, int],
    viewport: Tuple[int, int],
) -> Optional[Tuple[int, int, int, int]]:
    """Return ``(x, y, width, height)`` of the popup inside ``viewport``.

    The content size is clamped to the popup's maximum size and the box is
    shifted left/up when it would spill past the viewport edge.
    """
    if not popup.visible or popup.anchor is None:
        return None
    width = min(content_size[0], popup.max_width, viewport[0])
    height = min(content_size[1], popup.max_height, viewport[1])
    x, y = popup.anchor
    x = max(0, min(x, viewport[0] - width))
    y = max(0, min(y, viewport[1] - height))
    return (x, y, width, height)


@dataclass
class AnchorTracker:
    """Turn polled anchor positions into :class:`AnchorMoved` events.

    Polling the same position twice in a row produces no event.
    """

    last: Optional[Tuple[int, int]] = None

    def poll(self, position: Tuple[int, int]) -> Optional[AnchorMoved]:
        current = (int(position[0]), int(position[1]))
        if current == self.last:
            return None
        self.last = current
        return AnchorMoved(*current)

    def reset(self) -> None:
        self.last = None


def track_anchor(positions: Iterable[Tuple[int, int]]) -> Iterator[AnchorMoved]:
    """Yield an event for every change in a stream of anchor positions."""
    tracker = AnchorTracker()
    for position in positions:
        event = tracker.poll(position)
        if event is not None:
            yield event


__all__ = [
    "AnchorMoved",
    "AnchorTracker",
    "Hide",
    "MAX_HEIGHT",
    "MAX_WIDTH",
    "PopupEvent",
    "PopupState",
    "Show",
    "popup_rect",
    "track_anchor",
    "update_popup",
]
