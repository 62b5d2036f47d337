"""Drawing helpers for the context menu popup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Tuple

import pygame

from popmenu.core.context_keys import is_visible
from popmenu.core.popup import popup_rect
from popmenu.core.selection import ItemRenderer, MenuState, RenderContext, normalize

Color = Tuple[int, int, int]

PADDING = 6
ROW_SPACING = 4


@dataclass(frozen=True)
class Theme:
    """Colours used to paint the popup and its rows."""

    background: Color = (30, 34, 48)
    border: Color = (80, 86, 110)
    text: Color = (220, 220, 220)
    highlight: Color = (70, 92, 150)


def text_renderer(to_string: Callable[[Any], str] = str) -> ItemRenderer:
    """Default item renderer: the item's text in the theme's text colour."""

    def render(context: RenderContext, item: Any) -> pygame.Surface:
        return context.font.render(to_string(item), True, pygame.Color(*context.theme.text))

    return render


def calculate_scroll_offset(selected: int, current: int, visible: int, total: int) -> int:
    """Return the first visible row so that ``selected`` stays on screen."""
    if total <= visible:
        return 0
    offset = current
    if selected >= offset + visible:
        offset = selected - visible + 1
    elif selected < offset:
        offset = selected
    return max(0, min(offset, total - visible))


def draw_menu(
    surface: pygame.Surface,
    state: MenuState[Any],
    context: RenderContext,
    scroll: int = 0,
) -> int:
    """Paint the menu onto ``surface`` and return the updated scroll offset."""
    if not is_visible(state) or not state.items:
        return 0
    state = normalize(state)
    total = len(state.items)
    row_height = context.font.get_linesize() + ROW_SPACING
    usable = min(state.popup.max_height, surface.get_height())
    visible = max(1, min(total, (usable - 2 * PADDING) // row_height))
    selected = state.selected_index
    offset = calculate_scroll_offset(
        selected if selected is not None else scroll, scroll, visible, total
    )

    rows = [state.renderer(context, state.items[idx]) for idx in range(offset, offset + visible)]
    content_width = max(row.get_width() for row in rows) + 2 * PADDING
    content_height = visible * row_height + 2 * PADDING
    rect = popup_rect(state.popup, (content_width, content_height), surface.get_size())
    if rect is None:
        return offset

    box = pygame.Rect(rect)
    pygame.draw.rect(surface, context.theme.background, box)
    pygame.draw.rect(surface, context.theme.border, box, width=1)

    clip = surface.get_clip()
    surface.set_clip(box)
    for row_idx, row in enumerate(rows):
        top = box.top + PADDING + row_idx * row_height
        if offset + row_idx == selected:
            highlight = pygame.Rect(box.left + 1, top, box.width - 2, row_height)
            pygame.draw.rect(surface, context.theme.highlight, highlight)
        surface.blit(row, (box.left + PADDING, top + ROW_SPACING // 2))
    surface.set_clip(clip)
    return offset


__all__ = ["Theme", "calculate_scroll_offset", "draw_menu", "text_renderer"]
