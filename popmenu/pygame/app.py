"""Pygame editor demo that hosts the context menu."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

try:
    import pygame
except ImportError as exc:  # pragma: no cover - depends on runtime environment
    raise RuntimeError(
        "The pygame package is required to run the graphical context menu demo."
    ) from exc

from popmenu.core.context_keys import context_keys, is_visible
from popmenu.core.dispatch import (
    Cancelled,
    FocusChanged,
    Msg,
    Outcome,
    PopupMsg,
    Selected,
    update,
)
from popmenu.core.popup import AnchorTracker, Hide, Show
from popmenu.core.selection import MenuState, RenderContext, create, set_items
from popmenu.pygame.config import load_keybinding_config, save_keybinding_config
from popmenu.pygame.keybindings import MenuKeybindingManager
from popmenu.pygame.renderer import Theme, draw_menu, text_renderer

SAMPLE_ITEMS: List[str] = [
    "append",
    "clear",
    "copy",
    "count",
    "extend",
    "index",
    "insert",
    "pop",
    "remove",
    "reverse",
    "sort",
]


class PygameContextMenu:
    """Single-line editor with a completion menu anchored at the caret."""

    def __init__(
        self,
        items: Optional[Sequence[str]] = None,
        size: Tuple[int, int] = (960, 600),
        debug: bool = False,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.debug = debug
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption("Popmenu - Context Menu Demo")

        self.font = pygame.font.SysFont("consolas", 18)
        self.font_small = pygame.font.SysFont("consolas", 14)
        self.theme = Theme()
        self.render_context = RenderContext(theme=self.theme, font=self.font)

        self.keybindings = MenuKeybindingManager()
        self.keybindings.load_from_config(load_keybinding_config())

        self.all_items: List[str] = list(items) if items is not None else list(SAMPLE_ITEMS)
        self.menu: MenuState[str] = create(text_renderer(), self.all_items)
        self.menu_scroll = 0
        self.filter_text = ""
        self._anchor = AnchorTracker()
        self._rebind_index = -1

        self.text = "items."
        self.caret = len(self.text)
        self.message = "Ctrl+Space or right click opens the menu, F2 rebinds its keys"

        self.clock = pygame.time.Clock()
        self.running = True

    # ------------------------------------------------------------------
    # Menu plumbing
    def dispatch(self, msg: Msg) -> Outcome:
        self.menu, outcome = update(msg, self.menu)
        self._debug(f"{msg!r} -> {outcome!r} (index={self.menu.selected_index})")
        self._handle_outcome(outcome)
        return outcome

    def open_menu(self, position: Optional[Tuple[int, int]] = None) -> None:
        self.filter_text = ""
        self.menu = create(self.menu.renderer, self.all_items)
        self.menu_scroll = 0
        x, y = position if position is not None else self.caret_position()
        self._anchor.reset()
        self._anchor.poll((x, y))
        self.dispatch(PopupMsg(Show(x, y)))

    def close_menu(self) -> None:
        self._anchor.reset()
        self.dispatch(PopupMsg(Hide()))

    def apply_filter(self, text: str) -> None:
        self.filter_text = text
        needle = text.lower()
        matches = [item for item in self.all_items if needle in item.lower()]
        self.menu = set_items(matches, self.menu)
        self._debug(f"Filter '{text}' matched {len(matches)} items")

    def _handle_outcome(self, outcome: Outcome) -> None:
        if isinstance(outcome, FocusChanged):
            self.message = f"Focused: {outcome.item}"
        elif isinstance(outcome, Selected):
            self.insert_text(str(outcome.item))
            self.message = f"Inserted: {outcome.item}"
            self.close_menu()
        elif isinstance(outcome, Cancelled):
            self.message = "Nothing selected"
            self.close_menu()

    # ------------------------------------------------------------------
    # Editor helpers
    def insert_text(self, value: str) -> None:
        self.text = self.text[: self.caret] + value + self.text[self.caret :]
        self.caret += len(value)

    def text_origin(self) -> Tuple[int, int]:
        width, height = self.screen.get_size()
        text_width = self.font.size(self.text)[0]
        return (max(16, (width - text_width) // 2), height // 3)

    def caret_position(self) -> Tuple[int, int]:
        x, y = self.text_origin()
        return (x + self.font.size(self.text[: self.caret])[0], y + self.font.get_linesize())

    # ------------------------------------------------------------------
    # Event handling
    def process_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 3:
                self.open_menu(event.pos)
            elif event.button == 1 and is_visible(self.menu):
                self.close_menu()
        elif event.type == pygame.KEYDOWN:
            self._handle_key(event)

    def _handle_key(self, event: pygame.event.Event) -> None:
        key = event.key
        mods = getattr(event, "mod", 0)
        if self.keybindings.rebinding_target is not None:
            if key == pygame.K_ESCAPE:
                self.message = self.keybindings.cancel_rebinding()
            else:
                self.message = self.keybindings.finish_rebinding(key, mods)
            return
        if is_visible(self.menu):
            if key == pygame.K_ESCAPE:
                self.message = "Menu dismissed"
                self.close_menu()
                return
            command = self.keybindings.resolve(key, mods, context_keys(self.menu))
            if command is not None:
                self.dispatch(command)
                return
            if key == pygame.K_BACKSPACE:
                self.apply_filter(self.filter_text[:-1])
                return
            character = getattr(event, "unicode", "")
            if character and character.isprintable():
                self.apply_filter(self.filter_text + character)
            return

        if key == pygame.K_SPACE and mods & pygame.KMOD_CTRL:
            self.open_menu()
            return
        if key == pygame.K_ESCAPE:
            self.running = False
            return
        if key == pygame.K_F2:
            self.message = self.rebind_next()
            return
        if key == pygame.K_F3:
            self.message = self.keybindings.reset_to_defaults()
            return
        if key == pygame.K_LEFT:
            self.caret = max(0, self.caret - 1)
            return
        if key == pygame.K_RIGHT:
            self.caret = min(len(self.text), self.caret + 1)
            return
        if key == pygame.K_BACKSPACE and self.caret > 0:
            self.text = self.text[: self.caret - 1] + self.text[self.caret :]
            self.caret -= 1
            return
        character = getattr(event, "unicode", "")
        if character and character.isprintable():
            self.insert_text(character)

    def rebind_next(self) -> str:
        """Start rebinding the key slot after the one last edited."""
        targets = self.keybindings.rebind_targets()
        self._rebind_index = (self._rebind_index + 1) % len(targets)
        return self.keybindings.start_rebinding(*targets[self._rebind_index])

    def update(self) -> None:
        if not is_visible(self.menu):
            return
        moved = self._anchor.poll(self.caret_position())
        if moved is not None:
            self.dispatch(PopupMsg(moved))

    # ------------------------------------------------------------------
    # Rendering
    def draw(self) -> None:
        surface = self.screen
        surface.fill((16, 18, 26))
        x, y = self.text_origin()
        text_surface = self.font.render(self.text, True, pygame.Color(230, 230, 230))
        surface.blit(text_surface, (x, y))
        caret_x = x + self.font.size(self.text[: self.caret])[0]
        pygame.draw.line(
            surface,
            (200, 200, 120),
            (caret_x, y),
            (caret_x, y + self.font.get_linesize()),
            width=2,
        )
        if self.filter_text:
            filter_surface = self.font_small.render(
                f"Filter: {self.filter_text}", True, pygame.Color(180, 188, 200)
            )
            surface.blit(filter_surface, (16, 16))
        status = self.font_small.render(self.message, True, pygame.Color(180, 180, 180))
        surface.blit(status, (16, surface.get_height() - 32))
        self.menu_scroll = draw_menu(surface, self.menu, self.render_context, self.menu_scroll)

    def run(self) -> None:
        try:
            while self.running:
                for event in pygame.event.get():
                    self.process_event(event)
                self.update()
                self.draw()
                pygame.display.flip()
                self.clock.tick(60)
        finally:
            save_keybinding_config(self.keybindings.to_config())
            pygame.quit()

    def _debug(self, message: str) -> None:
        if self.debug:
            print(f"[DEBUG] {message}", flush=True)


def run_pygame(**kwargs) -> None:
    app = PygameContextMenu(**kwargs)
    app.run()


__all__ = ["PygameContextMenu", "SAMPLE_ITEMS", "run_pygame"]
