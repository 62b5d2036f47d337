"""Pygame front-end for the context menu."""

from popmenu.pygame.app import PygameContextMenu, run_pygame

__all__ = ["PygameContextMenu", "run_pygame"]
