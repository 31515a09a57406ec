"""Shared pieces every screen works with: assets, screen stack and window."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum

import pygame

from hexmaze.assets import AssetManager
from hexmaze.state import StateManager


class AssetID(IntEnum):
    MAIN_FONT = 0
    BLACK_SQUARE = 1
    FOOD = 2
    WALL = 3
    PACMAN = 4
    BLUE_GHOST = 5
    RED_GHOST = 6
    PURPLE_GHOST = 7


class Window:
    """The game window. Drawing on a window that is not open does nothing."""

    def __init__(self) -> None:
        self._screen: pygame.Surface | None = None
        self.size: tuple[int, int] = (0, 0)

    @property
    def is_open(self) -> bool:
        return self._screen is not None

    def create(self, size: tuple[int, int], title: str) -> None:
        pygame.display.init()
        self._screen = pygame.display.set_mode(size)
        pygame.display.set_caption(title)
        self.size = tuple(size)

    def close(self) -> None:
        if self._screen is None:
            return
        self._screen = None
        pygame.display.quit()

    def poll_events(self) -> Iterator[pygame.event.Event]:
        """Yield the events waiting on the window."""
        if self._screen is None:
            return
        yield from pygame.event.get()

    def clear(self) -> None:
        if self._screen is not None:
            self._screen.fill((0, 0, 0))

    def blit(self, surface: pygame.Surface, position) -> None:
        if self._screen is not None:
            self._screen.blit(surface, position)

    def display(self) -> None:
        if self._screen is not None:
            pygame.display.flip()


@dataclass
class Context:
    """What the screens share."""

    assets: AssetManager = field(default_factory=AssetManager)
    states: StateManager = field(default_factory=StateManager)
    window: Window = field(default_factory=Window)