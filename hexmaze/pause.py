"""The pause overlay shown over a running round."""

from __future__ import annotations

import pygame

from hexmaze.context import AssetID, Context
from hexmaze.state import State

TITLE_COLOUR = (255, 255, 255)
TITLE = "Pac Man"


class PauseGame(State):
    """Draws a title over the frozen round until Escape is pressed."""

    def __init__(self, context: Context) -> None:
        self.context = context
        self.title: pygame.Surface | None = None
        self.title_rect = pygame.Rect(0, 0, 0, 0)

    def init(self) -> None:
        font = self.context.assets.font(AssetID.MAIN_FONT)
        width, height = self.context.window.size
        self.title = font.render(TITLE, TITLE_COLOUR)
        self.title_rect = self.title.get_rect(center=(width // 2, height // 2))

    def process_input(self) -> None:
        self._pump_events(self.context.window, self.handle_key)

    def handle_key(self, key: int) -> None:
        """Escape leaves the pause screen."""
        if key == pygame.K_ESCAPE:
            self.context.states.pop_current()

    def update(self, delta: float) -> None:
        """The pause screen does not change over time."""

    def draw(self) -> None:
        self.context.window.blit(self.title, self.title_rect.topleft)
        self.context.window.display()