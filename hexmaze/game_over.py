"""The screen shown when a round ends, offering a retry or an exit."""

from __future__ import annotations

import pygame

from hexmaze.context import AssetID, Context
from hexmaze.state import State

YELLOW = (255, 255, 0)
WHITE = (255, 255, 255)
TITLE_SIZE = 30
BUTTON_SIZE = 20


class GameOver(State):
    """Shows ``message`` and lets the player retry or leave."""

    def __init__(self, context: Context, message: str) -> None:
        self.context = context
        self.message = message
        self.retry_selected = True
        self.retry_pressed = False
        self.exit_selected = False
        self.exit_pressed = False
        self.retry_colour = WHITE
        self.exit_colour = WHITE
        self._font = None
        self.title_center = (0, 0)
        self.retry_center = (0, 0)
        self.exit_center = (0, 0)

    def init(self) -> None:
        self._font = self.context.assets.font(AssetID.MAIN_FONT)
        width, height = self.context.window.size
        middle_x, middle_y = width // 2, height // 2
        self.title_center, self.retry_center, self.exit_center = (
            (middle_x, middle_y + offset) for offset in (-125, -25, 25)
        )

    def process_input(self) -> None:
        self._pump_events(self.context.window, self.handle_key)

    def handle_key(self, key: int) -> None:
        """Move the selection with Up and Down; confirm it with Enter."""
        if key in (pygame.K_UP, pygame.K_DOWN):
            self.retry_selected = key == pygame.K_UP
            self.exit_selected = not self.retry_selected
        elif key == pygame.K_RETURN:
            self.retry_pressed = self.retry_selected
            self.exit_pressed = not self.retry_selected and self.exit_selected

    def update(self, delta: float) -> None:
        highlighted = (YELLOW, WHITE) if self.retry_selected else (WHITE, YELLOW)
        self.retry_colour, self.exit_colour = highlighted

        if self.retry_pressed:
            from hexmaze.gameplay import GamePlay

            self.context.states.add(GamePlay(self.context))
        elif self.exit_pressed:
            self.context.window.close()

    def draw(self) -> None:
        window = self.context.window
        window.clear()
        lines = (
            (self.message, WHITE, TITLE_SIZE, self.title_center),
            ("Retry", self.retry_colour, BUTTON_SIZE, self.retry_center),
            ("Exit", self.exit_colour, BUTTON_SIZE, self.exit_center),
        )
        for text, colour, size, center in lines:
            surface = self._font.render(text, colour, size)
            window.blit(surface, surface.get_rect(center=center).topleft)
        window.display()