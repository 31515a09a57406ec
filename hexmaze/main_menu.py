"""The title screen, offering to start a round or to leave."""

from __future__ import annotations

import pygame

from hexmaze.context import AssetID, Context
from hexmaze.gameplay import GamePlay
from hexmaze.state import State

YELLOW = (255, 255, 0)
WHITE = (255, 255, 255)
TITLE = "Pac Man"
TITLE_SIZE = 30
BUTTON_SIZE = 20
FONT_FILE = "assets/fonts/Pacifico-Regular.ttf"


class MainMenu(State):
    """Shows the game title with Play and Exit buttons."""

    def __init__(self, context: Context) -> None:
        self.context = context
        self.play_selected = True
        self.play_pressed = False
        self.exit_selected = False
        self.exit_pressed = False
        self.play_colour = WHITE
        self.exit_colour = WHITE
        self._font = None
        self.title_center = (0, 0)
        self.play_center = (0, 0)
        self.exit_center = (0, 0)

    def init(self) -> None:
        assets = self.context.assets
        assets.add_font(AssetID.MAIN_FONT, FONT_FILE)
        self._font = assets.font(AssetID.MAIN_FONT)
        width, height = self.context.window.size
        middle_x, middle_y = width // 2, height // 2
        self.title_center = (middle_x, middle_y - 125)
        self.play_center = (middle_x, middle_y - 25)
        self.exit_center = (middle_x, middle_y + 25)

    def process_input(self) -> None:
        window = self.context.window
        for event in window.poll_events():
            if event.type == pygame.QUIT:
                window.close()
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)

    def handle_key(self, key: int) -> None:
        """Move the selection with Up and Down; confirm it with Enter."""
        if key == pygame.K_UP:
            self.play_selected = True
            self.exit_selected = False
        elif key == pygame.K_DOWN:
            self.play_selected = False
            self.exit_selected = True
        elif key == pygame.K_RETURN:
            self.play_pressed = self.play_selected
            self.exit_pressed = not self.play_selected and self.exit_selected

    def update(self, delta: float) -> None:
        if self.play_selected:
            self.play_colour, self.exit_colour = YELLOW, WHITE
        else:
            self.play_colour, self.exit_colour = WHITE, YELLOW

        if self.play_pressed:
            self.context.states.add(GamePlay(self.context))
        elif self.exit_pressed:
            self.context.window.close()

    def _blit_centred(self, text: str, colour, size: int, center) -> None:
        surface = self._font.render(text, colour, size)
        rect = surface.get_rect(center=center)
        self.context.window.blit(surface, rect.topleft)

    def draw(self) -> None:
        window = self.context.window
        window.clear()
        self._blit_centred(TITLE, WHITE, TITLE_SIZE, self.title_center)
        self._blit_centred("Play", self.play_colour, BUTTON_SIZE, self.play_center)
        self._blit_centred("Exit", self.exit_colour, BUTTON_SIZE, self.exit_center)
        window.display()